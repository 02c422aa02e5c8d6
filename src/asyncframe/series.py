"""
Eager Series: a single materialized column with its index.

A Series is what :meth:`AsyncSeries.bake` returns. Its values and index are
held in memory, so it can be iterated any number of times without
suspending.
"""

import inspect
import logging
from typing import TYPE_CHECKING, Any, Callable, Iterator, List, Optional, Tuple

import polars as pl

from ._config import get_option
from ._sources import check_count, unpack_config
from .index import Index
from .utils import materialize_inputs, to_polars_series

if TYPE_CHECKING:
    from .frame import DataFrame
    from .lazyseries import AsyncSeries

logger = logging.getLogger(__name__)

_CONFIG_KEYS = ("values", "index", "pairs", "name")


def _apply_selector(selector: Callable[[Any, Any], Any], value: Any, key: Any) -> Any:
    result = selector(value, key)
    if inspect.isawaitable(result):
        close = getattr(result, "close", None)
        if close is not None:
            close()
        raise TypeError(
            "select() on an eager frame needs a synchronous selector; "
            "call lazy() first to use an async one."
        )
    return result


class Series:
    """
    One-dimensional materialized column paired with an index.

    Parameters
    ----------
    data : list, iterable or mapping, optional
        Values, or a configuration mapping with keys ``values``, ``index``,
        ``pairs`` and ``name``.
    values, index, pairs : iterable, optional
        Keyword form of the configuration. ``pairs`` takes precedence over
        ``values`` and ``index``.
    name : str, optional
        Column name; defaults to the ``default_column_name`` option.

    Examples
    --------
    >>> import asyncframe as af
    >>> s = af.Series([1, 2, 3], index=["a", "b", "c"], name="x")
    >>> s.to_pairs()
    [('a', 1), ('b', 2), ('c', 3)]
    """

    def __init__(
        self,
        data: Optional[Any] = None,
        *,
        values: Optional[Any] = None,
        index: Optional[Any] = None,
        pairs: Optional[Any] = None,
        name: Optional[str] = None,
    ) -> None:
        config = unpack_config(
            data, _CONFIG_KEYS, {"values": values, "index": index, "pairs": pairs, "name": name}
        )
        self._index, self._values = materialize_inputs(
            config["values"], config["index"], config["pairs"]
        )
        name = config["name"]
        self._name: str = name if name is not None else get_option("default_column_name")

    @classmethod
    def _from_lists(cls, index: List[Any], values: List[Any], name: str) -> "Series":
        series = cls.__new__(cls)
        series._index = index
        series._values = values
        series._name = name
        return series

    @property
    def name(self) -> str:
        return self._name

    @property
    def index(self) -> Index:
        return Index(self._index)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        try:
            return self.to_string()
        except TypeError:
            return f"Series(pairs={self.to_pairs()!r}, name={self._name!r})"

    def __str__(self) -> str:
        return repr(self)

    def get_index(self) -> Index:
        """Return the index of the Series."""
        return Index(self._index)

    def with_index(self, new_index: Any) -> "Series":
        """Return a Series labelled by ``new_index``, truncated to the shorter length."""
        index, values = materialize_inputs(self._values, new_index)
        return Series._from_lists(index, values, self._name)

    def reset_index(self) -> "Series":
        """Return a Series with the default zero-based integer index."""
        return Series._from_lists(list(range(len(self._values))), list(self._values), self._name)

    def select(self, selector: Callable[[Any, Any], Any]) -> "Series":
        """Return a Series of ``selector(value, index)`` for each value."""
        values = [_apply_selector(selector, v, k) for k, v in zip(self._index, self._values)]
        return Series._from_lists(list(self._index), values, self._name)

    def skip(self, num_values: int) -> "Series":
        """Return a Series without its first ``num_values`` items."""
        count = check_count(num_values, "skip")
        return Series._from_lists(self._index[count:], self._values[count:], self._name)

    def take(self, num_values: int) -> "Series":
        """Return a Series holding at most the first ``num_values`` items."""
        count = check_count(num_values, "take")
        return Series._from_lists(self._index[:count], self._values[:count], self._name)

    def to_array(self) -> List[Any]:
        return list(self._values)

    def to_pairs(self) -> List[Tuple[Any, Any]]:
        return list(zip(self._index, self._values))

    def to_frame(self) -> "DataFrame":
        """Return a single-column DataFrame named after the Series."""
        from .frame import DataFrame

        return DataFrame._from_lists(list(self._index), list(self._values), [self._name])

    def to_polars(self) -> pl.Series:
        """Return the values as a Polars Series named after the Series."""
        return to_polars_series(self._name, list(self._values))

    def to_json(self) -> str:
        """Serialize to a JSON array of ``{name: value}`` objects."""
        return self.to_frame().to_json()

    def to_csv(self) -> str:
        """Serialize to CSV with a single column named after the Series."""
        return self.to_frame().to_csv()

    def to_string(self) -> str:
        """Render the Series, with its index, as a table."""
        return self.to_frame().to_string()

    def bake(self) -> "Series":
        """A Series is already baked; return it unchanged."""
        return self

    def lazy(self) -> "AsyncSeries":
        """Return an :class:`AsyncSeries` over this Series' in-memory values."""
        from .lazyseries import AsyncSeries

        logger.debug("Converting Series %r of %d rows to lazy", self._name, len(self))
        return AsyncSeries(values=list(self._values), index=list(self._index), name=self._name)
