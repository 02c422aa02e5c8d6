"""
Eager DataFrame produced by baking an AsyncDataFrame.

This module provides the materialized DataFrame. It holds the row values,
index and column names in memory and hands them to Polars whenever a
rendering or text encoding is needed.

The DataFrame class supports:
- Repeated, non-suspending iteration over the same snapshot
- The same transform contract as AsyncDataFrame (select, skip, take,
  with_index, reset_index, get_series), executed eagerly
- CSV, JSON and tabular text output through Polars
- Conversion to and from Polars, and to pandas when it is installed

Examples
--------
>>> import asyncframe as af
>>> df = af.DataFrame([{"a": 1, "b": 2}, {"a": 3, "b": 4}], column_names=["a", "b"])
>>> df.to_rows()
[[1, 2], [3, 4]]
>>> df.lazy()  # back to a lazy frame  # doctest: +SKIP

Notes
-----
- Row values are kept exactly as given; Polars only sees them when
  rendering or encoding
- Rows follow the row contract documented in ``asyncframe.utils``
"""

import logging
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
)

import polars as pl

from ._config import get_option
from ._exceptions import create_keyerror_with_suggestions
from ._sources import check_count, unpack_config
from .index import Index
from .series import Series, _apply_selector
from .utils import (
    column_value,
    materialize_inputs,
    project_row,
    to_polars_frame,
    validate_column_names,
)

if TYPE_CHECKING:
    from .lazyframe import AsyncDataFrame

logger = logging.getLogger(__name__)

_CONFIG_KEYS = ("values", "index", "pairs", "column_names")


def _require_pandas(feature: str) -> Any:
    try:
        import pandas as pd
    except ImportError as exc:  # pragma: no cover - exercised when pandas missing
        raise ImportError(
            f"{feature} requires pandas to be installed. "
            "Install with `pip install asyncframe[pandas]`."
        ) from exc
    return pd


class DataFrame:
    """
    Two-dimensional materialized table of indexed rows.

    DataFrame is the eager counterpart of :class:`AsyncDataFrame` and the
    result of :meth:`AsyncDataFrame.bake`. It exposes the same column, index
    and value contract, synchronously.

    Parameters
    ----------
    data : list, iterable or mapping, optional
        Row values, or a configuration mapping with keys ``values``,
        ``index``, ``pairs`` and ``column_names``.
    values, index, pairs : iterable, optional
        Keyword form of the configuration. ``pairs`` takes precedence over
        ``values`` and ``index``. Without an index rows are numbered from 0.
        An index of a different length than the values is truncated to the
        shorter of the two.
    column_names : iterable of str, optional
        Column order. Defaults to a single column named by the
        ``default_column_name`` option.

    Attributes
    ----------
    _values : list
        Row values.
    _index : list
        Index values, one per row.
    _columns : list of str
        Column names.

    Examples
    --------
    >>> import asyncframe as af
    >>> df = af.DataFrame(values=[1, 2, 3, 4], index=["a", "b", "c", "d"])
    >>> df.skip(2).to_pairs()
    [('c', 3), ('d', 4)]

    See Also
    --------
    AsyncDataFrame : Lazy, asynchronously iterable frame
    Series : One column of a DataFrame
    """

    _values: List[Any]
    _index: List[Any]
    _columns: List[str]

    def __init__(
        self,
        data: Optional[Any] = None,
        *,
        values: Optional[Any] = None,
        index: Optional[Any] = None,
        pairs: Optional[Any] = None,
        column_names: Optional[Sequence[str]] = None,
    ) -> None:
        config = unpack_config(
            data,
            _CONFIG_KEYS,
            {"values": values, "index": index, "pairs": pairs, "column_names": column_names},
        )
        self._index, self._values = materialize_inputs(
            config["values"], config["index"], config["pairs"]
        )
        names = config["column_names"]
        if isinstance(names, (str, bytes)):
            raise TypeError("column_names must be a sequence of strings, not a string")
        if names is None:
            names = [get_option("default_column_name")]
        self._columns = validate_column_names(names)

    @classmethod
    def _from_lists(
        cls, index: List[Any], values: List[Any], columns: List[str]
    ) -> "DataFrame":
        frame = cls.__new__(cls)
        frame._index = index
        frame._values = values
        frame._columns = columns
        return frame

    @classmethod
    def from_polars(cls, df: pl.DataFrame, index: Optional[Any] = None) -> "DataFrame":
        """
        Build a DataFrame from a Polars DataFrame.

        Each Polars row becomes a dict keyed by column name.

        Parameters
        ----------
        df : pl.DataFrame
            Source data.
        index : iterable, optional
            Index values; defaults to 0, 1, 2, ...
        """
        return cls(values=df.to_dicts(), index=index, column_names=list(df.columns))

    # Properties
    @property
    def columns(self) -> List[str]:
        """Column names of the DataFrame."""
        return list(self._columns)

    @property
    def index(self) -> Index:
        """Row labels of the DataFrame."""
        return Index(self._index)

    @property
    def shape(self) -> Tuple[int, int]:
        return (len(self._values), len(self._columns))

    @property
    def empty(self) -> bool:
        return len(self._values) == 0

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        try:
            return self.to_string()
        except TypeError:
            # Rows Polars cannot render are shown as plain Python values.
            return f"DataFrame(pairs={self.to_pairs()!r}, column_names={self._columns!r})"

    def __str__(self) -> str:
        return repr(self)

    def get_column_names(self) -> List[str]:
        """Return the column names, in row order."""
        return list(self._columns)

    def get_index(self) -> Index:
        """Return the index of the DataFrame."""
        return Index(self._index)

    def get_series(self, column_name: str) -> Series:
        """
        Return the column ``column_name`` as a Series sharing this index.

        Raises
        ------
        MissingColumnError
            If the DataFrame has no such column.
        """
        if column_name not in self._columns:
            raise create_keyerror_with_suggestions(column_name, self._columns)
        position = self._columns.index(column_name)
        width = len(self._columns)
        values = [column_value(row, column_name, position, width) for row in self._values]
        return Series._from_lists(list(self._index), values, column_name)

    def __getitem__(self, column_name: str) -> Series:
        return self.get_series(column_name)

    def with_index(self, new_index: Any) -> "DataFrame":
        """Return a DataFrame labelled by ``new_index``, truncated to the shorter length."""
        index, values = materialize_inputs(self._values, new_index)
        return DataFrame._from_lists(index, values, self._columns)

    def reset_index(self) -> "DataFrame":
        """Return a DataFrame with the default zero-based integer index."""
        return DataFrame._from_lists(
            list(range(len(self._values))), list(self._values), self._columns
        )

    def select(self, selector: Callable[[Any, Any], Any]) -> "DataFrame":
        """Return a DataFrame of ``selector(value, index)`` for each row."""
        values = [_apply_selector(selector, v, k) for k, v in zip(self._index, self._values)]
        return DataFrame._from_lists(list(self._index), values, self._columns)

    def skip(self, num_values: int) -> "DataFrame":
        """Return a DataFrame without its first ``num_values`` rows."""
        count = check_count(num_values, "skip")
        return DataFrame._from_lists(self._index[count:], self._values[count:], self._columns)

    def take(self, num_values: int) -> "DataFrame":
        """Return a DataFrame holding at most the first ``num_values`` rows."""
        count = check_count(num_values, "take")
        return DataFrame._from_lists(self._index[:count], self._values[:count], self._columns)

    def to_array(self) -> List[Any]:
        """Return the row values as a list."""
        return list(self._values)

    def to_pairs(self) -> List[Tuple[Any, Any]]:
        """Return ``(index, value)`` tuples, in row order."""
        return list(zip(self._index, self._values))

    def to_rows(self) -> List[List[Any]]:
        """Return each row as a list of values in column order."""
        return [project_row(row, self._columns) for row in self._values]

    def to_polars(self, include_index: bool = False) -> pl.DataFrame:
        """
        Convert to a Polars DataFrame.

        Parameters
        ----------
        include_index : bool, default False
            Add the index as a leading ``__index__`` column.
        """
        index = self._index if include_index else None
        return to_polars_frame(self._columns, self.to_rows(), index=index)

    def to_pandas(self) -> Any:
        """Convert to a pandas DataFrame carrying the same index."""
        pd = _require_pandas("DataFrame.to_pandas")
        return pd.DataFrame(self.to_rows(), columns=self._columns, index=self._index)

    def to_json(self) -> str:
        """Serialize to a JSON array with one object per row, keyed by column name."""
        return self.to_polars().write_json()

    def to_csv(self) -> str:
        """Serialize to CSV: a header of column names, then one line per row."""
        return self.to_polars().write_csv()

    def to_string(self) -> str:
        """Render the DataFrame, with its index, as a table."""
        with pl.Config(tbl_rows=get_option("display_max_rows")):
            return str(self.to_polars(include_index=True))

    def bake(self) -> "DataFrame":
        """A DataFrame is already baked; return it unchanged."""
        return self

    def lazy(self) -> "AsyncDataFrame":
        """
        Return an :class:`AsyncDataFrame` over this DataFrame's in-memory rows.

        The result is restartable and can be iterated any number of times.
        """
        from .lazyframe import AsyncDataFrame

        logger.debug("Converting DataFrame of %d rows to lazy", len(self))
        return AsyncDataFrame(
            values=list(self._values),
            index=list(self._index),
            column_names=list(self._columns),
        )
