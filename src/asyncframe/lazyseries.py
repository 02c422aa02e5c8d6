"""
AsyncSeries: a lazy, asynchronously iterable column with its index.

A series is either built directly from values, an index and pairs, or
derived from an AsyncDataFrame with ``get_series``. It follows the same pull
and transform contract as the frame, scoped to one named column.
"""

import logging
from typing import TYPE_CHECKING, Any, Optional

from ._config import get_option
from ._lazy import LazyPairsMixin
from ._sources import AsyncSource, IndexCounter, resolve_pairs, unpack_config
from .series import Series

if TYPE_CHECKING:
    from .lazyframe import AsyncDataFrame

logger = logging.getLogger(__name__)

_CONFIG_KEYS = ("values", "index", "pairs", "name")


class AsyncSeries(LazyPairsMixin):
    """
    Lazy, asynchronously iterable column of indexed values.

    Parameters
    ----------
    data : list, iterable, async iterable or mapping, optional
        Values, or a configuration mapping with keys ``values``, ``index``,
        ``pairs`` and ``name``.
    values, index, pairs : optional
        Keyword form of the configuration; see :class:`AsyncDataFrame`.
    name : str, optional
        Column name; defaults to the ``default_column_name`` option.

    Examples
    --------
    >>> import asyncframe as af
    >>> s = af.AsyncSeries([1, 2, 3], name="x")
    >>> await s.select(lambda v, i: v * 10).to_array()  # doctest: +SKIP
    [10, 20, 30]
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
        self._pairs: AsyncSource = resolve_pairs(
            config["values"], config["index"], config["pairs"], IndexCounter()
        )
        name = config["name"]
        self._name: str = name if name is not None else get_option("default_column_name")

    @classmethod
    def _from_pairs(cls, pairs: AsyncSource, name: str) -> "AsyncSeries":
        series = cls.__new__(cls)
        series._pairs = pairs
        series._name = name
        return series

    def _derive(self, pairs: AsyncSource) -> "AsyncSeries":
        return AsyncSeries._from_pairs(pairs, self._name)

    @property
    def name(self) -> str:
        return self._name

    def to_frame(self) -> "AsyncDataFrame":
        """Return a lazy single-column frame named after the series."""
        from .lazyframe import AsyncDataFrame

        return AsyncDataFrame(pairs=self._pairs, column_names=[self._name])

    async def bake(self) -> Series:
        """
        Drain the series into an eager :class:`Series`.

        Returns a complete snapshot or raises; nothing is returned for a
        partially drained source.
        """
        index, values = await self._drain()
        logger.debug("Baked series %r with %d rows", self._name, len(values))
        return Series._from_lists(index, values, self._name)

    async def to_json(self) -> str:
        """Serialize to a JSON array of ``{name: value}`` objects."""
        return (await self.bake()).to_json()

    async def to_csv(self) -> str:
        """Serialize to single-column CSV."""
        return (await self.bake()).to_csv()

    async def to_string(self) -> str:
        """Render the series as a table. This forces lazy evaluation to complete."""
        return (await self.bake()).to_string()

    def __repr__(self) -> str:
        return f"AsyncSeries(name={self._name!r}, {self._describe()})"
