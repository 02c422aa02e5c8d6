"""
AsyncDataFrame: a lazy, asynchronously iterable table.

This module provides the AsyncDataFrame class. A frame describes a pipeline
over data coming from slow or streaming origins (files, network, async
generators) without loading it. Nothing is pulled from the underlying source
until the frame is iterated or materialized.

The AsyncDataFrame class supports:
- Construction from lists, iterables, async iterables or (index, value) pairs
- Lazy, non-destructive transforms (select, skip, take, with_index,
  reset_index, get_series)
- Materialization with to_array, to_pairs, to_rows and bake
- Serialization to JSON, CSV and tabular text through the eager DataFrame

Examples
--------
>>> import asyncframe as af
>>> async def rows():
...     for i in range(3):
...         yield {"x": i, "y": i * i}
>>> df = af.AsyncDataFrame(values=rows(), column_names=["x", "y"])
>>> await df.skip(1).get_series("y").to_array()  # doctest: +SKIP
[1, 4]

Notes
-----
- Frames over a single-use async iterator (such as an async generator
  object) can be iterated once; a second iteration yields nothing. Check
  ``restartable`` or ``bake()`` the frame to iterate it repeatedly
- Column names are never inferred from rows, so resolving them never
  consumes an element of the value source
- Materialization can be expensive; prefer transforming lazily and baking once
"""

import asyncio
import logging
from typing import Any, AsyncIterator, List, Optional, Tuple

from ._config import get_option
from ._exceptions import create_keyerror_with_suggestions
from ._lazy import LazyPairsMixin
from ._sources import AsyncSource, IndexCounter, as_source, resolve_pairs, unpack_config
from .frame import DataFrame
from .lazyseries import AsyncSeries
from .utils import column_value, project_row, validate_column_names

logger = logging.getLogger(__name__)

_CONFIG_KEYS = ("values", "index", "pairs", "column_names")


class _ColumnNames:
    """
    Column names of a frame, drained from their source at most once.

    A frame and every frame derived from it share one instance, so names
    coming from a single-use async iterator stay available after the first
    read.
    """

    def __init__(self, source: AsyncSource) -> None:
        self._source = source
        self._names: Optional[List[Any]] = None
        self._lock: Optional[asyncio.Lock] = None

    async def resolve(self) -> List[str]:
        if self._names is None:
            if self._lock is None:
                self._lock = asyncio.Lock()
            async with self._lock:
                if self._names is None:
                    self._names = [name async for name in self._source]
                    logger.debug("Resolved %d column names", len(self._names))
        return validate_column_names(self._names)


class AsyncDataFrame(LazyPairsMixin):
    """
    Two-dimensional lazy table of indexed rows.

    Parameters
    ----------
    data : list, iterable, async iterable or mapping, optional
        Row values (shorthand for ``values=data``), or a configuration mapping
        with keys ``values``, ``index``, ``pairs`` and ``column_names``.
    values : list, iterable or async iterable, optional
        Row values.
    index : list, iterable or async iterable, optional
        Row labels. Defaults to 0, 1, 2, ... generated as values are pulled,
        so it also works for unbounded sources.
    pairs : list, iterable or async iterable of (index, value), optional
        Rows with their labels. When given, ``values`` and ``index`` are
        ignored.
    column_names : list or async iterable of str, optional
        Column order used by ``to_rows`` and ``get_series``. Defaults to a
        single column named by the ``default_column_name`` option.

    Raises
    ------
    ConfigurationError
        If an index is given without values or pairs.
    TypeError
        If a source is a string or not iterable.

    Examples
    --------
    >>> import asyncframe as af
    >>> df = af.AsyncDataFrame([10, 20, 30])
    >>> await df.to_pairs()  # doctest: +SKIP
    [(0, 10), (1, 20), (2, 30)]
    >>> df = af.AsyncDataFrame(values=[1, 2, 3, 4], index=["a", "b", "c", "d"])
    >>> await df.skip(2).to_pairs()  # doctest: +SKIP
    [('c', 3), ('d', 4)]

    See Also
    --------
    DataFrame : Eager table returned by :meth:`bake`
    AsyncSeries : One lazy column
    """

    _pairs: AsyncSource
    _column_names: _ColumnNames

    def __init__(
        self,
        data: Optional[Any] = None,
        *,
        values: Optional[Any] = None,
        index: Optional[Any] = None,
        pairs: Optional[Any] = None,
        column_names: Optional[Any] = None,
    ) -> None:
        config = unpack_config(
            data,
            _CONFIG_KEYS,
            {"values": values, "index": index, "pairs": pairs, "column_names": column_names},
        )
        if config["pairs"] is not None and (
            config["values"] is not None or config["index"] is not None
        ):
            logger.debug("Both pairs and values/index supplied; using pairs")
        self._pairs = resolve_pairs(
            config["values"], config["index"], config["pairs"], IndexCounter()
        )

        names = config["column_names"]
        if isinstance(names, (str, bytes)):
            raise TypeError("column_names must be a sequence of strings, not a string")
        if names is None:
            names = [get_option("default_column_name")]
        self._column_names = _ColumnNames(as_source(names, "column_names"))

    def _derive(self, pairs: AsyncSource) -> "AsyncDataFrame":
        frame = AsyncDataFrame.__new__(AsyncDataFrame)
        frame._pairs = pairs
        frame._column_names = self._column_names
        return frame

    def __repr__(self) -> str:
        return f"AsyncDataFrame({self._describe()})"

    async def get_column_names(self) -> List[str]:
        """
        Get the names of the columns in the frame.

        Raises
        ------
        TypeError
            If a name is not a string.
        ValueError
            If a name is duplicated.
        """
        return await self._column_names.resolve()

    def get_series(self, column_name: str) -> AsyncSeries:
        """
        Return a lazy series projecting ``column_name`` out of every row.

        The column is checked when the series is first iterated, since column
        names may themselves come from a lazy source.

        Raises
        ------
        MissingColumnError
            On iteration, if the frame has no such column.
        """
        pairs = self._pairs

        async def project() -> AsyncIterator[Tuple[Any, Any]]:
            names = await self.get_column_names()
            if column_name not in names:
                raise create_keyerror_with_suggestions(column_name, names)
            position = names.index(column_name)
            width = len(names)
            async for key, row in pairs:
                yield key, column_value(row, column_name, position, width)

        return AsyncSeries._from_pairs(pairs.derive(project), column_name)

    async def to_rows(self) -> List[List[Any]]:
        """
        Drain the frame into rows, each a list of values in column order.

        Mapping rows are looked up by column name, list and tuple rows are
        taken as already column-ordered, and scalar rows are only valid for a
        single-column frame.
        """
        names = await self.get_column_names()
        return [project_row(row, names) async for row in self]

    async def bake(self) -> DataFrame:
        """
        Force lazy evaluation to complete and load the frame into memory.

        The source is drained exactly once. The result can be iterated any
        number of times, even when this frame cannot.

        Returns
        -------
        DataFrame
            Eager snapshot of the index, values and column names.
        """
        names = await self.get_column_names()
        index, values = await self._drain()
        logger.debug("Baked %d rows across %d columns", len(values), len(names))
        return DataFrame._from_lists(index, values, names)

    async def to_json(self) -> str:
        """Serialize to a JSON array with one object per row, keyed by column name."""
        return (await self.bake()).to_json()

    async def to_csv(self) -> str:
        """Serialize to CSV: a header of column names, then one line per row."""
        return (await self.bake()).to_csv()

    async def to_string(self) -> str:
        """
        Format the frame for display as a string.

        This forces lazy evaluation to complete.
        """
        return (await self.bake()).to_string()
