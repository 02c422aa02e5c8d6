"""
Index implementations for lazy and eager frames.

This module provides the two index types: :class:`AsyncIndex`, a lazy
read-only view over the index half of a frame's (index, value) pairs, and
:class:`Index`, the eager snapshot produced by baking. The eager index keeps
the original Python values and renders through a Polars Series.

Classes
-------
AsyncIndex : Lazy, asynchronously iterable index
Index : Materialized index

Examples
--------
>>> import asyncframe as af
>>> idx = af.Index(["a", "b", "c"])
>>> list(idx)
['a', 'b', 'c']

Notes
-----
- An index is never mutated; ``with_index`` and ``reset_index`` on a frame
  return a new frame carrying a new index
- Index values need not be unique or sorted
"""

from typing import Any, AsyncIterator, Iterator, List, Optional, Tuple

import polars as pl

from ._sources import AsyncSource, as_source, pair_index


class Index:
    """
    Immutable sequence of row labels.

    Index is the eager counterpart of :class:`AsyncIndex`. It stores the index
    values as a Python list and exposes a Polars Series view of them; unknown
    attributes are delegated to that Series.

    Parameters
    ----------
    data : iterable or pl.Series, optional
        Index values. ``None`` gives an empty Index.

    Examples
    --------
    >>> import asyncframe as af
    >>> idx = af.Index([1, 2, 3])
    >>> idx.tolist()
    [1, 2, 3]
    >>> idx.dtype
    Int64
    """

    def __init__(self, data: Optional[Any] = None) -> None:
        if data is None:
            self._values: List[Any] = []
        elif isinstance(data, pl.Series):
            self._values = data.to_list()
        else:
            self._values = list(data)

    @property
    def _series(self) -> pl.Series:
        return pl.Series("index", self._values, strict=False)

    def __getattr__(self, name: str) -> Any:
        """
        Delegate attribute access to the Polars Series view.

        This allows transparent access to Polars methods and properties.
        """
        if name.startswith("_"):
            # Avoid infinite recursion for private attributes
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )

        try:
            return getattr(self._series, name)
        except AttributeError as e:
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            ) from e

    def __repr__(self) -> str:
        return f"Index({self._values!r})"

    def __str__(self) -> str:
        return str(self._series)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Index):
            return self._values == other._values
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def tolist(self) -> List[Any]:
        """Return the Index values as a list."""
        return list(self._values)

    to_array = tolist

    def to_polars(self) -> pl.Series:
        """Return the index as a Polars Series named ``index``."""
        return self._series

    @property
    def shape(self) -> Tuple[int]:
        return (len(self._values),)

    @property
    def size(self) -> int:
        return len(self._values)


class AsyncIndex:
    """
    Lazy, asynchronously iterable index.

    An AsyncIndex is a read-only view: iterating it pulls the owning frame's
    (index, value) pairs and yields only the index half. It never changes the
    frame it came from.

    Parameters
    ----------
    data : list, iterable or async iterable, optional
        Index values. Frames build their index view from their pair source
        through :meth:`from_pairs` instead.

    Examples
    --------
    >>> import asyncframe as af
    >>> df = af.AsyncDataFrame([10, 20, 30])
    >>> await df.get_index().to_array()  # doctest: +SKIP
    [0, 1, 2]
    """

    def __init__(self, data: Optional[Any] = None) -> None:
        self._source: AsyncSource = as_source(data, "index")

    @classmethod
    def from_pairs(cls, pairs: AsyncSource) -> "AsyncIndex":
        index = cls.__new__(cls)
        index._source = pair_index(pairs)
        return index

    def __aiter__(self) -> AsyncIterator[Any]:
        return self._source.__aiter__()

    @property
    def restartable(self) -> bool:
        """Whether the index can be iterated more than once."""
        return self._source.restartable

    async def to_array(self) -> List[Any]:
        """Drain the index into a list."""
        return [key async for key in self]

    async def bake(self) -> Index:
        """Drain the index into an eager :class:`Index`."""
        return Index(await self.to_array())

    def __repr__(self) -> str:
        return f"AsyncIndex(source={self._source.kind!r}, restartable={self.restartable})"
