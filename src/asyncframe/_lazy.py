"""
Transforms and materializers shared by AsyncDataFrame and AsyncSeries.

Both lazy types are a single pair source (``_pairs``) plus some column
metadata. The mixin implements everything that only touches the pairs;
subclasses supply ``_derive``, which wraps a transformed pair source in a new
instance carrying the same metadata.
"""

from typing import Any, AsyncIterator, Callable, List, Tuple

from ._sources import (
    AsyncSource,
    IndexCounter,
    as_source,
    check_count,
    enumerate_values,
    pair_values,
    select_pairs,
    skip_pairs,
    take_pairs,
    zip_index,
)
from .index import AsyncIndex


class LazyPairsMixin:
    """Pull iteration, pair transforms and pair materialization."""

    _pairs: AsyncSource

    def _derive(self, pairs: AsyncSource) -> Any:
        raise NotImplementedError

    def __aiter__(self) -> AsyncIterator[Any]:
        return pair_values(self._pairs).__aiter__()

    def iter_pairs(self) -> AsyncIterator[Tuple[Any, Any]]:
        """Return an async iterator of ``(index, value)`` pairs."""
        return self._pairs.__aiter__()

    @property
    def restartable(self) -> bool:
        """
        Whether iterating again replays the same rows.

        False when the data comes from a single-use async iterator; such an
        object yields nothing after its first full iteration.
        """
        return self._pairs.restartable

    def get_index(self) -> AsyncIndex:
        """Return a read-only lazy view of the index."""
        return AsyncIndex.from_pairs(self._pairs)

    def with_index(self, new_index: Any) -> Any:
        """
        Replace the index with ``new_index``, keeping the values.

        ``new_index`` may be a list, any iterable or async iterable, or another
        index or series. Lengths are not checked: iteration stops at the end of
        the shorter of the index and the values.
        """
        values = pair_values(self._pairs)
        return self._derive(zip_index(as_source(new_index, "index"), values))

    def reset_index(self) -> Any:
        """Replace the index with the default zero-based integer sequence."""
        return self._derive(enumerate_values(pair_values(self._pairs), IndexCounter()))

    def select(self, selector: Callable[[Any, Any], Any]) -> Any:
        """
        Transform every value with ``selector(value, index)``.

        The selector may be a coroutine function; its result is awaited. The
        index and column names are unchanged.
        """
        return self._derive(select_pairs(self._pairs, selector))

    def skip(self, num_values: int) -> Any:
        """Drop the first ``num_values`` rows; fewer rows give an empty result."""
        return self._derive(skip_pairs(self._pairs, check_count(num_values, "skip")))

    def take(self, num_values: int) -> Any:
        """Keep at most the first ``num_values`` rows."""
        return self._derive(take_pairs(self._pairs, check_count(num_values, "take")))

    async def to_array(self) -> List[Any]:
        """
        Drain the values into a list.

        This forces lazy evaluation to complete.
        """
        return [value async for value in self]

    async def to_pairs(self) -> List[Tuple[Any, Any]]:
        """
        Drain the data into a list of ``(index, value)`` tuples.

        This forces lazy evaluation to complete.
        """
        return [(key, value) async for key, value in self._pairs]

    async def _drain(self) -> Tuple[List[Any], List[Any]]:
        index: List[Any] = []
        values: List[Any] = []
        async for key, value in self._pairs:
            index.append(key)
            values.append(value)
        return index, values

    def _describe(self) -> str:
        return f"source={self._pairs.kind!r}, restartable={self.restartable}"
