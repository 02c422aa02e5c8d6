"""
Lazy pull sequences backing every asyncframe object.

Every input shape a frame accepts (lists, synchronous iterables, async
iterables, bare async iterators) is resolved once, at construction, into an
:class:`AsyncSource`. Frames, series and indexes only ever talk to
``AsyncSource`` objects, and every transform produces a new one wrapping its
parent.

An ``AsyncSource`` is *restartable* when each ``async for`` over it starts
again from the first item. Sources built from lists, tuples and re-iterable
objects are restartable; sources built from an async iterator (an object that
is its own iterator, such as an async generator) are single-use and yield
nothing once drained.
"""

from __future__ import annotations

import inspect
import itertools
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, AsyncIterator, Callable, Dict, Optional, Tuple

from ._exceptions import ConfigurationError

Pair = Tuple[Any, Any]


class AsyncSource:
    """
    A lazy, forward-only, asynchronously pulled sequence.

    Parameters
    ----------
    factory : callable
        Zero-argument callable returning a fresh async iterator each time the
        source is iterated.
    restartable : bool
        Whether repeated iteration replays the same items.
    kind : str
        Short label used in ``repr``.
    """

    __slots__ = ("_factory", "_restartable", "_kind")

    def __init__(
        self,
        factory: Callable[[], AsyncIterator[Any]],
        restartable: bool,
        kind: str,
    ) -> None:
        self._factory = factory
        self._restartable = restartable
        self._kind = kind

    def __aiter__(self) -> AsyncIterator[Any]:
        return self._factory()

    @property
    def restartable(self) -> bool:
        return self._restartable

    @property
    def kind(self) -> str:
        return self._kind

    def derive(
        self, factory: Callable[[], AsyncIterator[Any]], *others: "AsyncSource"
    ) -> "AsyncSource":
        """Wrap ``factory`` as a source restartable only if every parent is."""
        restartable = self._restartable and all(o.restartable for o in others)
        return AsyncSource(factory, restartable, "derived")

    def __repr__(self) -> str:
        return f"AsyncSource(kind={self._kind!r}, restartable={self._restartable})"


class IndexCounter:
    """
    Counter producing the default integer index of a single frame.

    Each iteration starts a fresh count at ``start`` so that a restartable
    frame numbers its rows identically every time it is iterated.
    """

    def __init__(self, start: int = 0) -> None:
        self.start = start

    def __iter__(self) -> Iterator[int]:
        return itertools.count(self.start)

    def __repr__(self) -> str:
        return f"IndexCounter(start={self.start})"


async def _iterate(items: Iterable[Any]) -> AsyncIterator[Any]:
    for item in items:
        yield item


async def _aclose(iterator: Any) -> None:
    close = getattr(iterator, "aclose", None)
    if close is not None:
        await close()


def empty_source() -> AsyncSource:
    return AsyncSource(lambda: _iterate(()), True, "empty")


def as_source(obj: Any, field_name: str) -> AsyncSource:
    """
    Resolve a user-supplied input into an :class:`AsyncSource`.

    Parameters
    ----------
    obj : Any
        ``None``, a list or tuple, a synchronous iterable, an async iterable
        or an async iterator.
    field_name : str
        Name of the configuration field, used in error messages.

    Raises
    ------
    TypeError
        If ``obj`` is a string, bytes, or not iterable at all.
    """
    if isinstance(obj, AsyncSource):
        return obj
    if obj is None:
        return empty_source()
    if isinstance(obj, (str, bytes)):
        raise TypeError(
            f"'{field_name}' must be a sequence or async iterable, "
            f"not {type(obj).__name__}"
        )
    if isinstance(obj, (list, tuple)):
        return AsyncSource(lambda: _iterate(obj), True, "array")
    if hasattr(obj, "__aiter__"):
        # An object that is its own iterator can only be drained once.
        restartable = not hasattr(obj, "__anext__") and bool(
            getattr(obj, "restartable", True)
        )
        kind = "async-iterable" if restartable else "async-iterator"
        return AsyncSource(obj.__aiter__, restartable, kind)
    if hasattr(obj, "__anext__"):
        return AsyncSource(lambda: obj, False, "async-iterator")
    if isinstance(obj, Iterable):
        restartable = not isinstance(obj, Iterator)
        kind = "iterable" if restartable else "iterator"
        return AsyncSource(lambda: _iterate(obj), restartable, kind)
    raise TypeError(
        f"'{field_name}' must be a sequence or async iterable, "
        f"not {type(obj).__name__}"
    )


def enumerate_values(values: AsyncSource, counter: IndexCounter) -> AsyncSource:
    """Pair each value with the next number from ``counter``."""

    async def generate() -> AsyncIterator[Pair]:
        numbers = iter(counter)
        async for value in values:
            yield next(numbers), value

    return values.derive(generate)


def zip_index(index: AsyncSource, values: AsyncSource) -> AsyncSource:
    """
    Pair ``index`` with ``values`` item by item.

    Iteration stops at the end of the shorter sequence; a length mismatch is
    not an error.
    """

    async def generate() -> AsyncIterator[Pair]:
        index_iter = index.__aiter__()
        value_iter = values.__aiter__()
        try:
            while True:
                try:
                    key = await index_iter.__anext__()
                except StopAsyncIteration:
                    break
                try:
                    value = await value_iter.__anext__()
                except StopAsyncIteration:
                    break
                yield key, value
        finally:
            await _aclose(index_iter)
            await _aclose(value_iter)

    return index.derive(generate, values)


def checked_pairs(pairs: AsyncSource) -> AsyncSource:
    """Validate that every item of a user-supplied pair source is a 2-item pair."""

    async def generate() -> AsyncIterator[Pair]:
        async for pair in pairs:
            try:
                key, value = pair
            except (TypeError, ValueError) as e:
                raise ValueError(
                    f"Each item of 'pairs' must be an (index, value) pair, got {pair!r}"
                ) from e
            yield key, value

    return pairs.derive(generate)


def pair_values(pairs: AsyncSource) -> AsyncSource:
    async def generate() -> AsyncIterator[Any]:
        async for _, value in pairs:
            yield value

    return pairs.derive(generate)


def pair_index(pairs: AsyncSource) -> AsyncSource:
    async def generate() -> AsyncIterator[Any]:
        async for key, _ in pairs:
            yield key

    return pairs.derive(generate)


def select_pairs(pairs: AsyncSource, selector: Callable[[Any, Any], Any]) -> AsyncSource:
    """Replace each value with ``selector(value, index)``, awaiting it if needed."""

    async def generate() -> AsyncIterator[Pair]:
        async for key, value in pairs:
            result = selector(value, key)
            if inspect.isawaitable(result):
                result = await result
            yield key, result

    return pairs.derive(generate)


def skip_pairs(pairs: AsyncSource, count: int) -> AsyncSource:
    async def generate() -> AsyncIterator[Pair]:
        seen = 0
        async for pair in pairs:
            if seen < count:
                seen += 1
                continue
            yield pair

    return pairs.derive(generate)


def take_pairs(pairs: AsyncSource, count: int) -> AsyncSource:
    """Keep at most ``count`` items, without pulling the source past them."""

    async def generate() -> AsyncIterator[Pair]:
        if count <= 0:
            return
        iterator = pairs.__aiter__()
        try:
            for _ in range(count):
                try:
                    pair = await iterator.__anext__()
                except StopAsyncIteration:
                    break
                yield pair
        finally:
            await _aclose(iterator)

    return pairs.derive(generate)


def check_count(count: Any, operation: str) -> int:
    """Validate the row count passed to ``skip`` or ``take``."""
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(
            f"{operation}() expects an integer count, got {type(count).__name__}"
        )
    if count < 0:
        raise ValueError(f"{operation}() count must be non-negative, got {count}")
    return count


def resolve_pairs(
    values: Any,
    index: Any,
    pairs: Any,
    counter: Optional[IndexCounter] = None,
) -> AsyncSource:
    """
    Resolve the value/index/pair inputs of a frame into one pair source.

    ``pairs`` wins when given. Otherwise ``values`` is paired with ``index``,
    or with ``counter`` when no index is given.
    """
    if pairs is not None:
        return checked_pairs(as_source(pairs, "pairs"))
    if values is None:
        return empty_source()
    value_source = as_source(values, "values")
    if index is None:
        return enumerate_values(value_source, counter or IndexCounter())
    return zip_index(as_source(index, "index"), value_source)


def unpack_config(
    data: Any, allowed: Tuple[str, ...], given: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Merge a positional ``data`` argument with keyword configuration.

    ``data`` is either a mapping with keys among ``allowed`` or a value
    sequence (shorthand for ``values=data``) that may be combined with the
    other keyword fields.

    Raises
    ------
    ConfigurationError
        If a configuration mapping is combined with keyword fields, if values
        are given twice, or if an index is given without values or pairs.
    TypeError
        If a configuration mapping has unknown keys.
    """
    if data is None:
        config = dict(given)
    elif isinstance(data, Mapping):
        if any(value is not None for value in given.values()):
            raise ConfigurationError(
                "Pass either a configuration mapping or keyword fields, not both."
            )
        unknown = set(data) - set(allowed)
        if unknown:
            raise TypeError(f"Unknown configuration keys: {sorted(unknown)}")
        config = {key: data.get(key) for key in allowed}
    elif given.get("values") is not None:
        raise ConfigurationError("Values were given both positionally and as 'values'.")
    else:
        config = dict(given)
        config["values"] = data
    if (
        config.get("index") is not None
        and config.get("values") is None
        and config.get("pairs") is None
    ):
        raise ConfigurationError(
            "An index was supplied without values or pairs; row values are undefined."
        )
    return config
