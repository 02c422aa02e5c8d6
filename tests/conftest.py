"""Shared pytest fixtures for asyncframe tests."""

from __future__ import annotations

import asyncio

import pytest

import asyncframe as af


class RestartableStream:
    """Async iterable handing out a fresh async generator per iteration."""

    def __init__(self, items):
        self.items = list(items)
        self.iterations = 0

    def __aiter__(self):
        self.iterations += 1
        return self._generate()

    async def _generate(self):
        for item in self.items:
            await asyncio.sleep(0)
            yield item


@pytest.fixture(autouse=True)
def _restore_options():
    yield
    af.reset_options()


@pytest.fixture
def async_values():
    """Factory for single-use async generators that suspend before every item."""

    def make(*items):
        async def generate():
            for item in items:
                await asyncio.sleep(0)
                yield item

        return generate()

    return make


@pytest.fixture
def restartable_stream():
    return RestartableStream


@pytest.fixture
def records() -> list[dict]:
    """Mapping rows with two columns."""

    return [
        {"x": 1, "y": "a"},
        {"x": 2, "y": "b"},
        {"x": 3, "y": "c"},
    ]
