"""
Test AsyncSeries and the eager Series it bakes into.
"""

import json

import polars as pl
import pytest

import asyncframe as af
from asyncframe import AsyncDataFrame, AsyncSeries, Series


class TestAsyncSeries:
    async def test_default_name_and_index(self):
        series = AsyncSeries([5, 6])
        assert series.name == "value"
        assert await series.to_pairs() == [(0, 5), (1, 6)]

    async def test_config_mapping(self):
        series = AsyncSeries({"values": [1, 2], "index": ["a", "b"], "name": "n"})
        assert series.name == "n"
        assert await series.to_pairs() == [("a", 1), ("b", 2)]

    async def test_transforms_keep_name(self):
        series = AsyncSeries([1, 2, 3, 4], name="n")
        result = series.skip(1).take(2).select(lambda v, i: v * 10).with_index(["p", "q"])
        assert isinstance(result, AsyncSeries)
        assert result.name == "n"
        assert await result.to_pairs() == [("p", 20), ("q", 30)]
        assert await result.reset_index().to_pairs() == [(0, 20), (1, 30)]

    async def test_bake(self, async_values):
        series = AsyncSeries(values=async_values(1, 2), index=["a", "b"], name="n")
        baked = await series.bake()
        assert isinstance(baked, Series)
        assert baked.name == "n"
        assert baked.to_pairs() == [("a", 1), ("b", 2)]

    async def test_serialization(self):
        series = AsyncSeries([1, 2], name="x")
        assert json.loads(await series.to_json()) == [{"x": 1}, {"x": 2}]
        assert await series.to_csv() == "x\n1\n2\n"
        assert "x" in await series.to_string()

    async def test_to_frame(self):
        frame = AsyncSeries([1, 2], name="x").to_frame()
        assert isinstance(frame, AsyncDataFrame)
        assert await frame.get_column_names() == ["x"]
        assert await frame.to_rows() == [[1], [2]]

    async def test_series_from_frame_round_trips(self, records):
        df = AsyncDataFrame(values=records, column_names=["x", "y"])
        assert await df.get_series("x").to_frame().to_csv() == "x\n1\n2\n3\n"


class TestSeries:
    def test_construction(self):
        series = Series([1, 2, 3], index=["a", "b", "c"], name="x")
        assert len(series) == 3
        assert list(series) == [1, 2, 3]
        assert series.get_index().tolist() == ["a", "b", "c"]

    def test_pairs_take_precedence(self):
        series = Series(pairs=[("a", 1)], values=[9, 9])
        assert series.to_pairs() == [("a", 1)]

    def test_transforms(self):
        series = Series([1, 2, 3], name="x")
        assert series.skip(1).to_array() == [2, 3]
        assert series.take(1).to_array() == [1]
        assert series.select(lambda v, i: v + i).to_array() == [1, 3, 5]
        assert series.with_index(["a", "b"]).to_pairs() == [("a", 1), ("b", 2)]
        assert series.with_index(["a", "b"]).reset_index().to_pairs() == [(0, 1), (1, 2)]

    def test_async_selector_rejected(self):
        async def selector(value, index):
            return value

        with pytest.raises(TypeError, match="lazy"):
            Series([1]).select(selector)

    def test_to_polars(self):
        polars_series = Series([1, 2], name="x").to_polars()
        assert isinstance(polars_series, pl.Series)
        assert polars_series.name == "x"
        assert polars_series.to_list() == [1, 2]

    def test_to_frame(self):
        frame = Series([1, 2], index=["a", "b"], name="x").to_frame()
        assert frame.get_column_names() == ["x"]
        assert frame.to_pairs() == [("a", 1), ("b", 2)]

    def test_bake_returns_self(self):
        series = Series([1])
        assert series.bake() is series

    async def test_lazy(self):
        lazy = Series([1, 2], index=["a", "b"], name="x").lazy()
        assert isinstance(lazy, af.AsyncSeries)
        assert lazy.name == "x"
        assert await lazy.to_pairs() == [("a", 1), ("b", 2)]

    def test_to_polars_rejects_mixed_values(self):
        with pytest.raises(TypeError, match="Column 'x' mixes"):
            Series([1, "a"], name="x").to_polars()
