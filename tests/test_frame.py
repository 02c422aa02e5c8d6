"""
Test the eager DataFrame returned by AsyncDataFrame.bake().
"""

import json

import polars as pl
import pytest

import asyncframe as af
from asyncframe import DataFrame, MissingColumnError, Series


@pytest.fixture
def frame(records) -> DataFrame:
    return DataFrame(values=records, index=["a", "b", "c"], column_names=["x", "y"])


class TestDataFrameInitialization:
    def test_from_list(self):
        df = DataFrame([10, 20, 30])
        assert df.to_pairs() == [(0, 10), (1, 20), (2, 30)]
        assert df.get_column_names() == ["value"]

    def test_from_config_mapping(self):
        df = DataFrame({"values": [1, 2], "index": ["a", "b"], "column_names": ["n"]})
        assert df.to_pairs() == [("a", 1), ("b", 2)]
        assert df.columns == ["n"]

    def test_pairs_take_precedence(self):
        df = DataFrame(pairs=[("k", 1)], values=[1, 2, 3])
        assert df.to_pairs() == [("k", 1)]

    def test_mismatched_index_is_truncated(self):
        assert DataFrame(values=[1, 2, 3], index=["a"]).to_pairs() == [("a", 1)]

    def test_empty(self):
        df = DataFrame()
        assert df.empty
        assert df.shape == (0, 1)

    def test_rejects_async_input(self, async_values):
        with pytest.raises(TypeError, match="AsyncDataFrame"):
            DataFrame(values=async_values(1))

    def test_index_without_values(self):
        with pytest.raises(af.ConfigurationError):
            DataFrame(index=[1])

    def test_duplicate_column_names(self):
        with pytest.raises(ValueError):
            DataFrame([], column_names=["a", "a"])


class TestDataFrameAccess:
    def test_iteration_is_repeatable(self, frame, records):
        assert list(frame) == records
        assert list(frame) == records
        assert len(frame) == 3

    def test_shape(self, frame):
        assert frame.shape == (3, 2)

    def test_index(self, frame):
        assert isinstance(frame.index, af.Index)
        assert frame.index.tolist() == ["a", "b", "c"]

    def test_get_series(self, frame):
        series = frame.get_series("y")
        assert isinstance(series, Series)
        assert series.to_pairs() == [("a", "a"), ("b", "b"), ("c", "c")]
        assert frame["x"].to_array() == [1, 2, 3]

    def test_get_series_missing_column_raises_immediately(self, frame):
        with pytest.raises(MissingColumnError, match="Did you mean"):
            frame.get_series("xx")


class TestDataFrameTransforms:
    def test_select(self, frame):
        result = frame.select(lambda row, index: {"x": row["x"] * 2, "y": index})
        assert result.to_rows() == [[2, "a"], [4, "b"], [6, "c"]]

    def test_skip_take(self, frame):
        assert frame.skip(2).get_index().tolist() == ["c"]
        assert frame.take(1).to_rows() == [[1, "a"]]
        assert frame.skip(5).to_array() == []

    def test_with_index_and_reset(self, frame):
        relabelled = frame.with_index(["p", "q"])
        assert relabelled.get_index().tolist() == ["p", "q"]
        assert relabelled.reset_index().get_index().tolist() == [0, 1]

    def test_transforms_do_not_mutate(self, frame, records):
        frame.skip(1).select(lambda row, index: None)
        assert frame.to_array() == records

    def test_bake_returns_self(self, frame):
        assert frame.bake() is frame


class TestDataFrameOutput:
    def test_to_json(self, frame, records):
        assert json.loads(frame.to_json()) == records

    def test_to_csv(self, frame):
        assert frame.to_csv() == "x,y\n1,a\n2,b\n3,c\n"

    def test_to_string(self, frame):
        output = frame.to_string()
        assert "__index__" in output
        assert repr(frame) == output

    def test_to_polars(self, frame):
        polars_df = frame.to_polars()
        assert polars_df.columns == ["x", "y"]
        with_index = frame.to_polars(include_index=True)
        assert with_index["__index__"].to_list() == ["a", "b", "c"]

    def test_from_polars(self):
        df = DataFrame.from_polars(pl.DataFrame({"a": [1, 2], "b": ["x", "y"]}))
        assert df.get_column_names() == ["a", "b"]
        assert df.to_rows() == [[1, "x"], [2, "y"]]
        assert df.to_array() == [{"a": 1, "b": "x"}, {"a": 2, "b": "y"}]

    def test_to_pandas(self, frame):
        pytest.importorskip("pandas")
        pandas_df = frame.to_pandas()
        assert list(pandas_df.columns) == ["x", "y"]
        assert pandas_df.index.tolist() == ["a", "b", "c"]
        assert pandas_df["x"].tolist() == [1, 2, 3]

    async def test_lazy_round_trip(self, frame):
        lazy = frame.lazy()
        assert isinstance(lazy, af.AsyncDataFrame)
        assert lazy.restartable
        assert await lazy.get_column_names() == ["x", "y"]
        assert await lazy.to_pairs() == frame.to_pairs()
        assert (await lazy.bake()).to_rows() == frame.to_rows()

    def test_repr_of_unrenderable_rows(self):
        df = DataFrame(values=[{"x": 1, "y": 2}, 5], column_names=["x", "y"])
        assert repr(df) == (
            "DataFrame(pairs=[(0, {'x': 1, 'y': 2}), (1, 5)], column_names=['x', 'y'])"
        )
        assert str(df) == repr(df)

    def test_repr_of_mixed_series(self):
        series = Series([1, "a"], name="v")
        assert repr(series) == "Series(pairs=[(0, 1), (1, 'a')], name='v')"
