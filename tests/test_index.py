"""
Test Index and AsyncIndex functionality.
"""

import polars as pl
import pytest

from asyncframe import AsyncDataFrame, AsyncIndex, Index


class TestIndexInitialization:
    """Test Index initialization from various sources."""

    def test_init_from_list(self):
        idx = Index([0, 1, 2, 3, 4])
        assert isinstance(idx, Index)
        assert isinstance(idx._series, pl.Series)

    def test_init_from_polars_series(self):
        idx = Index(pl.Series("index", ["a", "b"]))
        assert idx.tolist() == ["a", "b"]

    def test_init_from_generator(self):
        idx = Index(n * n for n in range(3))
        assert idx.tolist() == [0, 1, 4]

    def test_init_none(self):
        idx = Index(None)
        assert len(idx) == 0
        assert idx.tolist() == []


class TestIndexDelegation:
    """Test that Index delegates unknown attributes to its Polars Series."""

    def test_access_dtype(self):
        assert Index([0, 1, 2, 3]).dtype == pl.Int64

    def test_access_private_attribute_raises_error(self):
        idx = Index([0, 1, 2, 3])
        with pytest.raises(AttributeError, match="has no attribute"):
            _ = idx._private_attr

    def test_access_nonexistent_attribute_raises_error(self):
        idx = Index([0, 1, 2, 3])
        with pytest.raises(AttributeError, match="has no attribute"):
            _ = idx.nonexistent_method()

    def test_mixed_values_are_kept_as_given(self):
        assert Index([1, "b", None]).tolist() == [1, "b", None]

    def test_index_with_nulls(self):
        idx = Index([0, None, 2, None, 4])
        assert len(idx) == 5
        assert idx.null_count() == 2


class TestIndexProperties:
    def test_shape_property(self):
        assert Index([0, 1, 2, 3, 4]).shape == (5,)

    def test_size_property(self):
        assert Index([0, 1, 2, 3, 4]).size == 5

    def test_iteration(self):
        assert list(Index(["x", "y"])) == ["x", "y"]

    def test_equality(self):
        assert Index([1, 2]) == Index([1, 2])
        assert Index([1, 2]) != Index([2, 1])

    def test_repr_and_str(self):
        idx = Index([0, 1])
        assert repr(idx) == "Index([0, 1])"
        assert "index" in str(idx)

    def test_to_polars(self):
        assert Index([3, 4]).to_polars().to_list() == [3, 4]


class TestAsyncIndex:
    async def test_from_values(self):
        assert await AsyncIndex(["a", "b"]).to_array() == ["a", "b"]

    async def test_async_iteration(self, async_values):
        idx = AsyncIndex(async_values(3, 4))
        assert [key async for key in idx] == [3, 4]
        assert idx.restartable is False

    async def test_bake(self):
        baked = await AsyncIndex([1, 2]).bake()
        assert isinstance(baked, Index)
        assert baked.tolist() == [1, 2]

    async def test_frame_index_view(self):
        df = AsyncDataFrame(values=[10, 20], index=["a", "b"])
        idx = df.get_index()
        assert isinstance(idx, AsyncIndex)
        assert idx.restartable
        assert await idx.to_array() == ["a", "b"]
        assert await df.to_array() == [10, 20]

    def test_repr_does_not_iterate(self):
        assert "AsyncIndex" in repr(AsyncIndex([1]))
