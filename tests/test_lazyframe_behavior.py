import json

import pytest

import asyncframe as af


class ExplodingStream:
    """Async iterable that fails as soon as anything pulls from it."""

    def __aiter__(self):
        raise AssertionError("lazy frame was materialized")


def test_lazyframe_repr_does_not_materialize():
    lf = af.AsyncDataFrame(values=ExplodingStream())
    output = repr(lf)
    assert "AsyncDataFrame" in output
    assert "async-iterable" in output


def test_lazyframe_transforms_do_not_materialize():
    lf = af.AsyncDataFrame(values=ExplodingStream(), column_names=["a"])
    chained = lf.skip(1).take(2).select(lambda row, index: row).get_series("a")
    assert isinstance(chained, af.AsyncSeries)


def test_lazyframe_len_requires_materialization():
    lf = af.AsyncDataFrame([1, 2])
    with pytest.raises(TypeError):
        len(lf)


async def test_lazyframe_to_string_materializes():
    lf = af.AsyncDataFrame(values=[{"a": 1}, {"a": 2}], column_names=["a"])
    output = await lf.to_string()
    assert "__index__" in output
    assert "shape: (2, 2)" in output


async def test_lazyframe_display_rows_option():
    lf = af.AsyncDataFrame(values=range(100))
    with af.option_context(display_max_rows=4):
        output = await lf.to_string()
    assert "…" in output


async def test_lazyframe_missing_column_is_reported_on_iteration():
    lf = af.AsyncDataFrame(values=[{"a": 1}], column_names=["alpha", "beta"])
    series = lf.get_series("alpah")
    with pytest.raises(af.MissingColumnError) as excinfo:
        await series.to_array()
    assert excinfo.value.column == "alpah"
    assert "Did you mean: 'alpha'?" in str(excinfo.value)


async def test_lazyframe_async_column_names():
    async def names():
        yield "a"
        yield "b"

    lf = af.AsyncDataFrame(values=[[1, 2], [3, 4]], column_names=names())
    assert json.loads(await lf.to_json()) == [{"a": 1, "b": 2}, {"a": 3, "b": 4}]


async def test_lazyframe_scalar_rows_need_one_column():
    lf = af.AsyncDataFrame(values=[1, 2], column_names=["a", "b"])
    with pytest.raises(TypeError):
        await lf.to_rows()
