"""
I/O operations for asyncframe.

This module reads tabular files through Polars, either eagerly into a
DataFrame or lazily into an AsyncDataFrame that streams rows in batches.

Functions
---------
Eager I/O (immediate loading):
    read_csv, read_json
    Load data immediately into DataFrame

Lazy I/O (deferred loading):
    scan_csv
    Stream rows into an AsyncDataFrame, one batch at a time

Examples
--------
>>> import asyncframe as af
>>> # Eager loading
>>> df = af.read_csv("data.csv")  # doctest: +SKIP
>>> # Lazy loading for large files
>>> lf = af.scan_csv("large_file.csv", batch_size=10_000)  # doctest: +SKIP
>>> first = await lf.take(5).to_rows()  # doctest: +SKIP

Notes
-----
- Every row is a dict keyed by column name, so ``get_series`` and
  ``to_rows`` work without further configuration
- ``scan_csv`` reads a batch on a worker thread only when the consumer pulls
  past the previous one
"""

import asyncio
import logging
from typing import Any, AsyncIterator, Dict, Optional

import polars as pl

from ._config import get_option
from ._sources import AsyncSource
from .frame import DataFrame
from .lazyframe import AsyncDataFrame

logger = logging.getLogger(__name__)


def read_csv(source: Any, **kwargs: Any) -> DataFrame:
    """
    Read a CSV file into a DataFrame.

    Parameters
    ----------
    source : str, path or file-like
        CSV source accepted by ``polars.read_csv``.
    **kwargs
        Additional arguments passed to Polars read_csv()

    Returns
    -------
    DataFrame
        Rows as dicts keyed by the CSV header.

    Examples
    --------
    >>> import asyncframe as af
    >>> df = af.read_csv("data.csv")  # doctest: +SKIP
    """
    return DataFrame.from_polars(pl.read_csv(source, **kwargs))


def read_json(source: Any, **kwargs: Any) -> DataFrame:
    """
    Read a JSON array of row objects into a DataFrame.

    Parameters
    ----------
    source : str, path or file-like
        JSON source accepted by ``polars.read_json``.
    **kwargs
        Additional arguments passed to Polars read_json()

    Returns
    -------
    DataFrame
        Rows as dicts keyed by the object keys.
    """
    return DataFrame.from_polars(pl.read_json(source, **kwargs))


def scan_csv(path: str, batch_size: Optional[int] = None, **kwargs: Any) -> AsyncDataFrame:
    """
    Scan a CSV file into an AsyncDataFrame that streams its rows.

    Nothing is read until the frame is iterated. Each iteration starts again
    from the top of the file, so the frame is restartable.

    Parameters
    ----------
    path : str
        Path to CSV file
    batch_size : int, optional
        Rows the reader buffers per batch; defaults to the ``scan_batch_size``
        option. Polars treats it as a hint, so batches may differ in size.
    **kwargs
        Additional arguments passed to Polars read_csv_batched() and scan_csv()

    Returns
    -------
    AsyncDataFrame
        Lazy frame of dict rows whose column names come from the CSV header.

    Examples
    --------
    >>> import asyncframe as af
    >>> lf = af.scan_csv("data.csv")  # doctest: +SKIP
    >>> df = await lf.bake()  # doctest: +SKIP
    """
    size = batch_size if batch_size is not None else get_option("scan_batch_size")
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ValueError(f"batch_size must be a positive integer, got {size!r}")

    async def rows() -> AsyncIterator[Dict[str, Any]]:
        # A fresh reader per iteration; it moves forward through the file once.
        reader = await asyncio.to_thread(
            pl.read_csv_batched, path, batch_size=size, **kwargs
        )
        offset = 0
        while True:
            batches = await asyncio.to_thread(reader.next_batches, 1)
            if not batches:
                break
            for batch in batches:
                logger.debug("Read %d rows from %s at offset %d", batch.height, path, offset)
                for row in batch.iter_rows(named=True):
                    yield row
                offset += batch.height

    async def column_names() -> AsyncIterator[str]:
        schema = await asyncio.to_thread(pl.scan_csv(path, **kwargs).collect_schema)
        for name in schema.names():
            yield name

    return AsyncDataFrame(
        values=AsyncSource(rows, True, "csv"),
        column_names=AsyncSource(column_names, True, "csv-header"),
    )
