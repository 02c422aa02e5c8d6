"""
asyncframe - Lazy, asynchronously iterable dataframes.

asyncframe describes a pipeline of transformations over tabular data coming
from slow or streaming origins (files, network, async generators) and defers
all work until the result is explicitly materialized.

This module exports the main classes and functions:

Classes
-------
AsyncDataFrame : Lazy, asynchronously iterable table
AsyncSeries : Lazy, asynchronously iterable column
AsyncIndex : Lazy view of a frame's row labels
DataFrame : Eager table produced by ``AsyncDataFrame.bake()``
Series : Eager column produced by ``AsyncSeries.bake()``
Index : Eager row labels

I/O Functions
-------------
read_csv, read_json
    Eager I/O operations that load data immediately
scan_csv
    Lazy I/O operation streaming rows in batches

Options
-------
get_option, set_option, reset_options, option_context
    Package-wide settings

Examples
--------
>>> import asyncframe as af
>>> df = af.AsyncDataFrame(values=[{"x": 1}, {"x": 2}], column_names=["x"])
>>> await df.get_series("x").to_array()  # doctest: +SKIP
[1, 2]

See Also
--------
polars : Renders and encodes materialized frames
"""

from ._config import get_option, option_context, reset_options, set_option
from ._exceptions import ConfigurationError, MissingColumnError
from .frame import DataFrame
from .index import AsyncIndex, Index
from .io import read_csv, read_json, scan_csv
from .lazyframe import AsyncDataFrame
from .lazyseries import AsyncSeries
from .series import Series

# Version
__version__ = "0.1.0"

__all__ = [
    # Core classes
    "AsyncDataFrame",
    "AsyncSeries",
    "AsyncIndex",
    "DataFrame",
    "Series",
    "Index",
    # Errors
    "ConfigurationError",
    "MissingColumnError",
    # I/O operations
    "read_csv",
    "read_json",
    "scan_csv",
    # Options
    "get_option",
    "set_option",
    "reset_options",
    "option_context",
]
