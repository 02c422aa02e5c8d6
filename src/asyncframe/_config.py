"""
Package-wide options.

Options are read at the point of use, so changing one affects every frame
created or materialized afterwards.

Examples
--------
>>> import asyncframe as af
>>> af.get_option("display_max_rows")
20
>>> with af.option_context(display_max_rows=5):
...     pass
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, fields
from typing import Any, Iterator


@dataclass
class Options:
    default_column_name: str = "value"
    display_max_rows: int = 20
    scan_batch_size: int = 1024


options = Options()

_VALIDATORS = {
    "default_column_name": lambda value: isinstance(value, str) and value != "",
    "display_max_rows": lambda value: isinstance(value, int) and not isinstance(value, bool) and value > 0,
    "scan_batch_size": lambda value: isinstance(value, int) and not isinstance(value, bool) and value > 0,
}


def _check_name(name: str) -> None:
    if name not in {field.name for field in fields(Options)}:
        raise KeyError(f"No such option: '{name}'")


def get_option(name: str) -> Any:
    """Return the current value of option ``name``."""
    _check_name(name)
    return getattr(options, name)


def set_option(name: str, value: Any) -> None:
    """
    Set option ``name`` to ``value``.

    Raises
    ------
    KeyError
        If ``name`` is not a known option.
    ValueError
        If ``value`` is not valid for the option.
    """
    _check_name(name)
    if not _VALIDATORS[name](value):
        raise ValueError(f"Invalid value for option '{name}': {value!r}")
    setattr(options, name, value)


def reset_options() -> None:
    """Restore every option to its default."""
    for field in fields(Options):
        setattr(options, field.name, field.default)


@contextmanager
def option_context(**overrides: Any) -> Iterator[None]:
    """Temporarily set options, restoring the previous values on exit."""
    previous = {name: get_option(name) for name in overrides}
    try:
        for name, value in overrides.items():
            set_option(name, value)
        yield
    finally:
        for name, value in previous.items():
            setattr(options, name, value)
