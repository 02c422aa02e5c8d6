"""
Row and column helpers shared by the lazy and eager frames.

Row contract
------------
A row value is projected onto the frame's column names as follows:

- a mapping is looked up by column name; a missing key gives ``None``
- a list or tuple is already in column order; short rows are padded with
  ``None``
- anything else (strings included) is a scalar and is only valid when the
  frame has exactly one column

Functions
---------
project_row : Project a row value into a list ordered by column name
column_value : Extract a single column from a row value
validate_column_names : Check column names are unique strings
materialize_inputs : Resolve eager constructor inputs into index and value lists
to_polars_series : Build a Polars Series without casting its values
to_polars_frame : Build a Polars DataFrame from column-ordered rows
"""

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import polars as pl

INDEX_COLUMN = "__index__"


def _is_positional(row: Any) -> bool:
    return isinstance(row, (list, tuple))


def project_row(row: Any, column_names: Sequence[str]) -> List[Any]:
    """
    Project ``row`` into a list of values ordered by ``column_names``.

    Parameters
    ----------
    row : Any
        A mapping, list/tuple or scalar row value.
    column_names : sequence of str
        Column order of the result.

    Returns
    -------
    list
        One value per column.

    Raises
    ------
    TypeError
        If ``row`` is a scalar and there is more than one column.

    Examples
    --------
    >>> project_row({"b": 2, "a": 1}, ["a", "b"])
    [1, 2]
    >>> project_row(5, ["value"])
    [5]
    """
    if isinstance(row, Mapping):
        return [row.get(name) for name in column_names]
    if _is_positional(row):
        width = len(column_names)
        values = list(row[:width])
        return values + [None] * (width - len(values))
    if len(column_names) != 1:
        raise TypeError(
            f"Scalar row {row!r} cannot be projected onto {len(column_names)} "
            "columns; composite rows must be mappings or sequences."
        )
    return [row]


def column_value(row: Any, column: str, position: int, width: int) -> Any:
    """Return the value of ``column`` (at ``position`` of ``width``) in ``row``."""
    if isinstance(row, Mapping):
        return row.get(column)
    if _is_positional(row):
        return row[position] if position < len(row) else None
    if width != 1:
        raise TypeError(
            f"Scalar row {row!r} has no column '{column}'; composite rows must "
            "be mappings or sequences."
        )
    return row


def validate_column_names(names: Iterable[Any]) -> List[str]:
    """
    Return ``names`` as a list, checking that they are unique strings.

    Raises
    ------
    TypeError
        If a name is not a string.
    ValueError
        If a name appears more than once.
    """
    result: List[str] = []
    seen = set()
    for name in names:
        if not isinstance(name, str):
            raise TypeError(f"Column names must be strings, got {name!r}")
        if name in seen:
            raise ValueError(f"Duplicate column name '{name}'")
        seen.add(name)
        result.append(name)
    return result


def materialize_inputs(
    values: Any = None, index: Any = None, pairs: Any = None
) -> Tuple[List[Any], List[Any]]:
    """
    Resolve eager frame inputs into ``(index, values)`` lists.

    ``pairs`` wins when given. Without an index the values are numbered from
    zero. An index and values of different lengths are truncated to the
    shorter of the two.

    Raises
    ------
    TypeError
        If an input is asynchronous or a string.
    ValueError
        If an item of ``pairs`` is not an (index, value) pair.
    """
    for field_name, obj in (("values", values), ("index", index), ("pairs", pairs)):
        if hasattr(obj, "__aiter__") or hasattr(obj, "__anext__"):
            raise TypeError(
                f"'{field_name}' is asynchronous; build an AsyncDataFrame and "
                "bake() it instead."
            )
        if isinstance(obj, (str, bytes)):
            raise TypeError(f"'{field_name}' must be a sequence, not {type(obj).__name__}")

    if pairs is not None:
        keys: List[Any] = []
        items: List[Any] = []
        for pair in pairs:
            try:
                key, value = pair
            except (TypeError, ValueError) as e:
                raise ValueError(
                    f"Each item of 'pairs' must be an (index, value) pair, got {pair!r}"
                ) from e
            keys.append(key)
            items.append(value)
        return keys, items
    if values is None:
        return [], []
    items = list(values)
    if index is None:
        return list(range(len(items))), items
    keys = list(index)
    length = min(len(keys), len(items))
    return keys[:length], items[:length]


def to_polars_series(name: str, values: List[Any]) -> pl.Series:
    """Build a Polars Series from ``values`` without casting any of them."""
    try:
        return pl.Series(name, values)
    except (TypeError, pl.exceptions.PolarsError) as e:
        kinds = sorted({type(v).__name__ for v in values if v is not None})
        raise TypeError(
            f"Column '{name}' mixes values of types {kinds} that cannot be "
            "encoded as one column."
        ) from e


def to_polars_frame(
    column_names: Sequence[str],
    rows: Sequence[Sequence[Any]],
    index: Optional[Sequence[Any]] = None,
) -> pl.DataFrame:
    """
    Build a Polars DataFrame from column-ordered rows.

    Every column is built strictly, so values reach the encoders unchanged;
    a column that Polars could only represent by casting its values (for
    example ints mixed with strings) is rejected instead.

    Parameters
    ----------
    column_names : sequence of str
        Names of the columns.
    rows : sequence of sequences
        Rows as produced by :func:`project_row`.
    index : sequence, optional
        When given, added as a leading ``__index__`` column.

    Raises
    ------
    TypeError
        If a column holds values Polars cannot store without casting.
    """
    columns = [
        to_polars_series(name, [row[position] for row in rows])
        for position, name in enumerate(column_names)
    ]
    if index is not None:
        columns.insert(0, to_polars_series(INDEX_COLUMN, list(index)))
    return pl.DataFrame(columns)
