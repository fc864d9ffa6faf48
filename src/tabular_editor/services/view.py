"""Sort and aggregate derivation.

``derive`` turns a grid plus the active sort and summary specs into a View:
the display order of the body rows and the synthetic summary rows. Nothing
here mutates the grid, and views are rebuilt from scratch on every call.
"""

import re
from decimal import Decimal, InvalidOperation

from ..models import SummaryRow, View

_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
_AVG_QUANTUM = Decimal("1e-10")


def parse_number(text):
    """Parse a decimal number, returning None for anything unparsable."""
    s = text.strip()
    if not _NUMBER_RE.match(s):
        return None
    try:
        return Decimal(s)
    except InvalidOperation:
        return None


def format_number(value):
    """Integers without a fractional part, everything else minimal decimal."""
    if value == value.to_integral_value():
        if value == 0:
            return "0"
        # No int() round trip: huge exponents exceed the int-to-str digit limit
        return format(value.to_integral_value(), "f")
    return format(value.normalize(), "f")


def _get_sort_key(row, col_idx, method):
    val = row[col_idx]

    if method == "numeric":
        num = parse_number(val)
        if num is None:
            # Unparsable cells compare as +infinity
            return (1, Decimal(0))
        return (0, num)

    return val


def sort_order(grid, sort_spec):
    """Grid row indices of the body rows in display order."""
    indices = range(1, grid.row_count)
    if not sort_spec.active:
        return tuple(indices)

    col_idx = sort_spec.column
    method = sort_spec.method
    # sorted() is stable under reverse=True too, so ties keep original order
    return tuple(
        sorted(
            indices,
            key=lambda idx: _get_sort_key(grid.rows[idx], col_idx, method),
            reverse=sort_spec.direction == "desc",
        )
    )


def _aggregate_max(values):
    return max(values)


def _aggregate_min(values):
    return min(values)


def _aggregate_sum(values):
    return sum(values, Decimal(0))


def _aggregate_avg(values):
    mean = sum(values, Decimal(0)) / len(values)
    try:
        return mean.quantize(_AVG_QUANTUM)
    except InvalidOperation:
        # Too many integer digits to keep 10 places
        return mean


# Render order of summary rows follows this mapping
AGGREGATES = {
    "max": ("MAX", _aggregate_max),
    "min": ("MIN", _aggregate_min),
    "sum": ("SUM", _aggregate_sum),
    "avg": ("AVG", _aggregate_avg),
}


def column_aggregate(grid, row_order, col_idx, kind):
    """Aggregate one column over the body rows; None if nothing parses."""
    _, func = AGGREGATES[kind]
    numbers = []
    for idx in row_order:
        num = parse_number(grid.rows[idx][col_idx])
        if num is not None:
            numbers.append(num)

    if not numbers:
        return None
    return format_number(func(numbers))


def derive(grid, sort_spec, summary_spec):
    row_order = sort_order(grid, sort_spec)

    summary_rows = []
    for kind, (label, _) in AGGREGATES.items():
        if kind not in summary_spec.enabled:
            continue
        values = tuple(
            column_aggregate(grid, row_order, col_idx, kind)
            for col_idx in range(grid.col_count)
        )
        summary_rows.append(SummaryRow(kind=kind, label=label, values=values))

    return View(row_order=row_order, summary_rows=tuple(summary_rows))
