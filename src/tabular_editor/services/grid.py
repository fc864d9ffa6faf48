"""Pure edit operations on a Grid.

Every function takes the current grid and returns a new one. Arguments are
validated before anything is built, so a rejected edit never yields a
half-modified grid.
"""

from dataclasses import replace

from ..errors import InvalidEdit, NoOp, OutOfBounds
from ..models import ColumnAlignment, Grid
from .view import sort_order

DEFAULT_ALIGNMENT = ColumnAlignment()


def new_grid(rows=3, columns=3, header_prefix="Header", alignment=DEFAULT_ALIGNMENT):
    if rows < 1 or columns < 1:
        raise InvalidEdit("A grid needs at least one row and one column")

    header = tuple(f"{header_prefix} {i + 1}" for i in range(columns))
    body = tuple(tuple("" for _ in range(columns)) for _ in range(rows - 1))
    return Grid(rows=(header,) + body, alignments=(alignment,) * columns)


def from_cells(cells, alignment=DEFAULT_ALIGNMENT):
    """Build a grid from ragged lists of cell text, padding short rows."""
    rows = [list(r) for r in cells if r is not None]
    if not rows:
        rows = [[""]]

    width = max(1, max(len(r) for r in rows))
    padded = tuple(tuple(r) + ("",) * (width - len(r)) for r in rows)
    return Grid(rows=padded, alignments=(alignment,) * width)


def _check_row(grid, row):
    if row < 0 or row >= grid.row_count:
        raise OutOfBounds(f"Row index {row} out of range (0..{grid.row_count - 1})")


def _check_col(grid, col):
    if col < 0 or col >= grid.col_count:
        raise OutOfBounds(
            f"Column index {col} out of range (0..{grid.col_count - 1})"
        )


def set_cell(grid, row, col, text):
    _check_row(grid, row)
    _check_col(grid, col)

    new_row = list(grid.rows[row])
    new_row[col] = text
    new_rows = list(grid.rows)
    new_rows[row] = tuple(new_row)
    return replace(grid, rows=tuple(new_rows))


def add_row(grid):
    return insert_row_before(grid, grid.row_count)


def add_column(grid, alignment=DEFAULT_ALIGNMENT):
    return insert_column_before(grid, grid.col_count, alignment)


def insert_row_before(grid, index):
    if index < 0 or index > grid.row_count:
        raise OutOfBounds(
            f"Row insertion point {index} out of range (0..{grid.row_count})"
        )

    empty_row = tuple("" for _ in range(grid.col_count))
    new_rows = list(grid.rows)
    new_rows.insert(index, empty_row)
    return replace(grid, rows=tuple(new_rows))


def insert_column_before(grid, index, alignment=DEFAULT_ALIGNMENT):
    if index < 0 or index > grid.col_count:
        raise OutOfBounds(
            f"Column insertion point {index} out of range (0..{grid.col_count})"
        )

    new_rows = tuple(row[:index] + ("",) + row[index:] for row in grid.rows)
    new_alignments = list(grid.alignments)
    new_alignments.insert(index, alignment)
    return Grid(rows=new_rows, alignments=tuple(new_alignments))


def remove_row(grid, index):
    _check_row(grid, index)
    if grid.row_count == 1:
        raise InvalidEdit("Cannot remove the last row")

    new_rows = list(grid.rows)
    del new_rows[index]
    return replace(grid, rows=tuple(new_rows))


def remove_column(grid, index):
    _check_col(grid, index)
    if grid.col_count == 1:
        raise InvalidEdit("Cannot remove the last column")

    new_rows = tuple(row[:index] + row[index + 1 :] for row in grid.rows)
    new_alignments = list(grid.alignments)
    del new_alignments[index]
    return Grid(rows=new_rows, alignments=tuple(new_alignments))


def set_alignment(grid, col, which, alignment):
    _check_col(grid, col)
    if which not in ("header", "body"):
        raise InvalidEdit(f"Unknown alignment target: {which}")
    if alignment not in ("left", "center", "right"):
        raise InvalidEdit(f"Unknown alignment: {alignment}")

    new_alignments = list(grid.alignments)
    new_alignments[col] = replace(new_alignments[col], **{which: alignment})
    return replace(grid, alignments=tuple(new_alignments))


def apply_sort_to_inputs(grid, sort_spec):
    """Physically reorder the body rows into the sorted view order.

    The header row never moves.
    """
    if not sort_spec.active:
        raise NoOp("No sort is active")
    _check_col(grid, sort_spec.column)

    order = sort_order(grid, sort_spec)
    if list(order) == list(range(1, grid.row_count)):
        raise NoOp("Rows are already in sorted order")

    new_rows = [grid.rows[0]] + [grid.rows[idx] for idx in order]
    return replace(grid, rows=tuple(new_rows))
