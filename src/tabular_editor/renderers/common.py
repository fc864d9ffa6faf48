import re

_LINE_BREAK = re.compile(r"\r\n|\n|\r")


def single_line(text, separator):
    """Join a multi-line cell onto one line; table rows cannot span lines."""
    return _LINE_BREAK.sub(separator, text)


def body_rows(grid, view):
    return [grid.rows[idx] for idx in view.row_order]


def summary_cells(summary_row):
    """Plain text cells for a summary row.

    Value cells hold exactly the aggregate value. The label goes in the first
    column without a value and is left out when every column has one.
    """
    cells = ["" if v is None else v for v in summary_row.values]
    for col, value in enumerate(cells):
        if not value:
            cells[col] = summary_row.label
            break
    return cells


def align_text(text, width, alignment):
    if alignment == "right":
        return text.rjust(width)
    elif alignment == "center":
        return text.center(width)
    return text.ljust(width)
