"""GFM pipe table output."""

from .common import align_text, body_rows, single_line, summary_cells

_MIN_WIDTH = 3


def _escape_pipe(value):
    """Escape pipe characters for GFM table cells.

    Converts | to \\| so the parser treats it as literal pipe.
    Pipes inside backticks are escaped too.
    """
    if not value or "|" not in value:
        return value

    result = []
    i = 0
    n = len(value)

    while i < n:
        char = value[i]

        if char == "\\" and i + 1 < n:
            # Already escaped, keep as is
            result.append(char)
            result.append(value[i + 1])
            i += 2
        elif char == "|":
            result.append("\\|")
            i += 1
        else:
            result.append(char)
            i += 1

    return "".join(result)


def _cell_text(value):
    return _escape_pipe(single_line(value, "<br>"))


def _bold(value):
    return f"**{value}**" if value else ""


def _separator(alignment, width):
    if alignment == "center":
        return ":" + "-" * (width - 2) + ":"
    elif alignment == "right":
        return "-" * (width - 1) + ":"
    return ":" + "-" * (width - 1)


def _line(cells):
    return "| " + " | ".join(cells) + " |"


def render(grid, view, output_format):
    header = [_cell_text(c) for c in grid.header]
    body = [[_cell_text(c) for c in row] for row in body_rows(grid, view)]
    summary = [
        [_bold(_cell_text(c)) for c in summary_cells(s)] for s in view.summary_rows
    ]

    if output_format.compact:
        lines = [_line(header), _line(["---"] * grid.col_count)]
        lines.extend(_line(row) for row in body + summary)
        return "\n".join(lines)

    widths = []
    for col in range(grid.col_count):
        cells = [header[col]] + [row[col] for row in body + summary]
        widths.append(max([_MIN_WIDTH] + [len(c) for c in cells]))

    header_aligns = [a.header for a in grid.alignments]
    body_aligns = [a.body for a in grid.alignments]

    lines = [
        _line(align_text(c, w, a) for c, w, a in zip(header, widths, header_aligns)),
        _line(_separator(a, w) for a, w in zip(body_aligns, widths)),
    ]
    for row in body + summary:
        lines.append(
            _line(align_text(c, w, a) for c, w, a in zip(row, widths, body_aligns))
        )
    return "\n".join(lines)
