"""Fixed-width table drawn with Unicode box characters.

    ┌──────────┬──────────┐
    │ Header 1 │ Header 2 │
    ├──────────┼──────────┤
    │ a        │ b        │
    └──────────┴──────────┘

Summary rows, when present, sit below their own ├─┼─┤ rule.
"""

from .common import align_text, body_rows, single_line, summary_cells


def _rule(left, mid, right, widths):
    return left + mid.join("─" * (w + 2) for w in widths) + right


def _row(cells, widths, aligns):
    return (
        "│"
        + "│".join(
            f" {align_text(c, w, a)} " for c, w, a in zip(cells, widths, aligns)
        )
        + "│"
    )


def render(grid, view, output_format):
    header = [single_line(c, " ") for c in grid.header]
    body = [[single_line(c, " ") for c in row] for row in body_rows(grid, view)]
    summary = [summary_cells(s) for s in view.summary_rows]

    widths = []
    for col in range(grid.col_count):
        cells = [header[col]] + [row[col] for row in body + summary]
        widths.append(max(len(c) for c in cells))

    header_aligns = [a.header for a in grid.alignments]
    body_aligns = [a.body for a in grid.alignments]

    lines = [_rule("┌", "┬", "┐", widths), _row(header, widths, header_aligns)]
    lines.append(_rule("├", "┼", "┤", widths))
    lines.extend(_row(row, widths, body_aligns) for row in body)
    if summary:
        lines.append(_rule("├", "┼", "┤", widths))
        lines.extend(_row(row, widths, body_aligns) for row in summary)
    lines.append(_rule("└", "┴", "┘", widths))
    return "\n".join(lines)
