from html import escape

from .common import body_rows, single_line, summary_cells

_INDENT = "  "


def _cell(tag, text, alignment, bold=False):
    content = single_line(escape(text), "<br>")
    if bold and content:
        content = f"<strong>{content}</strong>"
    return f'<{tag} style="text-align: {alignment};">{content}</{tag}>'


def render(grid, view, output_format):
    header_aligns = [a.header for a in grid.alignments]
    body_aligns = [a.body for a in grid.alignments]

    # (depth, markup) pairs
    lines = [(0, "<table>"), (1, "<thead>"), (2, "<tr>")]
    lines.extend((3, _cell("th", c, a)) for c, a in zip(grid.header, header_aligns))
    lines.extend([(2, "</tr>"), (1, "</thead>"), (1, "<tbody>")])

    for row in body_rows(grid, view):
        lines.append((2, "<tr>"))
        lines.extend((3, _cell("td", c, a)) for c, a in zip(row, body_aligns))
        lines.append((2, "</tr>"))

    for summary_row in view.summary_rows:
        lines.append((2, '<tr class="summary">'))
        lines.extend(
            (3, _cell("td", c, a, bold=True))
            for c, a in zip(summary_cells(summary_row), body_aligns)
        )
        lines.append((2, "</tr>"))

    lines.extend([(1, "</tbody>"), (0, "</table>")])

    if output_format.compact:
        return "".join(markup for _, markup in lines)
    return "\n".join(_INDENT * depth + markup for depth, markup in lines)
