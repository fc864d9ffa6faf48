"""Tests for the Markdown, box drawing and HTML renderers."""

import pytest
from tabular_editor.errors import InvalidEdit
from tabular_editor.models import OutputFormat, SortSpec, SummarySpec
from tabular_editor.renderers import box, html, markdown
from tabular_editor.renderers.registry import RENDERERS, render
from tabular_editor.services import grid as grid_ops
from tabular_editor.services.view import derive

EXPANDED = OutputFormat(compact=False)
COMPACT = OutputFormat(compact=True)


def view_of(grid, sort=None, summary=None):
    return derive(grid, sort or SortSpec(), summary or SummarySpec())


@pytest.fixture
def small_grid():
    return grid_ops.from_cells([["A", "Bb"], ["10", "2"]])


class TestMarkdown:
    def test_default_grid_compact(self):
        grid = grid_ops.new_grid()

        out = markdown.render(grid, view_of(grid), COMPACT)

        assert out == (
            "| Header 1 | Header 2 | Header 3 |\n"
            "| --- | --- | --- |\n"
            "|  |  |  |\n"
            "|  |  |  |"
        )

    def test_default_grid_expanded(self):
        grid = grid_ops.new_grid(rows=2)

        out = markdown.render(grid, view_of(grid), EXPANDED)

        assert out == (
            "| Header 1 | Header 2 | Header 3 |\n"
            "| :------- | :------- | :------- |\n"
            "|          |          |          |"
        )

    def test_separator_uses_body_alignment(self, small_grid):
        grid = grid_ops.set_alignment(small_grid, 0, "body", "center")
        grid = grid_ops.set_alignment(grid, 1, "body", "right")
        grid = grid_ops.set_alignment(grid, 1, "header", "right")

        lines = markdown.render(grid, view_of(grid), EXPANDED).split("\n")

        assert lines[1] == "| :-: | --: |"
        assert lines[0] == "| A   |  Bb |"
        assert lines[2].endswith("|   2 |")

    def test_compact_ignores_alignment(self, small_grid):
        grid = grid_ops.set_alignment(small_grid, 0, "body", "center")

        lines = markdown.render(grid, view_of(grid), COMPACT).split("\n")

        assert lines[1] == "| --- | --- |"

    def test_pipes_are_escaped(self):
        grid = grid_ops.from_cells([["a|b", "`x|y`"]])

        out = markdown.render(grid, view_of(grid), COMPACT)

        assert out.split("\n")[0] == "| a\\|b | `x\\|y` |"

    def test_summary_row_bold(self):
        grid = grid_ops.from_cells([["Name", "Score"], ["a", "10"], ["b", "20"]])
        view = view_of(grid, summary=SummarySpec(enabled=frozenset({"max"})))

        lines = markdown.render(grid, view, COMPACT).split("\n")

        assert lines[-1] == "| **MAX** | **20** |"

    def test_summary_value_in_first_column_stays_exact(self):
        grid = grid_ops.from_cells([["Score", "Name", "Note"], ["10", "a", "x"]])
        grid = grid_ops.add_row(grid)
        grid = grid_ops.set_cell(grid, 2, 0, "20")
        view = view_of(grid, summary=SummarySpec(enabled=frozenset({"max"})))

        lines = markdown.render(grid, view, COMPACT).split("\n")
        cells = [c.strip() for c in lines[-1].strip("|").split("|")]

        assert cells == ["**20**", "**MAX**", ""]

    def test_summary_label_omitted_when_every_column_has_value(self):
        grid = grid_ops.from_cells([["N"], ["3"], ["4"]])
        view = view_of(grid, summary=SummarySpec(enabled=frozenset({"max"})))

        lines = markdown.render(grid, view, COMPACT).split("\n")

        assert lines[-1] == "| **4** |"

    def test_line_breaks_become_br(self):
        grid = grid_ops.from_cells([["A", "B"], ["one\ntwo", "x"]])

        lines = markdown.render(grid, view_of(grid), COMPACT).split("\n")

        assert len(lines) == 3
        assert lines[2] == "| one<br>two | x |"

    def test_rows_follow_view_order(self, small_grid):
        grid = grid_ops.add_row(small_grid)
        grid = grid_ops.set_cell(grid, 2, 0, "1")
        view = view_of(grid, sort=SortSpec(column=0, method="numeric"))

        lines = markdown.render(grid, view, COMPACT).split("\n")

        assert lines[2] == "| 1 |  |"
        assert lines[3] == "| 10 | 2 |"


class TestBox:
    def test_layout(self, small_grid):
        out = box.render(small_grid, view_of(small_grid), EXPANDED)

        assert out == (
            "┌────┬────┐\n"
            "│ A  │ Bb │\n"
            "├────┼────┤\n"
            "│ 10 │ 2  │\n"
            "└────┴────┘"
        )

    def test_alignment(self, small_grid):
        grid = grid_ops.set_alignment(small_grid, 0, "header", "right")
        grid = grid_ops.set_alignment(grid, 1, "body", "right")

        lines = box.render(grid, view_of(grid), EXPANDED).split("\n")

        assert lines[1] == "│  A │ Bb │"
        assert lines[3] == "│ 10 │  2 │"

    def test_summary_rows_have_own_rule(self):
        grid = grid_ops.from_cells([["A", "Bb"], ["10", ""]])
        view = view_of(grid, summary=SummarySpec(enabled=frozenset({"max"})))

        lines = box.render(grid, view, EXPANDED).split("\n")

        # Label widens the second column
        assert lines[0] == "┌────┬─────┐"
        assert lines[3] == "│ 10 │     │"
        assert lines[4] == "├────┼─────┤"
        assert lines[5] == "│ 10 │ MAX │"
        assert lines[6] == "└────┴─────┘"

    def test_line_breaks_become_spaces(self):
        grid = grid_ops.from_cells([["A"], ["a\nb"]])

        lines = box.render(grid, view_of(grid), EXPANDED).split("\n")

        assert len(lines) == 5
        assert lines[3] == "│ a b │"


class TestHtml:
    def test_compact(self):
        grid = grid_ops.from_cells([["A"], ["x"]])

        out = html.render(grid, view_of(grid), COMPACT)

        assert out == (
            "<table><thead><tr>"
            '<th style="text-align: left;">A</th>'
            "</tr></thead><tbody><tr>"
            '<td style="text-align: left;">x</td>'
            "</tr></tbody></table>"
        )

    def test_expanded_is_indented(self):
        grid = grid_ops.from_cells([["A"]])

        lines = html.render(grid, view_of(grid), EXPANDED).split("\n")

        assert lines[0] == "<table>"
        assert lines[1] == "  <thead>"
        assert lines[3] == '      <th style="text-align: left;">A</th>'
        assert lines[-1] == "</table>"

    def test_escapes_text(self):
        grid = grid_ops.from_cells([["<b>&"]])

        out = html.render(grid, view_of(grid), COMPACT)

        assert "&lt;b&gt;&amp;" in out

    def test_header_and_body_alignment(self, small_grid):
        grid = grid_ops.set_alignment(small_grid, 0, "header", "center")
        grid = grid_ops.set_alignment(grid, 0, "body", "right")

        out = html.render(grid, view_of(grid), COMPACT)

        assert '<th style="text-align: center;">A</th>' in out
        assert '<td style="text-align: right;">10</td>' in out

    def test_summary_row(self):
        grid = grid_ops.from_cells([["A", "Bb"], ["10", ""]])
        view = view_of(grid, summary=SummarySpec(enabled=frozenset({"max"})))

        out = html.render(grid, view, COMPACT)

        assert '<tr class="summary">' in out
        assert '<td style="text-align: left;"><strong>10</strong></td>' in out
        assert "<strong>MAX</strong>" in out

    def test_line_breaks_become_br(self):
        grid = grid_ops.from_cells([["a\nb"]])

        out = html.render(grid, view_of(grid), COMPACT)

        assert ">a<br>b</th>" in out


class TestRegistry:
    def test_all_formats_agree_on_content(self, small_grid):
        view = view_of(small_grid)

        for fmt in RENDERERS:
            out = render(fmt, small_grid, view, EXPANDED)
            for cell in ("A", "Bb", "10", "2"):
                assert cell in out

    def test_unknown_format(self, small_grid):
        with pytest.raises(InvalidEdit):
            render("latex", small_grid, view_of(small_grid), EXPANDED)
