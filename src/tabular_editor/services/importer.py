"""Turn pasted text into a fresh Grid."""

import csv
import io
import re
from dataclasses import replace

from md_spreadsheet_parser import MultiTableParsingSchema, parse_workbook

from ..errors import InvalidEdit
from ..models import ColumnAlignment
from .grid import DEFAULT_ALIGNMENT, from_cells

_LINE_BREAK = re.compile(r"\r\n|\n|\r")
_IMPORT_SHEET = "Import"


def _split_lines(text):
    lines = _LINE_BREAK.split(text)
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def import_csv(text, quoting=False, alignment=DEFAULT_ALIGNMENT):
    """Rows on line breaks, cells on commas.

    Without ``quoting`` there is no quote or escape handling at all. Short
    rows are padded with empty cells rather than rejected.
    """
    if quoting:
        cells = list(csv.reader(io.StringIO(text)))
        if not cells:
            cells = [[""]]
    else:
        cells = [line.split(",") for line in _split_lines(text)]

    return from_cells(cells, alignment)


def _gfm_alignment(value, fallback):
    if value in ("left", "center", "right"):
        return ColumnAlignment(header=value, body=value)
    return fallback


def import_markdown(text, alignment=DEFAULT_ALIGNMENT):
    """Import the first GFM table found in ``text``.

    Column alignments from the separator row apply to both header and body.
    """
    schema = MultiTableParsingSchema(root_marker="# Tables", sheet_header_level=2)
    wrapped = f"{schema.root_marker}\n\n## {_IMPORT_SHEET}\n\n{text.strip()}\n"
    workbook = parse_workbook(wrapped, schema)

    tables = [t for sheet in workbook.sheets for t in sheet.tables]
    if not tables:
        raise InvalidEdit("No Markdown table found")

    table = tables[0]
    headers = list(table.headers) if table.headers else []
    rows = [list(r) for r in table.rows]
    grid = from_cells([headers] + rows, alignment)

    gfm = list(table.alignments) if table.alignments else []
    new_alignments = tuple(
        _gfm_alignment(gfm[i] if i < len(gfm) else None, alignment)
        for i in range(grid.col_count)
    )
    return replace(grid, alignments=new_alignments)
