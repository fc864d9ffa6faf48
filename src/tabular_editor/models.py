from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple

from .types import AggregateKind, Alignment, SortDirection, SortMethod

Row = Tuple[str, ...]


@dataclass(frozen=True)
class ColumnAlignment:
    header: Alignment = "left"
    body: Alignment = "left"


@dataclass(frozen=True)
class Grid:
    """Rectangular table of cell text. Row 0 is the header row."""

    rows: Tuple[Row, ...]
    alignments: Tuple[ColumnAlignment, ...]

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def col_count(self) -> int:
        return len(self.alignments)

    @property
    def header(self) -> Row:
        return self.rows[0]

    def cell(self, row: int, col: int) -> str:
        return self.rows[row][col]

    def to_lists(self):
        return [list(r) for r in self.rows]


@dataclass(frozen=True)
class SortSpec:
    column: Optional[int] = None
    direction: SortDirection = "asc"
    method: SortMethod = "lexicographic"

    @property
    def active(self) -> bool:
        return self.column is not None


@dataclass(frozen=True)
class SummarySpec:
    enabled: FrozenSet[AggregateKind] = field(default_factory=frozenset)


@dataclass(frozen=True)
class OutputFormat:
    compact: bool = False


@dataclass(frozen=True)
class Snapshot:
    """Undo entry: everything a historied operation may change."""

    grid: Grid
    sort: SortSpec
    summary: SummarySpec


@dataclass(frozen=True)
class SummaryRow:
    kind: AggregateKind
    label: str
    values: Tuple[Optional[str], ...]


@dataclass(frozen=True)
class View:
    # Grid row indices of the body rows, in display order (header excluded).
    row_order: Tuple[int, ...]
    summary_rows: Tuple[SummaryRow, ...] = ()

    @property
    def is_identity(self) -> bool:
        return all(idx == pos for pos, idx in enumerate(self.row_order, start=1))
