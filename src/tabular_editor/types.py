from typing import List, Literal, Optional, Union

from typing_extensions import TypedDict

Alignment = Literal["left", "center", "right"]
AlignTarget = Literal["header", "body"]
SortDirection = Literal["asc", "desc"]
SortMethod = Literal["lexicographic", "numeric"]
AggregateKind = Literal["max", "min", "sum", "avg"]
RenderFormat = Literal["markdown", "box", "html"]


# Editor Config
class EditorConfig(TypedDict, total=False):
    rows: int
    columns: int
    headerPrefix: str
    headerAlign: Alignment
    bodyAlign: Alignment
    compact: bool
    undoDepth: Optional[int]
    csvQuoting: bool


# Intents
class SetCellIntent(TypedDict):
    type: Literal["setCell"]
    row: int
    col: int
    text: str


class AddIntent(TypedDict):
    type: Literal["addRow", "addColumn"]


class IndexIntent(TypedDict):
    type: Literal[
        "insertRowBefore", "insertColumnBefore", "removeRow", "removeColumn"
    ]
    index: int


class SetAlignmentIntent(TypedDict):
    type: Literal["setAlignment"]
    col: int
    which: AlignTarget
    alignment: Alignment


class ApplySortIntent(TypedDict):
    type: Literal["applySortToInputs"]


class ImportIntent(TypedDict):
    type: Literal["importCsv", "importMarkdown"]
    text: str


class UndoIntent(TypedDict):
    type: Literal["undo"]


class SortSpecIntent(TypedDict, total=False):
    type: Literal["setSortSpec"]
    column: Optional[int]
    direction: SortDirection
    method: SortMethod


class SummarySpecIntent(TypedDict):
    type: Literal["setSummarySpec"]
    enabled: List[AggregateKind]


class OutputFormatIntent(TypedDict):
    type: Literal["setOutputFormat"]
    compact: bool


Intent = Union[
    SetCellIntent,
    AddIntent,
    IndexIntent,
    SetAlignmentIntent,
    ApplySortIntent,
    ImportIntent,
    UndoIntent,
    SortSpecIntent,
    SummarySpecIntent,
    OutputFormatIntent,
]
