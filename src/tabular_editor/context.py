import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict

from .models import ColumnAlignment, Grid, OutputFormat, Snapshot, SortSpec, SummarySpec
from .services.grid import new_grid
from .services.history import History

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "rows": 3,
    "columns": 3,
    "headerPrefix": "Header",
    "headerAlign": "left",
    "bodyAlign": "left",
    "compact": False,
    "undoDepth": None,
    "csvQuoting": False,
}


def parse_config(config_json):
    config_dict = json.loads(config_json) if config_json else {}
    config = dict(DEFAULT_CONFIG)
    config.update({k: v for k, v in config_dict.items() if k in DEFAULT_CONFIG})
    return config


def _default_alignment(config):
    return ColumnAlignment(header=config["headerAlign"], body=config["bodyAlign"])


def _fresh_grid(config):
    return new_grid(
        rows=config["rows"],
        columns=config["columns"],
        header_prefix=config["headerPrefix"],
        alignment=_default_alignment(config),
    )


@dataclass
class EditorState:
    config: Dict[str, Any] = field(default_factory=lambda: dict(DEFAULT_CONFIG))
    grid: Grid = field(default_factory=lambda: _fresh_grid(DEFAULT_CONFIG))
    sort: SortSpec = field(default_factory=SortSpec)
    summary: SummarySpec = field(default_factory=SummarySpec)
    output_format: OutputFormat = field(default_factory=OutputFormat)
    history: History = field(default_factory=History)


class EditorContext:
    """Owner of the live editor state.

    The UI reads outputs and submits intents through the api module; it never
    touches the grid or the history directly.
    """

    _instance = None

    def __init__(self):
        self._state = EditorState()

    @classmethod
    def get_instance(cls):
        if cls._instance is None:
            cls._instance = EditorContext()
        return cls._instance

    @property
    def config(self) -> Dict[str, Any]:
        return self._state.config

    @property
    def grid(self) -> Grid:
        return self._state.grid

    @grid.setter
    def grid(self, value: Grid):
        self._state.grid = value

    @property
    def sort(self) -> SortSpec:
        return self._state.sort

    @sort.setter
    def sort(self, value: SortSpec):
        self._state.sort = value

    @property
    def summary(self) -> SummarySpec:
        return self._state.summary

    @summary.setter
    def summary(self, value: SummarySpec):
        self._state.summary = value

    @property
    def output_format(self) -> OutputFormat:
        return self._state.output_format

    @output_format.setter
    def output_format(self, value: OutputFormat):
        self._state.output_format = value

    @property
    def history(self) -> History:
        return self._state.history

    @property
    def default_alignment(self) -> ColumnAlignment:
        return _default_alignment(self._state.config)

    def snapshot(self) -> Snapshot:
        return Snapshot(grid=self.grid, sort=self.sort, summary=self.summary)

    def restore(self, snapshot: Snapshot):
        self._state.grid = snapshot.grid
        self._state.sort = snapshot.sort
        self._state.summary = snapshot.summary

    def reset(self):
        self._state = EditorState()

    def initialize_editor(self, config_json: str):
        config = parse_config(config_json)
        self._state = EditorState(
            config=config,
            grid=_fresh_grid(config),
            output_format=OutputFormat(compact=bool(config["compact"])),
            history=History(max_depth=config["undoDepth"]),
        )
        logger.info(
            "Editor initialized with a %dx%d grid", config["rows"], config["columns"]
        )
