import json

from .context import EditorContext
from .services import editor as editor_service

__all__ = [
    "EditorContext",
    "add_column",
    "add_row",
    "apply_intent",
    "apply_sort_to_inputs",
    "can_apply",
    "can_apply_sort_to_inputs",
    "can_undo",
    "get_cell",
    "get_state",
    "import_csv",
    "import_markdown",
    "initialize_editor",
    "insert_column_before",
    "insert_row_before",
    "remove_column",
    "remove_row",
    "render",
    "set_alignment",
    "set_cell",
    "set_output_format",
    "set_sort_spec",
    "set_summary_spec",
    "undo",
]


def initialize_editor(config_json=""):
    ctx = EditorContext.get_instance()
    ctx.initialize_editor(config_json)
    return editor_service.get_state(ctx)


def get_state():
    """Return the full state as a JSON string for the frontend."""
    ctx = EditorContext.get_instance()
    return json.dumps(editor_service.get_state(ctx))


def get_cell(row, col):
    ctx = EditorContext.get_instance()
    return ctx.grid.cell(row, col)


def render(fmt):
    """Render the live grid as "markdown", "box" or "html"."""
    ctx = EditorContext.get_instance()
    return editor_service.render(ctx, fmt)


def set_cell(row, col, text):
    ctx = EditorContext.get_instance()
    return editor_service.set_cell(ctx, row, col, text)


def add_row():
    ctx = EditorContext.get_instance()
    return editor_service.add_row(ctx)


def add_column():
    ctx = EditorContext.get_instance()
    return editor_service.add_column(ctx)


def insert_row_before(index):
    ctx = EditorContext.get_instance()
    return editor_service.insert_row_before(ctx, index)


def insert_column_before(index):
    ctx = EditorContext.get_instance()
    return editor_service.insert_column_before(ctx, index)


def remove_row(index):
    ctx = EditorContext.get_instance()
    return editor_service.remove_row(ctx, index)


def remove_column(index):
    ctx = EditorContext.get_instance()
    return editor_service.remove_column(ctx, index)


def set_alignment(col, which, alignment):
    ctx = EditorContext.get_instance()
    return editor_service.set_alignment(ctx, col, which, alignment)


def apply_sort_to_inputs():
    ctx = EditorContext.get_instance()
    return editor_service.apply_sort_to_inputs(ctx)


def import_csv(text):
    ctx = EditorContext.get_instance()
    return editor_service.import_csv(ctx, text)


def import_markdown(text):
    ctx = EditorContext.get_instance()
    return editor_service.import_markdown(ctx, text)


def undo():
    ctx = EditorContext.get_instance()
    return editor_service.undo(ctx)


def set_sort_spec(column=None, direction="asc", method="lexicographic"):
    ctx = EditorContext.get_instance()
    return editor_service.set_sort_spec(ctx, column, direction, method)


def set_summary_spec(enabled):
    ctx = EditorContext.get_instance()
    return editor_service.set_summary_spec(ctx, enabled)


def set_output_format(compact):
    ctx = EditorContext.get_instance()
    return editor_service.set_output_format(ctx, compact)


def apply_intent(intent):
    ctx = EditorContext.get_instance()
    return editor_service.apply_intent(ctx, intent)


def can_apply(intent):
    ctx = EditorContext.get_instance()
    return editor_service.can_apply(ctx, intent)


def can_undo():
    ctx = EditorContext.get_instance()
    return ctx.history.can_undo


def can_apply_sort_to_inputs():
    ctx = EditorContext.get_instance()
    return editor_service.can_apply_sort_to_inputs(ctx)
