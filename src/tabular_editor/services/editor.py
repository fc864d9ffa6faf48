"""State transitions for the live editor.

Historied operations go through ``apply_grid_update``: the transform runs
against a snapshot of the live state, and only when it succeeds is the
pre-edit snapshot pushed and the result committed. Rejections come back as
``{"error": ..., "kind": ...}`` dicts and leave everything untouched.
"""

import logging
from dataclasses import replace

from ..errors import InvalidEdit, NoOp, OutOfBounds, TabularError
from ..models import SortSpec, SummarySpec
from ..renderers.registry import RENDERERS
from ..renderers.registry import render as render_format
from . import grid as grid_ops
from .importer import import_csv as parse_csv
from .importer import import_markdown as parse_markdown
from .view import AGGREGATES, derive

logger = logging.getLogger(__name__)


def _error(e):
    return {"error": str(e), "kind": type(e).__name__}


def current_view(context):
    return derive(context.grid, context.sort, context.summary)


def render(context, fmt):
    return render_format(
        fmt, context.grid, current_view(context), context.output_format
    )


def can_apply_sort_to_inputs(context):
    if not context.sort.active:
        return False
    return not current_view(context).is_identity


def get_state(context):
    grid = context.grid
    view = current_view(context)
    sort = context.sort
    return {
        "grid": grid.to_lists(),
        "alignments": [{"header": a.header, "body": a.body} for a in grid.alignments],
        "sort": {
            "column": sort.column,
            "direction": sort.direction,
            "method": sort.method,
        },
        "summary": sorted(context.summary.enabled),
        "compact": context.output_format.compact,
        "outputs": {
            fmt: renderer(grid, view, context.output_format)
            for fmt, renderer in RENDERERS.items()
        },
        "canUndo": context.history.can_undo,
        "canApplySortToInputs": can_apply_sort_to_inputs(context),
    }


def apply_grid_update(context, transform, action="edit"):
    before = context.snapshot()
    try:
        after = transform(before)
    except NoOp as e:
        logger.debug("Ignored %s: %s", action, e)
        return _error(e)
    except TabularError as e:
        logger.warning("Rejected %s: %s", action, e)
        return _error(e)

    if after != before:
        context.history.push(before)
        context.restore(after)
        logger.debug("Applied %s", action)

    return get_state(context)


def _on_grid(func, *args):
    def transform(snapshot):
        return replace(snapshot, grid=func(snapshot.grid, *args))

    return transform


# Transform builders


def _set_cell_transform(context, row, col, text):
    return _on_grid(grid_ops.set_cell, row, col, text)


def _add_row_transform(context):
    return _on_grid(grid_ops.add_row)


def _add_column_transform(context):
    return _on_grid(grid_ops.add_column, context.default_alignment)


def _insert_row_transform(context, index):
    return _on_grid(grid_ops.insert_row_before, index)


def _insert_column_transform(context, index):
    alignment = context.default_alignment

    def transform(snapshot):
        new_grid = grid_ops.insert_column_before(snapshot.grid, index, alignment)
        sort = snapshot.sort
        if sort.active and index <= sort.column:
            sort = replace(sort, column=sort.column + 1)
        return replace(snapshot, grid=new_grid, sort=sort)

    return transform


def _remove_row_transform(context, index):
    return _on_grid(grid_ops.remove_row, index)


def _remove_column_transform(context, index):
    def transform(snapshot):
        new_grid = grid_ops.remove_column(snapshot.grid, index)
        sort = snapshot.sort
        if sort.active:
            if sort.column == index:
                sort = replace(sort, column=None)
            elif sort.column > index:
                sort = replace(sort, column=sort.column - 1)
        return replace(snapshot, grid=new_grid, sort=sort)

    return transform


def _set_alignment_transform(context, col, which, alignment):
    return _on_grid(grid_ops.set_alignment, col, which, alignment)


def _apply_sort_transform(context):
    def transform(snapshot):
        new_grid = grid_ops.apply_sort_to_inputs(snapshot.grid, snapshot.sort)
        return replace(snapshot, grid=new_grid)

    return transform


def _replace_grid(new_grid):
    def transform(snapshot):
        # Column indices of the old grid mean nothing in the new one
        sort = replace(snapshot.sort, column=None)
        return replace(snapshot, grid=new_grid, sort=sort)

    return transform


def _import_csv_transform(context, text):
    return _replace_grid(
        parse_csv(
            text,
            quoting=bool(context.config["csvQuoting"]),
            alignment=context.default_alignment,
        )
    )


def _import_markdown_transform(context, text):
    def transform(snapshot):
        new_grid = parse_markdown(text, alignment=context.default_alignment)
        return _replace_grid(new_grid)(snapshot)

    return transform


# Historied operations


def set_cell(context, row, col, text):
    return apply_grid_update(
        context, _set_cell_transform(context, row, col, text), "set_cell"
    )


def add_row(context):
    return apply_grid_update(context, _add_row_transform(context), "add_row")


def add_column(context):
    return apply_grid_update(context, _add_column_transform(context), "add_column")


def insert_row_before(context, index):
    return apply_grid_update(
        context, _insert_row_transform(context, index), "insert_row_before"
    )


def insert_column_before(context, index):
    return apply_grid_update(
        context, _insert_column_transform(context, index), "insert_column_before"
    )


def remove_row(context, index):
    return apply_grid_update(
        context, _remove_row_transform(context, index), "remove_row"
    )


def remove_column(context, index):
    return apply_grid_update(
        context, _remove_column_transform(context, index), "remove_column"
    )


def set_alignment(context, col, which, alignment):
    return apply_grid_update(
        context,
        _set_alignment_transform(context, col, which, alignment),
        "set_alignment",
    )


def apply_sort_to_inputs(context):
    return apply_grid_update(
        context, _apply_sort_transform(context), "apply_sort_to_inputs"
    )


def import_csv(context, text):
    logger.info("Importing CSV (%d characters)", len(text))
    return apply_grid_update(
        context, _import_csv_transform(context, text), "import_csv"
    )


def import_markdown(context, text):
    logger.info("Importing Markdown table (%d characters)", len(text))
    return apply_grid_update(
        context, _import_markdown_transform(context, text), "import_markdown"
    )


# Non-historied operations


def undo(context):
    snapshot = context.history.pop()
    if snapshot is None:
        return _error(NoOp("Nothing to undo"))

    context.restore(snapshot)
    logger.info("Undone (%d more)", len(context.history))
    return get_state(context)


def _validate_sort_spec(context, column, direction, method):
    if column is not None and (column < 0 or column >= context.grid.col_count):
        raise OutOfBounds(f"Sort column {column} out of range")
    if direction not in ("asc", "desc"):
        raise InvalidEdit(f"Unknown sort direction: {direction}")
    if method not in ("lexicographic", "numeric"):
        raise InvalidEdit(f"Unknown sort method: {method}")


def set_sort_spec(context, column=None, direction="asc", method="lexicographic"):
    try:
        _validate_sort_spec(context, column, direction, method)
    except TabularError as e:
        logger.warning("Rejected set_sort_spec: %s", e)
        return _error(e)

    context.sort = SortSpec(column=column, direction=direction, method=method)
    return get_state(context)


def _validate_summary_spec(enabled):
    unknown = [kind for kind in enabled if kind not in AGGREGATES]
    if unknown:
        raise InvalidEdit(f"Unknown aggregate: {', '.join(unknown)}")


def set_summary_spec(context, enabled):
    try:
        _validate_summary_spec(enabled)
    except TabularError as e:
        logger.warning("Rejected set_summary_spec: %s", e)
        return _error(e)

    context.summary = SummarySpec(enabled=frozenset(enabled))
    return get_state(context)


def set_output_format(context, compact):
    context.output_format = replace(context.output_format, compact=bool(compact))
    return get_state(context)


# Intents

_HISTORIED = {
    "setCell": (_set_cell_transform, ("row", "col", "text")),
    "addRow": (_add_row_transform, ()),
    "addColumn": (_add_column_transform, ()),
    "insertRowBefore": (_insert_row_transform, ("index",)),
    "insertColumnBefore": (_insert_column_transform, ("index",)),
    "removeRow": (_remove_row_transform, ("index",)),
    "removeColumn": (_remove_column_transform, ("index",)),
    "setAlignment": (_set_alignment_transform, ("col", "which", "alignment")),
    "applySortToInputs": (_apply_sort_transform, ()),
    "importCsv": (_import_csv_transform, ("text",)),
    "importMarkdown": (_import_markdown_transform, ("text",)),
}


def _intent_type(intent):
    intent_type = intent.get("type")
    if intent_type in _HISTORIED or intent_type in (
        "undo",
        "setSortSpec",
        "setSummarySpec",
        "setOutputFormat",
    ):
        return intent_type
    raise InvalidEdit(f"Unknown intent: {intent_type}")


def _intent_args(intent, keys):
    missing = [k for k in keys if k not in intent]
    if missing:
        raise InvalidEdit(
            f"Intent {intent.get('type')} is missing: {', '.join(missing)}"
        )
    return [intent[k] for k in keys]


def _sort_args(intent):
    return (
        intent.get("column"),
        intent.get("direction", "asc"),
        intent.get("method", "lexicographic"),
    )


def apply_intent(context, intent):
    try:
        intent_type = _intent_type(intent)
    except TabularError as e:
        logger.warning("Rejected intent: %s", e)
        return _error(e)

    if intent_type in _HISTORIED:
        builder, keys = _HISTORIED[intent_type]
        try:
            transform = builder(context, *_intent_args(intent, keys))
        except TabularError as e:
            logger.warning("Rejected %s: %s", intent_type, e)
            return _error(e)
        return apply_grid_update(context, transform, intent_type)
    elif intent_type == "undo":
        return undo(context)
    elif intent_type == "setSortSpec":
        return set_sort_spec(context, *_sort_args(intent))
    elif intent_type == "setSummarySpec":
        return set_summary_spec(context, intent.get("enabled", []))
    return set_output_format(context, intent.get("compact", False))


def can_apply(context, intent):
    """Whether ``intent`` would be accepted against the live state.

    Nothing is committed; this is what the UI uses to enable controls.
    """
    try:
        intent_type = _intent_type(intent)
        if intent_type in _HISTORIED:
            builder, keys = _HISTORIED[intent_type]
            builder(context, *_intent_args(intent, keys))(context.snapshot())
        elif intent_type == "undo":
            return context.history.can_undo
        elif intent_type == "setSortSpec":
            _validate_sort_spec(context, *_sort_args(intent))
        elif intent_type == "setSummarySpec":
            _validate_summary_spec(intent.get("enabled", []))
    except TabularError:
        return False
    return True
