from tabular_editor.models import Snapshot, SortSpec, SummarySpec
from tabular_editor.services.grid import new_grid
from tabular_editor.services.history import History


def make_snapshot(prefix):
    return Snapshot(
        grid=new_grid(header_prefix=prefix), sort=SortSpec(), summary=SummarySpec()
    )


def test_empty_history():
    history = History()

    assert not history.can_undo
    assert history.pop() is None
    assert len(history) == 0


def test_push_pop_is_lifo():
    history = History()
    first = make_snapshot("A")
    second = make_snapshot("B")

    history.push(first)
    history.push(second)

    assert history.can_undo
    assert history.pop() == second
    assert history.pop() == first
    assert not history.can_undo


def test_max_depth_drops_oldest():
    history = History(max_depth=2)
    for prefix in ("A", "B", "C"):
        history.push(make_snapshot(prefix))

    assert len(history) == 2
    assert history.pop().grid.header[0] == "C 1"
    assert history.pop().grid.header[0] == "B 1"
    assert history.pop() is None


def test_clear():
    history = History()
    history.push(make_snapshot("A"))

    history.clear()

    assert not history.can_undo
