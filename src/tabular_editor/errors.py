class TabularError(Exception):
    """Base class for rejected editor operations.

    None of these are fatal: the live state is left untouched and the UI is
    expected to disable the triggering control.
    """


class OutOfBounds(TabularError, IndexError):
    """A row or column index falls outside the current grid."""


class InvalidEdit(TabularError, ValueError):
    """The edit would leave the grid without rows or columns."""


class NoOp(TabularError):
    """The operation would not change anything."""
