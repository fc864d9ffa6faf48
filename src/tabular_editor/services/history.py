import logging
from typing import List, Optional

from ..models import Snapshot

logger = logging.getLogger(__name__)


class History:
    """Linear undo stack of pre-edit snapshots. There is no redo."""

    def __init__(self, max_depth: Optional[int] = None):
        self.max_depth = max_depth
        self._stack: List[Snapshot] = []

    def __len__(self):
        return len(self._stack)

    @property
    def can_undo(self) -> bool:
        return bool(self._stack)

    def push(self, snapshot: Snapshot) -> None:
        self._stack.append(snapshot)
        if self.max_depth is not None and len(self._stack) > self.max_depth:
            self._stack.pop(0)
            logger.debug("Undo stack full, dropped oldest entry")

    def pop(self) -> Optional[Snapshot]:
        """Remove and return the latest snapshot, or None when empty."""
        if not self._stack:
            return None
        return self._stack.pop()

    def clear(self) -> None:
        self._stack.clear()
