import logging
from dataclasses import dataclass

from spider.Cards import Suit

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveAction:
    source: int
    sourceIndex: int
    target: int
    targetIndex: int
    discovered: bool


@dataclass(frozen=True, slots=True)
class DealAction:
    pass


@dataclass(frozen=True, slots=True)
class CompleteSuitAction:
    pile: int
    suit: Suit
    discovered: bool


ACTION_TYPES = (MoveAction, DealAction, CompleteSuitAction)


class HistoryRecorder:
    """
    Linear undo/redo log. Entries before `head` are done, the rest are undone.
    Logging a new action drops the undone entries.
    """

    def __init__(self, core):
        self.core = core
        self.lst = []
        self.head = 0

    @property
    def length(self) -> int:
        return len(self.lst)

    def actions(self):
        return tuple(self.lst)

    def canUndo(self) -> bool:
        return self.head > 0

    def canRedo(self) -> bool:
        return self.head < len(self.lst)

    def log(self, action):
        if self.head != len(self.lst):
            logger.debug("dropping %d undone actions", len(self.lst) - self.head)
            del self.lst[self.head:]
        self.lst.append(action)
        self.head += 1

    def undo(self) -> bool:
        if not self.canUndo():
            return False
        self.head -= 1
        action = self.lst[self.head]
        logger.debug("undo %s", action)
        self.core.revertAction(action)
        return True

    def redo(self) -> bool:
        if not self.canRedo():
            return False
        action = self.lst[self.head]
        logger.debug("redo %s", action)
        self.core.replayAction(action)
        self.head += 1
        return True
