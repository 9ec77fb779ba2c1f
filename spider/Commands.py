from dataclasses import dataclass

from spider.Core import Core, Outcome


@dataclass(frozen=True, slots=True)
class NewGame:
    seed: int | None = None


@dataclass(frozen=True, slots=True)
class Quit:
    pass


@dataclass(frozen=True, slots=True)
class Move:
    source: int
    index: int
    target: int


@dataclass(frozen=True, slots=True)
class Deal:
    pass


@dataclass(frozen=True, slots=True)
class CompleteSuit:
    pile: int


@dataclass(frozen=True, slots=True)
class Undo:
    pass


@dataclass(frozen=True, slots=True)
class Redo:
    pass


@dataclass(frozen=True, slots=True)
class Help:
    pass


@dataclass(frozen=True, slots=True)
class SmartMove:
    source: int
    target: int


@dataclass(frozen=True, slots=True)
class SmartComplete:
    pass


@dataclass(frozen=True, slots=True)
class Restart:
    pass


COMMAND_TYPES = (NewGame, Quit, Move, Deal, CompleteSuit, Undo, Redo, Help, SmartMove, SmartComplete, Restart)


@dataclass(frozen=True, slots=True)
class GameStatus:
    reserve_count: int
    completed: int
    win_target: int
    won: bool
    history_head: int
    history_length: int


class Dispatcher:
    """Turns a parsed command into a call on the core."""

    def __init__(self, core: Core, helpText: str = ""):
        self.core = core
        self.helpText = helpText

    def dispatch(self, command) -> Outcome:
        core = self.core
        if isinstance(command, Move):
            return core.askMove(command.source, command.index, command.target)
        if isinstance(command, SmartMove):
            return core.askSmartMove(command.source, command.target)
        if isinstance(command, Deal):
            return core.askDeal()
        if isinstance(command, CompleteSuit):
            return core.askCompleteSuit(command.pile)
        if isinstance(command, SmartComplete):
            return core.askSmartComplete()
        if isinstance(command, Undo):
            return core.askUndo()
        if isinstance(command, Redo):
            return core.askRedo()
        if isinstance(command, Restart):
            return core.askRestart()
        if isinstance(command, NewGame):
            core.newGame(command.seed)
            return Outcome(True, "New game")
        if isinstance(command, Help):
            return Outcome(True, self.helpText)
        if isinstance(command, Quit):
            return Outcome(True, "Bye!", quit=True)
        raise TypeError(f"unknown command {command!r}")

    def status(self) -> GameStatus:
        core = self.core
        return GameStatus(
            reserve_count=core.tableau.reserveCount(),
            completed=core.tableau.completed,
            win_target=core.config.winTarget,
            won=core.isWon(),
            history_head=core.history.head,
            history_length=core.history.length,
        )
