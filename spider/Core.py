import logging
import random
from dataclasses import dataclass

from spider.Cards import NUM_PER_SUIT, SUIT_RUNS, Card, defaultShuffle, generateDeck
from spider.History import CompleteSuitAction, DealAction, HistoryRecorder, MoveAction
from spider.Interface import Interface
from spider.Tableau import INITIAL_HIDDEN, INITIAL_SIZES, PILE_COUNT, RESERVE_SIZE, Tableau

logger = logging.getLogger(__name__)

SUPPORTED_SUITS = (1, 2, 3, 4)
WIN_MESSAGE = "You win!"


class GameConfig:
    def __init__(self, suits=4, seed=None):
        self.suits = suits
        self.seed = seed
        self.pileCount = PILE_COUNT
        self.reserveSize = RESERVE_SIZE
        self.initialSizes = INITIAL_SIZES
        self.initialHidden = INITIAL_HIDDEN
        # one completed run per 13 cards in the deck
        self.winTarget = SUIT_RUNS

    def validate(self):
        if self.suits not in SUPPORTED_SUITS:
            raise ValueError(f"Invalid number of suits: {self.suits}")
        if len(self.initialSizes) != self.pileCount or len(self.initialHidden) != self.pileCount:
            raise ValueError("initial layout must list every pile")
        return self


@dataclass(frozen=True, slots=True)
class Outcome:
    """
    Result of one command.

    `moved` counts the cards a move carried; a single-card smart move reports 1.
    """

    applied: bool
    message: str = ""
    moved: int = 0
    won: bool = False
    quit: bool = False

    @staticmethod
    def rejected(message):
        return Outcome(False, message)


class Core:
    """
    ask*** : called on behalf of the player, validates and reports an Outcome.
    do*** : the forward effect of a fresh action, logged to the history.
    revert/replay : the reverse and forward effects of a logged action.
    """

    def __init__(self, config: GameConfig = None, shuffle=defaultShuffle, seedSource: random.Random = None):
        self.config = config if config is not None else GameConfig()
        self.shuffle = shuffle
        self.seedSource = seedSource if seedSource is not None else random.Random()
        self.interface = Interface()
        self.interface.core = self

        self.seed = None
        self.tableau: Tableau = None
        self.history: HistoryRecorder = None

    def registerInterface(self, interface):
        self.interface = interface
        interface.core = self

    def startGame(self, seed=None):
        self.config.validate()
        if seed is None:
            seed = self.config.seed
        if seed is None:
            seed = self.seedSource.randrange(2 ** 32)
        self.seed = seed
        deck = generateDeck(self.config.suits, self.shuffle, seed)
        self.tableau = Tableau.deal(
            deck, self.config.reserveSize, self.config.initialSizes, self.config.initialHidden
        )
        self.history = HistoryRecorder(self)
        logger.debug("new game: suits=%d seed=%s", self.config.suits, seed)
        self.interface.onStart()

    def newGame(self, seed=None):
        if seed is None:
            seed = self.seedSource.randrange(2 ** 32)
        self.startGame(seed)

    def loadTableau(self, tableau: Tableau):
        """Start from an arbitrary board, with an empty history."""
        self.tableau = tableau
        self.history = HistoryRecorder(self)
        self.interface.onStart()

    def _board(self) -> Tableau:
        if self.tableau is None:
            raise RuntimeError("game not started")
        return self.tableau

    def isWon(self) -> bool:
        return self._board().completed >= self.config.winTarget

    def isSequence(self, pile, index) -> bool:
        return self._board().isSequence(pile, index)

    # player requests

    def askMove(self, source, index, target) -> Outcome:
        t = self._board()
        reason = self._pileProblem(source, target)
        if reason:
            return self._reject("move", reason)
        if not 0 <= index < t.pileSize(source):
            return self._reject("move", "No card at that position")
        if not t.isSequence(source, index):
            return self._reject("move", "Not in sequence")
        reason = self._placementProblem(t.piles[source][index], target)
        if reason:
            return self._reject("move", reason)
        action = self.doMove(source, index, target)
        return Outcome(True, moved=t.pileSize(target) - action.targetIndex)

    def askSmartMove(self, source, target) -> Outcome:
        t = self._board()
        reason = self._pileProblem(source, target)
        if reason:
            return self._reject("smart move", reason)
        size = t.pileSize(source)
        if size == 0:
            return self._reject("smart move", "No cards to move")

        if t.pileSize(target) == 0:
            if size == 1 or not t.isSequence(source, size - 2):
                if not t.isSequence(source, size - 1):
                    return self._reject("smart move", "Not in sequence")
                self.doMove(source, size - 1, target)
                return Outcome(True, moved=1)
            return self._reject("smart move", "Multiple moves possible; use Mxyz notation")

        wanted = t.topCard(target).rank.successor()
        if wanted is None:
            return self._reject("smart move", "can't move onto ace")
        # face-down cards are never inspected
        for index in range(size - 1, t.hiddenCount(source) - 1, -1):
            if t.piles[source][index].rank != wanted:
                continue
            if not t.isSequence(source, index):
                break
            self.doMove(source, index, target)
            return Outcome(True, moved=size - index)
        return self._reject("smart move", "No valid move found")

    def askCompleteSuit(self, pile) -> Outcome:
        t = self._board()
        if not t.isValidPile(pile):
            return self._reject("complete", "No such pile")
        if t.pileSize(pile) < NUM_PER_SUIT:
            return self._reject("complete", "Not enough cards to complete a suit")
        start = t.completableAt(pile)
        if start < 0:
            return self._reject("complete", "Not in sequence")
        self.doComplete(pile, start)
        return self._completedOutcome(NUM_PER_SUIT)

    def askSmartComplete(self) -> Outcome:
        t = self._board()
        count = 0
        for pile in range(t.pileCount):
            start = t.completableAt(pile)
            if start < 0:
                continue
            self.doComplete(pile, start)
            count += 1
        if count == 0:
            return self._reject("smart complete", "No suit to complete")
        return self._completedOutcome(count * NUM_PER_SUIT)

    def askDeal(self) -> Outcome:
        t = self._board()
        if t.reserveCount() < t.pileCount:
            return self._reject("deal", "Stack exhausted")
        self.doDeal()
        return Outcome(True, moved=t.pileCount)

    def askUndo(self) -> Outcome:
        self._board()
        if not self.history.undo():
            return self._reject("undo", "Nothing to undo")
        return Outcome(True)

    def askRedo(self) -> Outcome:
        self._board()
        action = self.history.lst[self.history.head] if self.history.canRedo() else None
        if not self.history.redo():
            return self._reject("redo", "Nothing to redo")
        if isinstance(action, CompleteSuitAction) and self.tableau.completed == self.config.winTarget:
            self.interface.onWin()
            return Outcome(True, WIN_MESSAGE, won=True)
        return Outcome(True)

    def askRestart(self) -> Outcome:
        self._board()
        count = 0
        while self.history.undo():
            count += 1
        if count == 0:
            return self._reject("restart", "Nothing to undo")
        logger.debug("restart undid %d actions", count)
        return Outcome(True)

    def _pileProblem(self, source, target):
        t = self.tableau
        if not t.isValidPile(source) or not t.isValidPile(target):
            return "No such pile"
        if source == target:
            return "Source and target are the same pile"
        return None

    def _placementProblem(self, card: Card, target):
        base = self.tableau.topCard(target)
        if base is None:
            return None
        if base.rank.successor() is None:
            return "can't move onto ace"
        if not card.fitsOn(base):
            return "Card does not fit there"
        return None

    def _completedOutcome(self, moved):
        if self.tableau.completed == self.config.winTarget:
            self.interface.onWin()
            return Outcome(True, WIN_MESSAGE, moved=moved, won=True)
        return Outcome(True, moved=moved)

    @staticmethod
    def _reject(what, reason):
        logger.debug("%s rejected: %s", what, reason)
        return Outcome.rejected(reason)

    # forward effects of fresh actions

    def _afterRemoval(self, pile) -> bool:
        """Runs once after cards leave the top of a pile."""
        return self.tableau.discover(pile)

    def doMove(self, source, index, target) -> MoveAction:
        targetIndex = self.tableau.pileSize(target)
        self._moveCards(source, index, target)
        discovered = self._afterRemoval(source)
        action = MoveAction(source, index, target, targetIndex, discovered)
        self._record(action)
        return action

    def doComplete(self, pile, start) -> CompleteSuitAction:
        stack = self.tableau.piles[pile]
        suit = stack[-1].suit
        del stack[start:]
        self.tableau.completed += 1
        discovered = self._afterRemoval(pile)
        action = CompleteSuitAction(pile, suit, discovered)
        self._record(action)
        return action

    def doDeal(self) -> DealAction:
        self._dealCards()
        action = DealAction()
        self._record(action)
        return action

    def _record(self, action):
        logger.debug("apply %s", action)
        self.history.log(action)
        self.interface.onEvent(action)

    def _moveCards(self, source, index, target):
        piles = self.tableau.piles
        piles[target].extend(piles[source][index:])
        del piles[source][index:]

    def _dealCards(self):
        reserve = self.tableau.reserve
        for pile in self.tableau.piles:
            pile.append(reserve.pop())

    # logged actions, called by the history recorder

    def replayAction(self, action):
        t = self.tableau
        if isinstance(action, MoveAction):
            self._moveCards(action.source, action.sourceIndex, action.target)
            if action.discovered:
                t.hidden[action.source] -= 1
        elif isinstance(action, DealAction):
            self._dealCards()
        elif isinstance(action, CompleteSuitAction):
            del t.piles[action.pile][-NUM_PER_SUIT:]
            t.completed += 1
            if action.discovered:
                t.hidden[action.pile] -= 1
        else:
            raise TypeError(f"unknown action {action!r}")
        self.interface.onEvent(action)

    def revertAction(self, action):
        t = self.tableau
        if isinstance(action, MoveAction):
            target = t.piles[action.target]
            t.piles[action.source].extend(target[action.targetIndex:])
            del target[action.targetIndex:]
            if action.discovered:
                t.hidden[action.source] += 1
        elif isinstance(action, DealAction):
            for pile in reversed(t.piles):
                t.reserve.append(pile.pop())
        elif isinstance(action, CompleteSuitAction):
            t.piles[action.pile].extend(Card.fullSuit(action.suit))
            t.completed -= 1
            if action.discovered:
                t.hidden[action.pile] += 1
        else:
            raise TypeError(f"unknown action {action!r}")
        self.interface.onUndoEvent(action)

