from spider.Cards import NUM_PER_SUIT, Card

PILE_COUNT = 10
RESERVE_SIZE = 50
INITIAL_SIZES = (5, 5, 5, 5, 5, 5, 6, 6, 6, 6)
INITIAL_HIDDEN = (4, 4, 4, 4, 4, 4, 5, 5, 5, 5)


class Tableau:
    """
    Ten piles, the reserve, per-pile hidden counts and the completed-suit counter.

    Piles are stored bottom first, so the playable card is the last one. The
    first `hidden[p]` cards of pile p are face down.
    """

    def __init__(self):
        self.piles: list[list[Card]] = [[] for _ in range(PILE_COUNT)]
        self.hidden: list[int] = [0] * PILE_COUNT
        self.reserve: list[Card] = []
        self.completed = 0

    @staticmethod
    def deal(deck, reserveSize=RESERVE_SIZE, sizes=INITIAL_SIZES, hidden=INITIAL_HIDDEN):
        if len(deck) != reserveSize + sum(sizes):
            raise ValueError(f"deck of {len(deck)} cards does not match the layout")
        t = Tableau()
        t.piles = [[] for _ in sizes]
        t.reserve = list(deck[:reserveSize])
        pos = reserveSize
        for p, size in enumerate(sizes):
            t.piles[p] = list(deck[pos:pos + size])
            pos += size
        t.hidden = list(hidden)
        t._checkHidden()
        return t

    @staticmethod
    def fromPiles(piles, hidden=None, reserve=(), completed=0):
        t = Tableau()
        t.piles = [list(pile) for pile in piles]
        t.hidden = list(hidden) if hidden is not None else [0] * len(t.piles)
        t.reserve = list(reserve)
        t.completed = completed
        t._checkHidden()
        return t

    def _checkHidden(self):
        if len(self.hidden) != len(self.piles):
            raise ValueError("one hidden count is needed per pile")
        for p, pile in enumerate(self.piles):
            if not 0 <= self.hidden[p] <= len(pile):
                raise ValueError(f"pile {p}: hidden count {self.hidden[p]} outside 0..{len(pile)}")

    # read-only accessors

    @property
    def pileCount(self) -> int:
        return len(self.piles)

    def isValidPile(self, p) -> bool:
        return 0 <= p < len(self.piles)

    def pile(self, p) -> tuple[Card, ...]:
        return tuple(self.piles[p])

    def pileSize(self, p) -> int:
        return len(self.piles[p])

    def hiddenCount(self, p) -> int:
        return self.hidden[p]

    def isHidden(self, p, pos) -> bool:
        return self.hidden[p] > pos

    def topCard(self, p):
        pile = self.piles[p]
        return pile[-1] if pile else None

    def reserveCount(self) -> int:
        return len(self.reserve)

    def fingerprint(self):
        return (
            tuple(tuple(pile) for pile in self.piles),
            tuple(self.hidden),
            tuple(self.reserve),
            self.completed,
        )

    # rules

    def isSequence(self, p, index) -> bool:
        """
        True if the cards from `index` to the top of pile p form a same-suit,
        strictly descending run that starts in the face-up region.
        """
        pile = self.piles[p]
        if index < self.hidden[p] or index >= len(pile):
            return False
        for i in range(index + 1, len(pile)):
            if not pile[i].continues(pile[i - 1]):
                return False
        return True

    def completableAt(self, p) -> int:
        """Start index of a finished King..Ace run on top of pile p, or -1."""
        start = len(self.piles[p]) - NUM_PER_SUIT
        if start < 0 or not self.isSequence(p, start):
            return -1
        return start

    def discover(self, p) -> bool:
        # fires only when the pile has shrunk down to the hidden boundary
        if self.hidden[p] == len(self.piles[p]) and self.hidden[p] > 0:
            self.hidden[p] -= 1
            return True
        return False
