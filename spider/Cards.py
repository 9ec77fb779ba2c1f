import random
from dataclasses import dataclass
from enum import IntEnum

NUM_PER_SUIT = 13
DECK_SIZE = 104
SUIT_RUNS = DECK_SIZE // NUM_PER_SUIT


def ceilDiv(x, y):
    return (x + y - 1) // y


class Suit(IntEnum):
    HEARTS = 0
    SPADES = 1
    DIAMONDS = 2
    CLUBS = 3

    @property
    def glyph(self) -> str:
        return "♡♠♢♣"[self.value]

    def isRed(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)


class Rank(IntEnum):
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def letter(self) -> str:
        return "A23456789TJQK"[self.value - 1]

    def successor(self):
        """The next-lower rank, or None for an ace."""
        if self is Rank.ACE:
            return None
        return Rank(self.value - 1)


DESCENDING_RANKS = tuple(sorted(Rank, reverse=True))


@dataclass(frozen=True, slots=True)
class Card:
    rank: Rank
    suit: Suit

    def __str__(self):
        return f"{self.suit.glyph} {self.rank.letter}"

    def fitsOn(self, base: "Card") -> bool:
        """True if this card may be placed on `base`; suits are not compared."""
        return base.rank.successor() == self.rank

    def continues(self, base: "Card") -> bool:
        """True if this card extends a same-suit run whose top is `base`."""
        return self.suit == base.suit and self.fitsOn(base)

    @staticmethod
    def fullSuit(suit: Suit):
        return [Card(rank, suit) for rank in DESCENDING_RANKS]


# suit order used when dealing four suits
FOUR_SUITS = (Suit.HEARTS, Suit.SPADES, Suit.DIAMONDS, Suit.CLUBS)


def suitRuns(suits: int):
    """
    The suit of each of the eight 13-card runs in the deck.

    1 suit: all spades, 2 suits: spades and hearts, 4 suits: two of each.
    Three suits spread the runs as evenly as possible.
    """
    if suits == 1:
        return [Suit.SPADES] * SUIT_RUNS
    if suits == 2:
        return [Suit.SPADES] * (SUIT_RUNS // 2) + [Suit.HEARTS] * (SUIT_RUNS // 2)
    if suits == 3:
        runs = []
        remaining = SUIT_RUNS
        for i, suit in enumerate((Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS)):
            count = ceilDiv(remaining, 3 - i)
            remaining -= count
            runs.extend([suit] * count)
        return runs
    if suits == 4:
        return list(FOUR_SUITS) * (SUIT_RUNS // 4)
    raise ValueError(f"Invalid number of suits: {suits}")


def defaultShuffle(cards, seed):
    random.Random(seed).shuffle(cards)


def generateDeck(suits, shuffle=defaultShuffle, seed=None):
    cards = [Card(rank, suit) for suit in suitRuns(suits) for rank in DESCENDING_RANKS]
    shuffle(cards, seed)
    return cards
