from dataclasses import dataclass

from spider.Cards import Rank, Suit


@dataclass(frozen=True)
class CardView:
    # rank and suit are withheld for face-down cards
    rank: Rank | None
    suit: Suit | None
    hidden: bool


@dataclass(frozen=True)
class PileView:
    cards: tuple[CardView, ...]
    hidden_count: int


@dataclass(frozen=True)
class GameViewModel:
    reserve_count: int
    completed: int
    win_target: int
    won: bool
    piles: tuple[PileView, ...]

    @property
    def tallest(self) -> int:
        return max((len(p.cards) for p in self.piles), default=0)
