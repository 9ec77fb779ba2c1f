from spider.Core import Core
from spider.History import CompleteSuitAction, DealAction, MoveAction
from text_ui.view_model import CardView, GameViewModel, PileView


class CoreAdapter:
    """Read-only bridge from the core's tableau to a renderer-friendly model."""

    @staticmethod
    def snapshot(core: Core) -> GameViewModel:
        t = core.tableau
        piles = []
        for p in range(t.pileCount):
            cards = []
            for pos, card in enumerate(t.pile(p)):
                if t.isHidden(p, pos):
                    cards.append(CardView(rank=None, suit=None, hidden=True))
                else:
                    cards.append(CardView(rank=card.rank, suit=card.suit, hidden=False))
            piles.append(PileView(cards=tuple(cards), hidden_count=t.hiddenCount(p)))
        return GameViewModel(
            reserve_count=t.reserveCount(),
            completed=t.completed,
            win_target=core.config.winTarget,
            won=core.isWon(),
            piles=tuple(piles),
        )

    @staticmethod
    def describe(action) -> str:
        if isinstance(action, MoveAction):
            text = f"move {action.source}:{action.sourceIndex:x} -> {action.target}"
            if action.discovered:
                text += " (revealed a card)"
            return text
        if isinstance(action, DealAction):
            return "deal from reserve"
        if isinstance(action, CompleteSuitAction):
            return f"complete {action.suit.glyph} on pile {action.pile}"
        return type(action).__name__
