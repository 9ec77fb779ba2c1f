from text_ui.ui_config import (
    CARD_STYLE_ORDER,
    GLYPH_BACK,
    GLYPH_BASE,
    GLYPH_RANK,
    GLYPH_SUIT,
    HIDDEN_TEXT,
)
from text_ui.view_model import CardView


class CardFaceRenderer:
    def __init__(self, card_style="Text"):
        if card_style not in CARD_STYLE_ORDER:
            raise ValueError(f"unknown card style: {card_style}")
        self.card_style = card_style

    @property
    def width(self) -> int:
        return 1 if self.card_style == "Glyph" else len(HIDDEN_TEXT)

    def blank(self) -> str:
        return " " * self.width

    def card_text(self, card: CardView) -> str:
        if self.card_style == "Glyph":
            return self.card_glyph(card)
        if card.hidden:
            return HIDDEN_TEXT
        return f"{card.suit.glyph} {card.rank.letter}"

    @staticmethod
    def card_glyph(card: CardView) -> str:
        if card.hidden:
            return chr(GLYPH_BACK)
        return chr(GLYPH_BASE | GLYPH_SUIT[card.suit] | GLYPH_RANK[card.rank])
