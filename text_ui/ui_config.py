from spider.Cards import Rank, Suit

SUIT_COUNT_ORDER = (1, 2, 3, 4)
CARD_STYLE_ORDER = ("Text", "Glyph")

HIDDEN_TEXT = "? ?"
COLUMN_GAP = "  "
ROW_LABEL_WIDTH = 4

# Unicode playing cards block
GLYPH_BACK = 0x1F0A0
GLYPH_BASE = 0x1F000
GLYPH_SUIT = {
    Suit.SPADES: 0xA0,
    Suit.HEARTS: 0xB0,
    Suit.DIAMONDS: 0xC0,
    Suit.CLUBS: 0xD0,
}
# 0x0C is the knight, which a standard deck skips
GLYPH_RANK = {rank: rank.value for rank in Rank}
GLYPH_RANK[Rank.QUEEN] = 0x0D
GLYPH_RANK[Rank.KING] = 0x0E

# board image layout, in pixels
IMAGE_MARGIN = 16
IMAGE_HUD_HEIGHT = 28
CARD_WIDTH = 60
CARD_HEIGHT = 84
CARD_GAP = 10
HIDDEN_STEP = 10
VISIBLE_STEP = 22

IMAGE_COLORS = {
    "table": (27, 67, 50),
    "hud_text": (241, 245, 249),
    "slot_outline": (153, 246, 228),
    "card_front": (247, 232, 188),
    "card_back": (51, 65, 85),
    "card_border": (15, 23, 42),
    "back_pattern": (167, 243, 208),
    "red": (220, 38, 38),
    "black": (17, 24, 39),
}
