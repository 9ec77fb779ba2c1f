from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from spider.Cards import Suit
from text_ui.ui_config import (
    CARD_GAP,
    CARD_HEIGHT,
    CARD_WIDTH,
    HIDDEN_STEP,
    IMAGE_COLORS,
    IMAGE_HUD_HEIGHT,
    IMAGE_MARGIN,
    VISIBLE_STEP,
)
from text_ui.renderer import render_status
from text_ui.view_model import CardView, GameViewModel, PileView


def get_font(size):
    for name in ("DejaVuSans-Bold.ttf", "Arial.ttf", "Helvetica.ttc"):
        try:
            return ImageFont.truetype(name, size=size)
        except OSError:
            continue
    return ImageFont.load_default()


def draw_heart(draw, cx, cy, s, fill):
    r = s // 3
    draw.ellipse((cx - r - r // 2, cy - r, cx - r // 2, cy), fill=fill)
    draw.ellipse((cx + r // 2, cy - r, cx + r + r // 2, cy), fill=fill)
    draw.polygon([(cx - s // 2, cy), (cx + s // 2, cy), (cx, cy + s // 2 + s // 4)], fill=fill)


def draw_diamond(draw, cx, cy, s, fill):
    draw.polygon([(cx, cy - s // 2), (cx + s // 2, cy), (cx, cy + s // 2), (cx - s // 2, cy)], fill=fill)


def draw_club(draw, cx, cy, s, fill):
    r = s // 4
    draw.ellipse((cx - r - r, cy - r, cx - r, cy + r), fill=fill)
    draw.ellipse((cx + r, cy - r, cx + r + r, cy + r), fill=fill)
    draw.ellipse((cx - r, cy - r - r, cx + r, cy + r - r), fill=fill)
    draw.rectangle((cx - r // 3, cy + r, cx + r // 3, cy + s // 2), fill=fill)


def draw_spade(draw, cx, cy, s, fill):
    # upside-down heart + stem
    r = s // 3
    draw.ellipse((cx - r - r // 2, cy, cx - r // 2, cy + r), fill=fill)
    draw.ellipse((cx + r // 2, cy, cx + r + r // 2, cy + r), fill=fill)
    draw.polygon([(cx - s // 2, cy + r), (cx + s // 2, cy + r), (cx, cy - s // 2 + r // 2)], fill=fill)
    draw.rectangle((cx - r // 3, cy + r, cx + r // 3, cy + s // 2 + r // 3), fill=fill)


SUIT_PAINTERS = {
    Suit.HEARTS: draw_heart,
    Suit.SPADES: draw_spade,
    Suit.DIAMONDS: draw_diamond,
    Suit.CLUBS: draw_club,
}


def pile_height(pile: PileView) -> int:
    if not pile.cards:
        return CARD_HEIGHT
    steps = 0
    for card in pile.cards[:-1]:
        steps += HIDDEN_STEP if card.hidden else VISIBLE_STEP
    return steps + CARD_HEIGHT


def image_size(view: GameViewModel) -> tuple[int, int]:
    count = len(view.piles)
    width = IMAGE_MARGIN * 2 + count * CARD_WIDTH + max(0, count - 1) * CARD_GAP
    tallest = max((pile_height(p) for p in view.piles), default=CARD_HEIGHT)
    height = IMAGE_MARGIN * 2 + IMAGE_HUD_HEIGHT + tallest
    return width, height


def draw_card(draw, x, y, card: CardView, font):
    if card.hidden:
        draw.rectangle((x, y, x + CARD_WIDTH, y + CARD_HEIGHT), fill=IMAGE_COLORS["card_back"], outline=IMAGE_COLORS["card_border"])
        for i in range(0, CARD_WIDTH, 8):
            draw.line((x + i, y + 4, x + i + 6, y + CARD_HEIGHT - 4), fill=IMAGE_COLORS["back_pattern"], width=1)
        return

    draw.rectangle((x, y, x + CARD_WIDTH, y + CARD_HEIGHT), fill=IMAGE_COLORS["card_front"], outline=IMAGE_COLORS["card_border"])
    color = IMAGE_COLORS["red"] if card.suit.isRed() else IMAGE_COLORS["black"]
    draw.text((x + 5, y + 3), card.rank.letter, fill=color, font=font)
    SUIT_PAINTERS[card.suit](draw, x + CARD_WIDTH - 14, y + 11, 12, color)


def render_board(view: GameViewModel) -> Image.Image:
    img = Image.new("RGB", image_size(view), IMAGE_COLORS["table"])
    d = ImageDraw.Draw(img)
    font = get_font(14)

    d.text((IMAGE_MARGIN, IMAGE_MARGIN), render_status(view), fill=IMAGE_COLORS["hud_text"], font=font)
    top = IMAGE_MARGIN + IMAGE_HUD_HEIGHT
    for i, pile in enumerate(view.piles):
        x = IMAGE_MARGIN + i * (CARD_WIDTH + CARD_GAP)
        if not pile.cards:
            d.rectangle((x, top, x + CARD_WIDTH, top + CARD_HEIGHT), outline=IMAGE_COLORS["slot_outline"], width=2)
            continue
        y = top
        for card in pile.cards:
            draw_card(d, x, y, card, font)
            y += HIDDEN_STEP if card.hidden else VISIBLE_STEP
    return img


def save_board(view: GameViewModel, path) -> Path:
    out_path = Path(path).expanduser()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    render_board(view).save(out_path, "PNG")
    return out_path
