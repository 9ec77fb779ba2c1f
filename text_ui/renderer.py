from text_ui.card_face import CardFaceRenderer
from text_ui.ui_config import COLUMN_GAP, ROW_LABEL_WIDTH
from text_ui.view_model import GameViewModel


def render_board(view: GameViewModel, face: CardFaceRenderer) -> str:
    """
    Lay the piles out as columns. Rows are printed from the tallest pile's top
    down to row 0, each labelled with its index in hex, which is the notation
    explicit moves use for positions.
    """
    lines = []
    for row in range(view.tallest - 1, -1, -1):
        line = f"{row:x}".ljust(ROW_LABEL_WIDTH)
        for pile in view.piles:
            if row < len(pile.cards):
                line += face.card_text(pile.cards[row])
            else:
                line += face.blank()
            line += COLUMN_GAP
        lines.append(line.rstrip())

    footer = " " * ROW_LABEL_WIDTH
    for i in range(len(view.piles)):
        footer += str(i).ljust(face.width) + COLUMN_GAP
    lines.append(footer.rstrip())
    lines.append(render_status(view))
    return "\n".join(lines)


def render_status(view: GameViewModel) -> str:
    status = f"Reserve: {view.reserve_count}    Completed: {view.completed}/{view.win_target}"
    if view.won:
        status += "    (won)"
    return status
