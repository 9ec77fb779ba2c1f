"""
Line-oriented tokenizer for the terminal front end.

One command per line, selected by its first character. Upper-case letters are
the plain commands; lower-case ones are the shortcuts that let the engine
infer the missing details.
"""
from spider.Commands import (
    CompleteSuit,
    Deal,
    Help,
    Move,
    NewGame,
    Quit,
    Redo,
    Restart,
    SmartComplete,
    SmartMove,
    Undo,
)

HELP_TEXT = "\n".join(
    (
        "H: print this again",
        "N: new game",
        "Q: quit",
        "S: push from stack",
        "U: undo",
        "R: redo",
        "Cn: complete nth pile suit",
        "Mxyz: move card of xth pile at index y to zth pile (y in base 36)",
        "mxy: move the matching run from pile x to pile y",
        "c: complete every finished suit",
        "s: push from stack, z: undo, y: redo, r: restart",
    )
)

SIMPLE_COMMANDS = {
    "H": Help,
    "N": NewGame,
    "Q": Quit,
    "S": Deal,
    "U": Undo,
    "R": Redo,
    "z": Undo,
    "y": Redo,
    "r": Restart,
    "s": Deal,
    "c": SmartComplete,
}

ORDINALS = ("1st", "2nd", "3rd", "4th")


class ParseError(ValueError):
    pass


def _pile(text, pos):
    if pos >= len(text):
        raise ParseError("Data not provided")
    ch = text[pos]
    if not ("0" <= ch <= "9"):
        raise ParseError(f"{ORDINALS[pos]} char should be a digit!")
    return int(ch)


def _base36(text, pos):
    if pos >= len(text):
        raise ParseError("Data not provided")
    ch = text[pos]
    if "0" <= ch <= "9":
        return int(ch)
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    raise ParseError(f"{ORDINALS[pos]} char is a base (base 36; lowercase)")


def parse_line(line: str):
    text = line.rstrip("\r\n")
    if not text:
        raise ParseError("Empty input; try H for help")
    first = text[0]
    if first in SIMPLE_COMMANDS:
        return SIMPLE_COMMANDS[first]()
    if first == "C":
        if len(text) < 2:
            raise ParseError("Column not provided")
        if not ("0" <= text[1] <= "9"):
            raise ParseError("second char should be a digit!")
        return CompleteSuit(pile=int(text[1]))
    if first == "M":
        source = _pile(text, 1)
        index = _base36(text, 2)
        target = _pile(text, 3)
        return Move(source=source, index=index, target=target)
    if first == "m":
        source = _pile(text, 1)
        target = _pile(text, 2)
        return SmartMove(source=source, target=target)
    raise ParseError("Invalid char; try H for help")
