from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, Iterable

from spider.Commands import Dispatcher
from spider.Core import Core
from spider.Interface import Interface
from text_ui import board_image, settings_store
from text_ui.adapter import CoreAdapter
from text_ui.card_face import CardFaceRenderer
from text_ui.parser import HELP_TEXT, ParseError, parse_line
from text_ui.renderer import render_board
from text_ui.ui_config import CARD_STYLE_ORDER, SUIT_COUNT_ORDER

logger = logging.getLogger(__name__)

SUITS_PROMPT = "Select number of suits (1/2/4): "


class CommandLineInterface(Interface):

    def __init__(self, face: CardFaceRenderer, write: Callable[[str], None] = print):
        super().__init__()
        self.face = face
        self.write = write
        self.dirty = True

    def printAll(self):
        self.write(render_board(CoreAdapter.snapshot(self.core), self.face))
        self.dirty = False

    def onStart(self):
        self.write("Game started!")
        self.dirty = True

    def onEvent(self, action):
        logger.debug("applied: %s", CoreAdapter.describe(action))
        super().onEvent(action)

    def onUndoEvent(self, action):
        logger.debug("undone: %s", CoreAdapter.describe(action))
        super().onUndoEvent(action)

    def notifyRedraw(self):
        self.dirty = True


class TerminalSession:
    def __init__(self, core: Core, face: CardFaceRenderer, write: Callable[[str], None] = print):
        self.core = core
        self.write = write
        self.ui = CommandLineInterface(face, write)
        core.registerInterface(self.ui)
        self.dispatcher = Dispatcher(core, HELP_TEXT)

    def run(self, lines: Iterable[str]) -> bool:
        """Play until Quit or the input runs out. Returns True on Quit."""
        for line in lines:
            try:
                command = parse_line(line)
            except ParseError as e:
                self.write(str(e))
                continue
            outcome = self.dispatcher.dispatch(command)
            if outcome.message:
                self.write(outcome.message)
            if outcome.quit:
                return True
            if self.ui.dirty:
                self.write("")
                self.ui.printAll()
        return False


def read_lines(prompt="> "):
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def ask_suits(default: int, read: Callable[[str], str] = input) -> int:
    while True:
        try:
            answer = read(SUITS_PROMPT).strip()
        except EOFError:
            return default
        if not answer:
            return default
        try:
            suits = int(answer)
        except ValueError:
            suits = 0
        if suits in SUIT_COUNT_ORDER:
            return suits
        print("Invalid number of suits")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Text-driven Spider Solitaire.")
    parser.add_argument("--suits", type=int, choices=SUIT_COUNT_ORDER, help="Suits in play; asked for when omitted.")
    parser.add_argument("--seed", type=int, default=None, help="Shuffle seed for a reproducible deal.")
    parser.add_argument("--style", choices=CARD_STYLE_ORDER, default=None, help="Card faces as text or Unicode glyphs.")
    parser.add_argument("--snapshot", type=str, default="", help="Write a PNG of the final board to this path.")
    parser.add_argument("--settings", type=str, default="", help="Settings file (INI).")
    parser.add_argument("--verbose", action="store_true", help="Log engine actions.")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    settings_path = Path(args.settings).expanduser() if args.settings else None
    settings = settings_store.load_settings(settings_path)
    if args.suits is None:
        settings["suit_count"] = ask_suits(int(settings["suit_count"]))
    else:
        settings["suit_count"] = args.suits
    if args.style is not None:
        settings["card_style"] = args.style
    settings_store.save_settings(settings, settings_path)

    config = settings_store.build_config(settings)
    if args.seed is not None:
        config.seed = args.seed

    core = Core(config)
    session = TerminalSession(core, CardFaceRenderer(settings["card_style"]))
    core.startGame()
    logger.info("seed %s", core.seed)
    session.ui.printAll()
    if not session.run(read_lines()):
        print("Bye!")

    if args.snapshot:
        out_path = board_image.save_board(CoreAdapter.snapshot(core), args.snapshot)
        print(f"Saved board to {out_path}")


if __name__ == "__main__":
    main()
