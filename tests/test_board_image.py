import tempfile
import unittest
from pathlib import Path

from PIL import Image

from spider.Core import Core, GameConfig
from text_ui import board_image
from text_ui.adapter import CoreAdapter
from text_ui.ui_config import CARD_HEIGHT, HIDDEN_STEP, VISIBLE_STEP


class BoardImageTestCase(unittest.TestCase):
    def make_view(self):
        core = Core(GameConfig(suits=2, seed=4))
        core.startGame()
        core.askDeal()
        return CoreAdapter.snapshot(core)

    def test_pile_height_counts_hidden_and_visible_steps(self):
        view = self.make_view()
        # pile 9: five face-down cards, then the dealt top two face up
        self.assertEqual(5 * HIDDEN_STEP + VISIBLE_STEP + CARD_HEIGHT, board_image.pile_height(view.piles[9]))

    def test_save_board_writes_png_of_expected_size(self):
        view = self.make_view()
        with tempfile.TemporaryDirectory() as td:
            out_path = board_image.save_board(view, Path(td) / "shots" / "board.png")
            with Image.open(out_path) as img:
                self.assertEqual("PNG", img.format)
                self.assertEqual(board_image.image_size(view), img.size)


if __name__ == "__main__":
    unittest.main()
