import unittest

from spider.Cards import Card, Rank, Suit
from spider.Core import Core, GameConfig
from spider.History import CompleteSuitAction, MoveAction
from spider.Interface import Interface
from spider.Tableau import Tableau

S, H, D, C = Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS


class RecordingInterface(Interface):
    def __init__(self):
        super().__init__()
        self.events = []
        self.won = False

    def onEvent(self, action):
        self.events.append(action)

    def onWin(self):
        self.won = True


def card(rank, suit):
    return Card(Rank(rank), suit)


def loaded_core(*piles, hidden=(), completed=0):
    piles = list(piles) + [[] for _ in range(10 - len(piles))]
    hidden = list(hidden) + [0] * (10 - len(hidden))
    core = Core()
    ui = RecordingInterface()
    core.registerInterface(ui)
    core.loadTableau(Tableau.fromPiles(piles, hidden, completed=completed))
    return core, ui


class CompleteSuitTestCase(unittest.TestCase):
    def test_forced_run_on_fresh_deal_completes_and_undoes(self):
        core = Core(GameConfig(suits=4, seed=11))
        core.startGame()
        t = core.tableau
        t.piles[6].extend(Card.fullSuit(S))
        size = t.pileSize(6)

        outcome = core.askCompleteSuit(6)
        self.assertTrue(outcome.applied)
        self.assertEqual(1, t.completed)
        self.assertEqual(size - 13, t.pileSize(6))

        core.askUndo()
        self.assertEqual(size, t.pileSize(6))
        self.assertEqual(tuple(Card.fullSuit(S)), t.pile(6)[-13:])
        self.assertEqual(0, t.completed)

    def test_out_of_order_suit_is_rejected(self):
        ascending = list(reversed(Card.fullSuit(S)))
        core, _ = loaded_core(ascending, Card.fullSuit(S)[:12])
        self.assertEqual("Not in sequence", core.askCompleteSuit(0).message)
        self.assertEqual("Not enough cards to complete a suit", core.askCompleteSuit(1).message)
        self.assertEqual("No such pile", core.askCompleteSuit(12).message)
        self.assertEqual(0, core.tableau.completed)
        self.assertEqual(0, core.history.length)

    def test_hidden_run_cannot_be_completed(self):
        core, _ = loaded_core(Card.fullSuit(D), hidden=[1])
        self.assertFalse(core.askCompleteSuit(0).applied)

    def test_last_completion_wins_and_play_continues(self):
        core, ui = loaded_core([card(5, H)], Card.fullSuit(C), completed=7)
        outcome = core.askCompleteSuit(1)
        self.assertTrue(outcome.won)
        self.assertEqual("You win!", outcome.message)
        self.assertTrue(ui.won)
        self.assertTrue(core.isWon())
        self.assertTrue(core.askSmartMove(0, 1).applied)
        self.assertTrue(core.askUndo().applied)

    def test_redo_of_last_completion_reports_win(self):
        core, _ = loaded_core(Card.fullSuit(C), completed=7)
        core.askCompleteSuit(0)
        core.askUndo()
        self.assertFalse(core.isWon())
        self.assertTrue(core.askRedo().won)

    def test_smart_complete_clears_every_finished_pile(self):
        core, ui = loaded_core(
            [],
            [],
            [card(9, S)] + Card.fullSuit(H),
            [card(4, D)],
            [],
            Card.fullSuit(S),
        )
        outcome = core.askSmartComplete()
        self.assertTrue(outcome.applied)
        self.assertEqual(26, outcome.moved)
        self.assertEqual(2, core.tableau.completed)
        self.assertEqual(
            [CompleteSuitAction(2, H, False), CompleteSuitAction(5, S, False)],
            list(core.history.actions()),
        )
        self.assertEqual(2, len(ui.events))

    def test_smart_complete_reports_nothing_to_do(self):
        core, _ = loaded_core([card(4, D)])
        outcome = core.askSmartComplete()
        self.assertFalse(outcome.applied)
        self.assertEqual("No suit to complete", outcome.message)


class SmartMoveTestCase(unittest.TestCase):
    def test_empty_source_is_reported(self):
        core, _ = loaded_core([], [card(4, D)])
        self.assertEqual("No cards to move", core.askSmartMove(0, 1).message)

    def test_single_card_goes_to_empty_pile(self):
        core, _ = loaded_core([card(8, H)])
        outcome = core.askSmartMove(0, 1)
        self.assertTrue(outcome.applied)
        self.assertEqual(1, outcome.moved)
        self.assertEqual(0, core.tableau.pileSize(0))
        self.assertEqual((card(8, H),), core.tableau.pile(1))
        self.assertEqual(MoveAction(0, 0, 1, 0, False), core.history.actions()[0])

    def test_unrelated_top_card_goes_to_empty_pile_alone(self):
        core, _ = loaded_core([card(5, S), card(9, H)])
        outcome = core.askSmartMove(0, 3)
        self.assertTrue(outcome.applied)
        self.assertEqual(1, outcome.moved)
        self.assertEqual((card(5, S),), core.tableau.pile(0))
        # the log keeps the real position of the moved card
        self.assertEqual(1, core.history.actions()[0].sourceIndex)

    def test_top_card_over_hidden_card_goes_to_empty_pile(self):
        core, _ = loaded_core([card(10, S), card(9, S)], hidden=[1])
        outcome = core.askSmartMove(0, 1)
        self.assertTrue(outcome.applied)
        self.assertEqual(0, core.tableau.hiddenCount(0))

    def test_run_to_empty_pile_is_ambiguous(self):
        core, _ = loaded_core([card(6, S), card(5, S)])
        before = core.tableau.fingerprint()
        outcome = core.askSmartMove(0, 1)
        self.assertFalse(outcome.applied)
        self.assertEqual("Multiple moves possible; use Mxyz notation", outcome.message)
        self.assertEqual(before, core.tableau.fingerprint())

    def test_nothing_moves_onto_an_ace(self):
        core, _ = loaded_core([card(2, S)], [card(1, H)])
        self.assertEqual("can't move onto ace", core.askSmartMove(0, 1).message)

    def test_single_unsequenced_six_moves_onto_seven(self):
        core, _ = loaded_core([], [], [card(13, D), card(6, C)], [], [], [card(7, H)])
        outcome = core.askSmartMove(2, 5)
        self.assertTrue(outcome.applied)
        self.assertEqual(1, outcome.moved)
        self.assertEqual((card(13, D),), core.tableau.pile(2))
        self.assertEqual((card(7, H), card(6, C)), core.tableau.pile(5))

    def test_whole_run_below_matching_rank_moves(self):
        core, _ = loaded_core(
            [card(2, H), card(6, S), card(5, S), card(4, S)],
            [card(7, D)],
        )
        outcome = core.askSmartMove(0, 1)
        self.assertTrue(outcome.applied)
        self.assertEqual(3, outcome.moved)
        self.assertEqual(MoveAction(0, 1, 1, 1, False), core.history.actions()[0])

    def test_matching_rank_that_is_not_a_run_start(self):
        core, _ = loaded_core([card(6, S), card(3, H)], [card(7, H)])
        before = core.tableau.fingerprint()
        outcome = core.askSmartMove(0, 1)
        self.assertFalse(outcome.applied)
        self.assertEqual("No valid move found", outcome.message)
        self.assertEqual(before, core.tableau.fingerprint())

    def test_missing_rank_finds_no_move(self):
        core, _ = loaded_core([card(9, S)], [card(7, H)])
        self.assertEqual("No valid move found", core.askSmartMove(0, 1).message)

    def test_hidden_cards_are_not_searched(self):
        core, _ = loaded_core([card(6, S), card(2, D)], [card(7, H)], hidden=[1])
        self.assertEqual("No valid move found", core.askSmartMove(0, 1).message)

    def test_smart_move_reveals_card(self):
        core, _ = loaded_core([card(1, C), card(6, S)], [card(7, H)], hidden=[1])
        self.assertTrue(core.askSmartMove(0, 1).applied)
        self.assertEqual(0, core.tableau.hiddenCount(0))
        self.assertTrue(core.history.actions()[0].discovered)


if __name__ == "__main__":
    unittest.main()
