"""
Tests for PokerStars hand history export.
"""

import pytest
from holdem_trainer.core.card import parse_cards
from holdem_trainer.core.game import Board
from holdem_trainer.core.rules import Action, Street
from holdem_trainer.trainer.history import HandAction, HandHistory, HandResult, SeatRecord, Session
from holdem_trainer.trainer.pokerstars import NO_HANDS_MESSAGE, export_session_to_pokerstars, format_hand


def seat(name, position, role, cards, is_hero=False):
    c1, c2 = parse_cards(cards)
    return SeatRecord(name=name, position=position, role=role, cards=(c1, c2), is_hero=is_hero)


@pytest.fixture
def seats():
    return [
        seat("Player 2", "SB", "SB", "7c 2d"),
        seat("Player 3", "BB", "BB", "9h 9d"),
        seat("Hero", "Dealer", "Dealer", "Ah Kh", is_hero=True),
    ]


@pytest.fixture
def folded_hand(seats):
    return HandHistory(
        hand_id="hand_1",
        timestamp=0,
        players=seats,
        small_blind=1,
        big_blind=2,
        actions=[HandAction("Hero", Action.FOLD, 0, Street.PREFLOP, 0)],
        pot=3,
        result=HandResult.FOLDED,
    )


@pytest.fixture
def showdown_hand(seats):
    return HandHistory(
        hand_id="hand_2",
        timestamp=0,
        players=seats,
        small_blind=1,
        big_blind=2,
        board=Board(
            flop=tuple(parse_cards("Qh Jh 2s")),
            turn=parse_cards("Th")[0],
            river=parse_cards("3c")[0],
        ),
        actions=[
            HandAction("Hero", Action.RAISE, 4, Street.PREFLOP, 0),
            HandAction("Hero", Action.RAISE, 2, Street.FLOP, 0),
            HandAction("Hero", Action.CHECK, 0, Street.TURN, 0),
            HandAction("Hero", Action.CALL, 6, Street.RIVER, 0),
        ],
        pot=17,
        result=HandResult.COMPLETED,
        hero_won=True,
    )


class TestFormatHand:
    """Tests for a single formatted hand."""

    def test_header(self, folded_hand):
        lines = format_hand(folded_hand).splitlines()

        assert lines[0] == (
            "PokerStars Hand #hand_1: Hold'em No Limit ($1/$2) - 1970-01-01 00:00:00 ET"
        )
        assert lines[1] == "Table 'Training Table' 6-max Seat #1 is the button"
        assert lines[2:5] == [
            "Seat 1: Player 2 ($1000 in chips)",
            "Seat 2: Player 3 ($1000 in chips)",
            "Seat 3: Hero ($1000 in chips)",
        ]

    def test_blinds_and_hole_cards(self, folded_hand):
        text = format_hand(folded_hand)

        assert "Player 2: posts small blind $1\n" in text
        assert "Player 3: posts big blind $2\n" in text
        assert "*** HOLE CARDS ***\nDealt to Hero [Ah Kh]\n" in text

    def test_folded_hand(self, folded_hand):
        text = format_hand(folded_hand)

        assert "Hero: folds" in text
        assert "*** FLOP ***" not in text
        assert "*** SHOW DOWN ***" not in text
        assert text.endswith("*** SUMMARY ***\nTotal pot $3\nHero folded\n")

    def test_streets_show_board_so_far(self, showdown_hand):
        text = format_hand(showdown_hand)

        assert "*** FLOP *** [Qh Jh 2s]" in text
        assert "*** TURN *** [Qh Jh 2s Th]" in text
        assert "*** RIVER *** [Qh Jh 2s Th 3c]" in text

    def test_action_wording(self, showdown_hand):
        text = format_hand(showdown_hand)

        assert "Hero: raises $4" in text
        assert "Hero: bets $2" in text
        assert "Hero: checks" in text
        assert "Hero: calls $6" in text

    def test_showdown(self, showdown_hand):
        text = format_hand(showdown_hand)

        assert "*** SHOW DOWN ***\nBoard [Qh Jh 2s Th 3c]\n" in text
        assert "Player 2: shows [7c 2d]" in text
        assert "Player 3: shows [9h 9d]" in text
        assert "Hero: shows [Ah Kh]" in text
        assert text.endswith(
            "*** SUMMARY ***\nTotal pot $17\nBoard [Qh Jh 2s Th 3c]\nHero wins the pot\n"
        )

    def test_hero_loses(self, showdown_hand):
        showdown_hand.hero_won = False
        assert format_hand(showdown_hand).endswith("Hero loses the hand\n")

    def test_completed_before_river_has_no_showdown(self, showdown_hand):
        showdown_hand.board = Board(flop=showdown_hand.board.flop)
        showdown_hand.hero_won = None
        text = format_hand(showdown_hand)

        assert "*** FLOP ***" in text
        assert "*** TURN ***" not in text
        assert "*** SHOW DOWN ***" not in text
        assert text.endswith("Total pot $17\n")


class TestExportSession:

    def test_no_session(self):
        assert export_session_to_pokerstars(None) == NO_HANDS_MESSAGE

    def test_empty_session(self):
        assert export_session_to_pokerstars(Session.new()) == NO_HANDS_MESSAGE

    def test_hands_separated(self, folded_hand, showdown_hand):
        session = Session(id="session_0", start_time=0, hands=[folded_hand, showdown_hand])
        text = export_session_to_pokerstars(session)

        assert text.count("PokerStars Hand #") == 2
        assert "Hero folded\n\n\nPokerStars Hand #hand_2" in text
        assert text.endswith("Hero wins the pot\n\n\n")
