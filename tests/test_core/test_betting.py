"""
Tests for betting arithmetic.
"""

import pytest
from holdem_trainer.core.betting import (
    table_current_bet, hero_from_players, can_hero_check, bet_for_action,
)
from holdem_trainer.core.rules import Action


@pytest.fixture
def table(make_player):
    """Hero on the button facing the blinds (1/2)."""
    return [
        make_player(1, "2c 3d", bet=1),
        make_player(2, "4c 5d", bet=2),
        make_player(0, "As Kd", is_hero=True),
    ]


class TestTableBet:

    def test_current_bet_is_max(self, table):
        assert table_current_bet(table) == 2

    def test_empty_table(self):
        assert table_current_bet([]) == 0

    def test_hero_lookup(self, table):
        assert hero_from_players(table).id == 0
        assert hero_from_players(table[:2]) is None


class TestCanCheck:

    def test_hero_behind_cannot_check(self, table):
        assert not can_hero_check(table, hero_from_players(table))

    def test_hero_matching_can_check(self, table):
        table[2] = table[2].with_bet(2)
        assert can_hero_check(table, table[2])

    def test_no_hero(self, table):
        assert not can_hero_check(table, None)


class TestBetForAction:
    """Tests for the hero's bet after each action."""

    def test_check_keeps_bet(self, table):
        assert bet_for_action(Action.CHECK, table, 2, table[2]) == 0

    def test_call_matches_table(self, table):
        assert bet_for_action(Action.CALL, table, 2, table[2]) == 2

    def test_raise_is_min_raise(self, table):
        assert bet_for_action(Action.RAISE, table, 2, table[2]) == 4

    def test_opening_raise_postflop(self, make_player):
        players = [make_player(0, "As Kd", is_hero=True), make_player(1, "2c 3d")]
        assert bet_for_action(Action.RAISE, players, 2, players[0]) == 2

    def test_fold_keeps_bet(self, table):
        big_blind_hero = table[1]
        assert bet_for_action(Action.FOLD, table, 2, big_blind_hero) == 2

    def test_missing_hero_counts_as_zero(self, table):
        assert bet_for_action(Action.CHECK, table, 2, None) == 0
