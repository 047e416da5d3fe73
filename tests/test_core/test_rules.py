"""
Tests for blinds, minimum raise and the street state machine.
"""

import itertools

import pytest
from holdem_trainer.core.rules import (
    Street, StreetSettings, STREET_ORDER,
    small_blind_from_big_blind, min_raise, next_street,
)


class TestBlinds:
    """Tests for small blind derivation."""

    @pytest.mark.parametrize("big_blind,expected", [
        (1, 1),   # floor would be 0, clamped to the minimum
        (2, 1),
        (3, 1),
        (10, 5),
        (25, 12),
    ])
    def test_small_blind_from_big_blind(self, big_blind, expected):
        assert small_blind_from_big_blind(big_blind) == expected


class TestMinRaise:
    """Tests for the minimum raise rule."""

    def test_opening_bet_is_big_blind(self):
        assert min_raise(0, 2) == 2
        assert min_raise(0, 10) == 10

    def test_raise_doubles_the_bet(self):
        assert min_raise(2, 2) == 4
        assert min_raise(3, 2) == 6
        assert min_raise(10, 2) == 20

    def test_raise_adds_at_least_a_big_blind(self):
        assert min_raise(1, 2) == 3


class TestNextStreet:
    """Tests for the street state machine."""

    def test_all_streets_enabled(self):
        settings = StreetSettings(show_flop=True, show_turn=True, show_river=True)
        assert next_street(Street.PREFLOP, settings) == Street.FLOP
        assert next_street(Street.FLOP, settings) == Street.TURN
        assert next_street(Street.TURN, settings) == Street.RIVER
        assert next_street(Street.RIVER, settings) == Street.COMPLETE

    def test_preflop_only(self):
        settings = StreetSettings(show_flop=False, show_turn=True, show_river=True)
        assert next_street(Street.PREFLOP, settings) == Street.COMPLETE

    def test_flop_without_turn(self):
        settings = StreetSettings(show_flop=True, show_turn=False, show_river=True)
        assert next_street(Street.PREFLOP, settings) == Street.FLOP
        assert next_street(Street.FLOP, settings) == Street.COMPLETE

    def test_turn_without_river(self):
        settings = StreetSettings(show_flop=True, show_turn=True, show_river=False)
        assert next_street(Street.TURN, settings) == Street.COMPLETE

    def test_total_and_monotonic(self):
        """Every street/setting pair moves forward or stays complete."""
        for current, flags in itertools.product(Street, itertools.product([True, False], repeat=3)):
            result = next_street(current, StreetSettings(*flags))
            assert STREET_ORDER.index(result) > STREET_ORDER.index(current) or (
                current == result == Street.COMPLETE
            )

    @pytest.mark.parametrize("flags", list(itertools.product([True, False], repeat=3)))
    def test_complete_is_terminal(self, flags):
        assert next_street(Street.COMPLETE, StreetSettings(*flags)) == Street.COMPLETE

    def test_default_settings_are_preflop_only(self):
        assert next_street(Street.PREFLOP, StreetSettings()) == Street.COMPLETE
