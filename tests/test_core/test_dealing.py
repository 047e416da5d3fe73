"""
Tests for dealing players and community cards, and for pot settlement.
"""

import pytest
from holdem_trainer.core.card import make_deck
from holdem_trainer.core.dealing import (
    deal_players, deal_flop_from_deck, deal_turn_from_deck, deal_river_from_deck,
    rotate_to_small_blind_first, collect_bets, reset_bets, total_pot, settle_bets_into_pot,
)
from holdem_trainer.core.errors import DeckExhausted, InvalidSeatCount
from holdem_trainer.core.rules import Role, MIN_PLAYERS, MAX_PLAYERS


class TestDealPlayers:
    """Tests for dealing hole cards and posting blinds."""

    @pytest.mark.parametrize("n", range(MIN_PLAYERS, MAX_PLAYERS + 1))
    def test_every_seat_gets_two_distinct_cards(self, deck, n):
        players, remaining = deal_players(n, deck, 2)

        assert len(players) == n
        dealt = [c for p in players for c in p.cards]
        assert len(dealt) == 2 * n
        assert len(set(dealt)) == 2 * n
        assert len(remaining) == 52 - 2 * n
        assert set(dealt).isdisjoint(remaining)

    def test_cards_come_from_deck_tail(self, deck):
        players, remaining = deal_players(3, deck, 2, btn_index=2)
        by_seat = {p.id: p for p in players}

        # Seat 0 takes the last two cards, seat 1 the next two, ...
        assert by_seat[0].cards == (deck[-1], deck[-2])
        assert by_seat[1].cards == (deck[-3], deck[-4])
        assert by_seat[2].cards == (deck[-5], deck[-6])
        assert remaining == deck[:-6]

    def test_input_deck_untouched(self, deck):
        before = list(deck)
        deal_players(6, deck, 2)
        assert deck == before

    def test_blinds_posted(self, deck):
        players, _ = deal_players(6, deck, 10, btn_index=0)
        bets = {p.role: p.bet for p in players if p.role != Role.NONE}

        assert bets == {Role.DEALER: 0, Role.SB: 5, Role.BB: 10}
        assert all(p.bet == 0 for p in players if p.role == Role.NONE)

    def test_small_blind_seated_first(self, deck):
        for btn in range(6):
            players, _ = deal_players(6, deck, 2, btn_index=btn)
            assert players[0].role == Role.SB
            assert players[1].role == Role.BB
            # Seat order preserved after the rotation
            ids = [p.id for p in players]
            assert ids == [(ids[0] + i) % 6 for i in range(6)]

    def test_hero_seat(self, deck):
        players, _ = deal_players(6, deck, 2, hero_seat=3, btn_index=1)
        heroes = [p for p in players if p.is_hero]

        assert len(heroes) == 1
        assert heroes[0].id == 3
        assert heroes[0].name == "Hero"
        assert {p.name for p in players if not p.is_hero} == {
            "Player 1", "Player 2", "Player 3", "Player 5", "Player 6",
        }

    def test_heads_up_posts_both_blinds(self, deck):
        players, _ = deal_players(2, deck, 2, btn_index=1)
        assert [(p.id, p.role, p.bet) for p in players] == [(1, Role.SB, 1), (0, Role.BB, 2)]

    @pytest.mark.parametrize("n", [0, 1, MAX_PLAYERS + 1])
    def test_invalid_seat_count(self, deck, n):
        with pytest.raises(InvalidSeatCount):
            deal_players(n, deck, 2)

    def test_short_deck(self):
        with pytest.raises(DeckExhausted):
            deal_players(6, make_deck()[:11], 2)


class TestDealCommunity:
    """Tests for dealing the flop, turn and river."""

    def test_streets_pop_from_tail_in_order(self, deck):
        flop, d1 = deal_flop_from_deck(deck)
        assert flop == (deck[-1], deck[-2], deck[-3])

        turn, d2 = deal_turn_from_deck(d1)
        assert turn == deck[-4]

        river, d3 = deal_river_from_deck(d2)
        assert river == deck[-5]

        assert len(d3) == len(deck) - 5
        assert d3 == deck[:-5]

    def test_flop_needs_three_cards(self):
        with pytest.raises(DeckExhausted):
            deal_flop_from_deck(make_deck()[:2])

    def test_turn_and_river_need_a_card(self):
        with pytest.raises(DeckExhausted):
            deal_turn_from_deck([])
        with pytest.raises(DeckExhausted):
            deal_river_from_deck([])


class TestSettlement:
    """Tests for moving bets into the pot."""

    def test_collect_and_reset(self, deck):
        players, _ = deal_players(6, deck, 2)
        players = [p.with_bet(3) for p in players]

        assert collect_bets(players) == 18
        cleared = reset_bets(players)
        assert collect_bets(cleared) == 0
        assert collect_bets(players) == 18  # originals untouched

    def test_total_pot(self, deck):
        players, _ = deal_players(6, deck, 2)
        players = [p.with_bet(1) for p in players]
        assert total_pot(5, players) == 11

    def test_settle_bets_into_pot(self, deck):
        players, _ = deal_players(6, deck, 2)
        players = [p.with_bet(2) for p in players]

        pot, cleared = settle_bets_into_pot(10, players)

        assert pot == 10 + 6 * 2
        assert all(p.bet == 0 for p in cleared)
        assert [p.id for p in cleared] == [p.id for p in players]

    def test_settle_preserves_chip_total(self, deck):
        players, _ = deal_players(6, deck, 2)
        before = total_pot(0, players)
        pot, cleared = settle_bets_into_pot(0, players)
        assert pot == before == 3
        assert total_pot(pot, cleared) == before

    def test_settle_nothing(self):
        assert settle_bets_into_pot(7, []) == (7, [])

    def test_rotate_without_small_blind(self, deck):
        players, _ = deal_players(6, deck, 2)
        no_blinds = [p for p in players if p.role != Role.SB]
        assert rotate_to_small_blind_first(no_blinds) == no_blinds
