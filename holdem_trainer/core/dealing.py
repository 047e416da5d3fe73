"""
Dealing and pot settlement.

All functions here are pure: they take a deck or a list of players and
return new ones, leaving their inputs untouched.
"""

import logging
from typing import List, Sequence, Tuple

from holdem_trainer.core.card import Card, draw
from holdem_trainer.core.errors import DeckExhausted, InvalidSeatCount
from holdem_trainer.core.player import Player
from holdem_trainer.core.positions import assign_roles_and_positions
from holdem_trainer.core.rules import (
    Role,
    MIN_PLAYERS, MAX_PLAYERS,
    HOLE_CARDS, FLOP_CARDS, TURN_CARDS, RIVER_CARDS,
    small_blind_from_big_blind,
)


logger = logging.getLogger(__name__)


def validate_seat_count(num_players: int) -> None:
    if not MIN_PLAYERS <= num_players <= MAX_PLAYERS:
        raise InvalidSeatCount(num_players, MIN_PLAYERS, MAX_PLAYERS)


def rotate_to_small_blind_first(players: Sequence[Player]) -> List[Player]:
    """Rotate the seat list so the small blind comes first, order otherwise kept."""
    for index, player in enumerate(players):
        if player.role == Role.SB:
            return list(players[index:]) + list(players[:index])
    return list(players)


def deal_players(
    num_players: int,
    deck: Sequence[Card],
    big_blind: int,
    hero_seat: int = 0,
    btn_index: int = 0,
) -> Tuple[List[Player], List[Card]]:
    """
    Deal hole cards, assign roles and post the blinds.

    Each seat in turn takes two cards from the deck tail. The small blind
    posts ``small_blind_from_big_blind(big_blind)``, the big blind posts
    ``big_blind``, everyone else starts at 0.

    Args:
        num_players: Number of seats
        deck: Deck to deal from (not modified)
        big_blind: Big blind amount
        hero_seat: Seat index played by the user
        btn_index: Seat holding the dealer button

    Returns:
        Tuple of (players with the small blind first, remaining deck)

    Raises:
        InvalidSeatCount: If num_players is out of range.
        DeckExhausted: If fewer than 2 * num_players cards remain.
    """
    validate_seat_count(num_players)
    needed = HOLE_CARDS * num_players
    if needed > len(deck):
        raise DeckExhausted(needed, len(deck), "players")

    small_blind = small_blind_from_big_blind(big_blind)
    blinds = {Role.SB: small_blind, Role.BB: big_blind}

    remaining = list(deck)
    players = []
    for assignment in assign_roles_and_positions(num_players, btn_index):
        seat = assignment.seat
        hole, remaining = draw(remaining, HOLE_CARDS, "players")
        players.append(Player(
            id=seat,
            name="Hero" if seat == hero_seat else f"Player {seat + 1}",
            cards=(hole[0], hole[1]),
            role=assignment.role,
            bet=blinds.get(assignment.role, 0),
            is_hero=seat == hero_seat,
            position_label=assignment.position_label,
        ))

    logger.debug(f"Blinds posted: SB={small_blind} BB={big_blind} button={btn_index}")
    return rotate_to_small_blind_first(players), remaining


def deal_flop_from_deck(deck: Sequence[Card]) -> Tuple[Tuple[Card, Card, Card], List[Card]]:
    """Deal the three flop cards from the deck tail (no burn card)."""
    cards, remaining = draw(deck, FLOP_CARDS, "flop")
    return (cards[0], cards[1], cards[2]), remaining


def deal_turn_from_deck(deck: Sequence[Card]) -> Tuple[Card, List[Card]]:
    cards, remaining = draw(deck, TURN_CARDS, "turn")
    return cards[0], remaining


def deal_river_from_deck(deck: Sequence[Card]) -> Tuple[Card, List[Card]]:
    cards, remaining = draw(deck, RIVER_CARDS, "river")
    return cards[0], remaining


def collect_bets(players: Sequence[Player]) -> int:
    """Sum of all current-street bets."""
    return sum(p.bet for p in players)


def reset_bets(players: Sequence[Player]) -> List[Player]:
    return [p.with_bet(0) for p in players]


def total_pot(pot: int, players: Sequence[Player]) -> int:
    """Settled pot plus every bet still in front of the players."""
    return pot + collect_bets(players)


def settle_bets_into_pot(pot: int, players: Sequence[Player]) -> Tuple[int, List[Player]]:
    """
    Move every street bet into the pot.

    Returns:
        Tuple of (new pot, players with all bets cleared)
    """
    collected = collect_bets(players)
    if collected:
        logger.debug(f"Settled {collected} into pot {pot} -> {pot + collected}")
    return pot + collected, reset_bets(players)
