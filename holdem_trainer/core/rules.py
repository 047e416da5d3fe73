"""
Texas Hold'em training rules and constants.

The trainer plays one hero decision per street against a virtual table,
so the rules here are deliberately small:

1. Blinds: the small blind is half the big blind, rounded down, but never
   below MIN_SMALL_BLIND.

2. Minimum raise: an opening bet is one big blind; any raise must at least
   double the current bet.

3. Streets: preflop -> flop -> turn -> river -> complete. Settings can
   switch off any later street, which ends the hand at that point.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Street(Enum):
    """Betting rounds of a hand plus the terminal state."""
    PREFLOP = "preflop"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"
    COMPLETE = "complete"


class Action(Enum):
    """Hero actions the trainer accepts."""
    CHECK = "check"
    CALL = "call"
    FOLD = "fold"
    RAISE = "raise"


class Role(Enum):
    """Blind/button role of a seat relative to the button."""
    DEALER = "Dealer"
    SB = "SB"
    BB = "BB"
    NONE = ""


@dataclass(frozen=True)
class StreetSettings:
    """Which community streets are played before the hand completes."""
    show_flop: bool = False
    show_turn: bool = True
    show_river: bool = True


STREET_ORDER: Tuple[Street, ...] = (
    Street.PREFLOP,
    Street.FLOP,
    Street.TURN,
    Street.RIVER,
    Street.COMPLETE,
)

# Table configuration
MIN_PLAYERS = 2
MAX_PLAYERS = 9
DEFAULT_NUM_PLAYERS = 6
MIN_BIG_BLIND = 1
DEFAULT_BIG_BLIND = 2

# Blinds
SMALL_BLIND_FACTOR = 0.5
MIN_SMALL_BLIND = 1

# Cards per street
HOLE_CARDS = 2
FLOP_CARDS = 3
TURN_CARDS = 1
RIVER_CARDS = 1


def small_blind_from_big_blind(big_blind: int) -> int:
    """Small blind for a big blind, floored and clamped to MIN_SMALL_BLIND."""
    return max(MIN_SMALL_BLIND, math.floor(big_blind * SMALL_BLIND_FACTOR))


def min_raise(current_bet: int, big_blind: int) -> int:
    """
    Calculate the minimum total bet for a raise.

    With nothing bet yet the opening bet is one big blind. Otherwise the
    raise adds at least the current bet (or a big blind, whichever is
    larger), so it always doubles the bet.

    Args:
        current_bet: Highest bet on the table this street
        big_blind: Big blind amount

    Returns:
        Minimum total bet amount
    """
    if current_bet == 0:
        return big_blind
    return current_bet + max(current_bet, big_blind)


def next_street(current: Street, settings: StreetSettings) -> Street:
    """
    Street that follows ``current`` under ``settings``.

    Defined for every street and setting combination; COMPLETE is terminal.
    """
    if current == Street.PREFLOP:
        return Street.FLOP if settings.show_flop else Street.COMPLETE
    if current == Street.FLOP:
        return Street.TURN if settings.show_turn else Street.COMPLETE
    if current == Street.TURN:
        return Street.RIVER if settings.show_river else Street.COMPLETE
    return Street.COMPLETE
