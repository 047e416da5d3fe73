"""
Chen formula preflop scoring.

The Chen formula rates a starting hand from the value of its higher card,
pairing, the gap between the two ranks, and suitedness. The trainer
compares the hero's preflop action against the recommendation derived
from that score.
"""

import math
from enum import Enum

from holdem_trainer.core.card import Card, Rank
from holdem_trainer.core.rules import Action


class Recommendation(Enum):
    """Preflop action buckets."""
    RAISE = "raise"
    CALL_CHECK = "call/check"
    FOLD = "fold"


CHEN_RANK_VALUES = {
    Rank.ACE: 10,
    Rank.KING: 8,
    Rank.QUEEN: 7,
    Rank.JACK: 6,
    Rank.TEN: 5,
    Rank.NINE: 4.5,
    Rank.EIGHT: 4,
    Rank.SEVEN: 3.5,
    Rank.SIX: 3,
    Rank.FIVE: 2.5,
    Rank.FOUR: 2,
    Rank.THREE: 1.5,
    Rank.TWO: 1,
}

# Penalty by number of ranks between the two cards
GAP_PENALTIES = {0: 0, 1: 1, 2: 2, 3: 4}
MAX_GAP_PENALTY = 5
SUITED_BONUS = 2
MIN_PAIR_SCORE = 5


def chen_score(c1: Card, c2: Card) -> float:
    """
    Chen score of a two-card starting hand, rounded to the nearest 0.5.

    Example:
        chen_score(Card.from_string("As"), Card.from_string("Ks"))  # 12.0
    """
    high, low = sorted((c1, c2), key=lambda c: c.rank, reverse=True)

    if high.rank == low.rank:
        score = max(MIN_PAIR_SCORE, CHEN_RANK_VALUES[high.rank] * 2)
    else:
        score = CHEN_RANK_VALUES[high.rank]
        gap = high.rank - low.rank - 1
        score -= GAP_PENALTIES.get(gap, MAX_GAP_PENALTY)

    if c1.suit == c2.suit:
        score += SUITED_BONUS

    # Halves round up, matching JavaScript's Math.round
    return math.floor(score * 2 + 0.5) / 2


def recommend_action(score: float, num_players: int, facing_raise: bool) -> Recommendation:
    """
    Recommend a preflop action for a Chen score.

    Tables larger than six players tighten every threshold by 0.7 points
    per extra seat.

    Args:
        score: Chen score of the hand
        num_players: Seats at the table
        facing_raise: Whether someone has already raised

    Returns:
        RAISE, CALL_CHECK or FOLD
    """
    tightener = max(0, (num_players - 6) * 0.7)
    raise_at, call_at = (11, 8) if facing_raise else (9, 6)

    if score >= raise_at + tightener:
        return Recommendation.RAISE
    if score >= call_at + tightener:
        return Recommendation.CALL_CHECK
    return Recommendation.FOLD


def action_bucket(action: Action) -> Recommendation:
    """Map a hero action onto the recommendation it is graded against."""
    if action == Action.FOLD:
        return Recommendation.FOLD
    if action == Action.RAISE:
        return Recommendation.RAISE
    return Recommendation.CALL_CHECK
