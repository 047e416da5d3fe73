"""
Hand Category Evaluation for Texas Hold'em.

This module classifies up to 7 cards (2 hole + 0-5 community) into a hand
category. Only the category is computed; kickers and the rank of the made
hand are never compared, so two different two-pair hands come out equal.

Hand Categories (best to worst):
8. Straight Flush
7. Four of a Kind
6. Full House
5. Flush
4. Straight
3. Three of a Kind
2. Two Pair
1. One Pair
0. High Card

Note: Ace can be low in A-2-3-4-5 straight (wheel).
"""

from __future__ import annotations
from collections import Counter
from enum import IntEnum
from typing import Iterable, List, Sequence

from holdem_trainer.core.card import Card, Rank
from holdem_trainer.core.player import Player


class HandCategory(IntEnum):
    """Hand categories, higher value = better hand."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8


HAND_CATEGORY_NAMES = {
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FLUSH: "Flush",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.HIGH_CARD: "High Card",
}

WHEEL = {Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE}


def evaluate_hand(hole_cards: Sequence[Card], community_cards: Iterable[Card]) -> HandCategory:
    """
    Classify the best category made by hole and community cards together.

    Two sets of three of a kind count as a full house (a pair from the
    second set completes it), not as three of a kind.

    Args:
        hole_cards: The player's two hole cards
        community_cards: 0-5 board cards

    Returns:
        HandCategory of the combined cards
    """
    all_cards = list(hole_cards) + list(community_cards)

    rank_counts = Counter(c.rank for c in all_cards)
    suit_counts = Counter(c.suit for c in all_cards)
    counts = sorted(rank_counts.values(), reverse=True) + [0, 0]

    is_flush = any(count >= 5 for count in suit_counts.values())
    is_straight = _has_straight(rank_counts.keys())

    if is_straight and is_flush:
        return HandCategory.STRAIGHT_FLUSH
    if counts[0] == 4:
        return HandCategory.FOUR_OF_A_KIND
    if counts[0] == 3 and counts[1] >= 2:
        return HandCategory.FULL_HOUSE
    if is_flush:
        return HandCategory.FLUSH
    if is_straight:
        return HandCategory.STRAIGHT
    if counts[0] == 3:
        return HandCategory.THREE_OF_A_KIND
    if counts[0] == 2 and counts[1] == 2:
        return HandCategory.TWO_PAIR
    if counts[0] == 2:
        return HandCategory.ONE_PAIR
    return HandCategory.HIGH_CARD


def _has_straight(ranks: Iterable[Rank]) -> bool:
    """Check for 5 consecutive values among the unique ranks, wheel included."""
    unique_ranks: List[int] = sorted(set(int(r) for r in ranks))
    for i in range(len(unique_ranks) - 4):
        if unique_ranks[i + 4] - unique_ranks[i] == 4:
            return True
    return WHEEL.issubset(unique_ranks)


def did_hero_win(
    hero: Player,
    others: Sequence[Player],
    community_cards: Sequence[Card],
) -> bool:
    """
    Coarse showdown result for the hero.

    True only when the hero's category is strictly better than every
    opponent's. Ties and losses both return False; there is no split-pot
    signal.
    """
    hero_category = evaluate_hand(hero.cards, community_cards)
    return all(
        hero_category > evaluate_hand(player.cards, community_cards)
        for player in others
    )


def describe_category(category: HandCategory) -> str:
    return HAND_CATEGORY_NAMES[category]
