"""
Betting arithmetic for the hero's single decision per street.
"""

from typing import Optional, Sequence

from holdem_trainer.core.player import Player
from holdem_trainer.core.rules import Action, min_raise


def table_current_bet(players: Sequence[Player]) -> int:
    """Highest bet on the table this street, 0 for an empty table."""
    return max((p.bet for p in players), default=0)


def hero_from_players(players: Sequence[Player]) -> Optional[Player]:
    for player in players:
        if player.is_hero:
            return player
    return None


def can_hero_check(players: Sequence[Player], hero: Optional[Player]) -> bool:
    """The hero may check once their bet matches the table bet."""
    if hero is None:
        return False
    return hero.bet >= table_current_bet(players)


def bet_for_action(
    action: Action,
    players: Sequence[Player],
    big_blind: int,
    hero: Optional[Player],
) -> int:
    """
    Hero's total bet on this street after taking ``action``.

    Args:
        action: CHECK, CALL, RAISE or FOLD
        players: Everyone at the table, hero included
        big_blind: Big blind amount
        hero: The hero seat (a missing hero counts as a zero bet)

    Returns:
        The amount the hero has committed on the street. Folding leaves
        the bet unchanged; the caller completes and settles the hand.
    """
    current_bet = table_current_bet(players)
    hero_bet = hero.bet if hero is not None else 0

    if action == Action.CALL:
        return current_bet
    if action == Action.RAISE:
        return min_raise(current_bet, big_blind)
    return hero_bet
