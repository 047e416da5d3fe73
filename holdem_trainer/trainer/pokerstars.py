"""
PokerStars-style hand history export.

Formats finished sessions as text that hand-history tools can import.
Cards use PokerStars notation (``Ah``, ``Td``).
"""

from datetime import datetime, timezone
from typing import List, Optional

from holdem_trainer.core.card import cards_to_str
from holdem_trainer.core.rules import Action, Street
from holdem_trainer.trainer.history import HandAction, HandHistory, HandResult, Session


NO_HANDS_MESSAGE = "No hands to export in current session."
STARTING_CHIPS = 1000


def export_session_to_pokerstars(session: Optional[Session]) -> str:
    """
    Export a whole session to PokerStars hand history text.

    Each hand includes blinds, hole cards, actions per street, the
    showdown when the hand reached the river unfolded, and a summary.
    Hands are separated by two blank lines.
    """
    if session is None or not session.hands:
        return NO_HANDS_MESSAGE
    return "".join(format_hand(hand) + "\n\n" for hand in session.hands)


def format_hand(hand: HandHistory) -> str:
    lines: List[str] = []

    date_str = datetime.fromtimestamp(hand.timestamp / 1000, tz=timezone.utc).strftime(
        "%Y-%m-%d %H:%M:%S"
    )
    lines.append(
        f"PokerStars Hand #{hand.hand_id}: Hold'em No Limit "
        f"(${hand.small_blind}/${hand.big_blind}) - {date_str} ET"
    )
    lines.append("Table 'Training Table' 6-max Seat #1 is the button")

    for seat, player in enumerate(hand.players, start=1):
        lines.append(f"Seat {seat}: {player.name} (${STARTING_CHIPS} in chips)")

    sb = next((p for p in hand.players if p.role == "SB"), None)
    bb = next((p for p in hand.players if p.role == "BB"), None)
    if sb:
        lines.append(f"{sb.name}: posts small blind ${hand.small_blind}")
    if bb:
        lines.append(f"{bb.name}: posts big blind ${hand.big_blind}")

    lines.append("*** HOLE CARDS ***")
    hero = hand.hero
    if hero:
        lines.append(f"Dealt to {hero.name} [{cards_to_str(hero.cards)}]")
    lines.extend(_action_lines(hand.actions_on(Street.PREFLOP), preflop=True))

    # Each street header shows the whole board so far
    board = hand.board
    streets = (
        (Street.FLOP, board.flop is not None, 3),
        (Street.TURN, board.turn is not None, 4),
        (Street.RIVER, board.river is not None, 5),
    )
    for street, dealt, shown in streets:
        if not dealt:
            continue
        lines.append(f"*** {street.name} *** [{cards_to_str(board.cards[:shown])}]")
        lines.extend(_action_lines(hand.actions_on(street), preflop=False))

    showdown = _reached_showdown(hand)
    if showdown:
        lines.append("*** SHOW DOWN ***")
        lines.append(f"Board [{cards_to_str(board.cards)}]")
        for player in hand.players:
            lines.append(f"{player.name}: shows [{cards_to_str(player.cards)}]")

    lines.append("*** SUMMARY ***")
    lines.append(f"Total pot ${hand.pot}")
    if showdown:
        lines.append(f"Board [{cards_to_str(board.cards)}]")

    hero_name = hero.name if hero else "Hero"
    if hand.result == HandResult.FOLDED:
        lines.append(f"{hero_name} folded")
    elif hand.hero_won is not None:
        lines.append(f"{hero_name} wins the pot" if hand.hero_won else f"{hero_name} loses the hand")

    return "\n".join(lines) + "\n"


def _reached_showdown(hand: HandHistory) -> bool:
    board = hand.board
    return (
        hand.result == HandResult.COMPLETED
        and board.flop is not None
        and board.turn is not None
        and board.river is not None
    )


def _action_lines(actions: List[HandAction], preflop: bool) -> List[str]:
    return [f"{a.player}: {_describe_action(a, preflop)}" for a in actions]


def _describe_action(action: HandAction, preflop: bool) -> str:
    if action.action == Action.CHECK:
        return "checks"
    if action.action == Action.CALL:
        return f"calls ${action.amount}"
    if action.action == Action.RAISE:
        # A postflop raise is the hero's opening bet on that street
        verb = "raises" if preflop else "bets"
        return f"{verb} ${action.amount}"
    return "folds"
