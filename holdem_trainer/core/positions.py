"""
Seat roles and position labels relative to the dealer button.
"""

from dataclasses import dataclass
from typing import List

from holdem_trainer.core.rules import Role


# Labels for positions 3 and up, counted clockwise from the button
POSITION_LABELS = ("UTG", "UTG+1", "MP", "LJ", "HJ", "CO")


@dataclass(frozen=True)
class SeatAssignment:
    """Role and label of one seat for the current button."""
    seat: int
    pos: int
    role: Role
    position_label: str


def label_for_pos(pos: int) -> str:
    """Position label for a seat ``pos`` steps clockwise from the button."""
    if pos == 0:
        return "Dealer"
    if pos == 1:
        return "SB"
    if pos == 2:
        return "BB"
    if pos - 3 < len(POSITION_LABELS):
        return POSITION_LABELS[pos - 3]
    return f"Seat {pos}"


def assign_roles_and_positions(num_players: int, btn_index: int) -> List[SeatAssignment]:
    """
    Assign a role and position label to every seat.

    Seat ``i`` sits ``(i - btn_index) % n`` steps from the button: 0 is the
    Dealer, 1 the small blind, 2 the big blind.

    Heads-up the button also posts the small blind and the other seat is
    the big blind, so both blinds are always posted.

    Args:
        num_players: Number of seats at the table
        btn_index: Seat holding the dealer button

    Returns:
        One SeatAssignment per seat, in seat order
    """
    assignments = []
    for seat in range(num_players):
        pos = (seat - btn_index + num_players) % num_players
        if num_players == 2:
            role = Role.SB if pos == 0 else Role.BB
            label = "Dealer" if pos == 0 else "BB"
        else:
            role = {0: Role.DEALER, 1: Role.SB, 2: Role.BB}.get(pos, Role.NONE)
            label = label_for_pos(pos)
        assignments.append(SeatAssignment(seat, pos, role, label))
    return assignments
