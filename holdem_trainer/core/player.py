"""
Player record for a training table.

A Player is a snapshot of one seat for the current hand:
- Role and position label relative to the button
- Hole cards
- Chips committed on the current street
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict, Tuple

from holdem_trainer.core.card import Card
from holdem_trainer.core.rules import Role


@dataclass(frozen=True)
class Player:
    """
    A seat at the training table.

    Attributes:
        id: Seat index the player was dealt at (0-indexed)
        name: Display name ("Hero" or "Player N")
        role: Dealer, SB, BB or none
        bet: Amount committed on the current street only
        cards: The player's two hole cards
        is_hero: True for the seat the user plays
        position_label: Table position such as "UTG" or "CO"
    """
    id: int
    name: str
    cards: Tuple[Card, Card]
    role: Role = Role.NONE
    bet: int = 0
    is_hero: bool = False
    position_label: str = ""

    def __post_init__(self) -> None:
        if self.bet < 0:
            raise ValueError(f"Bet cannot be negative, got {self.bet}")
        if len(self.cards) != 2:
            raise ValueError(f"A player holds exactly 2 cards, got {len(self.cards)}")

    def with_bet(self, amount: int) -> Player:
        """Copy of this player with the current-street bet set to ``amount``."""
        return replace(self, bet=amount)

    def to_dict(self, hide_cards: bool = False) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Args:
            hide_cards: If True, don't include hole cards
        """
        result = {
            "id": self.id,
            "name": self.name,
            "role": self.role.value,
            "bet": self.bet,
            "is_hero": self.is_hero,
            "position_label": self.position_label,
        }
        if not hide_cards:
            result["cards"] = [card.to_dict() for card in self.cards]
        return result

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.cards)
        return f"{self.name} [{cards_str}] {self.position_label} ${self.bet}"
