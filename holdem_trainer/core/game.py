"""
Hold'em Trainer Game Engine - Hand Lifecycle State Machine.

This module drives a single hand from the deal to completion:
- Dealer button rotation across hands
- Dealing hole cards and posting blinds
- Street progression (preflop, flop, turn, river, complete)
- Settling street bets into the pot

Every operation runs to completion synchronously. Delaying or cancelling
calls (for UI pacing) is the caller's responsibility.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from holdem_trainer.core.card import Card, make_deck, shuffle
from holdem_trainer.core.betting import hero_from_players
from holdem_trainer.core.dealing import (
    deal_players, deal_flop_from_deck, deal_turn_from_deck, deal_river_from_deck,
    settle_bets_into_pot, total_pot, validate_seat_count,
)
from holdem_trainer.core.player import Player
from holdem_trainer.core.rules import (
    Street, StreetSettings, next_street,
    MIN_BIG_BLIND,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Board:
    """Community cards dealt so far."""
    flop: Optional[Tuple[Card, Card, Card]] = None
    turn: Optional[Card] = None
    river: Optional[Card] = None

    @property
    def cards(self) -> List[Card]:
        """All dealt community cards in deal order."""
        cards = list(self.flop or ())
        if self.turn is not None:
            cards.append(self.turn)
        if self.river is not None:
            cards.append(self.river)
        return cards

    def to_dict(self) -> Dict[str, Any]:
        return {
            "flop": [c.to_dict() for c in self.flop] if self.flop else None,
            "turn": self.turn.to_dict() if self.turn else None,
            "river": self.river.to_dict() if self.river else None,
        }


class GameEngine:
    """
    Hold'em Trainer engine implementing the hand state machine.

    Usage:
        engine = GameEngine()
        engine.deal_table(num_players=6, big_blind=2)

        # hero acts, caller updates the hero's bet
        engine.set_bet(hero.id, 4)

        while engine.street != Street.COMPLETE:
            engine.advance_street(StreetSettings(show_flop=True))
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize an engine with no hand dealt.

        Args:
            rng: Source of randomness for shuffles and the first button
                seat. Defaults to a fresh ``random.Random``.
        """
        self.rng = rng or random.Random()

        self.players: List[Player] = []
        self.deck: List[Card] = []
        self.street = Street.PREFLOP
        self.pot = 0
        self.board = Board()

        # Button seat persists across hands; None until the first deal
        self.button_index: Optional[int] = None
        self.hand_number = 0
        self.big_blind = 0

    @property
    def hero(self) -> Optional[Player]:
        return hero_from_players(self.players)

    @property
    def community_cards(self) -> List[Card]:
        return self.board.cards

    @property
    def deck_remaining(self) -> int:
        return len(self.deck)

    @property
    def total_pot(self) -> int:
        """Settled pot plus bets still in front of the players."""
        return total_pot(self.pot, self.players)

    def is_hand_running(self) -> bool:
        """Check if a hand has been dealt and not yet completed."""
        return bool(self.players) and self.street != Street.COMPLETE

    def deal_table(
        self,
        num_players: int,
        big_blind: int,
        hero_seat: int = 0,
    ) -> Tuple[List[Player], List[Card]]:
        """
        Start a new hand, replacing whatever hand was in progress.

        Moves the button one seat clockwise (or to a random seat on the
        first deal), shuffles a fresh deck, deals and posts blinds.

        Returns:
            Tuple of (players with the small blind first, remaining deck)

        Raises:
            InvalidSeatCount: If num_players is out of range.
            ValueError: If the big blind or hero seat is invalid.
        """
        validate_seat_count(num_players)
        if big_blind < MIN_BIG_BLIND:
            raise ValueError(f"Big blind must be at least {MIN_BIG_BLIND}, got {big_blind}")
        if not 0 <= hero_seat < num_players:
            raise ValueError(f"Hero seat must be 0-{num_players - 1}, got {hero_seat}")

        self._move_dealer_button(num_players)

        fresh = shuffle(make_deck(), self.rng)
        players, deck = deal_players(num_players, fresh, big_blind, hero_seat, self.button_index)

        self.hand_number += 1
        self.big_blind = big_blind
        self.players = players
        self.deck = deck
        self.board = Board()
        self.street = Street.PREFLOP
        self.pot = 0

        logger.info(
            f"Starting hand #{self.hand_number}: {num_players} players, "
            f"big blind {big_blind}, button seat {self.button_index}"
        )
        return players, deck

    def _move_dealer_button(self, num_players: int) -> None:
        if self.button_index is None:
            self.button_index = self.rng.randrange(num_players)
        else:
            self.button_index = (self.button_index + 1) % num_players

    def set_bet(self, player_id: int, amount: int) -> Player:
        """
        Record a player's total commitment on the current street.

        Raises:
            ValueError: If the amount is negative or no seat has that id.
        """
        if amount < 0:
            raise ValueError(f"Bet cannot be negative, got {amount}")
        for index, player in enumerate(self.players):
            if player.id == player_id:
                updated = player.with_bet(amount)
                self.players[index] = updated
                return updated
        raise ValueError(f"No player with id {player_id}")

    def settle_bets(self) -> None:
        """Collect every street bet into the pot and clear the bets."""
        self.pot, self.players = settle_bets_into_pot(self.pot, self.players)

    def deal_flop(self) -> bool:
        """
        Deal the flop, move to the flop street and settle preflop bets.

        Returns:
            False (and changes nothing) unless the hand is still preflop
        """
        if self.street != Street.PREFLOP or self.board.flop is not None:
            return False
        flop, self.deck = deal_flop_from_deck(self.deck)
        self.board = Board(flop=flop)
        self.street = Street.FLOP
        self.settle_bets()
        logger.debug(f"Flop: {' '.join(str(c) for c in flop)}")
        return True

    def deal_turn(self) -> bool:
        """Deal the turn; False unless the hand is on the flop."""
        if self.street != Street.FLOP or self.board.flop is None or self.board.turn is not None:
            return False
        turn, self.deck = deal_turn_from_deck(self.deck)
        self.board = Board(flop=self.board.flop, turn=turn)
        self.street = Street.TURN
        self.settle_bets()
        logger.debug(f"Turn: {turn}")
        return True

    def deal_river(self) -> bool:
        """Deal the river; False unless the hand is on the turn."""
        if self.street != Street.TURN or self.board.turn is None or self.board.river is not None:
            return False
        river, self.deck = deal_river_from_deck(self.deck)
        self.board = Board(flop=self.board.flop, turn=self.board.turn, river=river)
        self.street = Street.RIVER
        self.settle_bets()
        logger.debug(f"River: {river}")
        return True

    def advance_street(self, settings: StreetSettings) -> Street:
        """
        Move to the next street allowed by ``settings``.

        Deals the new street's community cards and settles bets; when the
        hand lands on COMPLETE only the settlement runs.

        Returns:
            The new street
        """
        current = self.street
        new_street = next_street(current, settings)

        if current == Street.PREFLOP and new_street == Street.FLOP:
            self.deal_flop()
        elif current == Street.FLOP and new_street == Street.TURN:
            self.deal_turn()
        elif current == Street.TURN and new_street == Street.RIVER:
            self.deal_river()
        elif new_street == Street.COMPLETE:
            self._finish()

        return new_street

    def complete_hand(self) -> None:
        """Settle and end the hand now (folds, or play cut short by settings)."""
        self._finish()

    def _finish(self) -> None:
        self.settle_bets()
        if self.street != Street.COMPLETE:
            logger.info(f"Hand #{self.hand_number} complete, pot {self.pot}")
        self.street = Street.COMPLETE

    def get_state(self, reveal_all: bool = True) -> Dict[str, Any]:
        """
        Snapshot of the current hand.

        Args:
            reveal_all: If False, only the hero's hole cards are included
        """
        return {
            "hand_number": self.hand_number,
            "street": self.street.value,
            "pot": self.pot,
            "total_pot": self.total_pot,
            "big_blind": self.big_blind,
            "button_index": self.button_index,
            "deck_remaining": self.deck_remaining,
            "board": self.board.to_dict(),
            "players": [
                p.to_dict(hide_cards=not (reveal_all or p.is_hero))
                for p in self.players
            ],
        }
