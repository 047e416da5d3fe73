"""
Hand history recording.

A Session collects finished HandHistory records. The recorder keeps the
hand in progress open, appends hero actions to it, and files it into the
session when the hand finishes (by fold or by completion).
"""

from __future__ import annotations
import logging
import time
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from holdem_trainer.core.card import Card
from holdem_trainer.core.game import Board
from holdem_trainer.core.player import Player
from holdem_trainer.core.rules import Action, Street, small_blind_from_big_blind


logger = logging.getLogger(__name__)

CURRENT_SESSION_STORAGE_KEY = "poker.currentSession"


class HandResult(Enum):
    FOLDED = "folded"
    COMPLETED = "completed"


def _now_ms() -> int:
    return int(time.time() * 1000)


def _cards_to_dicts(cards: Sequence[Card]) -> List[Dict[str, Any]]:
    return [c.to_dict() for c in cards]


def _cards_from_dicts(data: Sequence[Dict[str, Any]]) -> List[Card]:
    return [Card.from_dict(d) for d in data]


@dataclass
class HandAction:
    """One recorded action."""
    player: str
    action: Action
    amount: int
    street: Street
    timestamp: int = field(default_factory=_now_ms)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player": self.player,
            "action": self.action.value,
            "amount": self.amount,
            "street": self.street.value,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> HandAction:
        return cls(
            player=data["player"],
            action=Action(data["action"]),
            amount=data["amount"],
            street=Street(data["street"]),
            timestamp=data.get("timestamp", 0),
        )


@dataclass
class SeatRecord:
    """A player as seen in a hand history."""
    name: str
    position: str
    role: str
    cards: Tuple[Card, Card]
    is_hero: bool

    @classmethod
    def from_player(cls, player: Player) -> SeatRecord:
        return cls(
            name=player.name,
            position=player.position_label,
            role=player.role.value,
            cards=player.cards,
            is_hero=player.is_hero,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "position": self.position,
            "role": self.role,
            "cards": _cards_to_dicts(self.cards),
            "is_hero": self.is_hero,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SeatRecord:
        c1, c2 = _cards_from_dicts(data["cards"])
        return cls(
            name=data["name"],
            position=data.get("position", ""),
            role=data.get("role", ""),
            cards=(c1, c2),
            is_hero=data.get("is_hero", False),
        )


@dataclass
class HandHistory:
    """
    Record of one hand.

    Attributes:
        hand_id: Unique identifier
        timestamp: Deal time in epoch milliseconds
        players: Seats in table order (small blind first)
        small_blind: Small blind amount
        big_blind: Big blind amount
        board: Community cards dealt by the end of the hand
        actions: Hero actions in order
        pot: Final pot
        result: FOLDED or COMPLETED
        hero_won: Showdown outcome, None when there was no showdown
    """
    hand_id: str
    timestamp: int
    players: List[SeatRecord]
    small_blind: int
    big_blind: int
    board: Board = field(default_factory=Board)
    actions: List[HandAction] = field(default_factory=list)
    pot: int = 0
    result: HandResult = HandResult.FOLDED
    hero_won: Optional[bool] = None

    @property
    def hero(self) -> Optional[SeatRecord]:
        for seat in self.players:
            if seat.is_hero:
                return seat
        return None

    def actions_on(self, street: Street) -> List[HandAction]:
        return [a for a in self.actions if a.street == street]

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "hand_id": self.hand_id,
            "timestamp": self.timestamp,
            "players": [p.to_dict() for p in self.players],
            "blinds": {"small_blind": self.small_blind, "big_blind": self.big_blind},
            "community": self.board.to_dict(),
            "actions": [a.to_dict() for a in self.actions],
            "pot": self.pot,
            "result": self.result.value,
        }
        if self.hero_won is not None:
            result["hero_won"] = self.hero_won
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> HandHistory:
        community = data.get("community") or {}
        flop = community.get("flop")
        turn = community.get("turn")
        river = community.get("river")
        board = Board(
            flop=tuple(_cards_from_dicts(flop)) if flop else None,
            turn=Card.from_dict(turn) if turn else None,
            river=Card.from_dict(river) if river else None,
        )
        return cls(
            hand_id=data["hand_id"],
            timestamp=data["timestamp"],
            players=[SeatRecord.from_dict(p) for p in data["players"]],
            small_blind=data["blinds"]["small_blind"],
            big_blind=data["blinds"]["big_blind"],
            board=board,
            actions=[HandAction.from_dict(a) for a in data.get("actions", [])],
            pot=data.get("pot", 0),
            result=HandResult(data.get("result", HandResult.FOLDED.value)),
            hero_won=data.get("hero_won"),
        )


@dataclass
class Session:
    """A run of hands played in one sitting."""
    id: str
    start_time: int
    hands: List[HandHistory] = field(default_factory=list)

    @classmethod
    def new(cls) -> Session:
        start = _now_ms()
        return cls(id=f"session_{start}", start_time=start)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "start_time": self.start_time,
            "hands": [h.to_dict() for h in self.hands],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Session:
        return cls(
            id=data["id"],
            start_time=data["start_time"],
            hands=[HandHistory.from_dict(h) for h in data.get("hands", [])],
        )


class HandHistoryRecorder:
    """
    Builds hand histories and files them into a session.

    Usage:
        recorder = HandHistoryRecorder(Session.new())
        recorder.create(players, big_blind=2)
        recorder.add_action(Action.RAISE, 4, Street.PREFLOP)
        recorder.finalize(pot=7, result=HandResult.FOLDED, board=Board())
    """

    def __init__(self, session: Session):
        self.session = session
        self.current: Optional[HandHistory] = None

    def create(self, players: Sequence[Player], big_blind: int) -> HandHistory:
        """Open a new hand history, discarding any unfinished one."""
        now = _now_ms()
        self.current = HandHistory(
            hand_id=f"hand_{now}_{uuid.uuid4().hex[:9]}",
            timestamp=now,
            players=[SeatRecord.from_player(p) for p in players],
            small_blind=small_blind_from_big_blind(big_blind),
            big_blind=big_blind,
        )
        return self.current

    def add_action(
        self,
        action: Action,
        amount: int,
        street: Street,
        actor: str = "Hero",
    ) -> Optional[HandAction]:
        """Append an action to the open hand; ignored with no open hand or once complete."""
        if self.current is None or street == Street.COMPLETE:
            return None
        hand_action = HandAction(player=actor, action=action, amount=amount, street=street)
        self.current.actions.append(hand_action)
        return hand_action

    def finalize(
        self,
        pot: int,
        result: HandResult,
        board: Board,
        hero_won: Optional[bool] = None,
    ) -> Optional[HandHistory]:
        """
        Close the open hand and append it to the session.

        Returns:
            The finished history, or None if no hand was open
        """
        if self.current is None:
            return None
        finished = self.current
        finished.pot = pot
        finished.result = result
        finished.board = board
        finished.hero_won = hero_won
        self.session.hands.append(finished)
        self.current = None
        logger.debug(f"Recorded {finished.hand_id}: {result.value}, pot {pot}")
        return finished
