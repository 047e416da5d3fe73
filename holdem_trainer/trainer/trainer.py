"""
Hold'em Trainer controller.

Ties the engine to the training loop: deals hands, grades the hero's
action against the Chen recommendation, records hand history, and tells
the caller what to run next and after what delay.

Deferred work is described by a PendingStep rather than run on a timer
here. Each step remembers the generation it was scheduled in; dealing a
new hand or taking another action bumps the generation, and run_pending
drops any step from an older one. A stale advance can therefore never be
applied to a hand it no longer matches.
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from holdem_trainer.core.betting import bet_for_action, can_hero_check
from holdem_trainer.core.chen import Recommendation, action_bucket, chen_score, recommend_action
from holdem_trainer.core.errors import HandNotInProgress
from holdem_trainer.core.game import GameEngine
from holdem_trainer.core.hand import did_hero_win
from holdem_trainer.core.player import Player
from holdem_trainer.core.rules import Action, Street
from holdem_trainer.trainer.history import (
    CURRENT_SESSION_STORAGE_KEY, HandHistoryRecorder, HandResult, Session,
)
from holdem_trainer.trainer.settings import TrainerSettings, load_settings, save_settings
from holdem_trainer.trainer.storage import KeyValueStore, MemoryStore


logger = logging.getLogger(__name__)


class StepKind(Enum):
    """Deferred work the caller schedules after an action."""
    ADVANCE = "advance"
    COMPLETE = "complete"
    NEW_HAND = "new_hand"


@dataclass(frozen=True)
class PendingStep:
    """A deferred call, valid only while its generation is current."""
    kind: StepKind
    generation: int
    delay: float

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "generation": self.generation, "delay": self.delay}


@dataclass(frozen=True)
class ActionFeedback:
    """Grading of one hero action."""
    action: Action
    street: Street
    correct: bool
    recommended: Recommendation
    score: float
    bet: int
    total_pot: int
    message: str
    pending: PendingStep

    def to_dict(self) -> Dict[str, Any]:
        return {
            "action": self.action.value,
            "street": self.street.value,
            "correct": self.correct,
            "recommended": self.recommended.value,
            "score": self.score,
            "bet": self.bet,
            "total_pot": self.total_pot,
            "message": self.message,
            "pending": self.pending.to_dict(),
        }


class HoldemTrainer:
    """
    Training loop around a GameEngine.

    Usage:
        trainer = HoldemTrainer()
        trainer.new_hand()

        feedback = trainer.act(Action.RAISE)
        step = feedback.pending
        while step is not None:
            # wait step.delay seconds, unless something pre-empts it
            step = trainer.run_pending(step)
    """

    def __init__(
        self,
        settings: Optional[TrainerSettings] = None,
        engine: Optional[GameEngine] = None,
        store: Optional[KeyValueStore] = None,
    ):
        """
        Initialize the trainer.

        Args:
            settings: Trainer settings; loaded from the store when omitted
            engine: Engine to drive; a fresh GameEngine when omitted
            store: Key-value store for settings and the current session
        """
        self.store = store or MemoryStore()
        self.settings = settings or load_settings(self.store)
        self.engine = engine or GameEngine()

        self.session = self._load_session() or Session.new()
        self.recorder = HandHistoryRecorder(self.session)

        # Bumped by every deal and every action
        self.generation = 0

        self.total_hands = 0
        self.correct_hands = 0
        self.folded = False
        self.hero_won: Optional[bool] = None
        self.last_feedback: Optional[ActionFeedback] = None

    # ---------------------------------------------------------------- derived

    @property
    def hero(self) -> Optional[Player]:
        return self.engine.hero

    @property
    def hero_score(self) -> float:
        hero = self.hero
        if hero is None:
            return 0
        return chen_score(hero.cards[0], hero.cards[1])

    @property
    def recommended(self) -> Recommendation:
        return recommend_action(
            self.hero_score, self.settings.num_players, self.settings.facing_raise
        )

    @property
    def can_check(self) -> bool:
        return can_hero_check(self.engine.players, self.hero)

    @property
    def accuracy(self) -> float:
        """Share of preflop decisions that matched the recommendation."""
        if not self.total_hands:
            return 0.0
        return self.correct_hands / self.total_hands

    @property
    def delay(self) -> float:
        return self.settings.feedback_secs

    # ---------------------------------------------------------------- settings

    def update_settings(self, settings: TrainerSettings) -> None:
        """Replace and persist settings; table changes apply from the next deal."""
        self.settings = settings
        save_settings(self.store, settings)

    # ---------------------------------------------------------------- hands

    def new_hand(self) -> List[Player]:
        """Deal a new hand, invalidating every pending step."""
        self.generation += 1
        players, _ = self.engine.deal_table(
            self.settings.num_players, self.settings.big_blind, hero_seat=0
        )
        self.folded = False
        self.hero_won = None
        self.last_feedback = None
        self.recorder.create(players, self.settings.big_blind)
        return players

    def act(self, action: Action) -> ActionFeedback:
        """
        Take the hero's action on the current street.

        Args:
            action: CHECK, CALL, RAISE or FOLD

        Returns:
            ActionFeedback with the grading and the step to run next

        Raises:
            HandNotInProgress: If no hand is running or the hero folded.
        """
        engine = self.engine
        hero = self.hero
        if not engine.is_hand_running() or self.folded or hero is None:
            raise HandNotInProgress("No hand in progress")

        street = engine.street
        score = self.hero_score
        recommended = self.recommended

        # Only the preflop decision is graded
        if street == Street.PREFLOP:
            correct = action_bucket(action) == recommended
            self.total_hands += 1
            self.correct_hands += int(correct)
        else:
            correct = True

        bet = bet_for_action(action, engine.players, engine.big_blind, hero)
        self.recorder.add_action(action, bet, street, actor=hero.name)
        engine.set_bet(hero.id, bet)

        self.generation += 1
        if action == Action.FOLD:
            self.folded = True
            self.recorder.finalize(engine.total_pot, HandResult.FOLDED, engine.board)
            self._save_session()
            pending = PendingStep(StepKind.COMPLETE, self.generation, self.delay)
        else:
            pending = PendingStep(StepKind.ADVANCE, self.generation, self.delay)

        feedback = ActionFeedback(
            action=action,
            street=street,
            correct=correct,
            recommended=recommended,
            score=score,
            bet=bet,
            total_pot=engine.total_pot,
            message=self._feedback_message(action, street, correct, recommended, score),
            pending=pending,
        )
        self.last_feedback = feedback
        logger.debug(f"Hero {action.value} on {street.value}: bet {bet}, correct={correct}")
        return feedback

    def _feedback_message(
        self,
        action: Action,
        street: Street,
        correct: bool,
        recommended: Recommendation,
        score: float,
    ) -> str:
        pot = f"Pot: ${self.engine.total_pot}."
        if street != Street.PREFLOP:
            return (
                f"{street.value.upper()} Action: {action.value.upper()}. "
                f"{street.value} betting. Continue playing or fold. {pot}"
            )
        mark = "✅" if correct else "❌"
        raise_note = "Facing a raise." if self.settings.facing_raise else "No raise yet."
        return (
            f"{mark} Recommended: {recommended.value.upper()}. "
            f"Score: {score:g} (Chen). {raise_note} "
            f"{self.settings.num_players} players. {pot}"
        )

    def run_pending(self, step: PendingStep) -> Optional[PendingStep]:
        """
        Run a deferred step if it still belongs to the current hand.

        Returns:
            The next step to schedule, or None
        """
        if step.generation != self.generation:
            logger.debug(f"Dropping stale {step.kind.value} step (gen {step.generation} != {self.generation})")
            return None

        if step.kind == StepKind.NEW_HAND:
            self.new_hand()
            return None

        if step.kind == StepKind.COMPLETE:
            self.engine.complete_hand()
            if self.settings.auto_new:
                self.new_hand()
            return None

        previous = self.engine.street
        new_street = self.engine.advance_street(self.settings.street_settings)
        if new_street != Street.COMPLETE:
            return None

        self._finish_hand(showdown=previous == Street.RIVER)
        if self.settings.auto_new:
            return PendingStep(StepKind.NEW_HAND, self.generation, self.delay)
        return None

    def _finish_hand(self, showdown: bool) -> None:
        engine = self.engine
        board = engine.board
        hero = self.hero

        hero_won = None
        if showdown and hero is not None and board.river is not None:
            others = [p for p in engine.players if not p.is_hero]
            hero_won = did_hero_win(hero, others, board.cards)
            self.hero_won = hero_won

        self.recorder.finalize(engine.pot, HandResult.COMPLETED, board, hero_won)
        self._save_session()

    # ---------------------------------------------------------------- session

    def start_new_session(self) -> Session:
        """Start an empty session and reset the stats."""
        self.session = Session.new()
        self.recorder = HandHistoryRecorder(self.session)
        self.total_hands = 0
        self.correct_hands = 0
        self.last_feedback = None
        self._save_session()
        logger.info(f"Started {self.session.id}")
        return self.session

    def _load_session(self) -> Optional[Session]:
        raw = self.store.get_item(CURRENT_SESSION_STORAGE_KEY)
        if raw is None:
            return None
        try:
            return Session.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Ignoring stored session: {e}")
            return None

    def _save_session(self) -> None:
        self.store.set_item(CURRENT_SESSION_STORAGE_KEY, json.dumps(self.session.to_dict()))

    # ---------------------------------------------------------------- state

    def get_state(self) -> Dict[str, Any]:
        """Snapshot for display: table, grading, stats and session."""
        engine = self.engine
        # Opponents' cards are shown once the hand is over
        state = engine.get_state(reveal_all=engine.street == Street.COMPLETE)
        state.update({
            "generation": self.generation,
            "folded": self.folded,
            "hero_won": self.hero_won,
            "can_check": self.can_check,
            "recommended": self.recommended.value if self.hero else None,
            "hero_score": self.hero_score if self.settings.show_score else None,
            "feedback": self.last_feedback.to_dict() if self.last_feedback else None,
            "stats": {
                "total_hands": self.total_hands,
                "correct_hands": self.correct_hands,
                "accuracy": self.accuracy,
            },
            "session": {
                "id": self.session.id,
                "hands": len(self.session.hands),
            },
        })
        return state
