"""
Trainer settings.

Table configuration and trainer preferences live in a single pydantic
model so they are validated once, wherever they come from (defaults, the
settings store, or an API request).
"""

from __future__ import annotations
import logging

from pydantic import BaseModel, Field, ValidationError, field_validator

from holdem_trainer.core.rules import (
    StreetSettings,
    MIN_PLAYERS, MAX_PLAYERS, DEFAULT_NUM_PLAYERS,
    MIN_BIG_BLIND, DEFAULT_BIG_BLIND,
)
from holdem_trainer.trainer.storage import KeyValueStore


logger = logging.getLogger(__name__)

SETTINGS_STORAGE_KEY = "poker.trainerSettings.v1"
MAX_FEEDBACK_SECS = 10.0


class TrainerSettings(BaseModel):
    """Settings used by gameplay and the trainer."""
    # Which streets are played after the preflop decision
    show_flop: bool = False
    show_turn: bool = True
    show_river: bool = True

    auto_new: bool = True
    facing_raise: bool = True
    show_feedback: bool = True
    feedback_secs: float = 1.0
    show_score: bool = True
    show_community_cards: bool = False

    num_players: int = Field(default=DEFAULT_NUM_PLAYERS, ge=MIN_PLAYERS, le=MAX_PLAYERS)
    big_blind: int = Field(default=DEFAULT_BIG_BLIND, ge=MIN_BIG_BLIND)

    @field_validator("feedback_secs")
    @classmethod
    def clamp_feedback_secs(cls, v: float) -> float:
        """Keep the feedback delay within 0-10 seconds."""
        return max(0.0, min(MAX_FEEDBACK_SECS, v))

    @property
    def street_settings(self) -> StreetSettings:
        return StreetSettings(
            show_flop=self.show_flop,
            show_turn=self.show_turn,
            show_river=self.show_river,
        )


def load_settings(store: KeyValueStore) -> TrainerSettings:
    """Load settings from the store, falling back to defaults."""
    raw = store.get_item(SETTINGS_STORAGE_KEY)
    if raw is None:
        return TrainerSettings()
    try:
        return TrainerSettings.model_validate_json(raw)
    except ValidationError as e:
        logger.warning(f"Ignoring stored settings: {e}")
        return TrainerSettings()


def save_settings(store: KeyValueStore, settings: TrainerSettings) -> None:
    store.set_item(SETTINGS_STORAGE_KEY, settings.model_dump_json())
