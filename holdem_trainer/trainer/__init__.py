"""
Hold'em Trainer - Training loop, settings, hand history and export.
"""

from holdem_trainer.trainer.history import HandHistory, HandHistoryRecorder, HandResult, Session
from holdem_trainer.trainer.pokerstars import export_session_to_pokerstars
from holdem_trainer.trainer.settings import TrainerSettings, load_settings, save_settings
from holdem_trainer.trainer.storage import JsonFileStore, KeyValueStore, MemoryStore
from holdem_trainer.trainer.trainer import ActionFeedback, HoldemTrainer, PendingStep, StepKind

__all__ = [
    "HandHistory",
    "HandHistoryRecorder",
    "HandResult",
    "Session",
    "export_session_to_pokerstars",
    "TrainerSettings",
    "load_settings",
    "save_settings",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "ActionFeedback",
    "HoldemTrainer",
    "PendingStep",
    "StepKind",
]
