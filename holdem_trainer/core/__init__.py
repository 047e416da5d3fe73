"""
Hold'em Trainer Core - Pure Python Hand Progression Engine

This module contains all game logic without any network dependencies.
"""

from holdem_trainer.core.card import Card, Rank, Suit, make_deck, shuffle
from holdem_trainer.core.errors import DeckExhausted, InvalidSeatCount
from holdem_trainer.core.player import Player
from holdem_trainer.core.hand import HandCategory, evaluate_hand, did_hero_win
from holdem_trainer.core.chen import Recommendation, chen_score, recommend_action
from holdem_trainer.core.rules import Action, Role, Street, StreetSettings, next_street
from holdem_trainer.core.game import Board, GameEngine

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "make_deck",
    "shuffle",
    "DeckExhausted",
    "InvalidSeatCount",
    "Player",
    "HandCategory",
    "evaluate_hand",
    "did_hero_win",
    "Recommendation",
    "chen_score",
    "recommend_action",
    "Action",
    "Role",
    "Street",
    "StreetSettings",
    "next_street",
    "Board",
    "GameEngine",
]
