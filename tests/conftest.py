"""
Pytest configuration and shared fixtures for Hold'em Trainer tests.
"""

import random

import pytest
from holdem_trainer.core.card import Card, make_deck, parse_cards, shuffle
from holdem_trainer.core.game import GameEngine
from holdem_trainer.core.player import Player
from holdem_trainer.core.rules import Role
from holdem_trainer.trainer.settings import TrainerSettings
from holdem_trainer.trainer.storage import MemoryStore
from holdem_trainer.trainer.trainer import HoldemTrainer


def _make_player(player_id, hole, bet=0, is_hero=False, role=Role.NONE):
    c1, c2 = parse_cards(hole)
    return Player(
        id=player_id,
        name="Hero" if is_hero else f"Player {player_id + 1}",
        cards=(c1, c2),
        role=role,
        bet=bet,
        is_hero=is_hero,
    )


@pytest.fixture
def make_player():
    """Factory building a player from a card string such as 'As Kd'."""
    return _make_player


@pytest.fixture
def rng():
    """Seeded random source for repeatable shuffles."""
    return random.Random(1234)


@pytest.fixture
def deck(rng):
    """A fresh shuffled deck."""
    return shuffle(make_deck(), rng)


@pytest.fixture
def engine(rng):
    """An engine with no hand dealt."""
    return GameEngine(rng=rng)


@pytest.fixture
def six_player_engine(engine):
    """An engine with a 6-handed hand dealt at big blind 2."""
    engine.deal_table(6, 2)
    return engine


@pytest.fixture
def all_streets():
    return TrainerSettings(show_flop=True, show_turn=True, show_river=True).street_settings


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def trainer_settings():
    """Settings with all streets on, no delay and no auto-deal."""
    return TrainerSettings(
        show_flop=True,
        show_turn=True,
        show_river=True,
        auto_new=False,
        feedback_secs=0,
    )


@pytest.fixture
def trainer(trainer_settings, store, rng):
    """A trainer with a hand already dealt."""
    t = HoldemTrainer(settings=trainer_settings, engine=GameEngine(rng=rng), store=store)
    t.new_hand()
    return t


@pytest.fixture
def royal_board():
    """Board giving a spade straight flush with K♠ Q♠ in the hole."""
    return [Card.from_string(s) for s in ("A♠", "J♠", "T♠", "2♥", "3♦")]
