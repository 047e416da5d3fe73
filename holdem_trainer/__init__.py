"""
Hold'em Trainer - Texas Hold'em Decision Trainer

A Texas Hold'em training project with:
- Pure Python hand progression engine (no external poker dependencies)
- Chen formula preflop grading and hand history recording
- FastAPI HTTP server

Usage:
    from holdem_trainer.core import GameEngine, StreetSettings
    from holdem_trainer.trainer import HoldemTrainer
"""

__version__ = "0.1.0"
