"""
Hold'em Trainer Server - FastAPI HTTP Layer
"""

from holdem_trainer.server.app import app, create_app

__all__ = ["app", "create_app"]
