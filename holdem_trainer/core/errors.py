"""
Error types raised by the Hold'em Trainer engine.
"""


class HoldemTrainerError(Exception):
    """Base class for all trainer errors."""


class DeckExhausted(HoldemTrainerError, RuntimeError):
    """
    Raised when a deal asks for more cards than the deck holds.

    Seat counts and street limits make this structurally impossible, so
    it signals a sequencing bug in the caller and must never be retried.
    """

    def __init__(self, needed: int, remaining: int, what: str = "cards"):
        self.needed = needed
        self.remaining = remaining
        super().__init__(
            f"Deck exhausted while dealing {what}: need {needed}, {remaining} remain"
        )


class InvalidSeatCount(HoldemTrainerError, ValueError):
    """Raised when a table is requested with an unsupported number of seats."""

    def __init__(self, num_players: int, min_players: int, max_players: int):
        self.num_players = num_players
        super().__init__(
            f"Number of players must be {min_players}-{max_players}, got {num_players}"
        )


class HandNotInProgress(HoldemTrainerError):
    """Raised when the hero acts while no hand is running."""
