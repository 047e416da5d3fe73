"""
Pydantic schemas for API request/response validation.
"""

from pydantic import BaseModel, Field

from holdem_trainer.core.rules import Action


# ============= Request Schemas =============

class ActRequest(BaseModel):
    """Request to take a hero action."""
    action: Action = Field(..., description="Action: check, call, raise or fold")


# ============= Response Schemas =============

class PendingStepSchema(BaseModel):
    """Deferred step the server has scheduled."""
    kind: str
    generation: int
    delay: float


class FeedbackSchema(BaseModel):
    """Grading of a hero action."""
    action: str
    street: str
    correct: bool
    recommended: str
    score: float
    bet: int
    total_pot: int
    message: str
    pending: PendingStepSchema


class SessionInfoSchema(BaseModel):
    """Session summary."""
    id: str
    start_time: int
    hands: int


class HealthSchema(BaseModel):
    status: str = "ok"
    version: str
