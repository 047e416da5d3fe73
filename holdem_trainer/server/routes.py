"""
HTTP API Routes for the Hold'em Trainer.

A single trainer lives on ``app.state.trainer``. Actions return their
grading at once; the street advance or hand completion that follows is
scheduled on the event loop after the feedback delay.
"""

import asyncio
import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse

from holdem_trainer import __version__
from holdem_trainer.core.errors import HoldemTrainerError, DeckExhausted
from holdem_trainer.trainer.pokerstars import export_session_to_pokerstars
from holdem_trainer.trainer.settings import TrainerSettings
from holdem_trainer.trainer.trainer import HoldemTrainer, PendingStep
from holdem_trainer.server.schemas import (
    ActRequest, FeedbackSchema, HealthSchema, SessionInfoSchema,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def get_trainer(request: Request) -> HoldemTrainer:
    """Get the trainer instance for this app."""
    return request.app.state.trainer


def schedule_step(trainer: HoldemTrainer, step: PendingStep) -> None:
    """
    Run ``step`` after its delay on the running event loop.

    Steps that follow on (e.g. auto-dealing the next hand) are scheduled
    the same way. The trainer drops any step that has gone stale.
    """
    loop = asyncio.get_running_loop()

    def _run() -> None:
        next_step = trainer.run_pending(step)
        if next_step is not None:
            schedule_step(trainer, next_step)

    loop.call_later(step.delay, _run)


@router.get("/health", response_model=HealthSchema)
async def health() -> Dict[str, Any]:
    return {"status": "ok", "version": __version__}


@router.get("/settings")
async def get_settings(request: Request) -> Dict[str, Any]:
    """Get the current trainer settings."""
    return get_trainer(request).settings.model_dump()


@router.put("/settings")
async def update_settings(req: TrainerSettings, request: Request) -> Dict[str, Any]:
    """
    Replace the trainer settings.

    Table size and blinds apply from the next hand.
    """
    trainer = get_trainer(request)
    trainer.update_settings(req)
    return trainer.settings.model_dump()


@router.post("/new_hand")
async def new_hand(request: Request) -> Dict[str, Any]:
    """
    Deal a new hand.

    Any step still pending from the previous hand is discarded.
    """
    trainer = get_trainer(request)
    try:
        trainer.new_hand()
    except DeckExhausted:
        raise
    except (HoldemTrainerError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return trainer.get_state()


@router.post("/act", response_model=FeedbackSchema)
async def act(req: ActRequest, request: Request) -> Dict[str, Any]:
    """
    Take the hero's action.

    Returns the grading; the next street (or the end of the hand) follows
    after the configured feedback delay.
    """
    trainer = get_trainer(request)
    try:
        feedback = trainer.act(req.action)
    except HoldemTrainerError as e:
        raise HTTPException(status_code=400, detail=str(e))

    schedule_step(trainer, feedback.pending)
    return feedback.to_dict()


@router.get("/state")
async def get_state(request: Request) -> Dict[str, Any]:
    """Get the current table, grading and stats."""
    return get_trainer(request).get_state()


@router.get("/session", response_model=SessionInfoSchema)
async def get_session(request: Request) -> Dict[str, Any]:
    session = get_trainer(request).session
    return {"id": session.id, "start_time": session.start_time, "hands": len(session.hands)}


@router.post("/session/new", response_model=SessionInfoSchema)
async def new_session(request: Request) -> Dict[str, Any]:
    """Start a new session and reset stats."""
    session = get_trainer(request).start_new_session()
    return {"id": session.id, "start_time": session.start_time, "hands": 0}


@router.get("/session/export", response_class=PlainTextResponse)
async def export_session(request: Request) -> str:
    """Export the current session as PokerStars hand history text."""
    return export_session_to_pokerstars(get_trainer(request).session)
