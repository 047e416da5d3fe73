"""
FastAPI Application Entry Point for the Hold'em Trainer.

This module creates and configures the FastAPI application with:
- HTTP routes for dealing, acting and session export
- A single trainer backed by a key-value store
- CORS middleware for development
"""

import os
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from holdem_trainer import __version__
from holdem_trainer.server.routes import router
from holdem_trainer.trainer.storage import JsonFileStore, KeyValueStore, MemoryStore
from holdem_trainer.trainer.trainer import HoldemTrainer

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

DATA_FILE_ENV = "HOLDEM_TRAINER_DATA"


def default_store() -> KeyValueStore:
    """JSON file store when HOLDEM_TRAINER_DATA is set, memory otherwise."""
    path = os.environ.get(DATA_FILE_ENV)
    if path:
        logger.info(f"Persisting settings and session to {path}")
        return JsonFileStore(path)
    return MemoryStore()


def create_app(store: Optional[KeyValueStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Storage for settings and the session; see default_store()

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Hold'em Trainer",
        description="Texas Hold'em preflop decision trainer",
        version=__version__,
    )

    # CORS middleware for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    app.state.trainer = HoldemTrainer(store=store or default_store())

    return app


# Create the application instance
app = create_app()


def main():
    """Run the server (for use as entry point)."""
    import uvicorn
    uvicorn.run(
        "holdem_trainer.server.app:app",
        host="127.0.0.1",
        port=8000,
    )


if __name__ == "__main__":
    main()
