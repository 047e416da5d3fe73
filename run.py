#!/usr/bin/env python3
"""
Hold'em Trainer - Server Startup Script

Usage:
    python run.py [--host HOST] [--port PORT] [--reload] [--data-file PATH]
"""

import argparse
import os
import uvicorn


def main():
    parser = argparse.ArgumentParser(description="Hold'em Trainer Server")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--data-file", help="JSON file for settings and session history")
    args = parser.parse_args()

    # Read by the app factory at import time
    if args.data_file:
        os.environ["HOLDEM_TRAINER_DATA"] = args.data_file

    uvicorn.run(
        "holdem_trainer.server.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
