#!/usr/bin/env python3
"""Run the credit API with uvicorn."""

import argparse
import sys
from pathlib import Path

import uvicorn

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from credit_system.api import create_app
from credit_system.config import AppConfig
from credit_system.logging import setup_logging


def main() -> None:
    """Main entry point."""
    config = AppConfig.from_env()

    parser = argparse.ArgumentParser(description="Run the credit API")
    parser.add_argument("--host", type=str, default=config.api.host, help="Bind address")
    parser.add_argument("--port", type=int, default=config.api.port, help="Bind port")
    args = parser.parse_args()

    setup_logging(config.log_level, config.log_format)
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
