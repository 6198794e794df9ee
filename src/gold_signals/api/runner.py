#!/usr/bin/env python3
"""FastAPI server runner.

Run: python -m gold_signals.api.runner [--config config.yaml]
"""

from __future__ import annotations

import argparse

import uvicorn

from gold_signals.api.app import create_app
from gold_signals.config import load_config
from gold_signals.logging import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> None:
    """Run the FastAPI server."""
    parser = argparse.ArgumentParser(description="Gold signals API server")
    parser.add_argument("--config", default=None, help="Path to config YAML")
    args = parser.parse_args()

    config = load_config(args.config)
    setup_logging(level=config.logging.level, log_format=config.logging.format)

    logger.info("Starting FastAPI server", host=config.api.host, port=config.api.port)

    try:
        uvicorn.run(
            create_app(config),
            host=config.api.host,
            port=config.api.port,
            log_config=None,  # Use our structlog setup
        )
    except Exception as e:
        logger.error("Failed to start server", error=str(e))
        raise


if __name__ == "__main__":
    main()
