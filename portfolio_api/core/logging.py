"""Logging setup for the API process."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    resolved = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("portfolio_api").setLevel(resolved)
