from __future__ import annotations

import logging


def configure_logging(level: str = "INFO") -> None:
    """Route every ``signup_api.*`` logger to stderr at ``level`` (LOG_LEVEL)."""
    logging.basicConfig(
        level=(level or "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
