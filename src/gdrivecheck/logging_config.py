"""Logging setup for the gdrivecheck service."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the `gdrivecheck` logger."""
    pkg_logger = logging.getLogger("gdrivecheck")
    pkg_logger.setLevel(level.upper())

    if not any(getattr(h, "_gdrivecheck", False) for h in pkg_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._gdrivecheck = True  # type: ignore[attr-defined]
        pkg_logger.addHandler(handler)

    # uvicorn configures its own loggers; keep ours from double-printing via root.
    pkg_logger.propagate = False
