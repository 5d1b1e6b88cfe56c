"""Command line entry point: `gdrivecheck`."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import uvicorn

from gdrivecheck.config import load_settings
from gdrivecheck.dispatcher import RequestDispatcher
from gdrivecheck.errors import GDriveCheckError
from gdrivecheck.logging_config import configure_logging
from gdrivecheck.server import create_app

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gdrivecheck",
        description="Serve POST /check-downloadable for Google Drive links.",
    )
    parser.add_argument("--host", help="Bind address (env HOST, default 0.0.0.0)")
    parser.add_argument("--port", type=int, help="Listen port (env PORT, default 3000)")
    parser.add_argument("--log-level", help="Log level (env LOG_LEVEL, default INFO)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {
        key: value
        for key, value in (
            ("host", args.host),
            ("port", args.port),
            ("log_level", args.log_level),
        )
        if value is not None
    }

    try:
        settings = load_settings(**overrides)
    except GDriveCheckError as exc:
        print(f"gdrivecheck: {exc}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level)

    try:
        dispatcher = RequestDispatcher(
            settings.auth_info(),
            supports_all_drives=settings.supports_all_drives,
        )
    except GDriveCheckError as exc:
        logger.error("Failed to initialise Drive client: %s", exc)
        return 1

    app = create_app(dispatcher)
    logger.info("Listening on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
