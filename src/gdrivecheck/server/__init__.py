"""HTTP layer for gdrivecheck."""

from __future__ import annotations

from .app import create_app, status_for_error
from .schemas import CheckRequest, CheckResponse, ErrorResponse

__all__ = [
    "create_app",
    "status_for_error",
    "CheckRequest",
    "CheckResponse",
    "ErrorResponse",
]
