"""Partial-response field masks for Google Drive API requests."""

from __future__ import annotations

# Only the MIME type is needed to decide downloadability.
GET_FIELDS: str = "mimeType"

LIST_FIELDS: str = "files(id,mimeType)"
