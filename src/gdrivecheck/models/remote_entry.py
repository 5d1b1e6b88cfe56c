"""Data model for Drive items as reported by the API."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class RemoteEntry:
    """
    A Drive item reduced to what downloadability checks need.

    Notes:
        - Only `id` and `mimeType` are requested from the API.
        - Lives for one request; never cached.
    """

    id: str
    mime_type: str
