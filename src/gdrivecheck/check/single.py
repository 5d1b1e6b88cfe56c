"""Downloadability of a single Drive file."""

from __future__ import annotations

from gdrivecheck.controller import GoogleDriveController
from gdrivecheck.util.mime import MimePredicate


def evaluate_file(
    controller: GoogleDriveController,
    file_id: str,
    predicate: MimePredicate,
) -> bool:
    """
    Return True if the file's MIME type satisfies predicate.

    Exactly one metadata request is made. Provider errors propagate unchanged.
    """
    mime_type = controller.get_content_type(file_id)
    return predicate(mime_type)
