"""Downloadability of a Drive folder's immediate children."""

from __future__ import annotations

from gdrivecheck.controller import GoogleDriveController
from gdrivecheck.util.mime import MimePredicate


def evaluate_folder(
    controller: GoogleDriveController,
    folder_id: str,
    predicate: MimePredicate,
) -> bool:
    """
    Return True if any immediate child of the folder satisfies predicate.

    Notes:
        - One listing request, first page only.
        - Children are checked in the order the API returned them and the scan
          stops at the first match.
        - An empty folder is a plain False, not an error.
        - A listing failure propagates; nothing is partially aggregated.
    """
    children = controller.list_children(folder_id)
    if not children:
        return False

    for child in children:
        if predicate(child.mime_type):
            return True

    return False
