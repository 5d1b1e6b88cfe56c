"""Extract Drive resource IDs from sharing links."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Drive IDs are URL-safe base64-ish: letters, digits, '-' and '_'.
_FILE_ID_RE = re.compile(r"/d/([a-zA-Z0-9_-]+)")
_FOLDER_ID_RE = re.compile(r"/folders/([a-zA-Z0-9_-]+)")


class ResourceKind(str, Enum):
    """What a sharing link points at."""

    FILE = "file"
    FOLDER = "folder"


@dataclass(frozen=True)
class LinkReference:
    """A successfully parsed sharing link."""

    raw: str
    resource_id: str
    kind: ResourceKind

    @property
    def is_folder(self) -> bool:
        return self.kind is ResourceKind.FOLDER


def extract_link_reference(link: str) -> Optional[LinkReference]:
    """
    Parse a sharing link into a LinkReference.

    The file pattern (`/d/<id>`) is tried first; the folder pattern
    (`/folders/<id>`) only when the file pattern does not match. Returns None
    when neither matches. No network access.

    Examples:
      - https://drive.google.com/file/d/ABC123/view   -> (ABC123, FILE)
      - https://drive.google.com/drive/folders/XYZ    -> (XYZ, FOLDER)
      - https://example.com/nothing                   -> None
    """
    if not isinstance(link, str) or not link:
        return None

    m = _FILE_ID_RE.search(link)
    if m:
        return LinkReference(raw=link, resource_id=m.group(1), kind=ResourceKind.FILE)

    m = _FOLDER_ID_RE.search(link)
    if m:
        return LinkReference(raw=link, resource_id=m.group(1), kind=ResourceKind.FOLDER)

    return None
