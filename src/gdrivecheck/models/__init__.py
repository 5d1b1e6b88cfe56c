"""Public model exports for gdrivecheck."""

from __future__ import annotations

from .remote_entry import RemoteEntry

__all__ = ["RemoteEntry"]
