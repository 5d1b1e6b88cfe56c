"""Authentication information for gdrivecheck (API key only)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Authentication information.

    Only public-link access is supported:
        kind = "api_key"
        data must include:
            - api_key
    """

    kind: str
    data: dict[str, Any]

    def __post_init__(self) -> None:
        if self.kind != "api_key":
            raise ValueError("AuthInfo.kind must be 'api_key'")

        if not isinstance(self.data, dict):
            raise TypeError("AuthInfo.data must be a dict")

        value = self.data.get("api_key")
        if not isinstance(value, str) or not value.strip():
            raise ValueError("AuthInfo.data['api_key'] must be a non-empty string")

    @classmethod
    def from_api_key(cls, api_key: str) -> "AuthInfo":
        return cls(kind="api_key", data={"api_key": api_key})

    @property
    def api_key(self) -> str:
        """Google API key used as developerKey."""
        return str(self.data["api_key"])

    def __repr__(self) -> str:
        return f"AuthInfo(kind={self.kind!r}, data={{'api_key': '***'}})"
