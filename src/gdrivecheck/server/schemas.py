"""Request/response bodies for the HTTP API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, StrictStr


class CheckRequest(BaseModel):
    """POST /check-downloadable body."""

    model_config = ConfigDict(extra="ignore")

    # Missing fields bind to "" and then fail as "Invalid type" / "Invalid link format".
    link: StrictStr = ""
    # Kept as a plain string so unknown values get the "Invalid type" error.
    type: StrictStr = ""


class CheckResponse(BaseModel):
    result: Literal["yes", "no"]

    @classmethod
    def from_bool(cls, downloadable: bool) -> "CheckResponse":
        return cls(result="yes" if downloadable else "no")


class ErrorResponse(BaseModel):
    error: str
