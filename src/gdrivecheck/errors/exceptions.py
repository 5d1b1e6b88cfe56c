"""Exception hierarchy and HTTP error mapping for gdrivecheck."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class GDriveCheckError(Exception):
    """
    Base exception for gdrivecheck.

    Attributes:
        details: Optional structured information (e.g., HTTP status, reason).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause

    @property
    def message(self) -> str:
        return str(self)


class ConfigError(GDriveCheckError):
    """Raised when process configuration is missing or invalid at startup."""


# ----------------------------
# Caller-side errors
# ----------------------------
class RequestError(GDriveCheckError):
    """Base for errors caused by the caller's request (client-facing)."""


class InvalidRequestError(RequestError):
    """Raised when the request body is malformed."""


class InvalidCategoryError(InvalidRequestError):
    """Raised when the requested content category is not one of pdf/image/video."""


class InvalidLinkError(RequestError):
    """Raised when a link matches neither the file nor the folder pattern."""


# ----------------------------
# Provider-side errors
# ----------------------------
class ProviderError(GDriveCheckError):
    """Base for failures of the Drive API call itself (server-facing)."""


class AuthError(ProviderError):
    """Raised when the API key is rejected or the service cannot be built."""


class PermissionError(ProviderError):
    """Raised when access is denied (HTTP 403 non-quota)."""


class InvalidArgumentError(ProviderError):
    """Raised when request arguments are invalid (HTTP 400, etc.)."""


class NotFoundError(ProviderError):
    """Raised when a Drive resource is not found (HTTP 404)."""


class RateLimitError(ProviderError):
    """Raised when rate-limited (HTTP 429)."""


class QuotaExceededError(ProviderError):
    """Raised when quota is exceeded (HTTP 403 with quota-related reason)."""


class NetworkError(ProviderError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(ProviderError):
    """Raised for unclassified API errors (5xx, unknown 4xx, etc.)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to gdrivecheck exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_QUOTA_REASON_KEYWORDS: tuple[str, ...] = (
    "quota",
    "rateLimitExceeded",
    "userRateLimitExceeded",
    "dailyLimitExceeded",
    "usageLimits",
)


def _is_quota_reason(reason: str | None) -> bool:
    if not reason:
        return False
    return any(key.lower() in reason.lower() for key in _QUOTA_REASON_KEYWORDS)


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> ProviderError:
    """
    Map a Drive HTTP error to a gdrivecheck provider exception.

    Policy:
        - 401 -> AuthError
        - 403 -> PermissionError (default), but QuotaExceededError if quota-related
        - 404 -> NotFoundError
        - 429 -> RateLimitError
        - 400 -> InvalidArgumentError
        - 5xx -> ApiError
        - otherwise (incl. 409/412) -> ApiError

    The provider's own message is kept as the exception message.
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    if info.status_code == 400:
        return InvalidArgumentError(message, details=details, cause=cause)
    if info.status_code == 401:
        return AuthError(message, details=details, cause=cause)
    if info.status_code == 403:
        if _is_quota_reason(info.reason):
            return QuotaExceededError(message, details=details, cause=cause)
        return PermissionError(message, details=details, cause=cause)
    if info.status_code == 404:
        return NotFoundError(message, details=details, cause=cause)
    if info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)
