"""Public error exports for gdrivecheck."""

from __future__ import annotations

from .exceptions import (
    ApiError,
    AuthError,
    ConfigError,
    GDriveCheckError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidCategoryError,
    InvalidLinkError,
    InvalidRequestError,
    NetworkError,
    NotFoundError,
    PermissionError,
    ProviderError,
    QuotaExceededError,
    RateLimitError,
    RequestError,
    map_http_error,
)

__all__ = [
    "GDriveCheckError",
    "ConfigError",
    "RequestError",
    "InvalidRequestError",
    "InvalidCategoryError",
    "InvalidLinkError",
    "ProviderError",
    "AuthError",
    "PermissionError",
    "InvalidArgumentError",
    "NotFoundError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
