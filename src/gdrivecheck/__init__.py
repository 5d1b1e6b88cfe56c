"""gdrivecheck public API."""

from __future__ import annotations

from gdrivecheck.errors import (
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
from gdrivecheck.auth import ApiKeyClient, AuthInfo
from gdrivecheck.models import RemoteEntry
from gdrivecheck.util import (
    ContentCategory,
    LinkReference,
    ResourceKind,
    extract_link_reference,
    predicate_for,
)
from gdrivecheck.check import evaluate_file, evaluate_folder
from gdrivecheck.dispatcher import RequestDispatcher

__all__ = [
    # High-level
    "RequestDispatcher",
    # Auth
    "AuthInfo",
    "ApiKeyClient",
    # Core
    "ContentCategory",
    "LinkReference",
    "ResourceKind",
    "RemoteEntry",
    "extract_link_reference",
    "predicate_for",
    "evaluate_file",
    "evaluate_folder",
    # Errors
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
