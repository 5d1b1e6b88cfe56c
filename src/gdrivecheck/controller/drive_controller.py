"""Google Drive API controller (internal use only)."""

from __future__ import annotations

import json
import logging
from typing import Any

from gdrivecheck.auth import ApiKeyClient, AuthInfo
from gdrivecheck.errors import (
    ApiError,
    HttpErrorInfo,
    NetworkError,
    ProviderError,
    map_http_error,
)
from gdrivecheck.models import RemoteEntry

from .fields import GET_FIELDS, LIST_FIELDS

logger = logging.getLogger(__name__)


class GoogleDriveController:
    """
    Read-only Drive API controller (internal only).

    Notes:
        - The Drive `service` object is NOT exposed.
        - `supports_all_drives` is applied to all requests consistently.
        - Every call is executed exactly once; failures are never retried.
        - The service is shared, but each call gets its own httplib2.Http;
          httplib2 connections must not be used from several threads.
    """

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        supports_all_drives: bool = True,
    ) -> None:
        self._supports_all_drives = supports_all_drives
        client = ApiKeyClient(auth_info)
        self._service = client.build_drive_service()

    @classmethod
    def from_service(
        cls,
        service: Any,
        *,
        supports_all_drives: bool = True,
    ) -> "GoogleDriveController":
        """Create controller from a pre-built Drive service (useful for tests)."""
        obj = cls.__new__(cls)
        obj._supports_all_drives = supports_all_drives
        obj._service = service
        return obj

    # ----------------------------
    # Public API
    # ----------------------------
    def get_content_type(self, file_id: str) -> str:
        """Return the provider-reported MIME type of a single file."""
        req = self._service.files().get(
            fileId=file_id,
            fields=GET_FIELDS,
            **self._common_get_kwargs(),
        )
        data = self._execute(req)
        mime_type = data.get("mimeType", "") if isinstance(data, dict) else ""
        return mime_type if isinstance(mime_type, str) else ""

    def list_children(self, folder_id: str) -> list[RemoteEntry]:
        """
        List the immediate children of a folder.

        Only the first page is read; `nextPageToken` is ignored.
        """
        req = self._service.files().list(
            q=_build_parent_query(folder_id),
            fields=LIST_FIELDS,
            **self._common_list_kwargs(),
        )
        data = self._execute(req)
        files = data.get("files", []) if isinstance(data, dict) else []
        return [_file_dict_to_remote_entry(f) for f in files or [] if isinstance(f, dict)]

    # ----------------------------
    # Internals
    # ----------------------------
    def _common_get_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True}

    def _common_list_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True, "includeItemsFromAllDrives": True}

    def _execute(self, req: Any) -> Any:
        try:
            return req.execute(http=self._new_http())
        except Exception as exc:
            mapped = self._map_exception(exc)
            logger.debug("Drive request failed: %s", mapped)
            raise mapped from exc

    def _new_http(self):
        """Return a fresh transport for a single call."""
        from googleapiclient.http import build_http

        return build_http()

    def _map_exception(self, exc: Exception) -> ProviderError:
        try:
            from googleapiclient.errors import HttpError
        except Exception:  # pragma: no cover
            HttpError = None  # type: ignore[assignment]

        if HttpError is not None and isinstance(exc, HttpError):
            info = _http_error_to_info(exc)
            return map_http_error(info, cause=exc)

        if isinstance(exc, (OSError, TimeoutError)):
            return NetworkError(str(exc) or "Network error", cause=exc)

        return ApiError(str(exc) or "Drive API error", cause=exc)


def _build_parent_query(parent_id: str) -> str:
    escaped = parent_id.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}' in parents"


def _file_dict_to_remote_entry(data: dict[str, Any]) -> RemoteEntry:
    file_id = data.get("id")
    mime_type = data.get("mimeType")
    return RemoteEntry(
        id=file_id if isinstance(file_id, str) else "",
        mime_type=mime_type if isinstance(mime_type, str) else "",
    )


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            payload = None
        err = payload.get("error", {}) if isinstance(payload, dict) else {}
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                details["reason_detail"] = errors[0].get("reason")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if message is None:
        # HttpError parses the payload itself; fall back to its summary.
        reason_text = getattr(exc, "reason", None)
        if isinstance(reason_text, str) and reason_text:
            message = reason_text

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
