"""Drive service construction for gdrivecheck."""

from __future__ import annotations

from gdrivecheck.errors import AuthError, InvalidArgumentError

from .auth_info import AuthInfo


class ApiKeyClient:
    """Build Drive API service objects authenticated with an API key."""

    def __init__(self, auth_info: AuthInfo) -> None:
        if auth_info.kind != "api_key":
            raise InvalidArgumentError("ApiKeyClient requires AuthInfo(kind='api_key')")
        self._auth_info = auth_info

    def build_drive_service(self):
        """
        Build a Drive v3 service resource.

        Returns:
            googleapiclient.discovery.Resource

        Raises:
            AuthError: if the client library is missing or the build fails.
        """
        try:
            from googleapiclient.discovery import build
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                details={"hint": "Install google-api-python-client"},
                cause=exc,
            ) from exc

        try:
            return build(
                "drive",
                "v3",
                developerKey=self._auth_info.api_key,
                cache_discovery=False,
            )
        except Exception as exc:
            raise AuthError("Failed to build Drive service", cause=exc) from exc
