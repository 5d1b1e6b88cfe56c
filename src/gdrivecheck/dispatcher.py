"""RequestDispatcher: link + content type -> downloadable yes/no."""

from __future__ import annotations

import logging

from gdrivecheck.auth import AuthInfo
from gdrivecheck.check import evaluate_file, evaluate_folder
from gdrivecheck.controller import GoogleDriveController
from gdrivecheck.errors import InvalidLinkError, ProviderError
from gdrivecheck.util.links import extract_link_reference
from gdrivecheck.util.mime import ContentCategory, predicate_for

logger = logging.getLogger(__name__)


class RequestDispatcher:
    """High-level entry point: validate, classify the link, evaluate."""

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        supports_all_drives: bool = True,
    ) -> None:
        self._controller = GoogleDriveController(
            auth_info,
            supports_all_drives=supports_all_drives,
        )

    @classmethod
    def from_controller(cls, controller: GoogleDriveController) -> "RequestDispatcher":
        """Create dispatcher with an injected controller (useful for tests)."""
        obj = cls.__new__(cls)
        obj._controller = controller
        return obj

    def dispatch(self, link: str, category: str) -> bool:
        """
        Decide whether anything matching category can be downloaded from link.

        Steps (each may exit early):
            1. category must be pdf/image/video
            2. link must contain a file (`/d/<id>`) or folder (`/folders/<id>`) ID
            3. folder -> scan immediate children, file -> check the file itself

        Raises:
            InvalidCategoryError: unknown category; the link is not inspected.
            InvalidLinkError: unparseable link; no Drive request is made.
            ProviderError: the Drive request failed (message preserved).
        """
        content_category = ContentCategory.parse(category)
        predicate = predicate_for(content_category)

        ref = extract_link_reference(link)
        if ref is None:
            raise InvalidLinkError("Invalid link format", details={"link": link})

        logger.debug(
            "Checking %s %s for %s",
            ref.kind.value,
            ref.resource_id,
            content_category.value,
        )

        try:
            if ref.is_folder:
                result = evaluate_folder(self._controller, ref.resource_id, predicate)
            else:
                result = evaluate_file(self._controller, ref.resource_id, predicate)
        except ProviderError as exc:
            logger.warning(
                "Drive lookup failed for %s %s: %s",
                ref.kind.value,
                ref.resource_id,
                exc,
            )
            raise

        logger.debug("Result for %s %s: %s", ref.kind.value, ref.resource_id, result)
        return result
