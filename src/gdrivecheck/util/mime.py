from __future__ import annotations

from enum import Enum
from typing import Callable

from gdrivecheck.errors import InvalidCategoryError

MimePredicate = Callable[[str], bool]

PDF_MIME: str = "application/pdf"
IMAGE_MIME_PREFIX: str = "image/"
VIDEO_MIME_PREFIX: str = "video/"


class ContentCategory(str, Enum):
    """Content categories a caller may ask about. Values are the wire names."""

    DOCUMENT = "pdf"
    IMAGE = "image"
    VIDEO = "video"

    @classmethod
    def parse(cls, value: object) -> "ContentCategory":
        """
        Return the category for a wire value.

        Raises:
            InvalidCategoryError: if value is not one of pdf/image/video.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        raise InvalidCategoryError(
            "Invalid type",
            details={"type": value, "allowed": [m.value for m in cls]},
        )


def is_pdf(mime_type: str) -> bool:
    return mime_type == PDF_MIME


def is_image(mime_type: str) -> bool:
    return mime_type.startswith(IMAGE_MIME_PREFIX)


def is_video(mime_type: str) -> bool:
    return mime_type.startswith(VIDEO_MIME_PREFIX)


_PREDICATES: dict[ContentCategory, MimePredicate] = {
    ContentCategory.DOCUMENT: is_pdf,
    ContentCategory.IMAGE: is_image,
    ContentCategory.VIDEO: is_video,
}


def predicate_for(category: ContentCategory) -> MimePredicate:
    """
    Return the MIME predicate for a category.

    - DOCUMENT: exact match on "application/pdf" (parameters are a mismatch).
    - IMAGE / VIDEO: prefix match on "image/" / "video/".
    """
    # Plain strings compare equal to str-enum members; require the enum itself.
    if not isinstance(category, ContentCategory):
        raise InvalidCategoryError("Invalid type", details={"type": category})
    return _PREDICATES[category]
