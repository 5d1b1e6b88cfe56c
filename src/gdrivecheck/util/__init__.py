from .links import LinkReference, ResourceKind, extract_link_reference
from .mime import (
    IMAGE_MIME_PREFIX,
    PDF_MIME,
    VIDEO_MIME_PREFIX,
    ContentCategory,
    MimePredicate,
    is_image,
    is_pdf,
    is_video,
    predicate_for,
)

__all__ = [
    "LinkReference",
    "ResourceKind",
    "extract_link_reference",
    "PDF_MIME",
    "IMAGE_MIME_PREFIX",
    "VIDEO_MIME_PREFIX",
    "ContentCategory",
    "MimePredicate",
    "is_pdf",
    "is_image",
    "is_video",
    "predicate_for",
]
