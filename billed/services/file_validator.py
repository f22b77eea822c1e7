from __future__ import annotations

import logging
from enum import Enum

from billed.settings import settings

logger = logging.getLogger(__name__)


class FileValidation(str, Enum):
    VALID = "valid"
    INVALID = "invalid"


def receipt_extension(filename: str) -> str:
    """Return the lower-cased extension of ``filename``, or '' when it has none."""
    base = filename.rsplit("/", 1)[-1].rsplit("\\", 1)[-1]
    if "." not in base.strip("."):
        return ""
    return base.rsplit(".", 1)[-1].lower()


def validate_receipt_filename(filename: str | None) -> FileValidation:
    """Accept only the image extensions the backend accepts. The content is not inspected."""
    allowed = {ext.lower().lstrip(".") for ext in settings.allowed_receipt_extensions}
    ext = receipt_extension(filename or "")
    if ext and ext in allowed:
        return FileValidation.VALID
    logger.debug("Rejected receipt file %r (extension=%r)", filename, ext)
    return FileValidation.INVALID
