"""Input normalization shared by every document validator."""

import re

from peru_doi.validation.exceptions import NormalizationError

_ALLOWED = re.compile(r"[0-9A-Za-z]+")


def normalize(raw: object) -> str:
    """Trim and upper-case a raw document number.

    Document numbers never contain punctuation or inner spaces, so anything
    outside ASCII letters and digits is rejected rather than stripped.

    Raises:
        NormalizationError: if the input is not a string, is blank, or holds
            disallowed characters.
    """
    if not isinstance(raw, str):
        raise NormalizationError(f"Document number must be a string, got {type(raw).__name__}")
    trimmed = raw.strip()
    if not trimmed:
        raise NormalizationError("Document number cannot be empty")
    if not _ALLOWED.fullmatch(trimmed):
        raise NormalizationError("Document number may only contain letters and digits")
    return trimmed.upper()
