from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from peru_doi.validation.models import ValidationResult


class DocumentValidationError(Exception):
    """Base exception for all document validation errors."""


class NormalizationError(DocumentValidationError):
    """Raised when raw input cannot be normalized into a canonical form."""


class InvalidDocumentError(DocumentValidationError):
    """Raised on request when a validation result is not valid."""

    def __init__(self, result: "ValidationResult") -> None:
        self.result = result
        super().__init__(
            f"{result.document_type.value} rejected ({result.status.value}): {result.message}"
        )
