from peru_doi.validation.base import BaseDocumentValidator
from peru_doi.validation.exceptions import NormalizationError
from peru_doi.validation.models import (
    DIGITS,
    DocumentNumber,
    DocumentType,
    ValidationResult,
    ValidationStatus,
)
from peru_doi.validation.normalizer import normalize

DNI_LENGTH = 8


class DniValidator(BaseDocumentValidator):
    """Validates DNI numbers: exactly eight decimal digits, no check digit."""

    document_type = DocumentType.DNI

    def validate(self, raw: object) -> ValidationResult:
        try:
            canonical = normalize(raw)
        except NormalizationError as exc:
            return self._reject(ValidationStatus.INVALID_FORMAT, raw, str(exc))

        if len(canonical) != DNI_LENGTH:
            return self._reject(
                ValidationStatus.INVALID_LENGTH,
                raw,
                f"DNI must have {DNI_LENGTH} digits, got {len(canonical)}",
            )
        if not set(canonical) <= DIGITS:
            return self._reject(
                ValidationStatus.INVALID_CHARSET, raw, "DNI must contain only digits"
            )

        return ValidationResult.valid(raw, DocumentNumber(canonical, self.document_type))
