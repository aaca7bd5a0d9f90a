from peru_doi.validation.base import BaseDocumentValidator
from peru_doi.validation.exceptions import NormalizationError
from peru_doi.validation.models import (
    ALNUM_UPPER,
    DocumentNumber,
    DocumentType,
    ValidationResult,
    ValidationStatus,
)
from peru_doi.validation.normalizer import normalize


class CeValidator(BaseDocumentValidator):
    """Validates foreign-resident card numbers.

    Only the length range and the alphanumeric charset are checked; CE
    numbers carry no check digit.
    """

    document_type = DocumentType.CE

    def validate(self, raw: object) -> ValidationResult:
        try:
            canonical = normalize(raw)
        except NormalizationError as exc:
            return self._reject(ValidationStatus.INVALID_FORMAT, raw, str(exc))

        low, high = self._rules.ce_min_length, self._rules.ce_max_length
        if not low <= len(canonical) <= high:
            return self._reject(
                ValidationStatus.INVALID_LENGTH,
                raw,
                f"CE must have between {low} and {high} characters, got {len(canonical)}",
            )
        if not set(canonical) <= ALNUM_UPPER:
            return self._reject(
                ValidationStatus.INVALID_CHARSET,
                raw,
                "CE must contain only letters and digits",
            )

        return ValidationResult.valid(raw, DocumentNumber(canonical, self.document_type))
