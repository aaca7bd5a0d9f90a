from peru_doi.validation.base import BaseDocumentValidator
from peru_doi.validation.checksum import compute_check_digit
from peru_doi.validation.exceptions import NormalizationError
from peru_doi.validation.models import (
    DIGITS,
    DocumentNumber,
    DocumentType,
    ValidationResult,
    ValidationStatus,
)
from peru_doi.validation.normalizer import normalize

RUC_LENGTH = 11


class RucValidator(BaseDocumentValidator):
    """Validates RUC numbers.

    Checks run in order: normalization, length, digits only, taxpayer type
    prefix, then the modulo-11 check digit in the last position.
    """

    document_type = DocumentType.RUC

    def validate(self, raw: object) -> ValidationResult:
        try:
            canonical = normalize(raw)
        except NormalizationError as exc:
            return self._reject(ValidationStatus.INVALID_FORMAT, raw, str(exc))

        if len(canonical) != RUC_LENGTH:
            return self._reject(
                ValidationStatus.INVALID_LENGTH,
                raw,
                f"RUC must have {RUC_LENGTH} digits, got {len(canonical)}",
            )
        if not set(canonical) <= DIGITS:
            return self._reject(
                ValidationStatus.INVALID_CHARSET, raw, "RUC must contain only digits"
            )

        prefix = canonical[:2]
        if prefix not in self._rules.ruc_prefixes:
            return self._reject(
                ValidationStatus.INVALID_FORMAT,
                raw,
                f"RUC prefix {prefix} is not a valid taxpayer type. "
                f"Allowed: {sorted(self._rules.ruc_prefixes)}",
            )

        expected = compute_check_digit(canonical[:-1], self._rules.checksum)
        if canonical[-1] != expected:
            return self._reject(
                ValidationStatus.INVALID_CHECKSUM,
                raw,
                f"Check digit mismatch. Expected: {expected}, actual: {canonical[-1]}",
            )

        return ValidationResult.valid(raw, DocumentNumber(canonical, self.document_type))
