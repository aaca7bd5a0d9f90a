from abc import ABC, abstractmethod

from peru_doi.logging.logger import Log
from peru_doi.validation.models import DocumentType, ValidationResult, ValidationStatus
from peru_doi.validation.rules import DEFAULT_RULES, ValidationRules


class BaseDocumentValidator(ABC):
    """Contract for all document type validators."""

    document_type: DocumentType

    def __init__(self, rules: ValidationRules = DEFAULT_RULES) -> None:
        self._rules = rules

    @property
    def rules(self) -> ValidationRules:
        return self._rules

    @abstractmethod
    def validate(self, raw: object) -> ValidationResult:
        """Check a raw document number for this validator's type.

        Args:
            raw: Caller-supplied document number, untouched.

        Returns:
            ValidationResult with exactly one status. Failures are returned,
            never raised.
        """

    def _reject(self, status: ValidationStatus, raw: object, message: str) -> ValidationResult:
        Log.debug(
            f"{self.document_type.value} {Log.mask(raw)} rejected: {message}",
            document_type=self.document_type.value,
        )
        return ValidationResult.invalid(status, self.document_type, raw, message)
