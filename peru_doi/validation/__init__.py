from peru_doi.validation.base import BaseDocumentValidator
from peru_doi.validation.factory import ValidatorFactory
from peru_doi.validation.models import (
    DocumentNumber,
    DocumentType,
    ValidationResult,
    ValidationStatus,
)
from peru_doi.validation.service import (
    validate,
    validate_ce,
    validate_dni,
    validate_many,
    validate_ruc,
)

__all__ = [
    "BaseDocumentValidator",
    "DocumentNumber",
    "DocumentType",
    "ValidationResult",
    "ValidationStatus",
    "ValidatorFactory",
    "validate",
    "validate_ce",
    "validate_dni",
    "validate_many",
    "validate_ruc",
]
