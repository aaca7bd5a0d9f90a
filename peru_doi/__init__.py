from peru_doi.bootstrap import configure
from peru_doi.validation.catalog import UsageContext, code_for, is_suitable_for, suitable_types
from peru_doi.validation.checksum import compute_check_digit
from peru_doi.validation.exceptions import (
    DocumentValidationError,
    InvalidDocumentError,
    NormalizationError,
)
from peru_doi.validation.models import (
    DocumentNumber,
    DocumentType,
    ValidationResult,
    ValidationStatus,
)
from peru_doi.validation.rules import DEFAULT_RULES, ValidationRules, taxpayer_category
from peru_doi.validation.service import (
    validate,
    validate_ce,
    validate_dni,
    validate_many,
    validate_ruc,
)

__all__ = [
    "DEFAULT_RULES",
    "DocumentNumber",
    "DocumentType",
    "DocumentValidationError",
    "InvalidDocumentError",
    "NormalizationError",
    "UsageContext",
    "ValidationResult",
    "ValidationRules",
    "ValidationStatus",
    "code_for",
    "compute_check_digit",
    "configure",
    "is_suitable_for",
    "suitable_types",
    "taxpayer_category",
    "validate",
    "validate_ce",
    "validate_dni",
    "validate_many",
    "validate_ruc",
]
