"""Entry points used by host applications."""

from collections import Counter
from collections.abc import Iterable

from peru_doi.logging.logger import Log
from peru_doi.validation.factory import ValidatorFactory
from peru_doi.validation.models import DocumentType, ValidationResult
from peru_doi.validation.rules import ValidationRules


def validate(
    document_type: DocumentType | str,
    raw: object,
    rules: ValidationRules | None = None,
) -> ValidationResult:
    """Validate one document number against its declared type.

    Raises:
        ValueError: if ``document_type`` is not a known type. Invalid document
            numbers are reported through the returned result instead.
    """
    return ValidatorFactory.create(document_type, rules).validate(raw)


def validate_many(
    document_type: DocumentType | str,
    raws: Iterable[object],
    rules: ValidationRules | None = None,
) -> list[ValidationResult]:
    """Validate a batch of numbers of the same type, preserving input order."""
    validator = ValidatorFactory.create(document_type, rules)
    results = [validator.validate(raw) for raw in raws]

    counts = Counter(result.status.value for result in results)
    Log.info(
        f"Validated {len(results)} {validator.document_type.value} numbers: "
        f"{dict(sorted(counts.items()))}"
    )
    return results


def validate_dni(raw: object) -> ValidationResult:
    return validate(DocumentType.DNI, raw)


def validate_ruc(raw: object, rules: ValidationRules | None = None) -> ValidationResult:
    return validate(DocumentType.RUC, raw, rules)


def validate_ce(raw: object, rules: ValidationRules | None = None) -> ValidationResult:
    return validate(DocumentType.CE, raw, rules)
