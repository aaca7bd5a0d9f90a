"""Tests for validation domain models."""

import dataclasses

import pytest

from peru_doi.validation.exceptions import InvalidDocumentError
from peru_doi.validation.models import (
    DocumentNumber,
    DocumentType,
    ValidationResult,
    ValidationStatus,
)


class TestDocumentType:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (DocumentType.RUC, DocumentType.RUC),
            ("dni", DocumentType.DNI),
            ("RUC", DocumentType.RUC),
            (" ce ", DocumentType.CE),
        ],
    )
    def test_parse(self, value: object, expected: DocumentType) -> None:
        assert DocumentType.parse(value) is expected  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", ["passport", "", 6, None])
    def test_parse_unknown(self, value: object) -> None:
        with pytest.raises(ValueError, match="Unknown document type"):
            DocumentType.parse(value)  # type: ignore[arg-type]

    def test_fixed_lengths(self) -> None:
        assert DocumentType.DNI.fixed_length == 8
        assert DocumentType.RUC.fixed_length == 11
        assert DocumentType.CE.fixed_length is None


class TestDocumentNumber:
    def test_str_is_canonical_value(self) -> None:
        assert str(DocumentNumber("12345678", DocumentType.DNI)) == "12345678"

    def test_frozen(self) -> None:
        number = DocumentNumber("12345678", DocumentType.DNI)
        with pytest.raises(dataclasses.FrozenInstanceError):
            number.value = "87654321"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert DocumentNumber("AB1234567", DocumentType.CE) == DocumentNumber(
            "AB1234567", DocumentType.CE
        )

    @pytest.mark.parametrize(
        ("value", "document_type"),
        [
            ("", DocumentType.DNI),
            ("1234567", DocumentType.DNI),
            ("1234567A", DocumentType.DNI),
            ("2010007097", DocumentType.RUC),
            ("ab1234567", DocumentType.CE),
            ("AB-123456", DocumentType.CE),
        ],
    )
    def test_rejects_broken_invariants(self, value: str, document_type: DocumentType) -> None:
        with pytest.raises(ValueError):
            DocumentNumber(value, document_type)


class TestValidationResult:
    def test_valid_result(self) -> None:
        number = DocumentNumber("12345678", DocumentType.DNI)
        result = ValidationResult.valid(" 12345678", number)
        assert result.is_valid
        assert result.status is ValidationStatus.VALID
        assert result.document_type is DocumentType.DNI
        assert result.raw == " 12345678"
        assert result.message == ""
        assert result.raise_for_status() is number

    def test_invalid_result(self) -> None:
        result = ValidationResult.invalid(
            ValidationStatus.INVALID_LENGTH, DocumentType.DNI, "123", "too short"
        )
        assert not result.is_valid
        assert result.document is None

    def test_invalid_rejects_valid_status(self) -> None:
        with pytest.raises(ValueError, match="failure status"):
            ValidationResult.invalid(ValidationStatus.VALID, DocumentType.DNI, "x", "")

    def test_raise_for_status(self) -> None:
        result = ValidationResult.invalid(
            ValidationStatus.INVALID_CHECKSUM, DocumentType.RUC, "20100070971", "mismatch"
        )
        with pytest.raises(InvalidDocumentError, match="invalid_checksum") as exc_info:
            result.raise_for_status()
        assert exc_info.value.result is result


class TestValidationResultInvariants:
    def test_failure_status_with_document_is_rejected(self) -> None:
        number = DocumentNumber("20100070971", DocumentType.RUC)
        with pytest.raises(ValueError, match="if and only if"):
            ValidationResult(
                ValidationStatus.INVALID_CHECKSUM, DocumentType.RUC, "20100070971", number
            )

    def test_valid_status_without_document_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="if and only if"):
            ValidationResult(ValidationStatus.VALID, DocumentType.DNI, "x")

    def test_document_type_must_match(self) -> None:
        number = DocumentNumber("12345678", DocumentType.DNI)
        with pytest.raises(ValueError, match="type mismatch"):
            ValidationResult(ValidationStatus.VALID, DocumentType.CE, "12345678", number)


class TestCeLengthOwnership:
    def test_value_object_leaves_ce_bounds_to_the_validator(self) -> None:
        from peru_doi.validation.service import validate_ce

        assert DocumentNumber("A", DocumentType.CE).value == "A"
        assert validate_ce("A").status is ValidationStatus.INVALID_LENGTH
