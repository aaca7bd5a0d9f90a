from dataclasses import dataclass
from enum import Enum

from peru_doi.validation.exceptions import InvalidDocumentError

DIGITS = frozenset("0123456789")
ALNUM_UPPER = DIGITS | frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


class DocumentType(str, Enum):
    """Peruvian identity document types handled by the validators."""

    DNI = "DNI"
    RUC = "RUC"
    CE = "CE"

    @classmethod
    def parse(cls, value: "DocumentType | str") -> "DocumentType":
        """Resolve a DocumentType from itself or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ValueError(
            f"Unknown document type {value!r}. Choose from: {[t.value for t in cls]}"
        )

    @property
    def charset(self) -> frozenset[str]:
        return ALNUM_UPPER if self is DocumentType.CE else DIGITS

    @property
    def fixed_length(self) -> int | None:
        """Exact canonical length, or None when the type allows a range."""
        return _FIXED_LENGTHS.get(self)


_FIXED_LENGTHS = {DocumentType.DNI: 8, DocumentType.RUC: 11}


class ValidationStatus(str, Enum):
    """Outcome tag of a validation attempt."""

    VALID = "valid"
    INVALID_FORMAT = "invalid_format"
    INVALID_LENGTH = "invalid_length"
    INVALID_CHARSET = "invalid_charset"
    INVALID_CHECKSUM = "invalid_checksum"


@dataclass(frozen=True)
class DocumentNumber:
    """Canonical document number paired with its type.

    DNI and RUC lengths are fixed and checked here. CE length bounds are
    configurable per ValidationRules, so they are enforced by CeValidator,
    not by this value object.
    """

    value: str
    document_type: DocumentType

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Document number cannot be empty")
        if not set(self.value) <= self.document_type.charset:
            raise ValueError(
                f"{self.document_type.value} contains characters outside its charset"
            )
        expected = self.document_type.fixed_length
        if expected is not None and len(self.value) != expected:
            raise ValueError(
                f"{self.document_type.value} must have {expected} characters, "
                f"got {len(self.value)}"
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValidationResult:
    """Uniform outcome returned by every validator."""

    status: ValidationStatus
    document_type: DocumentType
    raw: object
    document: DocumentNumber | None = None
    message: str = ""

    def __post_init__(self) -> None:
        if (self.status is ValidationStatus.VALID) != (self.document is not None):
            raise ValueError("A document number is required if and only if the status is valid")
        if self.document is not None and self.document.document_type is not self.document_type:
            raise ValueError(
                f"Document type mismatch: {self.document.document_type.value} "
                f"number in a {self.document_type.value} result"
            )

    @classmethod
    def valid(cls, raw: object, document: DocumentNumber) -> "ValidationResult":
        return cls(
            status=ValidationStatus.VALID,
            document_type=document.document_type,
            raw=raw,
            document=document,
        )

    @classmethod
    def invalid(
        cls,
        status: ValidationStatus,
        document_type: DocumentType,
        raw: object,
        message: str,
    ) -> "ValidationResult":
        if status is ValidationStatus.VALID:
            raise ValueError("invalid() requires a failure status")
        return cls(status=status, document_type=document_type, raw=raw, message=message)

    @property
    def is_valid(self) -> bool:
        return self.status is ValidationStatus.VALID

    def raise_for_status(self) -> DocumentNumber:
        """Return the canonical number, or raise InvalidDocumentError.

        Raises:
            InvalidDocumentError: when the result is not VALID.
        """
        if not self.is_valid or self.document is None:
            raise InvalidDocumentError(self)
        return self.document
