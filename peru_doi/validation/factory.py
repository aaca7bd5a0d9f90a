from peru_doi.validation.base import BaseDocumentValidator
from peru_doi.validation.ce_validator import CeValidator
from peru_doi.validation.dni_validator import DniValidator
from peru_doi.validation.models import DocumentType
from peru_doi.validation.rules import DEFAULT_RULES, ValidationRules
from peru_doi.validation.ruc_validator import RucValidator


class ValidatorFactory:
    """Creates the validator for a declared document type."""

    ADAPTERS: dict[DocumentType, type[BaseDocumentValidator]] = {
        DocumentType.DNI: DniValidator,
        DocumentType.RUC: RucValidator,
        DocumentType.CE: CeValidator,
    }

    @classmethod
    def create(
        cls,
        document_type: DocumentType | str,
        rules: ValidationRules | None = None,
    ) -> BaseDocumentValidator:
        adapter_cls = cls.ADAPTERS[DocumentType.parse(document_type)]
        return adapter_cls(rules or DEFAULT_RULES)
