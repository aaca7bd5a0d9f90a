"""Document type codes used by SUNAT electronic filing systems."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from peru_doi.validation.models import DocumentType


class UsageContext(str, Enum):
    """SUNAT system in which a document number is reported."""

    PLE = "PLE"  # electronic books and registers
    PLAME = "PLAME"  # payroll
    AFP_NET = "AFP_NET"  # pension fund contributions
    FV_3800 = "FV_3800"  # beneficial owner declaration


@dataclass(frozen=True)
class DocumentTypeInfo:
    """Per-system codes of a document type. An empty code means not accepted."""

    short_name: str
    plame_id: str
    ple_id: str
    afp_id: str
    fv3800_id: str
    foreign: bool

    def code_for(self, context: UsageContext) -> str:
        return {
            UsageContext.PLE: self.ple_id,
            UsageContext.PLAME: self.plame_id,
            UsageContext.AFP_NET: self.afp_id,
            UsageContext.FV_3800: self.fv3800_id,
        }[context]


CATALOG = MappingProxyType({
    DocumentType.DNI: DocumentTypeInfo("DNI", "01", "1", "0", "01", foreign=False),
    DocumentType.CE: DocumentTypeInfo("CEX", "04", "4", "1", "04", foreign=True),
    DocumentType.RUC: DocumentTypeInfo("RUC", "06", "6", "", "06", foreign=False),
})


def document_info(document_type: DocumentType | str) -> DocumentTypeInfo:
    return CATALOG[DocumentType.parse(document_type)]


def is_suitable_for(document_type: DocumentType | str, context: UsageContext) -> bool:
    return bool(document_info(document_type).code_for(UsageContext(context)))


def code_for(document_type: DocumentType | str, context: UsageContext) -> str:
    """Return the code a SUNAT system expects for this document type.

    Raises:
        ValueError: if the system does not accept the document type.
    """
    info = document_info(document_type)
    code = info.code_for(UsageContext(context))
    if not code:
        raise ValueError(f"{info.short_name} is not accepted in {UsageContext(context).value}")
    return code


def suitable_types(context: UsageContext) -> list[DocumentType]:
    """List the document types a SUNAT system accepts, in declaration order."""
    return [t for t in DocumentType if is_suitable_for(t, context)]
