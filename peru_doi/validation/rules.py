"""Constant tables driving the structural and checksum checks."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from peru_doi.config.settings import Settings


@dataclass(frozen=True)
class ChecksumContext:
    """Weights and modulus of the RUC check digit."""

    weights: tuple[int, ...] = (5, 4, 3, 2, 7, 6, 5, 4, 3, 2)
    modulus: int = 11


RUC_CHECKSUM = ChecksumContext()

# SUNAT taxpayer type prefixes.
RUC_TAXPAYER_CATEGORIES = MappingProxyType({
    "10": "Natural person",
    "15": "Succession, marital society, non-domiciled or special taxpayer",
    "16": "Reserved",
    "17": "Natural person registered between 1993 and 2000",
    "20": "Legal entity or consortium",
})


@dataclass(frozen=True)
class ValidationRules:
    """Replaceable regulatory tables: RUC prefix allow-list and CE bounds."""

    ruc_prefixes: frozenset[str] = frozenset(RUC_TAXPAYER_CATEGORIES)
    ce_min_length: int = 9
    ce_max_length: int = 12
    checksum: ChecksumContext = field(default=RUC_CHECKSUM)

    def __post_init__(self) -> None:
        if not isinstance(self.ruc_prefixes, frozenset):
            object.__setattr__(self, "ruc_prefixes", frozenset(self.ruc_prefixes))
        for prefix in self.ruc_prefixes:
            if len(prefix) != 2 or not prefix.isascii() or not prefix.isdigit():
                raise ValueError(f"RUC prefix must be exactly two digits, got {prefix!r}")
        if not 1 <= self.ce_min_length <= self.ce_max_length:
            raise ValueError(
                f"Invalid CE length bounds: [{self.ce_min_length}, {self.ce_max_length}]"
            )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ValidationRules":
        return cls(
            ruc_prefixes=frozenset(settings.ruc_allowed_prefixes),
            ce_min_length=settings.ce_min_length,
            ce_max_length=settings.ce_max_length,
        )


DEFAULT_RULES = ValidationRules()


def taxpayer_category(ruc: object) -> str | None:
    """Describe the taxpayer type encoded in a RUC's first two digits."""
    if not isinstance(ruc, str):
        return None
    return RUC_TAXPAYER_CATEGORIES.get(ruc.strip()[:2])
