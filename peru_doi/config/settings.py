import logging

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration loaded from ``PERU_DOI_``-prefixed environment variables."""

    model_config = SettingsConfigDict(env_prefix="PERU_DOI_", env_file=".env", extra="ignore")

    log_level: str = "INFO"

    ruc_allowed_prefixes: list[str] = ["10", "15", "16", "17", "20"]

    ce_min_length: int = 9
    ce_max_length: int = 12

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {value!r}")
        return level

    @field_validator("ruc_allowed_prefixes")
    @classmethod
    def _check_prefixes(cls, value: list[str]) -> list[str]:
        for prefix in value:
            if len(prefix) != 2 or not prefix.isascii() or not prefix.isdigit():
                raise ValueError(f"RUC prefix must be exactly two digits, got {prefix!r}")
        return value

    @model_validator(mode="after")
    def _check_ce_bounds(self) -> "Settings":
        if self.ce_min_length < 1:
            raise ValueError("ce_min_length must be at least 1")
        if self.ce_min_length > self.ce_max_length:
            raise ValueError(
                f"ce_min_length ({self.ce_min_length}) cannot exceed "
                f"ce_max_length ({self.ce_max_length})"
            )
        return self
