import logging

import pytest

from peru_doi.validation.rules import ValidationRules


@pytest.fixture()
def legal_entities_only() -> ValidationRules:
    """Rules accepting only legal entity RUCs and a narrow CE range."""
    return ValidationRules(ruc_prefixes=frozenset({"20"}), ce_min_length=10, ce_max_length=11)


@pytest.fixture()
def clean_logger():  # type: ignore[no-untyped-def]
    """Give a test the package logger without handlers, restoring it afterwards."""
    logger = logging.getLogger("peru_doi")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
