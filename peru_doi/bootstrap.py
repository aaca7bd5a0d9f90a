from peru_doi.config.settings import Settings
from peru_doi.logging.logger import Log
from peru_doi.validation.rules import ValidationRules


def configure(settings: Settings | None = None) -> ValidationRules:
    """Entry point for hosts: load settings -> configure logging -> build rules."""
    settings = settings or Settings()
    Log.configure(settings.log_level)
    rules = ValidationRules.from_settings(settings)
    Log.info(
        f"peru_doi configured: RUC prefixes {sorted(rules.ruc_prefixes)}, "
        f"CE length {rules.ce_min_length}-{rules.ce_max_length}"
    )
    return rules
