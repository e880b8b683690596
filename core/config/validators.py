"""
Configuration Validators
========================

Startup checks for the search engine settings. ``AppConfig.validate()``
covers environment-level issues; this module adds the engine-specific
ones (storage currency, candidate limits) and decides what is fatal.

Production: CRITICAL issues raise ImproperlyConfigured.
Development: everything is only logged.

Called from core.apps.CoreConfig.ready().
"""

import logging
from typing import List

from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
}


def search_settings_issues(app_config) -> List[str]:
    """Issues with the filtering defaults that ``AppConfig.validate()`` does not know about."""
    from parts.services.currency import EXCHANGE_RATES
    from parts.services.intent import Currency, parse_enum

    issues = []
    storage = parse_enum(Currency, app_config.search.storage_currency)
    if storage is None or storage not in EXCHANGE_RATES:
        issues.append(
            f"CRITICAL: PARTS_STORAGE_CURRENCY={app_config.search.storage_currency!r} "
            f"is not a supported currency"
        )
    if app_config.search.max_candidates < 1:
        issues.append("WARNING: PARTS_MAX_CANDIDATES must be at least 1")
    if app_config.search.intent_cache_ttl < 0:
        issues.append("WARNING: PARTS_INTENT_CACHE_TTL is negative, intents will not be cached")
    return issues


def validate_config_on_startup(app_config=None) -> List[str]:
    """
    Log every configuration issue and fail hard on critical ones in
    production.

    Returns:
        The issues found (empty when the configuration is clean)
    """
    if app_config is None:
        from partsform.config import config as app_config

    issues = app_config.validate() + search_settings_issues(app_config)

    for issue in issues:
        level = _LOG_LEVELS.get(issue.split(":", 1)[0], logging.INFO)
        logger.log(level, issue)

    critical = [i for i in issues if i.startswith("CRITICAL")]
    if critical and app_config.is_production:
        raise ImproperlyConfigured(
            "Configuration validation failed in production:\n"
            + "\n".join(f"  • {i}" for i in critical)
        )

    if not issues:
        logger.info("Configuration validated, no issues found")
    app_config.log_status()
    return issues
