"""
Configuration Layer
===================

Centralized, type-safe configuration management for all environment variables.
Nothing else in the codebase should call os.getenv() directly.

Usage:
    from partsform.config import config

    # Language-model enhancer
    if config.llm.is_configured:
        ...

    # Filtering defaults
    threshold = config.search.high_stock_threshold
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List
import logging

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# =============================================================================
# Configuration Classes
# =============================================================================

@dataclass(frozen=True)
class DatabaseConfig:
    """Database connection settings."""
    url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///db.sqlite3"))
    name: str = field(default_factory=lambda: os.getenv("DB_NAME", "db.sqlite3"))
    host: str = field(default_factory=lambda: os.getenv("DB_HOST", "localhost"))
    port: int = field(default_factory=lambda: int(os.getenv("DB_PORT", "5432")))
    user: str = field(default_factory=lambda: os.getenv("DB_USER", ""))
    password: str = field(default_factory=lambda: os.getenv("DB_PASSWORD", ""))

    @property
    def is_sqlite(self) -> bool:
        return "sqlite" in self.url.lower()


@dataclass(frozen=True)
class LLMConfig:
    """Language-model settings for the intent enhancer."""
    api_key: str = field(default_factory=lambda: os.getenv("OPENAI_API_KEY", ""))
    model: str = field(default_factory=lambda: os.getenv("PARTS_LLM_MODEL", "gpt-4o-mini"))
    timeout: float = field(default_factory=lambda: float(os.getenv("PARTS_LLM_TIMEOUT", "12")))
    enabled: bool = field(default_factory=lambda: _env_bool("PARTS_LLM_ENABLED", "true"))
    max_workers: int = field(default_factory=lambda: int(os.getenv("PARTS_LLM_MAX_WORKERS", "4")))
    skip_when_confident: bool = field(default_factory=lambda: _env_bool("PARTS_LLM_SKIP_WHEN_CONFIDENT", "true"))

    @property
    def is_configured(self) -> bool:
        """Enhancement only runs with a key and the feature switch on."""
        return self.enabled and bool(self.api_key)


@dataclass(frozen=True)
class SearchConfig:
    """Filtering and parsing defaults."""
    storage_currency: str = field(default_factory=lambda: os.getenv("PARTS_STORAGE_CURRENCY", "AED"))
    high_stock_threshold: int = field(default_factory=lambda: int(os.getenv("PARTS_HIGH_STOCK_THRESHOLD", "10")))
    fast_delivery_days: int = field(default_factory=lambda: int(os.getenv("PARTS_FAST_DELIVERY_DAYS", "5")))
    max_keywords: int = field(default_factory=lambda: int(os.getenv("PARTS_MAX_KEYWORDS", "10")))
    intent_cache_ttl: int = field(default_factory=lambda: int(os.getenv("PARTS_INTENT_CACHE_TTL", "300")))
    max_candidates: int = field(default_factory=lambda: int(os.getenv("PARTS_MAX_CANDIDATES", "5000")))


@dataclass(frozen=True)
class SecurityConfig:
    """Security-related settings."""
    secret_key: str = field(default_factory=lambda: os.getenv("SECRET_KEY", "django-insecure-dev-key-change-in-production"))
    allowed_hosts: List[str] = field(default_factory=lambda: os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(","))

    @property
    def is_secure_key(self) -> bool:
        """Check if using a proper secret key."""
        return "insecure" not in self.secret_key.lower() and len(self.secret_key) >= 50


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration - aggregates all config sections."""

    # Environment
    environment: str = field(default_factory=lambda: os.getenv("DJANGO_ENV", "development"))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "True").lower() == "true")

    # Sub-configurations
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    llm: LLMConfig = field(default_factory=LLMConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def validate(self) -> List[str]:
        """
        Validate configuration and return list of warnings/errors.
        Call this on startup to catch misconfigurations early.
        """
        issues = []

        if self.is_production:
            if not self.security.is_secure_key:
                issues.append("CRITICAL: Using insecure SECRET_KEY in production!")
            if self.debug:
                issues.append("WARNING: DEBUG=True in production!")

        if self.llm.timeout <= 0:
            issues.append("CRITICAL: PARTS_LLM_TIMEOUT must be positive")

        if self.search.fast_delivery_days < 0 or self.search.high_stock_threshold < 1:
            issues.append("WARNING: Search thresholds look wrong (fast delivery days / high stock)")

        if not self.llm.api_key:
            issues.append("INFO: OPENAI_API_KEY not configured (intent enhancement disabled)")
        elif not self.llm.enabled:
            issues.append("INFO: PARTS_LLM_ENABLED is off (intent enhancement disabled)")

        return issues

    def log_status(self) -> None:
        """Log configuration status on startup."""
        logger.info(f"Environment: {self.environment}")
        logger.info(f"Debug: {self.debug}")
        logger.info(
            f"Intent enhancer: {'on (' + self.llm.model + ')' if self.llm.is_configured else 'off'}"
        )
        logger.info(f"Storage currency: {self.search.storage_currency}")


# =============================================================================
# Singleton Instance
# =============================================================================

@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """
    Get the singleton configuration instance.
    Uses lru_cache to ensure single instance across the application.
    """
    return AppConfig()


# Convenience alias
config = get_config()


# =============================================================================
# Django Settings Helpers
# =============================================================================

def get_database_config() -> dict:
    """
    Get database configuration in Django format.
    Returns dict suitable for DATABASES setting.
    """
    if config.database.is_sqlite:
        return {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": config.database.name,
        }

    return {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": config.database.name,
        "HOST": config.database.host,
        "PORT": config.database.port,
        "USER": config.database.user,
        "PASSWORD": config.database.password,
    }
