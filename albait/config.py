"""
Configuration Layer
===================

Centralized, type-safe configuration management for all environment variables.
Every tunable of the assistant engine lives here instead of being scattered
as literals through the services.

Usage:
    from albait.config import config

    # Assistant thresholds
    min_results = config.assistant.fallback_min_results

    # Check if in production
    if config.is_production:
        ...
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional, List
import logging

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Classes
# =============================================================================

@dataclass(frozen=True)
class DatabaseConfig:
    """Database connection settings (sessions live in memory; Django still wants one)."""
    name: str = field(default_factory=lambda: os.getenv("DB_NAME", "db.sqlite3"))


@dataclass(frozen=True)
class SecurityConfig:
    """Security-related settings."""
    secret_key: str = field(default_factory=lambda: os.getenv("SECRET_KEY", "django-insecure-dev-key-change-in-production"))
    allowed_hosts: List[str] = field(default_factory=lambda: os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(","))
    cors_origins: List[str] = field(default_factory=lambda: os.getenv(
        "CORS_ORIGINS",
        "http://localhost:4321,http://127.0.0.1:4321,http://localhost:3000"
    ).split(","))

    @property
    def is_secure_key(self) -> bool:
        """Check if using a proper secret key."""
        return "insecure" not in self.secret_key.lower() and len(self.secret_key) >= 50


@dataclass(frozen=True)
class AssistantConfig:
    """
    Search engine tunables.

    The fallback and call-to-action thresholds were picked empirically on the
    website; change them only with product input.
    """

    # Fallback page search kicks in below either of these
    fallback_min_results: int = field(default_factory=lambda: int(os.getenv("ASSISTANT_FALLBACK_MIN_RESULTS", "3")))
    fallback_min_confidence: int = field(default_factory=lambda: int(os.getenv("ASSISTANT_FALLBACK_MIN_CONFIDENCE", "40")))
    fallback_confidence_floor: int = field(default_factory=lambda: int(os.getenv("ASSISTANT_FALLBACK_CONFIDENCE_FLOOR", "50")))

    # Call-to-action trigger
    cta_package_queries: int = field(default_factory=lambda: int(os.getenv("ASSISTANT_CTA_PACKAGE_QUERIES", "2")))
    cta_total_queries: int = field(default_factory=lambda: int(os.getenv("ASSISTANT_CTA_TOTAL_QUERIES", "3")))

    # Ranking
    min_composite_score: float = field(default_factory=lambda: float(os.getenv("ASSISTANT_MIN_SCORE", "10")))
    max_results: int = field(default_factory=lambda: int(os.getenv("ASSISTANT_MAX_RESULTS", "5")))
    fuzzy_threshold: float = field(default_factory=lambda: float(os.getenv("ASSISTANT_FUZZY_THRESHOLD", "0.45")))

    # Outreach
    whatsapp_number: str = field(default_factory=lambda: os.getenv("ASSISTANT_WHATSAPP_NUMBER", "6281222442100"))

    # Data
    catalog_path: Optional[str] = field(default_factory=lambda: os.getenv("ASSISTANT_CATALOG_PATH") or None)
    max_sessions: int = field(default_factory=lambda: int(os.getenv("ASSISTANT_MAX_SESSIONS", "1000")))

    def validate(self) -> List[str]:
        """Return configuration issues prefixed with their severity."""
        issues = []
        if not 0.0 <= self.fuzzy_threshold <= 1.0:
            issues.append(f"CRITICAL: ASSISTANT_FUZZY_THRESHOLD must be within [0, 1], got {self.fuzzy_threshold}")
        if self.max_results < 1:
            issues.append("CRITICAL: ASSISTANT_MAX_RESULTS must be at least 1")
        if self.fallback_confidence_floor > 100 or self.fallback_min_confidence > 100:
            issues.append("WARNING: confidence thresholds above 100 can never be reached")
        if self.catalog_path and not Path(self.catalog_path).is_file():
            issues.append(f"CRITICAL: ASSISTANT_CATALOG_PATH does not exist: {self.catalog_path}")
        if not self.whatsapp_number.isdigit():
            issues.append("WARNING: ASSISTANT_WHATSAPP_NUMBER should contain digits only (international format)")
        return issues


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration - aggregates all config sections."""

    # Environment
    environment: str = field(default_factory=lambda: os.getenv("DJANGO_ENV", "development"))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "True").lower() == "true")

    # Sub-configurations
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    assistant: AssistantConfig = field(default_factory=AssistantConfig)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

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

        issues.extend(self.assistant.validate())

        if not self.assistant.catalog_path:
            issues.append("INFO: Using the bundled assistant catalog")

        return issues

    def log_status(self) -> None:
        """Log configuration status on startup."""
        logger.info(f"Environment: {self.environment}")
        logger.info(f"Debug: {self.debug}")
        logger.info(
            f"Assistant: fallback<{self.assistant.fallback_min_results} results "
            f"or <{self.assistant.fallback_min_confidence}% confidence, "
            f"CTA at {self.assistant.cta_package_queries} package / "
            f"{self.assistant.cta_total_queries} total queries"
        )


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
    """Get database configuration in Django format."""
    return {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": config.database.name,
    }
