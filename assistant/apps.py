"""
Assistant App Configuration
===========================

Holds the chat assistant: query engine services, API views and tests.
On startup the shared session registry is built (catalog loaded, fuzzy index
constructed) and the catalog is audited.
"""

from django.apps import AppConfig


class AssistantConfig(AppConfig):
    name = "assistant"
    verbose_name = "Al-Bait Assistant"

    def ready(self):
        from albait.config import config
        from core.config import report_issues
        from .services.catalog import audit_catalog
        from .services.session_registry import get_session_registry

        registry = get_session_registry()
        report_issues(audit_catalog(registry.catalog), "catalog", fatal=config.is_production)
