"""
Core App Configuration
======================

Shared plumbing for the Al-Bait backend: the error hierarchy, the DRF
exception handler, BaseService and the startup checks. The environment is
validated as soon as the app registry is ready, before the assistant app
loads its catalog.
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    name = "core"
    verbose_name = "Al-Bait Core"

    def ready(self):
        from core.config import validate_config_on_startup
        validate_config_on_startup()
