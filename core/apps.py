"""
Core App Configuration
======================

Validates the PartsForm configuration once Django has loaded its apps,
so a bad timeout or an insecure key fails fast in production.
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    name = "core"
    verbose_name = "PartsForm Core"
    default_auto_field = "django.db.models.BigAutoField"

    def ready(self):
        from core.config import validate_config_on_startup
        validate_config_on_startup()
