"""Inventory application configuration."""

import atexit

from django.apps import AppConfig


class InventoryConfig(AppConfig):
    """Build the data store once the app registry is ready.

    Missing or inconsistent Supabase settings raise ``ConfigurationError``
    here, which aborts startup.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "inventory"
    store = None

    def ready(self):
        from .config import load_store_settings
        from .store import Store

        settings = load_store_settings()
        self.store = Store.from_settings(settings)
        atexit.register(self.store.close)
