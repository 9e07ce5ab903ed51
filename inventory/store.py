"""Application-wide handle on the remote store and its repositories."""

import logging

from django.apps import apps

from .config import StoreSettings
from .exceptions import ConfigurationError
from .services.gateway import SupabaseGateway
from .services.supabase_client import build_supabase_client
from .services.supplier_repository import SupplierRepository

logger = logging.getLogger(__name__)


class Store:
    """Owns the gateway and the repositories built on it.

    Constructed once when the ``inventory`` app starts and passed to whatever
    needs a repository; ``close`` ends its lifetime.
    """

    def __init__(self, gateway, settings: StoreSettings | None = None):
        self.settings = settings
        self._gateway = gateway
        self._suppliers = SupplierRepository(gateway)

    @classmethod
    def from_settings(cls, settings: StoreSettings) -> "Store":
        client = build_supabase_client(settings)
        return cls(SupabaseGateway(client), settings)

    @property
    def closed(self) -> bool:
        return self._gateway is None

    def _require_open(self) -> None:
        if self._gateway is None:
            raise ConfigurationError("The data store has been closed")

    @property
    def gateway(self):
        self._require_open()
        return self._gateway

    @property
    def suppliers(self) -> SupplierRepository:
        self._require_open()
        return self._suppliers

    def close(self) -> None:
        if self._gateway is not None:
            logger.info("Closing data store")
        self._gateway = None


def get_store() -> Store:
    """Return the store created by :class:`inventory.apps.InventoryConfig`."""
    return apps.get_app_config("inventory").store
