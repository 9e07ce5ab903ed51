"""Service layer for the inventory app."""

from . import (
    gateway,
    supabase_client,
    supplier_repository,
    supplier_table,
    view_options,
)

__all__ = [
    "gateway",
    "supabase_client",
    "supplier_repository",
    "supplier_table",
    "view_options",
]
