from .api import (
    SupplierArchiveAPIView,
    SupplierBulkDeleteAPIView,
    SupplierDetailAPIView,
    SupplierListAPIView,
)

__all__ = [
    "SupplierArchiveAPIView",
    "SupplierBulkDeleteAPIView",
    "SupplierDetailAPIView",
    "SupplierListAPIView",
]
