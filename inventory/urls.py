"""API routes for the inventory app."""

from django.urls import path

from .views import (
    SupplierArchiveAPIView,
    SupplierBulkDeleteAPIView,
    SupplierDetailAPIView,
    SupplierListAPIView,
)

urlpatterns = [
    path("suppliers/", SupplierListAPIView.as_view(), name="api_suppliers"),
    path(
        "suppliers/archive/",
        SupplierArchiveAPIView.as_view(),
        name="api_suppliers_archive",
    ),
    path(
        "suppliers/delete/",
        SupplierBulkDeleteAPIView.as_view(),
        name="api_suppliers_delete",
    ),
    path(
        "suppliers/<str:pk>/",
        SupplierDetailAPIView.as_view(),
        name="api_supplier_detail",
    ),
]
