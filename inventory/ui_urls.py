from django.urls import path

from .views.suppliers import (
    SupplierCreateView,
    SupplierDeleteView,
    SupplierEditView,
    SuppliersBulkActionView,
    SuppliersBulkUploadView,
    SuppliersListView,
    SuppliersTableView,
    SupplierToggleArchivedView,
)

urlpatterns = [
    path("suppliers/", SuppliersListView.as_view(), name="suppliers_list"),
    path(
        "suppliers2/",
        SuppliersListView.as_view(variant="alternative"),
        name="suppliers_alternative",
    ),
    path(
        "suppliers3/",
        SuppliersListView.as_view(variant="clean"),
        name="suppliers_clean",
    ),
    path("suppliers/table/", SuppliersTableView.as_view(), name="suppliers_table"),
    path("suppliers/create/", SupplierCreateView.as_view(), name="supplier_create"),
    path(
        "suppliers/bulk-action/",
        SuppliersBulkActionView.as_view(),
        name="suppliers_bulk_action",
    ),
    path(
        "suppliers/bulk-upload/",
        SuppliersBulkUploadView.as_view(),
        name="suppliers_bulk_upload",
    ),
    path("suppliers/<str:pk>/edit/", SupplierEditView.as_view(), name="supplier_edit"),
    path(
        "suppliers/<str:pk>/archive/",
        SupplierToggleArchivedView.as_view(),
        name="supplier_toggle_archived",
    ),
    path(
        "suppliers/<str:pk>/delete/",
        SupplierDeleteView.as_view(),
        name="supplier_delete",
    ),
]
