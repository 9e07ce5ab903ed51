"""
URL configuration for inventory_app project.

Page shells and the health check come from ``core``; supplier screens and the
JSON API from ``inventory``.
"""

from django.urls import include, path

urlpatterns = [
    path("", include("core.urls")),
    path("api/", include("inventory.urls")),   # DRF API
    path("", include("inventory.ui_urls")),    # HTML UI routes
]
