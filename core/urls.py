from django.urls import path

from .views import PLACEHOLDER_PAGES, PlaceholderPageView, dashboard, health_check

urlpatterns = [
    path("", dashboard, name="dashboard"),
    path("healthz", health_check, name="health-check"),
] + [
    path(f"{page}/", PlaceholderPageView.as_view(page=page), name=page)
    for page in PLACEHOLDER_PAGES
]
