import logging

from asgiref.sync import async_to_sync
from django.http import HttpResponse
from django.shortcuts import render
from django.views.generic import TemplateView

from inventory.exceptions import GatewayError
from inventory.store import get_store

logger = logging.getLogger(__name__)

PLACEHOLDER_PAGES = {
    "purchases": ("Purchases", "Manage your purchase orders and invoices", "Purchase management will be implemented here."),
    "sales": ("Sales", "Record sales and track revenue", "Sales tracking will be implemented here."),
    "recipes": ("Recipes", "Define recipes and their ingredients", "Recipe management will be implemented here."),
    "batches": ("Batches", "Log and track production batches", "Batch logging will be implemented here."),
    "reports": ("Reports", "Inventory and purchasing reports", "Reports will be implemented here."),
}


def dashboard(request):
    """Render the dashboard with supplier counts, or an error panel."""
    context = {"supplier_counts": None, "error": None}
    try:
        context["supplier_counts"] = async_to_sync(get_store().suppliers.count_suppliers)()
    except GatewayError as exc:
        logger.warning("Dashboard could not load supplier counts: %s", exc)
        context["error"] = exc
    return render(request, "core/dashboard.html", context)


def health_check(request):
    return HttpResponse("ok")


class PlaceholderPageView(TemplateView):
    """Static shell for a screen that has no behaviour yet."""

    template_name = "core/placeholder.html"
    page = ""

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        title, subtitle, body = PLACEHOLDER_PAGES[self.page]
        ctx.update({"page": self.page, "title": title, "subtitle": subtitle, "body": body})
        return ctx
