import csv
import io
import logging

from asgiref.sync import async_to_sync
from django.contrib import messages
from django.core.exceptions import ValidationError
from django.http import Http404, HttpResponse, HttpResponseBadRequest
from django.shortcuts import redirect, render
from django.views import View
from django.views.generic import TemplateView

from ..exceptions import GatewayError, NotFoundError
from ..forms import BulkUploadForm, SupplierForm
from ..services.supplier_table import SupplierTableController
from ..services.view_options import ViewOptions
from ..store import get_store

logger = logging.getLogger(__name__)

VARIANTS = {
    "standard": {
        "title": "Suppliers",
        "subtitle": "Manage your supplier relationships",
        "template": "inventory/suppliers_list.html",
        "url_name": "suppliers_list",
    },
    "alternative": {
        "title": "Suppliers (Alternative View)",
        "subtitle": "Alternative suppliers table with a compact layout.",
        "template": "inventory/suppliers_list_alt.html",
        "url_name": "suppliers_alternative",
    },
    "clean": {
        "title": "Suppliers",
        "subtitle": "Clean design",
        "template": "inventory/suppliers_list_clean.html",
        "url_name": "suppliers_clean",
    },
}


def _form_errors(exc: ValidationError):
    return exc.message_dict if hasattr(exc, "error_dict") else {"__all__": exc.messages}


def load_supplier_table(params) -> SupplierTableController:
    """Mount a table controller for the view options in ``params``."""
    options = ViewOptions.from_query(params)
    controller = SupplierTableController(get_store().suppliers, options)
    async_to_sync(controller.mount)()
    controller.unmount()
    return controller


def table_context(params, controller: SupplierTableController, variant=None) -> dict:
    variant = variant or params.get("variant") or "standard"
    if variant not in VARIANTS:
        variant = "standard"
    options = controller.options
    archived_toggle = options.copy()
    archived_toggle.toggle_show_archived()
    return {
        "table": controller,
        "options": options,
        "all_columns": options.columns,
        "variant": variant,
        "page_url": VARIANTS[variant]["url_name"],
        "query": options.to_query().urlencode(),
        "toggle_archived_query": archived_toggle.to_query().urlencode(),
        "action_error": None,
        "action_message": None,
    }


def render_table(request, params, action_error=None, action_message=None):
    """Re-render the table partial after a write, keeping the caller's options.

    ``action_error`` is shown in the partial's alert block, so a failed write
    is visible in the HTMX swap itself.
    """
    controller = load_supplier_table(params)
    ctx = table_context(params, controller)
    ctx.update({"action_error": action_error, "action_message": action_message})
    return render(request, SuppliersTableView.template_name, ctx)


class SuppliersListView(TemplateView):
    """Page shell for one of the supplier table variants.

    GET params:
        show_archived, columns, view
        restore the view options carried by the page's own links.
    """

    variant = "standard"

    def get_template_names(self):
        return [VARIANTS[self.variant]["template"]]

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        controller = load_supplier_table(self.request.GET)
        ctx.update(table_context(self.request.GET, controller, self.variant))
        ctx.update(
            {
                "title": VARIANTS[self.variant]["title"],
                "subtitle": VARIANTS[self.variant]["subtitle"],
            }
        )
        return ctx


class SuppliersTableView(TemplateView):
    """HTMX partial with the table body and the View Options dropdown."""

    template_name = "inventory/_suppliers_table.html"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx.update(table_context(self.request.GET, self.controller))
        return ctx

    def get(self, request, *args, **kwargs):
        self.controller = load_supplier_table(request.GET)
        if request.GET.get("export") == "1":
            if self.controller.error is not None:
                return HttpResponse(str(self.controller.error), status=502, content_type="text/plain")
            return _export_csv(self.controller)
        return super().get(request, *args, **kwargs)


def _export_csv(controller: SupplierTableController, ids=None) -> HttpResponse:
    response = HttpResponse(content_type="text/csv")
    response["Content-Disposition"] = "attachment; filename=suppliers.csv"
    writer = csv.writer(response)
    writer.writerow([column.label for column in controller.columns])
    for supplier, cells in controller.table_rows():
        if ids is not None and supplier.supplier_id not in ids:
            continue
        writer.writerow(
            [value.label if column.key == "status" else (value if value is not None else "") for column, value in cells]
        )
    return response


class SupplierCreateView(View):
    template_name = "inventory/supplier_form.html"

    def get(self, request):
        form = SupplierForm()
        return render(request, self.template_name, {"form": form, "is_edit": False})

    def post(self, request):
        form = SupplierForm(request.POST)
        if form.is_valid():
            try:
                supplier = async_to_sync(get_store().suppliers.create_supplier)(form.cleaned_data)
            except ValidationError as exc:
                for field, errors in _form_errors(exc).items():
                    for error in errors:
                        form.add_error(None if field == "__all__" else field, error)
            except GatewayError as exc:
                messages.error(request, f"Could not add supplier: {exc}")
            else:
                messages.success(request, f"Supplier '{supplier.name}' added.")
                return redirect("suppliers_list")
        return render(request, self.template_name, {"form": form, "is_edit": False})


class SupplierEditView(View):
    template_name = "inventory/supplier_form.html"

    def _get_supplier(self, pk):
        try:
            return async_to_sync(get_store().suppliers.get_supplier)(pk)
        except NotFoundError:
            raise Http404(f"Supplier {pk} not found")

    def get(self, request, pk):
        supplier = self._get_supplier(pk)
        form = SupplierForm.from_supplier(supplier)
        ctx = {"form": form, "is_edit": True, "supplier": supplier}
        return render(request, self.template_name, ctx)

    def post(self, request, pk):
        supplier = self._get_supplier(pk)
        form = SupplierForm.from_supplier(supplier, request.POST)
        if form.is_valid():
            try:
                async_to_sync(get_store().suppliers.update_supplier)(pk, form.cleaned_data)
            except NotFoundError:
                raise Http404(f"Supplier {pk} not found")
            except ValidationError as exc:
                for field, errors in _form_errors(exc).items():
                    for error in errors:
                        form.add_error(None if field == "__all__" else field, error)
            except GatewayError as exc:
                messages.error(request, f"Could not update supplier: {exc}")
            else:
                messages.success(request, f"Supplier '{form.cleaned_data['name']}' updated.")
                return redirect("suppliers_list")
        ctx = {"form": form, "is_edit": True, "supplier": supplier}
        return render(request, self.template_name, ctx)


class SupplierToggleArchivedView(View):
    """Archive or restore one supplier, then re-render the table partial.

    The view options travel in the POST body so the refreshed table keeps the
    caller's columns, search and archived filter.
    """

    def post(self, request, pk):
        repository = get_store().suppliers
        try:
            supplier = async_to_sync(repository.get_supplier)(pk)
            async_to_sync(repository.set_archived)([pk], not supplier.archived)
        except NotFoundError:
            raise Http404(f"Supplier {pk} not found")
        except GatewayError as exc:
            logger.warning("Archive toggle for supplier %s failed: %s", pk, exc)
            return render_table(
                request, request.POST, action_error=f"Could not change supplier status: {exc}"
            )
        verb = "Restored" if supplier.archived else "Archived"
        return render_table(request, request.POST, action_message=f"{verb} '{supplier.name}'.")


BULK_ACTIONS = ("archive", "restore", "delete", "export")


class SuppliersBulkActionView(View):
    """Apply an action to the suppliers selected in the table.

    POST params:
        ids       repeated supplier ids
        action    one of ``archive``, ``restore``, ``delete`` or ``export``
        plus the view options, so the refreshed table keeps its state.
    """

    def post(self, request):
        action = request.POST.get("action")
        if action not in BULK_ACTIONS:
            return HttpResponseBadRequest("Unknown bulk action")
        ids = [i for i in request.POST.getlist("ids") if i]
        if not ids:
            return render_table(request, request.POST, action_error="Select at least one supplier.")
        if action == "export":
            controller = load_supplier_table(request.POST)
            if controller.error is not None:
                return HttpResponse(str(controller.error), status=502, content_type="text/plain")
            return _export_csv(controller, ids=set(ids))

        repository = get_store().suppliers
        try:
            if action == "delete":
                count = async_to_sync(repository.delete_suppliers)(ids)
            else:
                count = async_to_sync(repository.set_archived)(ids, action == "archive")
        except GatewayError as exc:
            logger.warning("Bulk %s of %d supplier(s) failed: %s", action, len(ids), exc)
            return render_table(
                request, request.POST, action_error=f"Could not {action} suppliers: {exc}"
            )
        verb = {"archive": "Archived", "restore": "Restored", "delete": "Deleted"}[action]
        return render_table(request, request.POST, action_message=f"{verb} {count} supplier(s).")


class SupplierDeleteView(View):
    def post(self, request, pk):
        try:
            deleted = async_to_sync(get_store().suppliers.delete_suppliers)([pk])
        except GatewayError as exc:
            messages.error(request, f"Could not delete supplier: {exc}")
            return redirect("suppliers_list")
        if not deleted:
            raise Http404(f"Supplier {pk} not found")
        messages.success(request, "Supplier deleted.")
        return redirect("suppliers_list")


class SuppliersBulkUploadView(View):
    template_name = "inventory/bulk_upload.html"

    def _context(self, form, inserted=0, errors=None):
        return {
            "form": form,
            "inserted": inserted,
            "errors": errors or [],
            "title": "Bulk Upload Suppliers",
            "back_url": "suppliers_list",
        }

    def get(self, request):
        return render(request, self.template_name, self._context(BulkUploadForm()))

    def post(self, request):
        inserted = 0
        errors: list[str] = []
        form = BulkUploadForm(request.POST, request.FILES)
        if form.is_valid():
            create = async_to_sync(get_store().suppliers.create_supplier)
            file = form.cleaned_data["file"]
            try:
                data = io.StringIO(file.read().decode("utf-8-sig"))
            except UnicodeDecodeError:
                errors.append("File must be UTF-8 encoded CSV.")
                return render(request, self.template_name, self._context(form, 0, errors))
            reader = csv.DictReader(data)
            for line, row in enumerate(reader, start=2):
                form_row = SupplierForm(row)
                if not form_row.is_valid():
                    errors.append(f"Row {line}: {form_row.errors.as_text()}")
                    continue
                try:
                    create(form_row.cleaned_data)
                except ValidationError as exc:
                    errors.append(f"Row {line}: {'; '.join(exc.messages)}")
                except GatewayError as exc:
                    errors.append(f"Row {line}: {exc}")
                else:
                    inserted += 1
            logger.info("Bulk supplier upload: %d inserted, %d error(s)", inserted, len(errors))
        return render(request, self.template_name, self._context(form, inserted, errors))
