from django import forms

from .base import StyledFormMixin


class SupplierForm(StyledFormMixin, forms.Form):
    name = forms.CharField(max_length=255)
    website = forms.URLField(required=False, assume_scheme="https")
    email = forms.EmailField(required=False)
    phone = forms.CharField(max_length=50, required=False)
    address = forms.CharField(widget=forms.Textarea(attrs={"rows": 3}), required=False)
    notes = forms.CharField(widget=forms.Textarea(attrs={"rows": 3}), required=False)

    def clean_name(self):
        name = self.cleaned_data["name"].strip()
        if not name:
            raise forms.ValidationError("Supplier name is required.")
        return name

    @classmethod
    def from_supplier(cls, supplier, data=None):
        """Return a form bound to ``data`` or pre-filled from ``supplier``."""
        if data is not None:
            return cls(data)
        initial = {
            field: getattr(supplier, field) or ""
            for field in ("name", "website", "email", "phone", "address", "notes")
        }
        return cls(initial=initial)
