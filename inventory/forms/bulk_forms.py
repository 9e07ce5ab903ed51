from django import forms

from .base import StyledFormMixin


class BulkUploadForm(StyledFormMixin, forms.Form):
    file = forms.FileField(help_text="CSV with a header row: name,website,email,phone,address,notes")
