from __future__ import annotations

INPUT_CLASS = "form-input"
CHECKBOX_CLASS = "form-checkbox"
ERROR_CLASS = "has-error"


class StyledFormMixin:
    """Apply the app stylesheet classes to form widgets."""

    def apply_styling(self) -> None:
        for name, field in self.fields.items():
            widget = field.widget
            if getattr(widget, "input_type", None) == "checkbox":
                classes = CHECKBOX_CLASS
            else:
                classes = INPUT_CLASS
            if name in (self._errors or {}):
                classes += f" {ERROR_CLASS}"
            widget.attrs.update({"class": classes})

    def full_clean(self):
        super().full_clean()
        self.apply_styling()

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.apply_styling()
