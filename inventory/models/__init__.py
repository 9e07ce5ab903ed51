from .status import Status
from .suppliers import COLUMN_MAP, EDITABLE_FIELDS, Supplier

__all__ = [
    "COLUMN_MAP",
    "EDITABLE_FIELDS",
    "Status",
    "Supplier",
]
