from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from django.utils.dateparse import parse_datetime

from .status import Status

# Domain attribute -> column in the ``suppliers`` table
COLUMN_MAP = {
    "supplier_id": "supplierid",
    "name": "name",
    "website": "website",
    "email": "email",
    "phone": "contactphone",
    "address": "address",
    "notes": "notes",
    "archived": "isarchived",
    "created_at": "created_at",
    "updated_at": "updated_at",
}

EDITABLE_FIELDS = ("name", "website", "email", "phone", "address", "notes")


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return parse_datetime(str(value))


@dataclass(frozen=True)
class Supplier:
    """Vendor contact details and archive flag as stored in Supabase."""

    supplier_id: str
    name: str
    website: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None
    archived: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __str__(self) -> str:  # pragma: no cover - simple representation
        return self.name or f"Supplier {self.supplier_id}"

    @property
    def status(self) -> Status:
        return Status.ARCHIVED if self.archived else Status.ACTIVE

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Supplier":
        """Build a supplier from a store row, tolerating missing columns."""
        return cls(
            supplier_id=str(row[COLUMN_MAP["supplier_id"]]),
            name=row.get("name") or "",
            website=row.get("website"),
            email=row.get("email"),
            phone=row.get("contactphone"),
            address=row.get("address"),
            notes=row.get("notes"),
            archived=bool(row.get("isarchived") or False),
            created_at=_parse_timestamp(row.get("created_at")),
            updated_at=_parse_timestamp(row.get("updated_at")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "supplier_id": self.supplier_id,
            "name": self.name,
            "website": self.website,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            "notes": self.notes,
            "archived": self.archived,
            "status": self.status.value,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


def to_row(values: Mapping[str, Any]) -> Dict[str, Any]:
    """Return ``values`` keyed by store column names."""
    return {COLUMN_MAP[key]: value for key, value in values.items()}
