import logging
from typing import Any, Dict, List, Mapping, Sequence

from django.core.exceptions import ValidationError

from ..exceptions import NotFoundError
from ..models import COLUMN_MAP, EDITABLE_FIELDS, Supplier
from ..models.suppliers import to_row
from .gateway import Ordering, eq, in_

logger = logging.getLogger(__name__)

TABLE = "suppliers"
ID_COLUMN = COLUMN_MAP["supplier_id"]
ARCHIVED_COLUMN = COLUMN_MAP["archived"]

# Name first; the id keeps suppliers sharing a name in a stable order.
DEFAULT_ORDERING = (Ordering("name"), Ordering(ID_COLUMN))


def _clean(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip() or None
    return value


class SupplierRepository:
    """Supplier queries and writes on top of a store gateway.

    Gateway errors are never caught here; callers decide how to surface them.
    """

    def __init__(self, gateway):
        self.gateway = gateway

    async def list_suppliers(self, include_archived: bool = False) -> List[Supplier]:
        predicates = [] if include_archived else [eq(ARCHIVED_COLUMN, False)]
        rows = await self.gateway.select(TABLE, predicates, DEFAULT_ORDERING)
        return [Supplier.from_row(row) for row in rows]

    async def get_supplier(self, supplier_id: str) -> Supplier:
        rows = await self.gateway.select(TABLE, [eq(ID_COLUMN, supplier_id)])
        if not rows:
            raise NotFoundError(f"Supplier {supplier_id} not found")
        return Supplier.from_row(rows[0])

    async def create_supplier(self, details: Mapping[str, Any]) -> Supplier:
        name = (details.get("name") or "").strip()
        if not name:
            raise ValidationError(
                {"name": "Supplier name is required and cannot be empty."}
            )
        values: Dict[str, Any] = {
            field: _clean(details.get(field)) for field in EDITABLE_FIELDS
        }
        values["name"] = name
        values["archived"] = False
        rows = await self.gateway.insert(TABLE, to_row(values))
        supplier = Supplier.from_row(rows[0])
        logger.info("Supplier '%s' added with ID %s", supplier.name, supplier.supplier_id)
        return supplier

    async def update_supplier(self, supplier_id: str, updates: Mapping[str, Any]) -> Supplier:
        values = {
            field: _clean(updates[field]) for field in EDITABLE_FIELDS if field in updates
        }
        if not values:
            raise ValidationError("No valid fields provided for update.")
        if "name" in values and not values["name"]:
            raise ValidationError({"name": "Supplier name cannot be empty."})
        rows = await self.gateway.update(TABLE, to_row(values), [eq(ID_COLUMN, supplier_id)])
        if not rows:
            raise NotFoundError(f"Update failed: Supplier ID {supplier_id} not found.")
        logger.info("Supplier ID %s updated (%s)", supplier_id, ", ".join(sorted(values)))
        return Supplier.from_row(rows[0])

    async def set_archived(self, supplier_ids: Sequence[str], archived: bool) -> int:
        """Archive or restore ``supplier_ids``; return the number of rows changed."""
        ids = list(supplier_ids)
        if not ids:
            return 0
        rows = await self.gateway.update(
            TABLE, {ARCHIVED_COLUMN: archived}, [in_(ID_COLUMN, ids)]
        )
        logger.info(
            "%s %d supplier(s)", "Archived" if archived else "Restored", len(rows)
        )
        return len(rows)

    async def delete_suppliers(self, supplier_ids: Sequence[str]) -> int:
        ids = list(supplier_ids)
        if not ids:
            return 0
        rows = await self.gateway.delete(TABLE, [in_(ID_COLUMN, ids)])
        logger.info("Deleted %d supplier(s)", len(rows))
        return len(rows)

    async def count_suppliers(self) -> Dict[str, int]:
        suppliers = await self.list_suppliers(include_archived=True)
        archived = sum(1 for s in suppliers if s.archived)
        return {"active": len(suppliers) - archived, "archived": archived}
