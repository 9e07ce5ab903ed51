"""State for one mounted supplier table.

The controller owns a :class:`ViewOptions` instance and the rows currently
displayed. Every fetch is tagged with a generation number; only the response
to the latest fetch of a still-mounted view is applied, so a slow response to
a superseded toggle cannot overwrite newer state.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from ..exceptions import GatewayError
from ..models import Supplier
from .view_options import Column, ViewOptions

logger = logging.getLogger(__name__)

Cell = Tuple[Column, Any]


def cell_value(supplier: Supplier, column: Column) -> Any:
    if column.key == "status":
        return supplier.status
    return getattr(supplier, column.key)


class SupplierTableController:
    def __init__(self, repository, options: Optional[ViewOptions] = None):
        self.repository = repository
        self.options = options or ViewOptions()
        self.rows: List[Supplier] = []
        self.error: Optional[GatewayError] = None
        self.loading = False
        self.mounted = False
        self._generation = 0

    async def mount(self) -> None:
        self.mounted = True
        await self.refresh()

    def unmount(self) -> None:
        """Detach the view; results of in-flight fetches are dropped."""
        self.mounted = False
        self._generation += 1
        self.loading = False

    def _is_current(self, generation: int) -> bool:
        return self.mounted and generation == self._generation

    async def refresh(self) -> None:
        self._generation += 1
        generation = self._generation
        include_archived = self.options.show_archived
        self.loading = True
        try:
            rows = await self.repository.list_suppliers(include_archived=include_archived)
        except GatewayError as exc:
            if not self._is_current(generation):
                logger.debug("Ignoring error from superseded supplier fetch %d", generation)
                return
            logger.warning("Supplier fetch failed (%s): %s", exc.kind.value, exc)
            self.error = exc
            self.loading = False
            return
        if not self._is_current(generation):
            logger.debug("Discarding stale supplier fetch %d", generation)
            return
        self.rows = rows
        self.error = None
        self.loading = False

    async def toggle_show_archived(self) -> None:
        self.options.toggle_show_archived()
        await self.refresh()

    def set_column_visible(self, key: str, visible: bool) -> None:
        self.options.set_column_visible(key, visible)

    @property
    def columns(self) -> List[Column]:
        return self.options.visible()

    @property
    def visible_rows(self) -> List[Supplier]:
        """Fetched rows narrowed by the search term."""
        return self.options.filter_rows(self.rows)

    def table_rows(self) -> List[Tuple[Supplier, List[Cell]]]:
        columns = self.columns
        return [
            (supplier, [(column, cell_value(supplier, column)) for column in columns])
            for supplier in self.visible_rows
        ]
