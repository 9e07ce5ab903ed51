"""Per-view table preferences: archived visibility, visible columns and search.

A :class:`ViewOptions` instance belongs to one mounted table view. It lives
only as long as that view and is carried between requests in the page's own
query string (``to_query``/``from_query``); nothing is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from django.http import QueryDict

TRUE_VALUES = {"1", "true", "on", "yes"}

# Query marker telling ``from_query`` that the column checkboxes were submitted,
# so an absent ``columns`` list means "hide every optional column".
VIEW_MARKER = "view"


@dataclass(frozen=True)
class Column:
    key: str
    label: str
    required: bool = False


SUPPLIER_COLUMNS: Tuple[Column, ...] = (
    Column("name", "Supplier Name", required=True),
    Column("website", "Website"),
    Column("phone", "Phone"),
    Column("email", "Email"),
    Column("address", "Address"),
    Column("notes", "Notes"),
    Column("status", "Status"),
    Column("created_at", "Created Date"),
)

# Fields the search term is matched against, case-insensitively.
SEARCH_FIELDS = ("name", "website", "phone", "email")


@dataclass
class ViewOptions:
    columns: Sequence[Column] = SUPPLIER_COLUMNS
    show_archived: bool = False
    visible_columns: Optional[Set[str]] = None
    search: str = ""

    def __post_init__(self):
        if self.visible_columns is None:
            self.visible_columns = {c.key for c in self.columns}
        else:
            self.visible_columns = set(self.visible_columns)
        self.visible_columns |= {c.key for c in self.columns if c.required}
        self.search = (self.search or "").strip()

    def _column(self, key: str) -> Column:
        for column in self.columns:
            if column.key == key:
                return column
        raise KeyError(key)

    def toggle_show_archived(self) -> bool:
        self.show_archived = not self.show_archived
        return self.show_archived

    def set_column_visible(self, key: str, visible: bool) -> None:
        column = self._column(key)
        if visible:
            self.visible_columns.add(key)
        elif column.required:
            raise ValueError(f"Column {key!r} cannot be hidden")
        else:
            self.visible_columns.discard(key)

    def is_visible(self, key: str) -> bool:
        return key in self.visible_columns

    def visible(self) -> List[Column]:
        """Return visible columns in display order."""
        return [c for c in self.columns if c.key in self.visible_columns]

    def matches(self, supplier) -> bool:
        """True when ``supplier`` contains the search term in a searchable field."""
        if not self.search:
            return True
        term = self.search.lower()
        return any(
            term in (getattr(supplier, key) or "").lower() for key in SEARCH_FIELDS
        )

    def filter_rows(self, suppliers: Iterable) -> list:
        return [s for s in suppliers if self.matches(s)]

    def copy(self) -> "ViewOptions":
        return replace(self, visible_columns=set(self.visible_columns))

    def to_query(self) -> QueryDict:
        query = QueryDict(mutable=True)
        query[VIEW_MARKER] = "1"
        if self.show_archived:
            query["show_archived"] = "1"
        if self.search:
            query["search"] = self.search
        query.setlist("columns", [c.key for c in self.visible()])
        return query

    @classmethod
    def from_query(
        cls, params: Mapping[str, Any], columns: Sequence[Column] = SUPPLIER_COLUMNS
    ) -> "ViewOptions":
        """Build options from GET parameters, ignoring unknown columns.

        ``params`` may be a ``QueryDict`` or a plain mapping whose ``columns``
        entry is a single key or a list of keys.
        """
        show_archived = (params.get("show_archived") or "").strip().lower() in TRUE_VALUES
        known = {c.key for c in columns}
        if hasattr(params, "getlist"):
            requested: Iterable[str] = params.getlist("columns")
        else:
            requested = params.get("columns") or []
            if isinstance(requested, str):
                requested = [requested]
        visible = None
        if params.get(VIEW_MARKER):
            visible = {key for key in requested if key in known}
        return cls(
            columns=columns,
            show_archived=show_archived,
            visible_columns=visible,
            search=params.get("search") or "",
        )
