"""Thin async gateway over the Supabase query builder.

Requests are described with :class:`Predicate` and :class:`Ordering` values
and executed against a supabase-py client. The client's ``execute()`` call is
blocking, so it runs in a worker thread via ``sync_to_async``. Each call is a
single attempt; failures are logged and re-raised as
:class:`~inventory.exceptions.GatewayError`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Sequence

import httpx
from asgiref.sync import sync_to_async
from postgrest.exceptions import APIError

from ..exceptions import GatewayError, GatewayErrorKind

logger = logging.getLogger(__name__)

Row = Dict[str, Any]

_AUTH_CODES = {"42501", "PGRST301", "PGRST302"}


@dataclass(frozen=True)
class Predicate:
    """Equality (``eq``) or membership (``in``) constraint on a column."""

    column: str
    value: Any
    op: str = "eq"

    def __post_init__(self):
        if self.op not in {"eq", "in"}:
            raise ValueError(f"Unsupported predicate operator: {self.op}")


@dataclass(frozen=True)
class Ordering:
    column: str
    descending: bool = False


def eq(column: str, value: Any) -> Predicate:
    return Predicate(column, value)


def in_(column: str, values: Iterable[Any]) -> Predicate:
    return Predicate(column, list(values), op="in")


def classify_api_error(exc: APIError) -> GatewayErrorKind:
    """Map a PostgREST error onto the gateway error taxonomy."""
    code = str(getattr(exc, "code", "") or "")
    if code in _AUTH_CODES or code in {"401", "403"}:
        return GatewayErrorKind.AUTHORIZATION
    if code.startswith("23"):
        return GatewayErrorKind.CONSTRAINT
    return GatewayErrorKind.REQUEST


class SupabaseGateway:
    """Issue filtered, ordered requests against a Supabase client."""

    def __init__(self, client):
        self.client = client

    def _apply(self, query, predicates: Sequence[Predicate]):
        for predicate in predicates:
            if predicate.op == "in":
                query = query.in_(predicate.column, predicate.value)
            else:
                query = query.eq(predicate.column, predicate.value)
        return query

    async def _execute(self, action: str, table: str, query) -> List[Row]:
        try:
            resp = await sync_to_async(query.execute, thread_sensitive=False)()
        except APIError as exc:
            kind = classify_api_error(exc)
            logger.error("Supabase %s on %s failed (%s): %s", action, table, kind.value, exc.message)
            raise GatewayError(exc.message or str(exc), kind, getattr(exc, "code", None)) from exc
        except httpx.HTTPError as exc:
            logger.error("Supabase %s on %s failed: network error %s", action, table, exc)
            raise GatewayError(f"Could not reach the data store: {exc}", GatewayErrorKind.NETWORK) from exc
        rows = list(resp.data or [])
        logger.debug("Supabase %s on %s returned %d row(s)", action, table, len(rows))
        return rows

    async def select(
        self,
        table: str,
        predicates: Sequence[Predicate] = (),
        ordering: Sequence[Ordering] = (),
        columns: str = "*",
    ) -> List[Row]:
        query = self._apply(self.client.table(table).select(columns), predicates)
        for order in ordering:
            query = query.order(order.column, desc=order.descending)
        return await self._execute("select", table, query)

    async def insert(self, table: str, row: Mapping[str, Any]) -> List[Row]:
        query = self.client.table(table).insert(dict(row))
        return await self._execute("insert", table, query)

    async def update(
        self, table: str, values: Mapping[str, Any], predicates: Sequence[Predicate]
    ) -> List[Row]:
        if not predicates:
            raise ValueError("Refusing to update without predicates")
        query = self._apply(self.client.table(table).update(dict(values)), predicates)
        return await self._execute("update", table, query)

    async def delete(self, table: str, predicates: Sequence[Predicate]) -> List[Row]:
        if not predicates:
            raise ValueError("Refusing to delete without predicates")
        query = self._apply(self.client.table(table).delete(), predicates)
        return await self._execute("delete", table, query)


__all__ = [
    "Ordering",
    "Predicate",
    "SupabaseGateway",
    "classify_api_error",
    "eq",
    "in_",
]
