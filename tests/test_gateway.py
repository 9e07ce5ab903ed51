import asyncio

import httpx
import pytest
from postgrest.exceptions import APIError

from inventory.exceptions import GatewayError, GatewayErrorKind
from inventory.services.gateway import Ordering, Predicate, SupabaseGateway, eq, in_


class DummyResp:
    def __init__(self, data):
        self.data = data


class DummyQuery:
    def __init__(self, client, table):
        self.client = client
        self.calls = [("table", table)]
        client.queries.append(self)

    def __getattr__(self, name):
        if name in {"select", "eq", "in_", "order", "insert", "update", "delete"}:
            def record(*args, **kwargs):
                self.calls.append((name, args, kwargs))
                return self
            return record
        raise AttributeError(name)

    def execute(self):
        if self.client.error is not None:
            raise self.client.error
        return DummyResp(self.client.data)


class DummyClient:
    def __init__(self, data=None, error=None):
        self.data = data
        self.error = error
        self.queries = []

    def table(self, name):
        return DummyQuery(self, name)


def test_select_builds_filtered_ordered_query():
    client = DummyClient([{"supplierid": "1", "name": "A"}])
    gateway = SupabaseGateway(client)
    rows = asyncio.run(
        gateway.select(
            "suppliers",
            [eq("isarchived", False), in_("supplierid", ["1", "2"])],
            [Ordering("name"), Ordering("supplierid", descending=True)],
        )
    )
    assert rows == [{"supplierid": "1", "name": "A"}]
    assert client.queries[0].calls == [
        ("table", "suppliers"),
        ("select", ("*",), {}),
        ("eq", ("isarchived", False), {}),
        ("in_", ("supplierid", ["1", "2"]), {}),
        ("order", ("name",), {"desc": False}),
        ("order", ("supplierid",), {"desc": True}),
    ]


def test_select_with_no_data_returns_empty_list():
    gateway = SupabaseGateway(DummyClient(None))
    assert asyncio.run(gateway.select("suppliers")) == []


def test_update_and_delete_require_predicates():
    gateway = SupabaseGateway(DummyClient([]))
    with pytest.raises(ValueError):
        asyncio.run(gateway.update("suppliers", {"name": "x"}, []))
    with pytest.raises(ValueError):
        asyncio.run(gateway.delete("suppliers", []))


def test_insert_passes_row_through():
    client = DummyClient([{"supplierid": "9", "name": "New"}])
    rows = asyncio.run(SupabaseGateway(client).insert("suppliers", {"name": "New"}))
    assert rows[0]["supplierid"] == "9"
    assert client.queries[0].calls[1] == ("insert", ({"name": "New"},), {})


def test_unsupported_predicate_operator():
    with pytest.raises(ValueError):
        Predicate("name", "x", op="like")


@pytest.mark.parametrize(
    "code, kind",
    [
        ("23505", GatewayErrorKind.CONSTRAINT),
        ("42501", GatewayErrorKind.AUTHORIZATION),
        ("PGRST301", GatewayErrorKind.AUTHORIZATION),
        ("PGRST116", GatewayErrorKind.REQUEST),
    ],
)
def test_api_errors_are_classified(code, kind):
    error = APIError({"message": "boom", "code": code, "hint": None, "details": None})
    gateway = SupabaseGateway(DummyClient(error=error))
    with pytest.raises(GatewayError) as exc:
        asyncio.run(gateway.select("suppliers"))
    assert exc.value.kind is kind
    assert exc.value.code == code
    assert exc.value.message == "boom"


def test_network_failure_raises_network_gateway_error():
    gateway = SupabaseGateway(DummyClient(error=httpx.ConnectError("refused")))
    with pytest.raises(GatewayError) as exc:
        asyncio.run(gateway.delete("suppliers", [eq("supplierid", "1")]))
    assert exc.value.kind is GatewayErrorKind.NETWORK
