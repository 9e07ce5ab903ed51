import asyncio
import random

import pytest
from django.core.exceptions import ValidationError

from conftest import FakeGateway, supplier_row
from inventory.exceptions import GatewayError, NotFoundError
from inventory.models import Status
from inventory.services.supplier_repository import SupplierRepository


@pytest.fixture
def repo(fake_gateway):
    return SupplierRepository(fake_gateway)


def names(suppliers):
    return [s.name for s in suppliers]


def test_list_suppliers_excludes_archived(repo):
    suppliers = asyncio.run(repo.list_suppliers(include_archived=False))
    assert names(suppliers) == ["A Supply", "C Foods"]
    assert all(s.archived is False for s in suppliers)


def test_list_suppliers_includes_archived(repo):
    suppliers = asyncio.run(repo.list_suppliers(include_archived=True))
    assert names(suppliers) == ["A Supply", "B Wholesale", "C Foods"]
    assert suppliers[1].status is Status.ARCHIVED


def test_archived_result_is_superset_of_active(repo):
    active = {s.supplier_id for s in asyncio.run(repo.list_suppliers(False))}
    everything = {s.supplier_id for s in asyncio.run(repo.list_suppliers(True))}
    assert active <= everything


def test_list_request_orders_by_name_then_id(repo, fake_gateway):
    asyncio.run(repo.list_suppliers(False))
    action, table, kwargs = fake_gateway.calls[-1]
    assert (action, table) == ("select", "suppliers")
    assert [(o.column, o.descending) for o in kwargs["ordering"]] == [
        ("name", False),
        ("supplierid", False),
    ]
    assert [(p.column, p.value) for p in kwargs["predicates"]] == [("isarchived", False)]


def test_list_with_archived_sends_no_filter(repo, fake_gateway):
    asyncio.run(repo.list_suppliers(True))
    assert fake_gateway.calls[-1][2]["predicates"] == []


def test_results_sorted_for_shuffled_input():
    rows = [supplier_row(f"s-{i}", name) for i, name in enumerate("delta alpha echo bravo charlie".split())]
    random.Random(7).shuffle(rows)
    suppliers = asyncio.run(SupplierRepository(FakeGateway({"suppliers": rows})).list_suppliers(True))
    assert names(suppliers) == sorted(names(suppliers))


def test_equal_names_break_ties_by_id():
    rows = [supplier_row("s-9", "Same"), supplier_row("s-2", "Same"), supplier_row("s-5", "Same")]
    suppliers = asyncio.run(SupplierRepository(FakeGateway({"suppliers": rows})).list_suppliers(True))
    assert [s.supplier_id for s in suppliers] == ["s-2", "s-5", "s-9"]


def test_gateway_error_propagates(repo, fake_gateway, network_error):
    fake_gateway.error = network_error
    with pytest.raises(GatewayError):
        asyncio.run(repo.list_suppliers(False))


def test_row_mapping(repo):
    supplier = asyncio.run(repo.get_supplier("s-1"))
    assert supplier.email == "sales@a.example"
    assert supplier.phone == "555-0100"
    assert supplier.created_at.year == 2024


def test_get_missing_supplier(repo):
    with pytest.raises(NotFoundError):
        asyncio.run(repo.get_supplier("nope"))


def test_create_supplier_defaults_to_active(repo, fake_gateway):
    supplier = asyncio.run(
        repo.create_supplier({"name": "  New Co ", "email": "", "phone": "123"})
    )
    assert supplier.name == "New Co"
    assert supplier.archived is False
    assert supplier.email is None
    inserted = fake_gateway.calls[-1][2]["row"]
    assert inserted["isarchived"] is False
    assert inserted["contactphone"] == "123"


def test_create_supplier_requires_name(repo, fake_gateway):
    with pytest.raises(ValidationError):
        asyncio.run(repo.create_supplier({"name": "   "}))
    assert not any(call[0] == "insert" for call in fake_gateway.calls)


def test_update_supplier_changes_fields(repo):
    supplier = asyncio.run(repo.update_supplier("s-1", {"phone": " 999 ", "unknown": "x"}))
    assert supplier.phone == "999"


def test_update_supplier_rejects_blank_name_and_empty_updates(repo):
    with pytest.raises(ValidationError):
        asyncio.run(repo.update_supplier("s-1", {"name": ""}))
    with pytest.raises(ValidationError):
        asyncio.run(repo.update_supplier("s-1", {"is_active": True}))


def test_update_supplier_invalid_id(repo):
    with pytest.raises(NotFoundError):
        asyncio.run(repo.update_supplier("missing", {"phone": "000"}))


def test_archive_and_restore(repo):
    assert asyncio.run(repo.set_archived(["s-1", "s-2"], True)) == 2
    assert asyncio.run(repo.list_suppliers(False)) == []
    assert asyncio.run(repo.set_archived(["s-1"], False)) == 1
    assert names(asyncio.run(repo.list_suppliers(False))) == ["A Supply"]


def test_empty_bulk_operations_skip_the_store(repo, fake_gateway):
    assert asyncio.run(repo.set_archived([], True)) == 0
    assert asyncio.run(repo.delete_suppliers([])) == 0
    assert fake_gateway.calls == []


def test_delete_suppliers(repo):
    assert asyncio.run(repo.delete_suppliers(["s-3"])) == 1
    assert names(asyncio.run(repo.list_suppliers(True))) == ["A Supply", "C Foods"]


def test_count_suppliers(repo):
    assert asyncio.run(repo.count_suppliers()) == {"active": 2, "archived": 1}
