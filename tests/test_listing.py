"""Tests for list page filters and name lookups."""

from datetime import date
from decimal import Decimal

from factories import make_contract, make_expense, make_payment, make_property, make_tenant
from rentdash.services.listing import (
    NO_TENANT,
    UNKNOWN_PROPERTY,
    UNKNOWN_TENANT,
    filter_expenses,
    filter_payments,
    filter_properties,
    filter_tenants,
    group_contracts,
    payment_details,
    property_list,
    property_name,
    tenant_name,
)


class TestNameLookups:
    """Missing references resolve to placeholders."""

    def test_property_and_tenant_names(self) -> None:
        assert property_name([make_property("p1", name="Casa Azul")], "p1") == "Casa Azul"
        assert property_name([], "p1") == UNKNOWN_PROPERTY
        assert property_name([make_property("p1")], "") == UNKNOWN_PROPERTY
        assert tenant_name([make_tenant("t1", name="Ana")], "t1") == "Ana"
        assert tenant_name([], "t1") == UNKNOWN_TENANT

    def test_payment_without_contract(self) -> None:
        detail = payment_details(make_payment(contract_id="gone"), [], [make_property()], [make_tenant()])

        assert detail.property_name == UNKNOWN_PROPERTY
        assert detail.tenant_name == UNKNOWN_TENANT

    def test_payment_with_contract_but_missing_tenant(self) -> None:
        detail = payment_details(
            make_payment(),
            [make_contract(tenant_id="gone")],
            [make_property(name="Casa Azul")],
            [],
        )

        assert detail.property_name == "Casa Azul"
        assert detail.tenant_name == UNKNOWN_TENANT


class TestPropertyAndTenantFilters:
    """Tests for free-text search."""

    def test_property_search_is_case_insensitive(self) -> None:
        properties = [
            make_property("p1", name="Casa Azul", address="Rua A"),
            make_property("p2", name="Loja Centro", address="Av. Paulista", type="commercial", status="vacant"),
        ]

        assert [p.id for p in filter_properties(properties, "casa")] == ["p1"]
        assert [p.id for p in filter_properties(properties, "PAULISTA")] == ["p2"]
        assert [p.id for p in filter_properties(properties, "vacant")] == ["p2"]
        assert len(filter_properties(properties, None)) == 2

    def test_search_term_is_matched_as_typed(self) -> None:
        properties = [make_property("p1", name="Casa Azul"), make_property("p2", name="Casa")]

        assert [p.id for p in filter_properties(properties, "casa ")] == ["p1"]
        assert filter_properties(properties, " casa") == []

    def test_tenant_search_fields(self) -> None:
        tenants = [
            make_tenant("t1", name="Ana Lima", email="ana@email.com.br", cpf="111.111.111-11"),
            make_tenant("t2", name="Bruno Reis", email="bruno@email.com.br", phone="(31) 90000-0000"),
        ]

        assert [t.id for t in filter_tenants(tenants, "lima")] == ["t1"]
        assert [t.id for t in filter_tenants(tenants, "bruno@")] == ["t2"]
        assert [t.id for t in filter_tenants(tenants, "111.111")] == ["t1"]
        assert [t.id for t in filter_tenants(tenants, "(31)")] == ["t2"]


class TestGroupContracts:
    """Tests for the contracts page grouping."""

    def setup_method(self) -> None:
        self.properties = [make_property("p1", name="Casa Azul"), make_property("p2", name="Loja Centro")]
        self.tenants = [make_tenant("t1", name="Ana"), make_tenant("t2", name="Bruno")]
        self.contracts = [
            make_contract("c1", property_id="p1", tenant_id="t1"),
            make_contract("c2", property_id="p2", tenant_id="t2"),
            make_contract("c3", property_id="p1", tenant_id="t2"),
            make_contract("c4", property_id="", tenant_id="t1"),
        ]

    def test_grouped_by_property_name(self) -> None:
        groups = group_contracts(self.contracts, self.properties, self.tenants)

        assert [g.property_name for g in groups] == ["Casa Azul", "Loja Centro", UNKNOWN_PROPERTY]
        assert [c.id for c in groups[0].contracts] == ["c1", "c3"]

    def test_search_by_tenant_drops_empty_groups(self) -> None:
        groups = group_contracts(self.contracts, self.properties, self.tenants, search="bruno")

        assert [g.property_name for g in groups] == ["Casa Azul", "Loja Centro"]
        assert [c.id for c in groups[0].contracts] == ["c3"]

    def test_search_by_contract_id(self) -> None:
        groups = group_contracts(self.contracts, self.properties, self.tenants, search="c4")

        assert len(groups) == 1
        assert groups[0].property_name == UNKNOWN_PROPERTY


class TestFilterPayments:
    """Tests for the payments page."""

    def test_sorted_by_due_date_and_filtered_by_status(self) -> None:
        payments = [
            make_payment("old", due_date=date(2026, 8, 5), status="paid"),
            make_payment("new", due_date=date(2026, 10, 5), status="pending"),
            make_payment("mid", due_date=date(2026, 9, 5), status="overdue"),
        ]
        contracts = [make_contract()]
        properties = [make_property(name="Casa Azul")]
        tenants = [make_tenant(name="Ana")]

        everything = filter_payments(payments, contracts, properties, tenants, status="all")
        assert [p.id for p in everything] == ["new", "mid", "old"]
        assert everything[0].property_name == "Casa Azul"
        assert everything[0].tenant_name == "Ana"

        overdue = filter_payments(payments, contracts, properties, tenants, status="overdue")
        assert [p.id for p in overdue] == ["mid"]

        assert filter_payments(payments, contracts, properties, tenants, search="nobody") == []
        assert len(filter_payments(payments, contracts, properties, tenants, search="ana")) == 3


class TestFilterExpenses:
    """Tests for the expenses page."""

    def test_filters_order_and_total(self) -> None:
        properties = [make_property("p1", name="Casa Azul"), make_property("p2", name="Loja Centro")]
        expenses = [
            make_expense("e1", property_id="p1", date=date(2026, 8, 1), category="taxes", amount=Decimal("100")),
            make_expense("e2", property_id="p2", date=date(2026, 10, 1), category="maintenance", amount=Decimal("250.50")),
            make_expense("e3", property_id="p1", date=None, category="maintenance", amount=Decimal("40")),
            make_expense("e4", property_id="p1", date=date(2026, 9, 1), category="maintenance", amount=Decimal("60")),
        ]

        listed = filter_expenses(expenses, properties)
        assert [e.id for e in listed.items] == ["e2", "e4", "e1", "e3"]
        assert listed.count == 4
        assert listed.total_amount == Decimal("450.50")

        maintenance_p1 = filter_expenses(expenses, properties, category="maintenance", property_id="p1")
        assert [e.id for e in maintenance_p1.items] == ["e4", "e3"]
        assert maintenance_p1.total_amount == Decimal("100")

        by_name = filter_expenses(expenses, properties, search="loja", category="all", property_id="all")
        assert [e.id for e in by_name.items] == ["e2"]
        assert by_name.items[0].property_name == "Loja Centro"

    def test_detached_expense_keeps_placeholder_name(self) -> None:
        listed = filter_expenses([make_expense(property_id="")], [])
        assert listed.items[0].property_name == UNKNOWN_PROPERTY


class TestPropertyList:
    """Tests for the dashboard property rows."""

    def test_tenant_name_or_placeholder(self) -> None:
        properties = [make_property("p1", name="Casa Azul"), make_property("p2", name="Loja Centro")]
        tenants = [make_tenant("t1", name="Ana", property_id="p1"), make_tenant("t2", name="Bruno", property_id="p1")]

        rows = property_list(properties, tenants)

        assert [(r.id, r.tenant_name) for r in rows] == [("p1", "Ana"), ("p2", NO_TENANT)]
