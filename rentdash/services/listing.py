"""
Search, filter and ordering rules for the entity list pages.

Lookups that miss never fail: they resolve to placeholder labels.
"""
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from rentdash.schemas.contract import ContractGroupOut, ContractOut
from rentdash.schemas.expense import ExpenseDetailOut, ExpenseListOut, ExpenseOut
from rentdash.schemas.payment import PaymentDetailOut, PaymentOut
from rentdash.schemas.property import PropertyOut
from rentdash.schemas.report import PropertyListItem
from rentdash.schemas.tenant import TenantOut
from rentdash.services.analytics import find_by_id

UNKNOWN_PROPERTY = "Unknown property"
UNKNOWN_TENANT = "Unknown tenant"
NO_TENANT = "No tenant"

# Filter value meaning "no filter"
ALL = "all"


def _matches(search: Optional[str], *fields: Optional[str]) -> bool:
    if not search:
        return True
    needle = search.lower()
    return any(needle in (field or "").lower() for field in fields)


def _selected(value: Optional[str], wanted: Optional[str]) -> bool:
    return not wanted or wanted == ALL or value == wanted


def property_name(properties: Sequence[PropertyOut], property_id: Optional[str]) -> str:
    prop = find_by_id(properties, property_id)
    return prop.name if prop is not None else UNKNOWN_PROPERTY


def tenant_name(tenants: Sequence[TenantOut], tenant_id: Optional[str]) -> str:
    tenant = find_by_id(tenants, tenant_id)
    return tenant.name if tenant is not None else UNKNOWN_TENANT


def payment_details(
    payment: PaymentOut,
    contracts: Sequence[ContractOut],
    properties: Sequence[PropertyOut],
    tenants: Sequence[TenantOut],
) -> PaymentDetailOut:
    """Resolve payment -> contract -> property/tenant names."""
    contract = find_by_id(contracts, payment.contract_id)
    if contract is None:
        names = {"property_name": UNKNOWN_PROPERTY, "tenant_name": UNKNOWN_TENANT}
    else:
        names = {
            "property_name": property_name(properties, contract.property_id),
            "tenant_name": tenant_name(tenants, contract.tenant_id),
        }
    return PaymentDetailOut(**payment.model_dump(), **names)


def filter_properties(properties: Sequence[PropertyOut], search: Optional[str] = None) -> List[PropertyOut]:
    return [p for p in properties if _matches(search, p.name, p.address, p.type, p.status)]


def filter_tenants(tenants: Sequence[TenantOut], search: Optional[str] = None) -> List[TenantOut]:
    return [t for t in tenants if _matches(search, t.name, t.email, t.phone, t.cpf)]


def group_contracts(
    contracts: Sequence[ContractOut],
    properties: Sequence[PropertyOut],
    tenants: Sequence[TenantOut],
    search: Optional[str] = None,
) -> List[ContractGroupOut]:
    """
    Contracts grouped by property name, in first-seen order.

    The search matches the property name, the tenant name or the contract id.
    Groups left empty by the search are dropped.
    """
    groups: Dict[str, List[ContractOut]] = {}
    for contract in contracts:
        name = property_name(properties, contract.property_id)
        groups.setdefault(name, [])
        tenant = find_by_id(tenants, contract.tenant_id)
        if _matches(search, name, tenant.name if tenant else "", contract.id):
            groups[name].append(contract)

    return [
        ContractGroupOut(property_name=name, contracts=items)
        for name, items in groups.items()
        if items
    ]


def filter_payments(
    payments: Sequence[PaymentOut],
    contracts: Sequence[ContractOut],
    properties: Sequence[PropertyOut],
    tenants: Sequence[TenantOut],
    search: Optional[str] = None,
    status: Optional[str] = None,
) -> List[PaymentDetailOut]:
    """Payments matching property/tenant name and status, latest due date first."""
    detailed = [payment_details(p, contracts, properties, tenants) for p in payments]
    result = [
        p for p in detailed
        if _matches(search, p.property_name, p.tenant_name) and _selected(p.status, status)
    ]
    return sorted(result, key=lambda p: p.due_date, reverse=True)


def filter_expenses(
    expenses: Sequence[ExpenseOut],
    properties: Sequence[PropertyOut],
    search: Optional[str] = None,
    category: Optional[str] = None,
    property_id: Optional[str] = None,
) -> ExpenseListOut:
    """Expenses matching description/property name, category and property, newest first."""
    detailed = [
        ExpenseDetailOut(**e.model_dump(), property_name=property_name(properties, e.property_id))
        for e in expenses
    ]
    items = [
        e for e in detailed
        if _matches(search, e.description, e.property_name)
        and _selected(e.category, category)
        and _selected(e.property_id, property_id)
    ]
    # undated expenses sort last
    items.sort(key=lambda e: e.date.toordinal() if e.date else 0, reverse=True)
    return ExpenseListOut(
        items=items,
        count=len(items),
        total_amount=sum((e.amount for e in items), Decimal("0")),
    )


def property_list(properties: Sequence[PropertyOut], tenants: Sequence[TenantOut]) -> List[PropertyListItem]:
    """Dashboard rows: each property with the first tenant living there."""
    items = []
    for prop in properties:
        tenant = next((t for t in tenants if t.property_id == prop.id), None)
        items.append(
            PropertyListItem(
                id=prop.id,
                name=prop.name,
                address=prop.address,
                status=prop.status,
                image_url=prop.image_url,
                tenant_name=tenant.name if tenant is not None else NO_TENANT,
            )
        )
    return items
