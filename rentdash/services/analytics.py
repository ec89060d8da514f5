"""
Derived dashboard views.

Pure functions over the in-memory collections; nothing here touches the
database. Callers pass `today` so results are deterministic under test.
"""
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from rentdash.schemas.contract import ContractOut
from rentdash.schemas.expense import ExpenseOut
from rentdash.schemas.payment import PaymentOut
from rentdash.schemas.property import PropertyOut
from rentdash.schemas.report import MonthlyFinancialsOut, StatsOut
from rentdash.schemas.tenant import TenantOut


SUPPORTED_SERIES_MONTHS = (3, 6, 12)

MONTH_ABBREVIATIONS = {
    "pt-BR": ("jan", "fev", "mar", "abr", "mai", "jun", "jul", "ago", "set", "out", "nov", "dez"),
    "en": ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
}

# Reminder ordering: overdue first, then pending, then paid; unknown ranks with pending
PAYMENT_STATUS_RANK = {"overdue": 0, "pending": 1, "paid": 2}

_CENTS = Decimal("0.01")


def compute_stats(
    properties: Sequence[PropertyOut],
    tenants: Sequence[TenantOut],
    payments: Sequence[PaymentOut],
    expenses: Sequence[ExpenseOut],
) -> StatsOut:
    occupied = sum(1 for p in properties if p.status == "occupied")
    vacant = sum(1 for p in properties if p.status == "vacant")
    maintenance = sum(1 for p in properties if p.status == "maintenance")

    total_income = sum(
        (p.amount + p.late_fee for p in payments if p.status == "paid"), Decimal("0")
    )
    total_expenses = sum((e.amount for e in expenses), Decimal("0"))

    total_properties = len(properties)
    occupancy_rate = 0
    if total_properties > 0:
        # half-up, so 1 of 8 shows 13
        rate = Decimal(occupied * 100) / Decimal(total_properties)
        occupancy_rate = int(rate.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    return StatsOut(
        total_properties=total_properties,
        occupied_properties=occupied,
        vacant_properties=vacant,
        maintenance_properties=maintenance,
        occupancy_rate=occupancy_rate,
        total_tenants=len(tenants),
        pending_payments=sum(1 for p in payments if p.status == "pending"),
        overdue_payments=sum(1 for p in payments if p.status == "overdue"),
        total_income=float(total_income),
        total_expenses=float(total_expenses),
        net_income=float(total_income - total_expenses),
    )


def month_label(year: int, month: int, locale: str = "pt-BR") -> str:
    """'MMM yyyy' label, e.g. 'out 2026' (pt-BR) or 'Oct 2026' (en)."""
    names = MONTH_ABBREVIATIONS.get(locale, MONTH_ABBREVIATIONS["en"])
    return f"{names[month - 1]} {year}"


def trailing_months(today: date, months: int) -> List[Tuple[int, int]]:
    """(year, month) keys from months-1 months ago through today's month, oldest first."""
    keys = []
    for offset in range(months - 1, -1, -1):
        index = today.year * 12 + (today.month - 1) - offset
        keys.append((index // 12, index % 12 + 1))
    return keys


def compute_monthly_financials(
    payments: Iterable[PaymentOut],
    expenses: Iterable[ExpenseOut],
    today: date,
    months: int = 6,
    locale: str = "pt-BR",
) -> List[MonthlyFinancialsOut]:
    keys = trailing_months(today, months)
    income: Dict[Tuple[int, int], Decimal] = {key: Decimal("0") for key in keys}
    spent: Dict[Tuple[int, int], Decimal] = {key: Decimal("0") for key in keys}

    for payment in payments:
        if payment.status != "paid" or payment.date is None:
            continue
        key = (payment.date.year, payment.date.month)
        if key in income:
            income[key] += payment.amount + payment.late_fee

    for expense in expenses:
        if expense.date is None:
            continue
        key = (expense.date.year, expense.date.month)
        if key in spent:
            spent[key] += expense.amount

    return [
        MonthlyFinancialsOut(
            month=month_label(year, month, locale),
            year=year,
            month_number=month,
            income=float(income[(year, month)]),
            expenses=float(spent[(year, month)]),
            net_income=float(income[(year, month)] - spent[(year, month)]),
        )
        for year, month in keys
    ]


def days_late(payment: PaymentOut, today: date) -> int:
    return (today - payment.due_date).days


def calculate_late_fee(
    payment: PaymentOut,
    contracts: Iterable[ContractOut],
    today: date,
) -> Decimal:
    """
    Penalty for an overdue payment once the contract's grace period has passed.

    Returns 0 unless the payment is overdue, its contract exists and it is
    more than `late_fee_days` days late. Nothing is persisted.
    """
    if payment.status != "overdue":
        return Decimal("0")

    contract = find_by_id(contracts, payment.contract_id)
    if contract is None:
        return Decimal("0")

    if days_late(payment, today) <= contract.late_fee_days:
        return Decimal("0")

    fee = payment.amount * Decimal(str(contract.late_fee_percentage)) / Decimal("100")
    return fee.quantize(_CENTS, rounding=ROUND_HALF_UP)


def payment_reminders(payments: Iterable[PaymentOut], limit: int = 5) -> List[PaymentOut]:
    """The `limit` most important payments: by status rank, then latest due date first."""
    ordered = sorted(
        payments,
        key=lambda p: (PAYMENT_STATUS_RANK.get(p.status, 1), -p.due_date.toordinal()),
    )
    return ordered[:limit]


def find_by_id(items, entity_id: Optional[str]):
    if not entity_id:
        return None
    return next((item for item in items if item.id == entity_id), None)
