"""
Application state for one portfolio.

PortfolioState holds the five collections read through the gateway and the
two derived views (stats, monthly financials). Every mutation writes through
the gateway, re-reads the affected collections in full and recomputes the
derived views. There is no partial patching of in-memory state.

Deletes cascade:
- property: tenants, contracts and expenses pointing at it are detached
- contract: its property (and unit) go back to vacant, its tenant is
  detached and its payments are removed
- tenant:   units rented to it are cleared
"""
import logging
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from rentdash.core.config import settings
from rentdash.core.exceptions import EntityNotFoundError
from rentdash.schemas.contract import ContractCreate, ContractOut, ContractReplace
from rentdash.schemas.expense import ExpenseCreate, ExpenseOut, ExpenseReplace
from rentdash.schemas.payment import PaymentCreate, PaymentDetailOut, PaymentOut, PaymentReplace
from rentdash.schemas.property import PropertyCreate, PropertyOut, PropertyReplace
from rentdash.schemas.report import DashboardOut, MonthlyFinancialsOut, StatsOut
from rentdash.schemas.tenant import TenantCreate, TenantOut, TenantReplace
from rentdash.services import analytics, gateway, listing
from rentdash.services.analytics import find_by_id

logger = logging.getLogger(__name__)

COLLECTIONS = ("properties", "tenants", "contracts", "payments", "expenses")


class PortfolioState:
    def __init__(
        self,
        db: Session,
        today: Optional[date] = None,
        months: Optional[int] = None,
        locale: Optional[str] = None,
    ):
        self.db = db
        self.today = today or datetime.now(timezone.utc).date()
        self.months = months or settings.FINANCIAL_SERIES_MONTHS
        self.locale = locale or settings.MONTH_LABEL_LOCALE

        self.properties: List[PropertyOut] = []
        self.tenants: List[TenantOut] = []
        self.contracts: List[ContractOut] = []
        self.payments: List[PaymentOut] = []
        self.expenses: List[ExpenseOut] = []

        self.stats = StatsOut()
        self.monthly_financials: List[MonthlyFinancialsOut] = []

    @classmethod
    def load(cls, db: Session, **kwargs) -> "PortfolioState":
        state = cls(db, **kwargs)
        state.refresh()
        return state

    def refresh(self, *names: str) -> None:
        """Re-read the named collections (all by default) and recompute derived views."""
        for name in names or COLLECTIONS:
            setattr(self, name, getattr(gateway, name).list(self.db))
        self._recompute()

    def _recompute(self) -> None:
        self.stats = analytics.compute_stats(self.properties, self.tenants, self.payments, self.expenses)
        self.monthly_financials = analytics.compute_monthly_financials(
            self.payments, self.expenses, self.today, months=self.months, locale=self.locale
        )

    def _require(self, name: str, entity_id: str):
        entity = find_by_id(getattr(self, name), entity_id)
        if entity is None:
            raise EntityNotFoundError(name, entity_id)
        return entity

    # --- properties ---

    def add_property(self, payload: PropertyCreate) -> str:
        entity_id = gateway.properties.add(self.db, payload.model_dump())
        self.refresh("properties")
        return entity_id

    def replace_property(self, property_id: str, payload: PropertyReplace) -> None:
        gateway.properties.replace(self.db, property_id, payload.model_dump())
        self.refresh("properties")

    def delete_property(self, property_id: str) -> None:
        self._require("properties", property_id)

        detached = 0
        for tenant in self.tenants:
            if tenant.property_id == property_id:
                self._rewrite(gateway.tenants, tenant, property_id="", unit_id=None)
                detached += 1
        for contract in self.contracts:
            if contract.property_id == property_id:
                self._rewrite(gateway.contracts, contract, property_id="", unit_id=None)
                detached += 1
        for expense in self.expenses:
            if expense.property_id == property_id:
                self._rewrite(gateway.expenses, expense, property_id="")
                detached += 1

        gateway.properties.delete(self.db, property_id, commit=False)
        gateway.finish(self.db)
        logger.info("Property %s deleted, %d records detached", property_id, detached)
        self.refresh("properties", "tenants", "contracts", "expenses")

    # --- tenants ---

    def add_tenant(self, payload: TenantCreate) -> str:
        entity_id = gateway.tenants.add(self.db, payload.model_dump())
        self.refresh("tenants")
        return entity_id

    def replace_tenant(self, tenant_id: str, payload: TenantReplace) -> None:
        gateway.tenants.replace(self.db, tenant_id, payload.model_dump())
        self.refresh("tenants")

    def delete_tenant(self, tenant_id: str) -> None:
        self._require("tenants", tenant_id)

        for prop in self.properties:
            if any(unit.tenant_id == tenant_id for unit in prop.units):
                doc = prop.model_dump()
                for unit in doc["units"]:
                    if unit["tenant_id"] == tenant_id:
                        unit["tenant_id"] = None
                gateway.properties.replace(self.db, prop.id, doc, commit=False)

        gateway.tenants.delete(self.db, tenant_id, commit=False)
        gateway.finish(self.db)
        self.refresh("properties", "tenants")

    # --- contracts ---

    def add_contract(self, payload: ContractCreate) -> str:
        entity_id = gateway.contracts.add(self.db, payload.model_dump())
        self.refresh("contracts")
        return entity_id

    def replace_contract(self, contract_id: str, payload: ContractReplace) -> None:
        gateway.contracts.replace(self.db, contract_id, payload.model_dump())
        self.refresh("contracts")

    def delete_contract(self, contract_id: str) -> None:
        contract = self._require("contracts", contract_id)

        prop = find_by_id(self.properties, contract.property_id)
        if prop is not None:
            doc = prop.model_dump()
            doc["status"] = "vacant"
            for unit in doc["units"]:
                if contract.unit_id and unit["id"] == contract.unit_id:
                    unit["status"] = "vacant"
                    unit["tenant_id"] = None
            gateway.properties.replace(self.db, prop.id, doc, commit=False)

        for tenant in self.tenants:
            if tenant.contract_id == contract_id:
                self._rewrite(gateway.tenants, tenant, contract_id="")

        removed = 0
        for payment in self.payments:
            if payment.contract_id == contract_id:
                gateway.payments.delete(self.db, payment.id, commit=False)
                removed += 1

        gateway.contracts.delete(self.db, contract_id, commit=False)
        gateway.finish(self.db)
        logger.info("Contract %s deleted with %d payments", contract_id, removed)
        self.refresh("properties", "tenants", "contracts", "payments")

    # --- payments ---

    def add_payment(self, payload: PaymentCreate) -> str:
        entity_id = gateway.payments.add(self.db, payload.model_dump())
        self.refresh("payments")
        return entity_id

    def replace_payment(self, payment_id: str, payload: PaymentReplace) -> None:
        gateway.payments.replace(self.db, payment_id, payload.model_dump())
        self.refresh("payments")

    def delete_payment(self, payment_id: str) -> None:
        gateway.payments.delete(self.db, payment_id)
        self.refresh("payments")

    def calculate_late_fee(self, payment: PaymentOut) -> Decimal:
        return analytics.calculate_late_fee(payment, self.contracts, self.today)

    def apply_late_fee(self, payment_id: str) -> Decimal:
        """Persist the computed late fee into the payment."""
        payment = self._require("payments", payment_id)
        fee = self.calculate_late_fee(payment)
        self._rewrite(gateway.payments, payment, commit=True, late_fee=fee)
        self.refresh("payments")
        return fee

    # --- expenses ---

    def add_expense(self, payload: ExpenseCreate) -> str:
        entity_id = gateway.expenses.add(self.db, payload.model_dump())
        self.refresh("expenses")
        return entity_id

    def replace_expense(self, expense_id: str, payload: ExpenseReplace) -> None:
        gateway.expenses.replace(self.db, expense_id, payload.model_dump())
        self.refresh("expenses")

    def delete_expense(self, expense_id: str) -> None:
        gateway.expenses.delete(self.db, expense_id)
        self.refresh("expenses")

    # --- dashboard ---

    def payment_reminders(self, limit: Optional[int] = None) -> List[PaymentDetailOut]:
        limit = limit or settings.PAYMENT_REMINDERS_LIMIT
        return [
            listing.payment_details(p, self.contracts, self.properties, self.tenants)
            for p in analytics.payment_reminders(self.payments, limit)
        ]

    def dashboard(self) -> DashboardOut:
        return DashboardOut(
            stats=self.stats,
            monthly_financials=self.monthly_financials,
            payment_reminders=self.payment_reminders(),
            property_list=listing.property_list(self.properties, self.tenants),
        )

    def _rewrite(self, collection, entity, commit: bool = False, **changes) -> None:
        # replace is a full write, so send the whole stored record back
        doc = entity.model_dump()
        doc.update(changes)
        collection.replace(self.db, entity.id, doc, commit=commit)
