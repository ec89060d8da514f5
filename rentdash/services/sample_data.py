"""Sample portfolio generation for demos and local development."""

import calendar
import logging
import random
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import List, Optional

from faker import Faker
from sqlalchemy.orm import Session

from rentdash.schemas.contract import ContractCreate
from rentdash.schemas.expense import ExpenseCreate
from rentdash.schemas.payment import PaymentCreate
from rentdash.schemas.property import UNIT_PROPERTY_TYPES, PropertyCreate, PropertyUnitIn
from rentdash.schemas.tenant import TenantCreate
from rentdash.services import gateway
from rentdash.services.analytics import trailing_months

logger = logging.getLogger(__name__)


@dataclass
class SeedSummary:
    properties: int = 0
    tenants: int = 0
    contracts: int = 0
    payments: int = 0
    expenses: int = 0


class SamplePortfolioGenerator:
    """Builds validated create payloads with Faker (pt_BR by default).

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale.
    """

    PROPERTY_TYPES = ["apartment", "house", "commercial", "building", "lot"]
    PROPERTY_TYPE_WEIGHTS = [0.35, 0.25, 0.15, 0.20, 0.05]

    STATUSES = ["occupied", "vacant", "maintenance"]
    STATUS_WEIGHTS = [0.65, 0.25, 0.10]

    PAYMENT_METHODS = ["bank transfer", "credit card", "cash", "pix", "boleto"]
    OVERDUE_RATE = 0.2

    EXPENSE_DESCRIPTIONS = {
        "maintenance": ["Plumbing repair", "Painting", "Electrical repair", "Roof repair"],
        "utilities": ["Water bill", "Electricity bill", "Gas bill"],
        "taxes": ["IPTU installment", "Property tax"],
        "insurance": ["Fire insurance", "Building insurance"],
        "other": ["Cleaning", "Condominium fee", "Key copies"],
    }
    EXPENSE_WEIGHTS = [0.35, 0.25, 0.15, 0.10, 0.15]

    def __init__(self, seed: Optional[int] = None, locale: str = "pt_BR"):
        self.fake = Faker(locale)
        self.rng = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)

    def property(self) -> PropertyCreate:
        prop_type = self.rng.choices(self.PROPERTY_TYPES, weights=self.PROPERTY_TYPE_WEIGHTS, k=1)[0]
        status = self.rng.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0]
        units = []
        if prop_type in UNIT_PROPERTY_TYPES:
            units = [self.unit(str(101 + i)) for i in range(self.rng.randint(2, 4))]

        return PropertyCreate(
            name=f"{self.fake.last_name()} {prop_type.title()}",
            address=f"{self.fake.street_address()}, {self.fake.city()}",
            type=prop_type,
            bedrooms=0 if prop_type in ("commercial", "lot") else self.rng.randint(1, 4),
            bathrooms=self.rng.randint(1, 3),
            area=float(self.rng.randint(35, 400)),
            description=self.fake.sentence(nb_words=8),
            status=status,
            units=units,
        )

    def unit(self, unit_number: str) -> PropertyUnitIn:
        return PropertyUnitIn(
            id=gateway.new_id(),
            unit_number=unit_number,
            bedrooms=self.rng.randint(1, 3),
            bathrooms=self.rng.randint(1, 2),
            area=float(self.rng.randint(30, 90)),
            monthly_rent=Decimal(self.rng.randrange(800, 3500, 50)),
            status=self.rng.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0],
        )

    def tenant(self, property_id: str, unit_id: Optional[str] = None) -> TenantCreate:
        return TenantCreate(
            name=self.fake.name(),
            email=self.fake.email(),
            phone=self.fake.cellphone_number(),
            cpf=self.fake.cpf(),
            occupants=self.rng.randint(1, 5),
            property_id=property_id,
            unit_id=unit_id,
        )

    def contract(
        self,
        property_id: str,
        tenant_id: str,
        monthly_rent: Decimal,
        today: date,
        unit_id: Optional[str] = None,
    ) -> ContractCreate:
        start = today - timedelta(days=self.rng.randint(200, 700))
        return ContractCreate(
            property_id=property_id,
            unit_id=unit_id,
            tenant_id=tenant_id,
            start_date=start,
            end_date=start + timedelta(days=730),
            monthly_rent=monthly_rent,
            deposit_amount=monthly_rent * 2,
            payment_due_day=self.rng.choice([5, 10, 15]),
            late_fee_days=self.rng.choice([3, 5]),
            late_fee_percentage=self.rng.choice([2, 5, 10]),
        )

    def payments(self, contract_id: str, contract: ContractCreate, today: date, months: int = 6) -> List[PaymentCreate]:
        """One payment per month of the window, paid unless due in the future or left overdue."""
        result = []
        for year, month in trailing_months(today, months):
            day = min(contract.payment_due_day, calendar.monthrange(year, month)[1])
            due = date(year, month, day)
            if due < contract.start_date:
                continue

            if due >= today:
                status, paid_on = "pending", None
            elif self.rng.random() < self.OVERDUE_RATE:
                status, paid_on = "overdue", None
            else:
                status = "paid"
                paid_on = min(today, due + timedelta(days=self.rng.randint(-3, 3)))

            result.append(
                PaymentCreate(
                    contract_id=contract_id,
                    amount=contract.monthly_rent,
                    date=paid_on,
                    due_date=due,
                    status=status,
                    payment_method=self.rng.choice(self.PAYMENT_METHODS) if status == "paid" else None,
                )
            )
        return result

    def expenses(self, property_id: str, today: date, months: int = 6) -> List[ExpenseCreate]:
        result = []
        categories = list(self.EXPENSE_DESCRIPTIONS)
        for year, month in trailing_months(today, months):
            for _ in range(self.rng.randint(0, 2)):
                category = self.rng.choices(categories, weights=self.EXPENSE_WEIGHTS, k=1)[0]
                last_day = calendar.monthrange(year, month)[1]
                spent_on = min(today, date(year, month, self.rng.randint(1, last_day)))
                result.append(
                    ExpenseCreate(
                        property_id=property_id,
                        amount=Decimal(self.rng.randrange(50, 1500, 10)),
                        date=spent_on,
                        category=category,
                        description=self.rng.choice(self.EXPENSE_DESCRIPTIONS[category]),
                        recurring=category in ("utilities", "taxes"),
                    )
                )
        return result


def seed_sample_data(
    db: Session,
    seed: Optional[int] = None,
    num_properties: int = 8,
    today: Optional[date] = None,
    months: int = 6,
) -> SeedSummary:
    """Write a consistent sample portfolio through the gateway in one transaction."""
    today = today or datetime.now(timezone.utc).date()
    generator = SamplePortfolioGenerator(seed=seed)
    summary = SeedSummary()

    for _ in range(num_properties):
        prop = generator.property()
        property_id = gateway.properties.add(db, prop.model_dump(), commit=False)
        summary.properties += 1

        # (unit, rent) pairs to let; whole property when it has no units
        lettings = [(u, u.monthly_rent) for u in prop.units if u.status == "occupied"]
        if not prop.units and prop.status == "occupied":
            lettings = [(None, Decimal(generator.rng.randrange(1200, 6000, 100)))]

        for unit, rent in lettings:
            unit_id = unit.id if unit is not None else None
            tenant = generator.tenant(property_id, unit_id)
            tenant_id = gateway.tenants.add(db, tenant.model_dump(), commit=False)

            contract = generator.contract(property_id, tenant_id, rent, today, unit_id=unit_id)
            contract_id = gateway.contracts.add(db, contract.model_dump(), commit=False)

            gateway.tenants.replace(
                db, tenant_id, {**tenant.model_dump(), "contract_id": contract_id}, commit=False
            )
            if unit is not None:
                unit.tenant_id = tenant_id
            summary.tenants += 1
            summary.contracts += 1

            for payment in generator.payments(contract_id, contract, today, months):
                gateway.payments.add(db, payment.model_dump(), commit=False)
                summary.payments += 1

        if any(u.tenant_id for u in prop.units):
            gateway.properties.replace(db, property_id, prop.model_dump(), commit=False)

        for expense in generator.expenses(property_id, today, months):
            gateway.expenses.add(db, expense.model_dump(), commit=False)
            summary.expenses += 1

    gateway.finish(db)
    logger.info(
        "Seeded %d properties, %d tenants, %d contracts, %d payments, %d expenses",
        summary.properties,
        summary.tenants,
        summary.contracts,
        summary.payments,
        summary.expenses,
    )
    return summary


def clear_all(db: Session) -> None:
    """Delete every record of every collection."""
    for collection in (gateway.payments, gateway.expenses, gateway.contracts, gateway.tenants, gateway.properties):
        for entity in collection.list(db):
            collection.delete(db, entity.id, commit=False)
    gateway.finish(db)
    logger.info("All collections cleared")
