from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Literal, Optional, List
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal


ContractStatus = Literal["active", "expired", "terminated"]


def _today() -> date:
    return datetime.now(timezone.utc).date()


def _one_year_from_today() -> date:
    return _today() + timedelta(days=365)


class ContractBase(BaseModel):
    property_id: str = ""
    unit_id: Optional[str] = None
    tenant_id: str = ""
    start_date: date = Field(default_factory=_today)
    end_date: date = Field(default_factory=_one_year_from_today)
    monthly_rent: Decimal = Field(Decimal("0"), ge=0)
    deposit_amount: Decimal = Field(Decimal("0"), ge=0)
    payment_due_day: int = Field(5, ge=1, le=31)
    late_fee_days: int = Field(5, ge=0)  # grace period in days
    late_fee_percentage: float = Field(10, ge=0, le=100)
    status: ContractStatus = "active"
    contract_file: Optional[str] = None  # reference only, there is no upload endpoint

    @field_validator("unit_id")
    @classmethod
    def blank_unit_is_unset(cls, v):
        return v or None


class ContractCreate(ContractBase):
    property_id: str = Field(min_length=1)
    tenant_id: str = Field(min_length=1)

    @model_validator(mode="after")
    def end_after_start(self) -> "ContractCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date cannot be before start_date")
        return self


class ContractReplace(ContractCreate):
    created_at: Optional[datetime] = None


class ContractOut(ContractBase):
    id: str
    created_at: datetime

    class Config:
        from_attributes = True


class ContractGroupOut(BaseModel):
    """Contracts of one property, as listed on the contracts page."""
    property_name: str
    contracts: List[ContractOut] = []
