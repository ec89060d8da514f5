import datetime as dt
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator


PaymentStatus = Literal["paid", "pending", "overdue"]


def _today() -> dt.date:
    return dt.datetime.now(dt.timezone.utc).date()


class PaymentBase(BaseModel):
    contract_id: str = ""
    amount: Decimal = Field(Decimal("0"), ge=0)
    date: Optional[dt.date] = Field(default_factory=_today)
    due_date: dt.date = Field(default_factory=_today)
    status: PaymentStatus = "pending"
    late_fee: Decimal = Field(Decimal("0"), ge=0)
    payment_method: Optional[str] = None  # bank transfer|credit card|cash|pix|boleto
    notes: Optional[str] = None

    @field_validator("payment_method", "notes")
    @classmethod
    def blank_is_unset(cls, v):
        return v or None


class PaymentCreate(PaymentBase):
    contract_id: str = Field(min_length=1)


class PaymentReplace(PaymentCreate):
    created_at: Optional[dt.datetime] = None


class PaymentOut(PaymentBase):
    id: str
    created_at: dt.datetime

    class Config:
        from_attributes = True


class PaymentDetailOut(PaymentOut):
    """Payment with its contract's property and tenant resolved to names."""
    property_name: str
    tenant_name: str


class LateFeeOut(BaseModel):
    payment_id: str
    status: PaymentStatus
    days_late: int = 0
    late_fee: Decimal = Decimal("0")
