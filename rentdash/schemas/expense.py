import datetime as dt
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator


ExpenseCategory = Literal["maintenance", "utilities", "taxes", "insurance", "other"]


def _today() -> dt.date:
    return dt.datetime.now(dt.timezone.utc).date()


class ExpenseBase(BaseModel):
    property_id: str = ""
    amount: Decimal = Field(Decimal("0"), ge=0)
    date: Optional[dt.date] = Field(default_factory=_today)
    category: ExpenseCategory = "other"
    description: str = Field(min_length=1)
    receipt: Optional[str] = None  # reference only, there is no upload endpoint
    recurring: bool = False

    @field_validator("receipt")
    @classmethod
    def blank_receipt_is_unset(cls, v):
        return v or None


class ExpenseCreate(ExpenseBase):
    property_id: str = Field(min_length=1)


class ExpenseReplace(ExpenseCreate):
    created_at: Optional[dt.datetime] = None


class ExpenseOut(ExpenseBase):
    id: str
    created_at: dt.datetime

    class Config:
        from_attributes = True


class ExpenseDetailOut(ExpenseOut):
    property_name: str


class ExpenseListOut(BaseModel):
    """Filtered expenses, newest first, with their summed amount."""
    items: List[ExpenseDetailOut] = []
    count: int = 0
    total_amount: Decimal = Decimal("0")
