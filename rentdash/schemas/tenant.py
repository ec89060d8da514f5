from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime


class TenantBase(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    phone: str = Field(min_length=1)
    cpf: str = Field(min_length=1)
    occupants: int = Field(1, ge=1)
    property_id: str = ""
    unit_id: Optional[str] = None
    contract_id: str = ""

    @field_validator("unit_id")
    @classmethod
    def blank_unit_is_unset(cls, v):
        return v or None


class TenantCreate(TenantBase):
    pass


class TenantReplace(TenantBase):
    created_at: Optional[datetime] = None


class TenantOut(TenantBase):
    id: str
    email: str  # stored values are not re-validated on read
    created_at: datetime

    class Config:
        from_attributes = True
