from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Literal, Optional, List
from datetime import datetime
from decimal import Decimal


PropertyType = Literal["apartment", "house", "commercial", "building", "lot"]
OccupancyStatus = Literal["occupied", "vacant", "maintenance"]

# Only these property types carry sub-lettable units
UNIT_PROPERTY_TYPES = ("building", "lot")


class PropertyUnitIn(BaseModel):
    id: Optional[str] = None  # kept on replace, generated when missing
    unit_number: str = Field(min_length=1)
    bedrooms: int = Field(1, ge=0)
    bathrooms: int = Field(1, ge=0)
    area: float = Field(50, ge=0)
    monthly_rent: Decimal = Field(Decimal("1000"), ge=0)
    status: OccupancyStatus = "vacant"
    tenant_id: Optional[str] = None

    @field_validator("tenant_id")
    @classmethod
    def blank_tenant_is_unset(cls, v):
        return v or None


class PropertyUnitOut(BaseModel):
    id: str
    property_id: str
    unit_number: str
    bedrooms: int
    bathrooms: int
    area: float
    monthly_rent: Decimal
    status: OccupancyStatus
    tenant_id: Optional[str] = None

    class Config:
        from_attributes = True


class PropertyBase(BaseModel):
    name: str = Field(min_length=1)
    address: str = Field(min_length=1)
    type: PropertyType = "apartment"
    bedrooms: Optional[int] = Field(0, ge=0)
    bathrooms: Optional[int] = Field(0, ge=0)
    area: float = Field(0, ge=0)
    description: str = ""
    status: OccupancyStatus = "vacant"
    image_url: Optional[str] = None


class PropertyCreate(PropertyBase):
    units: List[PropertyUnitIn] = []

    @model_validator(mode="after")
    def drop_units_for_single_properties(self) -> "PropertyCreate":
        """Houses, apartments and commercial rooms are let as a whole."""
        if self.type not in UNIT_PROPERTY_TYPES and self.units:
            self.units = []
        return self


class PropertyReplace(PropertyCreate):
    """Full replacement body: any field left out is reset, not kept."""
    created_at: Optional[datetime] = None


class PropertyOut(PropertyBase):
    id: str
    units: List[PropertyUnitOut] = []
    created_at: datetime

    class Config:
        from_attributes = True
