from sqlalchemy import Column, String, Integer, DateTime, Numeric, Float, ForeignKey, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from rentdash.core.database import Base


class Property(Base):
    __tablename__ = "properties"

    id = Column(String(32), primary_key=True, index=True)

    name = Column(String, nullable=False)
    address = Column(String, nullable=False)

    # apartment / house / commercial / building / lot
    type = Column(String, nullable=False, default="apartment")
    bedrooms = Column(Integer, nullable=True)
    bathrooms = Column(Integer, nullable=True)
    area = Column(Float, nullable=False, default=0)
    description = Column(Text, nullable=False, default="")
    image_url = Column(String, nullable=True)

    # occupied / vacant / maintenance
    status = Column(String, nullable=False, default="vacant")

    # Embedded unit records: written and replaced together with the property
    units = relationship(
        "PropertyUnit",
        back_populates="property",
        cascade="all, delete-orphan",
        order_by="PropertyUnit.position",
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class PropertyUnit(Base):
    __tablename__ = "property_units"

    id = Column(String(32), primary_key=True, index=True)

    property_id = Column(String(32), ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
    property = relationship("Property", back_populates="units")
    position = Column(Integer, nullable=False, default=0)  # order inside the property

    unit_number = Column(String, nullable=False)
    bedrooms = Column(Integer, nullable=False, default=1)
    bathrooms = Column(Integer, nullable=False, default=1)
    area = Column(Float, nullable=False, default=50)
    monthly_rent = Column(Numeric(12, 2), nullable=False, default=1000)
    status = Column(String, nullable=False, default="vacant")
    tenant_id = Column(String(32), nullable=True, index=True)  # not a FK, see cascade rules
