from sqlalchemy import Column, String, DateTime, Numeric, Boolean, Text
from sqlalchemy.sql import func
from rentdash.core.database import Base


class Expense(Base):
    __tablename__ = "expenses"

    id = Column(String(32), primary_key=True, index=True)

    property_id = Column(String(32), nullable=False, default="", index=True)

    amount = Column(Numeric(12, 2), nullable=False)
    date = Column(DateTime(timezone=True), nullable=True, index=True)

    # maintenance / utilities / taxes / insurance / other
    category = Column(String, nullable=False, default="other")
    description = Column(Text, nullable=False)
    receipt = Column(String, nullable=True)
    recurring = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
