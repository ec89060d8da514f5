from sqlalchemy import Column, String, Integer, DateTime, Numeric, Float
from sqlalchemy.sql import func
from rentdash.core.database import Base


class Contract(Base):
    __tablename__ = "contracts"

    id = Column(String(32), primary_key=True, index=True)

    property_id = Column(String(32), nullable=False, default="", index=True)
    unit_id = Column(String(32), nullable=True)
    tenant_id = Column(String(32), nullable=False, default="", index=True)

    # Stored as timestamps, read back as calendar dates by the gateway
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)

    monthly_rent = Column(Numeric(12, 2), nullable=False, default=0)
    deposit_amount = Column(Numeric(12, 2), nullable=False, default=0)
    payment_due_day = Column(Integer, nullable=False, default=5)  # 1..31
    late_fee_days = Column(Integer, nullable=False, default=5)  # grace period
    late_fee_percentage = Column(Float, nullable=False, default=10)  # 0..100

    # active / expired / terminated
    status = Column(String, nullable=False, default="active")
    contract_file = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
