from sqlalchemy import Column, String, DateTime, Numeric, Text
from sqlalchemy.sql import func
from rentdash.core.database import Base


class Payment(Base):
    __tablename__ = "payments"

    id = Column(String(32), primary_key=True, index=True)

    contract_id = Column(String(32), nullable=False, default="", index=True)

    amount = Column(Numeric(12, 2), nullable=False)
    date = Column(DateTime(timezone=True), nullable=True)  # when it was paid
    due_date = Column(DateTime(timezone=True), nullable=False, index=True)

    # paid / pending / overdue
    status = Column(String, nullable=False, default="pending", index=True)
    late_fee = Column(Numeric(12, 2), nullable=False, default=0)
    payment_method = Column(String, nullable=True)  # bank transfer / credit card / cash / pix / boleto
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
