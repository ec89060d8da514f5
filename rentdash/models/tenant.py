from sqlalchemy import Column, String, Integer, DateTime
from sqlalchemy.sql import func
from rentdash.core.database import Base


class Tenant(Base):
    __tablename__ = "tenants"

    id = Column(String(32), primary_key=True, index=True)

    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    cpf = Column(String, nullable=False)
    occupants = Column(Integer, nullable=False, default=1)

    # References are plain strings ("" when unset); integrity is not enforced on write
    property_id = Column(String(32), nullable=False, default="", index=True)
    unit_id = Column(String(32), nullable=True)
    contract_id = Column(String(32), nullable=False, default="", index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
