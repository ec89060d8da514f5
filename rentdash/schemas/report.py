from pydantic import BaseModel
from typing import Optional, List

from rentdash.schemas.payment import PaymentDetailOut


class StatsOut(BaseModel):
    """Top cards: properties, tenants, overdue payments, net income."""
    total_properties: int = 0
    occupied_properties: int = 0
    vacant_properties: int = 0
    maintenance_properties: int = 0
    occupancy_rate: int = 0  # rounded percentage of occupied properties
    total_tenants: int = 0
    pending_payments: int = 0
    overdue_payments: int = 0
    total_income: float = 0.0
    total_expenses: float = 0.0
    net_income: float = 0.0


class MonthlyFinancialsOut(BaseModel):
    """Single point in the income/expense chart."""
    month: str  # localised "MMM yyyy" label
    year: int
    month_number: int
    income: float = 0.0
    expenses: float = 0.0
    net_income: float = 0.0


class PropertyListItem(BaseModel):
    """Short property row on the dashboard."""
    id: str
    name: str
    address: str
    status: str
    image_url: Optional[str] = None
    tenant_name: str


class DashboardOut(BaseModel):
    """Full dashboard response."""
    stats: StatsOut = StatsOut()
    monthly_financials: List[MonthlyFinancialsOut] = []
    payment_reminders: List[PaymentDetailOut] = []
    property_list: List[PropertyListItem] = []
