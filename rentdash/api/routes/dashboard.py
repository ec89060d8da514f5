"""
Dashboard endpoints.
Read-only views composed from the portfolio's derived data.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from rentdash.api.deps import get_portfolio
from rentdash.schemas.payment import PaymentDetailOut
from rentdash.schemas.report import DashboardOut, MonthlyFinancialsOut, PropertyListItem, StatsOut
from rentdash.services.analytics import SUPPORTED_SERIES_MONTHS, compute_monthly_financials
from rentdash.services.listing import property_list
from rentdash.services.portfolio import PortfolioState

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardOut)
def get_dashboard(portfolio: PortfolioState = Depends(get_portfolio)):
    """
    Everything the dashboard page shows:
    - stat cards
    - income/expense series for the trailing months
    - the most important payment reminders
    - the short property list
    """
    return portfolio.dashboard()


@router.get("/stats", response_model=StatsOut)
def get_stats(portfolio: PortfolioState = Depends(get_portfolio)):
    return portfolio.stats


@router.get("/monthly-financials", response_model=List[MonthlyFinancialsOut])
def get_monthly_financials(
    portfolio: PortfolioState = Depends(get_portfolio),
    months: int = Query(6, description="3|6|12"),
):
    """Income, expenses and net income per month, oldest first."""
    if months not in SUPPORTED_SERIES_MONTHS:
        raise HTTPException(
            status_code=400,
            detail=f"months must be one of {', '.join(str(m) for m in SUPPORTED_SERIES_MONTHS)}",
        )
    if months == portfolio.months:
        return portfolio.monthly_financials
    return compute_monthly_financials(
        portfolio.payments, portfolio.expenses, portfolio.today, months=months, locale=portfolio.locale
    )


@router.get("/payment-reminders", response_model=List[PaymentDetailOut])
def get_payment_reminders(
    portfolio: PortfolioState = Depends(get_portfolio),
    limit: int = Query(5, ge=1, le=50),
):
    """Overdue first, then pending, then paid; latest due date first within each."""
    return portfolio.payment_reminders(limit)


@router.get("/property-list", response_model=List[PropertyListItem])
def get_property_list(portfolio: PortfolioState = Depends(get_portfolio)):
    return property_list(portfolio.properties, portfolio.tenants)
