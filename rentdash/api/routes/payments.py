from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from rentdash.api.deps import get_portfolio
from rentdash.schemas.payment import (
    LateFeeOut,
    PaymentCreate,
    PaymentDetailOut,
    PaymentOut,
    PaymentReplace,
)
from rentdash.services.analytics import days_late, find_by_id
from rentdash.services.listing import filter_payments
from rentdash.services.portfolio import PortfolioState

router = APIRouter(prefix="/payments", tags=["payments"])


def _get_payment_or_404(portfolio: PortfolioState, payment_id: str) -> PaymentOut:
    payment = find_by_id(portfolio.payments, payment_id)
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    return payment


@router.get("", response_model=List[PaymentDetailOut])
def list_payments(
    portfolio: PortfolioState = Depends(get_portfolio),
    search: Optional[str] = Query(None, description="search by property name/tenant name"),
    status: Optional[str] = Query(None, description="all|paid|pending|overdue"),
):
    """Payments with property and tenant names, latest due date first."""
    return filter_payments(
        portfolio.payments,
        portfolio.contracts,
        portfolio.properties,
        portfolio.tenants,
        search=search,
        status=status,
    )


@router.get("/{payment_id}", response_model=PaymentOut)
def get_payment(payment_id: str, portfolio: PortfolioState = Depends(get_portfolio)):
    return _get_payment_or_404(portfolio, payment_id)


@router.get("/{payment_id}/late-fee", response_model=LateFeeOut)
def get_late_fee(payment_id: str, portfolio: PortfolioState = Depends(get_portfolio)):
    """
    Late fee the payment would carry today. Nothing is saved.
    """
    payment = _get_payment_or_404(portfolio, payment_id)
    return LateFeeOut(
        payment_id=payment.id,
        status=payment.status,
        days_late=max(days_late(payment, portfolio.today), 0),
        late_fee=portfolio.calculate_late_fee(payment),
    )


@router.post("/{payment_id}/apply-late-fee", response_model=PaymentOut)
def apply_late_fee(payment_id: str, portfolio: PortfolioState = Depends(get_portfolio)):
    """
    Compute today's late fee and store it on the payment.
    """
    _get_payment_or_404(portfolio, payment_id)
    portfolio.apply_late_fee(payment_id)
    return find_by_id(portfolio.payments, payment_id)


@router.post("", response_model=PaymentOut, status_code=201)
def create_payment(payload: PaymentCreate, portfolio: PortfolioState = Depends(get_portfolio)):
    payment_id = portfolio.add_payment(payload)
    return find_by_id(portfolio.payments, payment_id)


@router.put("/{payment_id}", response_model=PaymentOut)
def replace_payment(
    payment_id: str,
    payload: PaymentReplace,
    portfolio: PortfolioState = Depends(get_portfolio),
):
    portfolio.replace_payment(payment_id, payload)
    return find_by_id(portfolio.payments, payment_id)


@router.delete("/{payment_id}", status_code=204)
def delete_payment(payment_id: str, portfolio: PortfolioState = Depends(get_portfolio)):
    portfolio.delete_payment(payment_id)
    return None
