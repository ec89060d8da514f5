from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from rentdash.api.deps import get_portfolio
from rentdash.schemas.expense import ExpenseCreate, ExpenseListOut, ExpenseOut, ExpenseReplace
from rentdash.services.analytics import find_by_id
from rentdash.services.listing import filter_expenses
from rentdash.services.portfolio import PortfolioState

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.get("", response_model=ExpenseListOut)
def list_expenses(
    portfolio: PortfolioState = Depends(get_portfolio),
    search: Optional[str] = Query(None, description="search by description/property name"),
    category: Optional[str] = Query(None, description="all|maintenance|utilities|taxes|insurance|other"),
    property_id: Optional[str] = Query(None, description="all or a property id"),
):
    """
    Filtered expenses, newest first, plus the total of what is listed.
    """
    return filter_expenses(
        portfolio.expenses,
        portfolio.properties,
        search=search,
        category=category,
        property_id=property_id,
    )


@router.get("/{expense_id}", response_model=ExpenseOut)
def get_expense(expense_id: str, portfolio: PortfolioState = Depends(get_portfolio)):
    expense = find_by_id(portfolio.expenses, expense_id)
    if not expense:
        raise HTTPException(status_code=404, detail="Expense not found")
    return expense


@router.post("", response_model=ExpenseOut, status_code=201)
def create_expense(payload: ExpenseCreate, portfolio: PortfolioState = Depends(get_portfolio)):
    expense_id = portfolio.add_expense(payload)
    return find_by_id(portfolio.expenses, expense_id)


@router.put("/{expense_id}", response_model=ExpenseOut)
def replace_expense(
    expense_id: str,
    payload: ExpenseReplace,
    portfolio: PortfolioState = Depends(get_portfolio),
):
    portfolio.replace_expense(expense_id, payload)
    return find_by_id(portfolio.expenses, expense_id)


@router.delete("/{expense_id}", status_code=204)
def delete_expense(expense_id: str, portfolio: PortfolioState = Depends(get_portfolio)):
    portfolio.delete_expense(expense_id)
    return None
