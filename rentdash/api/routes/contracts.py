from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from rentdash.api.deps import get_portfolio
from rentdash.schemas.contract import ContractCreate, ContractGroupOut, ContractOut, ContractReplace
from rentdash.services.analytics import find_by_id
from rentdash.services.listing import group_contracts
from rentdash.services.portfolio import PortfolioState

router = APIRouter(prefix="/contracts", tags=["contracts"])


@router.get("", response_model=List[ContractGroupOut])
def list_contracts(
    portfolio: PortfolioState = Depends(get_portfolio),
    search: Optional[str] = Query(None, description="search by property name/tenant name/contract id"),
):
    """Contracts grouped by property name."""
    return group_contracts(portfolio.contracts, portfolio.properties, portfolio.tenants, search)


@router.get("/{contract_id}", response_model=ContractOut)
def get_contract(contract_id: str, portfolio: PortfolioState = Depends(get_portfolio)):
    contract = find_by_id(portfolio.contracts, contract_id)
    if not contract:
        raise HTTPException(status_code=404, detail="Contract not found")
    return contract


@router.post("", response_model=ContractOut, status_code=201)
def create_contract(payload: ContractCreate, portfolio: PortfolioState = Depends(get_portfolio)):
    contract_id = portfolio.add_contract(payload)
    return find_by_id(portfolio.contracts, contract_id)


@router.put("/{contract_id}", response_model=ContractOut)
def replace_contract(
    contract_id: str,
    payload: ContractReplace,
    portfolio: PortfolioState = Depends(get_portfolio),
):
    portfolio.replace_contract(contract_id, payload)
    return find_by_id(portfolio.contracts, contract_id)


@router.delete("/{contract_id}", status_code=204)
def delete_contract(contract_id: str, portfolio: PortfolioState = Depends(get_portfolio)):
    """
    Delete a contract:
    - its property (and unit) go back to vacant
    - the tenant holding it is detached
    - its payments are removed
    """
    portfolio.delete_contract(contract_id)
    return None
