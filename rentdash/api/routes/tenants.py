from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from rentdash.api.deps import get_portfolio
from rentdash.schemas.tenant import TenantCreate, TenantOut, TenantReplace
from rentdash.services.analytics import find_by_id
from rentdash.services.listing import filter_tenants
from rentdash.services.portfolio import PortfolioState

router = APIRouter(prefix="/tenants", tags=["tenants"])


@router.get("", response_model=List[TenantOut])
def list_tenants(
    portfolio: PortfolioState = Depends(get_portfolio),
    search: Optional[str] = Query(None, description="search by name/email/phone/cpf"),
):
    return filter_tenants(portfolio.tenants, search)


@router.get("/{tenant_id}", response_model=TenantOut)
def get_tenant(tenant_id: str, portfolio: PortfolioState = Depends(get_portfolio)):
    tenant = find_by_id(portfolio.tenants, tenant_id)
    if not tenant:
        raise HTTPException(status_code=404, detail="Tenant not found")
    return tenant


@router.post("", response_model=TenantOut, status_code=201)
def create_tenant(payload: TenantCreate, portfolio: PortfolioState = Depends(get_portfolio)):
    tenant_id = portfolio.add_tenant(payload)
    return find_by_id(portfolio.tenants, tenant_id)


@router.put("/{tenant_id}", response_model=TenantOut)
def replace_tenant(
    tenant_id: str,
    payload: TenantReplace,
    portfolio: PortfolioState = Depends(get_portfolio),
):
    portfolio.replace_tenant(tenant_id, payload)
    return find_by_id(portfolio.tenants, tenant_id)


@router.delete("/{tenant_id}", status_code=204)
def delete_tenant(tenant_id: str, portfolio: PortfolioState = Depends(get_portfolio)):
    """Delete a tenant and free the units rented to it."""
    portfolio.delete_tenant(tenant_id)
    return None
