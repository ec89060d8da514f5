from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from rentdash.api.deps import get_portfolio
from rentdash.schemas.property import PropertyCreate, PropertyOut, PropertyReplace
from rentdash.services.analytics import find_by_id
from rentdash.services.listing import filter_properties
from rentdash.services.portfolio import PortfolioState

router = APIRouter(prefix="/properties", tags=["properties"])


@router.get("", response_model=List[PropertyOut])
def list_properties(
    portfolio: PortfolioState = Depends(get_portfolio),
    search: Optional[str] = Query(None, description="search by name/address/type/status"),
):
    return filter_properties(portfolio.properties, search)


@router.get("/{property_id}", response_model=PropertyOut)
def get_property(property_id: str, portfolio: PortfolioState = Depends(get_portfolio)):
    """Property with its embedded units."""
    prop = find_by_id(portfolio.properties, property_id)
    if not prop:
        raise HTTPException(status_code=404, detail="Property not found")
    return prop


@router.post("", response_model=PropertyOut, status_code=201)
def create_property(payload: PropertyCreate, portfolio: PortfolioState = Depends(get_portfolio)):
    """
    Create a property. Units are only kept for buildings and lots.
    """
    property_id = portfolio.add_property(payload)
    return find_by_id(portfolio.properties, property_id)


@router.put("/{property_id}", response_model=PropertyOut)
def replace_property(
    property_id: str,
    payload: PropertyReplace,
    portfolio: PortfolioState = Depends(get_portfolio),
):
    """
    Full replace: fields missing from the body fall back to their defaults,
    and the unit list is replaced as a whole.
    """
    portfolio.replace_property(property_id, payload)
    return find_by_id(portfolio.properties, property_id)


@router.delete("/{property_id}", status_code=204)
def delete_property(property_id: str, portfolio: PortfolioState = Depends(get_portfolio)):
    """
    Delete a property and detach the tenants, contracts and expenses pointing at it.
    """
    portfolio.delete_property(property_id)
    return None
