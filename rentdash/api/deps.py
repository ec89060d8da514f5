from fastapi import Depends
from sqlalchemy.orm import Session

from rentdash.core.database import SessionLocal
from rentdash.services.portfolio import PortfolioState


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_portfolio(db: Session = Depends(get_db)) -> PortfolioState:
    """Fresh state for every request: all collections read, derived views computed."""
    return PortfolioState.load(db)
