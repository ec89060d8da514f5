"""Pytest configuration and fixtures."""

from datetime import date

import pytest
from fastapi import Depends
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from rentdash.api.deps import get_db, get_portfolio
from rentdash.core.database import Base
from rentdash.main import app
from rentdash.services.portfolio import PortfolioState

TODAY = date(2026, 10, 18)


@pytest.fixture
def today() -> date:
    """Fixed reference date for derived views."""
    return TODAY


@pytest.fixture
def engine():
    """In-memory SQLite shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine) -> Session:
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def portfolio(db, today) -> PortfolioState:
    return PortfolioState.load(db, today=today, months=6, locale="pt-BR")


@pytest.fixture
def client(db, today):
    """TestClient bound to the test database; the lifespan is not run."""

    def override_get_db():
        yield db

    def override_get_portfolio(session: Session = Depends(get_db)) -> PortfolioState:
        return PortfolioState.load(session, today=today, months=6, locale="pt-BR")

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_portfolio] = override_get_portfolio
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


# --- request bodies ---


@pytest.fixture
def property_body() -> dict:
    return {
        "name": "Casa Jardim",
        "address": "Av. Brasil, 200",
        "type": "house",
        "bedrooms": 3,
        "bathrooms": 2,
        "area": 120,
        "description": "Two floors with garden",
        "status": "vacant",
    }


@pytest.fixture
def building_body() -> dict:
    return {
        "name": "Edifício Central",
        "address": "Rua XV de Novembro, 50",
        "type": "building",
        "status": "occupied",
        "units": [
            {"unit_number": "101", "monthly_rent": "1500", "status": "occupied"},
            {"unit_number": "102", "monthly_rent": "1600"},
        ],
    }


@pytest.fixture
def tenant_body() -> dict:
    return {
        "name": "João Pereira",
        "email": "joao.pereira@email.com.br",
        "phone": "(21) 99876-5432",
        "cpf": "987.654.321-00",
        "occupants": 2,
    }


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible sample data."""
    return 42
