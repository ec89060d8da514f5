import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy import text

from rentdash.core.config import settings
from rentdash.core.database import Base, SessionLocal, engine
from rentdash.core.exceptions import EntityNotFoundError, StoreError
from rentdash.core.logging import setup_logging
from rentdash.api.routes.dashboard import router as dashboard_router
from rentdash.api.routes.properties import router as properties_router
from rentdash.api.routes.tenants import router as tenants_router
from rentdash.api.routes.contracts import router as contracts_router
from rentdash.api.routes.payments import router as payments_router
from rentdash.api.routes.expenses import router as expenses_router

logger = logging.getLogger(__name__)

ENTITY_LABELS = {
    "properties": "Property",
    "tenants": "Tenant",
    "contracts": "Contract",
    "payments": "Payment",
    "expenses": "Expense",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    # Fresh databases work without running migrations
    Base.metadata.create_all(bind=engine)
    logger.info("rentdash started (env=%s)", settings.ENV)
    yield


# 1) Create the app FIRST
app = FastAPI(title="Rental Portfolio Dashboard", lifespan=lifespan)

# 2) Add CORS Middleware BEFORE routes
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 3) Include routers AFTER app is created
app.include_router(dashboard_router)
app.include_router(properties_router)
app.include_router(tenants_router)
app.include_router(contracts_router)
app.include_router(payments_router)
app.include_router(expenses_router)


# 4) Errors raised below the routes
@app.exception_handler(EntityNotFoundError)
def entity_not_found(request: Request, exc: EntityNotFoundError):
    label = ENTITY_LABELS.get(exc.collection, "Entity")
    return JSONResponse(status_code=404, content={"detail": f"{label} not found"})


@app.exception_handler(StoreError)
def store_unavailable(request: Request, exc: StoreError):
    return JSONResponse(status_code=503, content={"detail": str(exc)})


# 5) Health check endpoints
@app.get("/health")
def health():
    return {"ok": True, "service": "rentdash"}

@app.get("/db-health")
def db_health():
    db = SessionLocal()
    try:
        db.execute(text("select 1"))
        return {"ok": True, "db": "connected"}
    finally:
        db.close()


# 6) Unknown pages land on the dashboard; must stay the last route
VIEW_PREFIXES = ("dashboard", "properties", "tenants", "contracts", "payments", "expenses")


@app.get("/{path:path}", include_in_schema=False)
def redirect_to_dashboard(path: str, request: Request):
    # "/payments/" lands here too; drop the slash instead
    stripped = path.rstrip("/")
    if stripped != path and stripped.split("/", 1)[0] in VIEW_PREFIXES:
        url = "/" + stripped
        if request.url.query:
            url = f"{url}?{request.url.query}"
        return RedirectResponse(url=url)
    return RedirectResponse(url="/dashboard")
