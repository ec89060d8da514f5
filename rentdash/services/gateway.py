"""
Persistence gateway.

One CollectionGateway per collection (properties, tenants, contracts,
payments, expenses) translating between the entity schemas used by the rest
of the app and the rows kept in the database:

- list():    every record, designated date fields read back as calendar dates
- add():     new id + created_at, returns the id
- replace(): full replace, fields the caller leaves out are reset
- delete():  removes the record

Writes commit by default. Pass commit=False to group several writes into one
transaction and commit through finish().
"""
import logging
import uuid
from datetime import date, datetime, timezone
from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from rentdash.core.database import Base
from rentdash.core.exceptions import EntityNotFoundError, StoreError
from rentdash.models.contract import Contract
from rentdash.models.expense import Expense
from rentdash.models.payment import Payment
from rentdash.models.property import Property, PropertyUnit
from rentdash.models.tenant import Tenant
from rentdash.schemas.contract import ContractOut
from rentdash.schemas.expense import ExpenseOut
from rentdash.schemas.payment import PaymentOut
from rentdash.schemas.property import PropertyOut
from rentdash.schemas.tenant import TenantOut

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)

# Never written from caller data
_MANAGED_FIELDS = ("id", "created_at")


def new_id() -> str:
    return uuid.uuid4().hex


def to_timestamp(value: Any) -> Optional[datetime]:
    """Calendar date -> stored timestamp (midnight UTC)."""
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    raise TypeError(f"Expected a date, got {type(value).__name__}")


def to_calendar_date(value: Any) -> Optional[date]:
    """Stored timestamp -> calendar date, read in UTC like to_timestamp writes it."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def _empty_value(column) -> Any:
    default = column.default
    if default is not None and default.is_scalar:
        return default.arg
    return None


class CollectionGateway(Generic[EntityT]):
    def __init__(
        self,
        name: str,
        model: Type[Base],
        schema: Type[EntityT],
        date_fields: Iterable[str] = (),
    ):
        self.name = name
        self.model = model
        self.schema = schema
        self.date_fields = tuple(date_fields)

    @property
    def _columns(self):
        return [c for c in self.model.__table__.columns if c.key not in _MANAGED_FIELDS]

    # --- read ---

    def _query(self, db: Session):
        return db.query(self.model)

    def _to_document(self, row) -> Dict[str, Any]:
        doc = {c.key: getattr(row, c.key) for c in self.model.__table__.columns}
        for field in self.date_fields:
            doc[field] = to_calendar_date(doc[field])
        return doc

    def _to_entity(self, row) -> EntityT:
        return self.schema.model_validate(self._to_document(row))

    def list(self, db: Session) -> List[EntityT]:
        return [self._to_entity(row) for row in self._query(db).all()]

    def get(self, db: Session, entity_id: str) -> Optional[EntityT]:
        row = self._query(db).filter(self.model.id == entity_id).first()
        return self._to_entity(row) if row is not None else None

    # --- write ---

    def _write_fields(self, db: Session, row, data: Dict[str, Any], reset_missing: bool) -> None:
        for column in self._columns:
            key = column.key
            if key in data:
                value = data[key]
                if key in self.date_fields:
                    value = to_timestamp(value)
            elif reset_missing:
                value = _empty_value(column)
            else:
                continue
            setattr(row, key, value)

    def add(self, db: Session, data: Dict[str, Any], commit: bool = True) -> str:
        entity_id = new_id()
        row = self.model(id=entity_id, created_at=datetime.now(timezone.utc))
        self._write_fields(db, row, data, reset_missing=False)
        db.add(row)
        self._finish(db, commit, "add", entity_id)
        logger.info("%s %s added", self.name, entity_id)
        return entity_id

    def replace(self, db: Session, entity_id: str, data: Dict[str, Any], commit: bool = True) -> None:
        row = self._query(db).filter(self.model.id == entity_id).first()
        if row is None:
            raise EntityNotFoundError(self.name, entity_id)

        self._write_fields(db, row, data, reset_missing=True)
        if data.get("created_at") is not None:
            row.created_at = data["created_at"]
        self._finish(db, commit, "replace", entity_id)
        logger.info("%s %s replaced", self.name, entity_id)

    def delete(self, db: Session, entity_id: str, commit: bool = True) -> None:
        row = self._query(db).filter(self.model.id == entity_id).first()
        if row is None:
            raise EntityNotFoundError(self.name, entity_id)

        db.delete(row)
        self._finish(db, commit, "delete", entity_id)
        logger.info("%s %s deleted", self.name, entity_id)

    def _finish(self, db: Session, commit: bool, action: str, entity_id: str) -> None:
        try:
            if commit:
                db.commit()
            else:
                db.flush()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("Failed to %s %s %s", action, self.name, entity_id)
            raise StoreError(f"Failed to {action} {self.name} {entity_id}") from exc


class PropertyGateway(CollectionGateway[PropertyOut]):
    """Properties carry their units as embedded records."""

    def _query(self, db: Session):
        return db.query(Property).options(selectinload(Property.units))

    def _to_document(self, row) -> Dict[str, Any]:
        doc = super()._to_document(row)
        doc["units"] = [
            {c.key: getattr(unit, c.key) for c in PropertyUnit.__table__.columns}
            for unit in row.units
        ]
        return doc

    def _write_fields(self, db: Session, row, data: Dict[str, Any], reset_missing: bool) -> None:
        super()._write_fields(db, row, data, reset_missing)
        if "units" not in data and not reset_missing:
            return

        # Units are replaced wholesale, keeping ids the caller sends back
        units = []
        for position, unit in enumerate(data.get("units") or []):
            fields = {k: v for k, v in unit.items() if k not in ("id", "property_id", "position")}
            units.append(
                PropertyUnit(
                    id=unit.get("id") or new_id(),
                    position=position,
                    **fields,
                )
            )
        row.units.clear()
        if units:
            # flush the orphans first so kept unit ids can be re-inserted
            self._finish(db, False, "replace units of", row.id)
            row.units.extend(units)


properties = PropertyGateway("properties", Property, PropertyOut)
tenants = CollectionGateway("tenants", Tenant, TenantOut)
contracts = CollectionGateway("contracts", Contract, ContractOut, date_fields=("start_date", "end_date"))
payments = CollectionGateway("payments", Payment, PaymentOut, date_fields=("date", "due_date"))
expenses = CollectionGateway("expenses", Expense, ExpenseOut, date_fields=("date",))


def finish(db: Session) -> None:
    """Commit writes made with commit=False."""
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to commit grouped writes")
        raise StoreError("Failed to commit grouped writes") from exc
