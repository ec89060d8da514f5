"""Tests for the persistence gateway."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from sqlalchemy.exc import SQLAlchemyError

from rentdash.core.exceptions import EntityNotFoundError, StoreError
from rentdash.services import gateway
from rentdash.services.gateway import to_calendar_date, to_timestamp


def _payment(**overrides) -> dict:
    data = {
        "contract_id": "c1",
        "amount": Decimal("1200"),
        "date": date(2026, 10, 3),
        "due_date": date(2026, 10, 5),
        "status": "paid",
        "late_fee": Decimal("0"),
        "payment_method": "pix",
        "notes": "paid early",
    }
    data.update(overrides)
    return data


class TestDateConversion:
    """Tests for date <-> timestamp helpers."""

    def test_to_timestamp(self) -> None:
        assert to_timestamp(date(2026, 10, 5)) == datetime(2026, 10, 5, tzinfo=timezone.utc)
        assert to_timestamp(None) is None

    def test_to_timestamp_rejects_strings(self) -> None:
        with pytest.raises(TypeError):
            to_timestamp("2026-10-05")

    def test_to_calendar_date(self) -> None:
        assert to_calendar_date(datetime(2026, 10, 5, 0, 0)) == date(2026, 10, 5)
        assert to_calendar_date(None) is None

    def test_to_calendar_date_in_another_timezone(self) -> None:
        # drivers may hand back the stored midnight UTC in the session timezone
        sao_paulo = timezone(timedelta(hours=-3))
        stored = to_timestamp(date(2026, 10, 5)).astimezone(sao_paulo)

        assert stored.day == 4
        assert to_calendar_date(stored) == date(2026, 10, 5)


class TestCollectionGateway:
    """Tests for add/list/get/replace/delete."""

    def test_add_and_read_back(self, db) -> None:
        payment_id = gateway.payments.add(db, _payment())

        stored = gateway.payments.get(db, payment_id)
        assert stored.id == payment_id
        assert stored.date == date(2026, 10, 3)
        assert stored.due_date == date(2026, 10, 5)
        assert stored.amount == Decimal("1200")
        assert stored.payment_method == "pix"
        assert stored.created_at is not None
        assert [p.id for p in gateway.payments.list(db)] == [payment_id]

    def test_listed_record_equals_input(self, db) -> None:
        data = _payment()
        payment_id = gateway.payments.add(db, data)

        listed = gateway.payments.list(db)
        assert len(listed) == 1
        stored = listed[0].model_dump()
        assert stored.pop("id") == payment_id
        assert stored.pop("created_at") is not None
        assert stored == data

    def test_ids_are_unique(self, db) -> None:
        ids = {gateway.payments.add(db, _payment()) for _ in range(3)}
        assert len(ids) == 3

    def test_replace_is_a_full_write(self, db) -> None:
        payment_id = gateway.payments.add(db, _payment())
        created_at = gateway.payments.get(db, payment_id).created_at

        data = _payment(status="pending", date=None)
        del data["notes"]
        del data["payment_method"]
        gateway.payments.replace(db, payment_id, data)

        stored = gateway.payments.get(db, payment_id)
        assert stored.status == "pending"
        assert stored.date is None
        assert stored.notes is None
        assert stored.payment_method is None
        assert stored.created_at == created_at

    def test_replace_resets_missing_fields_to_defaults(self, db) -> None:
        expense_id = gateway.expenses.add(
            db,
            {
                "property_id": "p1",
                "amount": Decimal("80"),
                "date": date(2026, 9, 1),
                "category": "utilities",
                "description": "Water bill",
                "recurring": True,
            },
        )
        gateway.expenses.replace(db, expense_id, {"amount": Decimal("90"), "description": "Water bill"})

        stored = gateway.expenses.get(db, expense_id)
        assert stored.amount == Decimal("90")
        assert stored.property_id == ""
        assert stored.category == "other"
        assert stored.recurring is False

    def test_missing_ids(self, db) -> None:
        assert gateway.tenants.get(db, "nope") is None
        with pytest.raises(EntityNotFoundError) as exc_info:
            gateway.tenants.replace(db, "nope", {})
        assert exc_info.value.collection == "tenants"
        assert exc_info.value.entity_id == "nope"
        with pytest.raises(EntityNotFoundError):
            gateway.tenants.delete(db, "nope")

    def test_delete(self, db) -> None:
        payment_id = gateway.payments.add(db, _payment())
        gateway.payments.delete(db, payment_id)

        assert gateway.payments.list(db) == []

    def test_failed_write_raises_store_error(self, db) -> None:
        with pytest.raises(StoreError):
            gateway.tenants.add(db, {"email": "sem.nome@email.com.br"})

        # the session is usable again after the rollback
        assert gateway.tenants.list(db) == []

    def test_grouped_writes(self, db) -> None:
        gateway.payments.add(db, _payment(), commit=False)
        gateway.payments.add(db, _payment(), commit=False)
        gateway.finish(db)

        assert len(gateway.payments.list(db)) == 2


class TestPropertyGateway:
    """Properties carry embedded units."""

    def _building(self, units) -> dict:
        return {
            "name": "Edifício Central",
            "address": "Rua XV de Novembro, 50",
            "type": "building",
            "area": 900.0,
            "description": "",
            "status": "occupied",
            "units": units,
        }

    def test_units_round_trip_in_order(self, db) -> None:
        property_id = gateway.properties.add(
            db,
            self._building([
                {"unit_number": "101", "monthly_rent": Decimal("1500"), "status": "occupied"},
                {"unit_number": "102"},
            ]),
        )

        stored = gateway.properties.get(db, property_id)
        assert [u.unit_number for u in stored.units] == ["101", "102"]
        assert stored.units[0].monthly_rent == Decimal("1500")
        assert stored.units[1].bedrooms == 1
        assert stored.units[1].status == "vacant"
        assert all(u.property_id == property_id for u in stored.units)

    def test_replace_keeps_sent_unit_ids(self, db) -> None:
        property_id = gateway.properties.add(
            db, self._building([{"unit_number": "101"}, {"unit_number": "102"}])
        )
        first, second = gateway.properties.get(db, property_id).units

        doc = gateway.properties.get(db, property_id).model_dump()
        doc["units"] = [
            {**doc["units"][1], "tenant_id": "t9"},
            {"unit_number": "103"},
        ]
        gateway.properties.replace(db, property_id, doc)

        units = gateway.properties.get(db, property_id).units
        assert [u.unit_number for u in units] == ["102", "103"]
        assert units[0].id == second.id
        assert units[0].tenant_id == "t9"
        assert first.id not in {u.id for u in units}

    def test_replace_without_units_clears_them(self, db) -> None:
        property_id = gateway.properties.add(db, self._building([{"unit_number": "101"}]))
        data = self._building([])
        del data["units"]
        gateway.properties.replace(db, property_id, data)

        assert gateway.properties.get(db, property_id).units == []

    def test_delete_removes_units(self, db) -> None:
        property_id = gateway.properties.add(db, self._building([{"unit_number": "101"}]))
        gateway.properties.delete(db, property_id)

        assert gateway.properties.list(db) == []
        assert db.query(gateway.PropertyUnit).count() == 0

    def test_failed_unit_flush_raises_store_error(self, db, monkeypatch) -> None:
        property_id = gateway.properties.add(db, self._building([{"unit_number": "101"}]))

        def fail_flush(*args, **kwargs):
            raise SQLAlchemyError("disk full")

        monkeypatch.setattr(db, "flush", fail_flush)
        with pytest.raises(StoreError, match="replace units of properties"):
            gateway.properties.replace(db, property_id, self._building([{"unit_number": "102"}]))
