"""Unit tests for ResourceService."""

import pytest

from catalog_service.entities import PRODUCT_SCHEMA
from catalog_service.errors import RecordNotFoundError, RecordValidationError
from catalog_service.repositories import InMemoryRecordRepository
from catalog_service.services import ResourceService


class TestCreate:
    """Test record creation rules."""

    def test_trims_and_coerces(self, product_service):
        record = product_service.create_record(
            {"name": "  Ноутбук  ", "price": " 75000 ", "stock": "5", "category": "Ноутбуки "}
        )

        assert record.fields == {
            "name": "Ноутбук",
            "category": "Ноутбуки",
            "price": 75000,
            "stock": 5,
        }

    def test_keeps_fractional_price(self, product_service):
        record = product_service.create_record({"name": "Кабель", "price": "199.9"})
        assert record.fields["price"] == pytest.approx(199.9)

    def test_drops_unknown_fields_and_caller_id(self, product_service):
        record = product_service.create_record(
            {"id": "abcdef", "name": "Мышь", "price": 6000, "color": "black"}
        )

        assert "color" not in record.fields
        assert "id" not in record.fields
        assert record.id != "abcdef"

    def test_missing_required_fields(self, product_service):
        with pytest.raises(RecordValidationError, match="Missing required fields: name, price"):
            product_service.create_record({"category": "Аксессуары"})
        assert product_service.count() == 0

    def test_blank_required_field_counts_as_missing(self, user_service):
        with pytest.raises(RecordValidationError, match="Missing required fields: name"):
            user_service.create_record({"name": "   ", "age": 30})

    @pytest.mark.parametrize("price", ["cheap", True, [1], float("nan"), float("inf")])
    def test_rejects_non_numeric_price(self, product_service, price):
        with pytest.raises(RecordValidationError, match="price must be a number"):
            product_service.create_record({"name": "Ноутбук", "price": price})

    def test_rejects_fractional_integer_field(self, user_service):
        with pytest.raises(RecordValidationError, match="age must be an integer"):
            user_service.create_record({"name": "Анна", "age": 22.5})

    def test_whole_float_integer_field_becomes_int(self, user_service):
        record = user_service.create_record({"name": "Анна", "age": 22.0})
        assert record.fields["age"] == 22
        assert isinstance(record.fields["age"], int)

    def test_rejects_non_string_name(self, product_service):
        with pytest.raises(RecordValidationError, match="name must be a string"):
            product_service.create_record({"name": 42, "price": 1})


class TestUpdate:
    """Test partial update semantics."""

    def test_only_supplied_fields_change(self, product_service):
        record = product_service.create_record(
            {"name": "Ноутбук", "price": 75000, "description": "Игровой"}
        )

        updated = product_service.update_record(record.id, {"price": 70000})

        assert updated.id == record.id
        assert updated.fields == {"name": "Ноутбук", "description": "Игровой", "price": 70000}
        assert product_service.get_record(record.id) == updated

    def test_null_values_are_ignored(self, user_service):
        record = user_service.create_record({"name": "Иван", "age": 18})

        updated = user_service.update_record(record.id, {"name": None, "age": "19"})

        assert updated.fields == {"name": "Иван", "age": 19}

    @pytest.mark.parametrize("data", [{}, {"unknown": 1}, {"age": None}])
    def test_nothing_to_update(self, user_service, data):
        record = user_service.create_record({"name": "Иван", "age": 18})

        with pytest.raises(RecordValidationError, match="Nothing to update"):
            user_service.update_record(record.id, data)
        assert user_service.get_record(record.id) == record

    def test_blank_required_field_rejected(self, user_service):
        record = user_service.create_record({"name": "Иван", "age": 18})

        with pytest.raises(RecordValidationError, match="Fields cannot be empty: name"):
            user_service.update_record(record.id, {"name": " "})

    def test_blank_optional_field_rejected(self, product_service):
        record = product_service.create_record(
            {"name": "Монитор", "category": "Мониторы", "price": 32000}
        )

        with pytest.raises(RecordValidationError, match="Fields cannot be empty: category"):
            product_service.update_record(record.id, {"category": "   "})
        assert product_service.get_record(record.id) == record

    def test_unknown_id(self, user_service):
        with pytest.raises(RecordNotFoundError) as exc_info:
            user_service.update_record("zzzzzz", {})

        assert str(exc_info.value) == "User not found"
        assert exc_info.value.record_id == "zzzzzz"


class TestReadAndDelete:
    """Test lookups and removal."""

    def test_get_unknown_id(self, product_service):
        with pytest.raises(RecordNotFoundError, match="Product not found"):
            product_service.get_record("zzzzzz")

    def test_delete_then_get(self, product_service):
        record = product_service.create_record({"name": "Ноутбук", "price": 75000})

        product_service.delete_record(record.id)

        with pytest.raises(RecordNotFoundError):
            product_service.get_record(record.id)
        with pytest.raises(RecordNotFoundError):
            product_service.delete_record(record.id)

    def test_list_size_after_creates_and_deletes(self, product_service):
        created = [
            product_service.create_record({"name": f"Товар {i}", "price": i}) for i in range(10)
        ]
        for record in created[::3]:
            product_service.delete_record(record.id)

        listed = product_service.list_records()
        assert len(listed) == 10 - 4
        assert [r.id for r in listed] == [r.id for i, r in enumerate(created) if i % 3]

    def test_clear(self, product_service):
        for i in range(3):
            product_service.create_record({"name": f"Товар {i}", "price": i})

        assert product_service.clear() == 3
        assert product_service.list_records() == []


def test_create_uses_given_repository():
    repository = InMemoryRecordRepository(id_factory=lambda: "fixed1")
    service = ResourceService(schema=PRODUCT_SCHEMA, repository=repository)

    record = service.create_record({"name": "Ноутбук", "price": 75000})

    assert record.id == "fixed1"
    assert service.repository is repository
    assert repository.get("fixed1") == record
