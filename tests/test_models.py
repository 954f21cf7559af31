"""Tests for item validation."""

from datetime import datetime

import pytest

from app.core.errors import ValidationError
from app.models.item import validate_item
from app.schemas.item import ItemCreate, ItemRead


class TestValidateItem:

    def test_valid_item_passes(self, make_item):
        validate_item(make_item())

    def test_zero_amount_is_allowed(self, make_item):
        validate_item(make_item(amount=0))

    @pytest.mark.parametrize("amount", [-0.01, -1, -1000])
    def test_negative_amount(self, make_item, amount):
        with pytest.raises(ValidationError, match="amount cannot be negative"):
            validate_item(make_item(amount=amount))

    @pytest.mark.parametrize("item_type", ["", "transfer", "INCOME"])
    def test_invalid_type(self, make_item, item_type):
        with pytest.raises(ValidationError) as exc_info:
            validate_item(make_item(type=item_type))
        assert exc_info.value.message == "type must be 'income' or 'expense'"

    def test_expense_type_is_valid(self, make_item):
        validate_item(make_item(type="expense"))

    def test_empty_category(self, make_item):
        with pytest.raises(ValidationError, match="category is required"):
            validate_item(make_item(category=""))

    def test_missing_date(self, make_item):
        with pytest.raises(ValidationError, match="date is required"):
            validate_item(make_item(date=None))

    def test_amount_checked_before_type(self, make_item):
        with pytest.raises(ValidationError, match="amount cannot be negative"):
            validate_item(make_item(amount=-5, type="bogus", category="", date=None))

    def test_category_checked_before_date(self, make_item):
        with pytest.raises(ValidationError, match="category is required"):
            validate_item(make_item(category="", date=None))


class TestItemSchemas:

    def test_create_defaults_leave_validation_to_domain(self):
        item = ItemCreate().to_item()

        assert item.type == ""
        assert item.amount == 0.0
        assert item.category == ""
        assert item.date is None
        with pytest.raises(ValidationError, match="type must be"):
            validate_item(item)

    def test_create_ignores_id_in_body(self):
        data = ItemCreate.model_validate({
            "id": 99,
            "type": "expense",
            "amount": 12.5,
            "category": "Food",
            "date": "2024-03-01T08:00:00Z",
        })

        item = data.to_item(item_id=7)

        assert item.id == 7
        assert item.category == "Food"

    def test_read_renders_dates_as_utc(self, make_item):
        item = make_item(id=1, created_at=datetime(2024, 1, 1), updated_at=datetime(2024, 1, 2))

        payload = ItemRead.model_validate(item).model_dump(mode="json")

        assert payload["date"] == "2024-01-15T10:30:00Z"
        assert payload["created_at"] == "2024-01-01T00:00:00Z"
