from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, StrictStr, field_validator

from app.models.item import Item
from app.utils.dates import as_utc, parse_rfc3339


def _json_number(value: Any) -> Any:
    # "100" o true no son montos
    if isinstance(value, (str, bool)):
        raise ValueError("amount must be a JSON number")
    return value


def _rfc3339_or_none(value: Any) -> Any:
    if value is None or isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError("date must be an RFC3339 string")
    return parse_rfc3339(value)


class ItemCreate(BaseModel):
    # Los valores por defecto dejan que validate_item reporte el campo faltante
    type: StrictStr = ""
    amount: Annotated[float, BeforeValidator(_json_number)] = 0.0
    category: StrictStr = ""
    date: Annotated[Optional[datetime], BeforeValidator(_rfc3339_or_none)] = None

    model_config = ConfigDict(extra="ignore")

    def to_item(self, item_id: Optional[int] = None) -> Item:
        return Item(
            id=item_id,
            type=self.type,
            amount=self.amount,
            category=self.category,
            date=self.date,
        )


class ItemRead(BaseModel):
    id: int
    type: str
    amount: float
    category: str
    date: datetime
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("date", "created_at", "updated_at")
    @classmethod
    def _mark_utc(cls, value: datetime) -> datetime:
        return as_utc(value)
