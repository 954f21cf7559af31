from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, Column, DateTime, Numeric, String
from sqlmodel import SQLModel, Field

from app.core.errors import ValidationError
from app.models.enums import ItemType


class Item(SQLModel, table=True):
    __tablename__ = "items"
    __table_args__ = (
        CheckConstraint("type IN ('income', 'expense')", name="ck_items_type"),
        CheckConstraint("amount >= 0", name="ck_items_amount_non_negative"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    # Se guarda como texto para poder validar valores que no pertenecen al enum
    type: str = Field(sa_column=Column(String(20), nullable=False))
    amount: float = Field(sa_column=Column(Numeric(15, 2, asdecimal=False), nullable=False))
    category: str = Field(sa_column=Column(String(100), nullable=False))
    # Fechas en UTC naive: DateTime sin zona, igual que la columna TIMESTAMP
    date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=False, index=True))
    created_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=False))
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=False))


def validate_item(item: Item) -> None:
    """
    Valida un item antes de persistirlo. Se detiene en el primer error,
    en este orden: monto, tipo, categoría y fecha.
    """
    if item.amount < 0:
        raise ValidationError("amount cannot be negative")
    if item.type not in (ItemType.income.value, ItemType.expense.value):
        raise ValidationError("type must be 'income' or 'expense'")
    if item.category == "":
        raise ValidationError("category is required")
    if item.date is None:
        raise ValidationError("date is required")
