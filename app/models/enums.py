from enum import Enum

class ItemType(str, Enum):
    income = "income"
    expense = "expense"
