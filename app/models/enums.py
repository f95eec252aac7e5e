# app/models/enums.py

import enum


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    ACCOUNTANT = "accountant"
    SALES = "sales"


class ProductType(str, enum.Enum):
    BREAD = "bread"
    WATER = "water"


class MaterialType(str, enum.Enum):
    FLOUR = "flour"
    YEAST = "yeast"
    SALT = "salt"
    WATER = "water"
    FILTER = "filter"
    BOTTLE = "bottle"
    OTHER = "other"


class MovementType(str, enum.Enum):
    IN = "in"
    OUT = "out"


class PaymentType(str, enum.Enum):
    CASH = "cash"
    BANK_TRANSFER = "bank_transfer"
    CREDIT = "credit"


class PaymentMethod(str, enum.Enum):
    CASH = "cash"
    BANK_TRANSFER = "bank_transfer"


class ExpenseCategory(str, enum.Enum):
    ELECTRICITY = "electricity"
    GAS = "gas"
    SALARY = "salary"
    UTILITIES = "utilities"
    RAW_MATERIALS = "raw_materials"
    MAINTENANCE = "maintenance"
    TRANSPORT = "transport"
    OTHER = "other"


def check_in(column: str, enum_cls) -> str:
    """SQL fragment for a CHECK constraint restricting a column to enum values."""
    values = ", ".join(f"'{member.value}'" for member in enum_cls)
    return f"{column} IN ({values})"
