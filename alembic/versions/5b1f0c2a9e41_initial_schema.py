"""initial_schema

Revision ID: 5b1f0c2a9e41
Revises:
Create Date: 2026-10-19 09:12:40.118204
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1f0c2a9e41'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(with_updated=True):
    columns = [sa.Column("created_at", sa.DateTime(), nullable=False)]
    if with_updated:
        columns.append(sa.Column("updated_at", sa.DateTime(), nullable=False))
    return columns


def upgrade() -> None:
    """Upgrade schema."""

    # USERS
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("full_name", sa.String(), nullable=False),
        sa.Column("role", sa.String(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(with_updated=False),
        sa.CheckConstraint("role IN ('admin', 'accountant', 'sales')", name="ck_user_role_valid"),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    # CUSTOMERS
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("company_name", sa.String(), nullable=True),
        sa.Column("phone_number", sa.String(), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("current_debt", sa.Numeric(10, 2), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("current_debt >= 0", name="ck_customer_debt_non_negative"),
    )
    op.create_index("ix_customers_id", "customers", ["id"])
    op.create_index("ix_customers_name", "customers", ["name"])

    # PRODUCTS
    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("unit", sa.String(), nullable=False),
        sa.Column("current_stock", sa.Numeric(10, 2), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("name", name="uq_product_name"),
        sa.CheckConstraint("type IN ('bread', 'water')", name="ck_product_type_valid"),
        sa.CheckConstraint("price > 0", name="ck_product_price_positive"),
        sa.CheckConstraint("current_stock >= 0", name="ck_product_stock_non_negative"),
    )
    op.create_index("ix_products_id", "products", ["id"])
    op.create_index("ix_products_type", "products", ["type"])

    # RAW MATERIALS
    op.create_table(
        "raw_materials",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("unit", sa.String(), nullable=False),
        sa.Column("current_stock", sa.Numeric(10, 2), nullable=False),
        sa.Column("min_stock_level", sa.Numeric(10, 2), nullable=False),
        sa.Column("cost_per_unit", sa.Numeric(10, 2), nullable=False),
        *_timestamps(),
        sa.CheckConstraint(
            "type IN ('flour', 'yeast', 'salt', 'water', 'filter', 'bottle', 'other')",
            name="ck_material_type_valid",
        ),
        sa.CheckConstraint("current_stock >= 0", name="ck_material_stock_non_negative"),
        sa.CheckConstraint("min_stock_level >= 0", name="ck_material_min_stock_non_negative"),
        sa.CheckConstraint("cost_per_unit >= 0", name="ck_material_cost_non_negative"),
    )
    op.create_index("ix_raw_materials_id", "raw_materials", ["id"])
    op.create_index("ix_raw_materials_name", "raw_materials", ["name"])

    # SALES
    op.create_table(
        "sales",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("customer_id", sa.Integer(), sa.ForeignKey("customers.id"), nullable=False),
        sa.Column("total_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("paid_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("remaining_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("payment_type", sa.String(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_by_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        *_timestamps(),
        sa.CheckConstraint(
            "payment_type IN ('cash', 'bank_transfer', 'credit')",
            name="ck_sale_payment_type_valid",
        ),
        sa.CheckConstraint("total_amount >= 0", name="ck_sale_total_non_negative"),
        sa.CheckConstraint("paid_amount >= 0", name="ck_sale_paid_non_negative"),
        sa.CheckConstraint("remaining_amount >= 0", name="ck_sale_remaining_non_negative"),
    )
    op.create_index("ix_sales_id", "sales", ["id"])
    op.create_index("ix_sales_customer_id", "sales", ["customer_id"])
    op.create_index("ix_sales_created_at", "sales", ["created_at"])
    op.create_index("ix_sales_customer_created", "sales", ["customer_id", "created_at"])

    # SALE ITEMS
    op.create_table(
        "sale_items",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("sale_id", sa.Integer(), sa.ForeignKey("sales.id", ondelete="CASCADE"), nullable=False),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("products.id"), nullable=False),
        sa.Column("quantity", sa.Numeric(10, 2), nullable=False),
        sa.Column("unit_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("total_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("returned_quantity", sa.Numeric(10, 2), nullable=False),
        sa.CheckConstraint("quantity > 0", name="ck_sale_item_quantity_positive"),
        sa.CheckConstraint(
            "returned_quantity >= 0 AND returned_quantity <= quantity",
            name="ck_sale_item_returned_within_quantity",
        ),
    )
    op.create_index("ix_sale_items_id", "sale_items", ["id"])
    op.create_index("ix_sale_items_sale_id", "sale_items", ["sale_id"])
    op.create_index("ix_sale_items_product_id", "sale_items", ["product_id"])

    # SALE RETURNS
    op.create_table(
        "sale_returns",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("sale_id", sa.Integer(), sa.ForeignKey("sales.id", ondelete="CASCADE"), nullable=False),
        sa.Column(
            "sale_item_id",
            sa.Integer(),
            sa.ForeignKey("sale_items.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("quantity", sa.Numeric(10, 2), nullable=False),
        sa.Column("refund_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("debt_reduction", sa.Numeric(10, 2), nullable=False),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column("created_by_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        *_timestamps(with_updated=False),
        sa.CheckConstraint("quantity > 0", name="ck_sale_return_quantity_positive"),
    )
    op.create_index("ix_sale_returns_id", "sale_returns", ["id"])
    op.create_index("ix_sale_returns_sale_id", "sale_returns", ["sale_id"])

    # PAYMENTS
    op.create_table(
        "payments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("customer_id", sa.Integer(), sa.ForeignKey("customers.id"), nullable=False),
        sa.Column("sale_id", sa.Integer(), sa.ForeignKey("sales.id"), nullable=True),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("method", sa.String(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("received_by_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        *_timestamps(with_updated=False),
        sa.CheckConstraint("method IN ('cash', 'bank_transfer')", name="ck_payment_method_valid"),
        sa.CheckConstraint("amount > 0", name="ck_payment_amount_positive"),
    )
    op.create_index("ix_payments_id", "payments", ["id"])
    op.create_index("ix_payments_customer_id", "payments", ["customer_id"])
    op.create_index("ix_payments_sale_id", "payments", ["sale_id"])
    op.create_index("ix_payments_customer_created", "payments", ["customer_id", "created_at"])

    # WAREHOUSE MOVEMENTS
    op.create_table(
        "warehouse_movements",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "raw_material_id",
            sa.Integer(),
            sa.ForeignKey("raw_materials.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("quantity", sa.Numeric(10, 2), nullable=False),
        sa.Column("unit_cost", sa.Numeric(10, 2), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_by_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        *_timestamps(with_updated=False),
        sa.CheckConstraint("type IN ('in', 'out')", name="ck_movement_type_valid"),
        sa.CheckConstraint("quantity > 0", name="ck_movement_quantity_positive"),
    )
    op.create_index("ix_warehouse_movements_id", "warehouse_movements", ["id"])
    op.create_index("ix_warehouse_movements_raw_material_id", "warehouse_movements", ["raw_material_id"])
    op.create_index("ix_warehouse_movements_created_at", "warehouse_movements", ["created_at"])

    # EXPENSES
    op.create_table(
        "expenses",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("category", sa.String(), nullable=False),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_by_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        *_timestamps(with_updated=False),
        sa.CheckConstraint(
            "category IN ('electricity', 'gas', 'salary', 'utilities', "
            "'raw_materials', 'maintenance', 'transport', 'other')",
            name="ck_expense_category_valid",
        ),
        sa.CheckConstraint("amount > 0", name="ck_expense_amount_positive"),
    )
    op.create_index("ix_expenses_id", "expenses", ["id"])
    op.create_index("ix_expenses_category", "expenses", ["category"])
    op.create_index("ix_expenses_date", "expenses", ["date"])


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("expenses")
    op.drop_table("warehouse_movements")
    op.drop_table("payments")
    op.drop_table("sale_returns")
    op.drop_table("sale_items")
    op.drop_table("sales")
    op.drop_table("raw_materials")
    op.drop_table("products")
    op.drop_table("customers")
    op.drop_table("users")
