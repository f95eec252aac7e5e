# Import every model so Base.metadata knows all tables

from app.models.users import User
from app.models.customers import Customer
from app.models.products import Product
from app.models.raw_materials import RawMaterial
from app.models.sales import Sale
from app.models.sale_items import SaleItem
from app.models.sale_returns import SaleReturn
from app.models.payments import Payment
from app.models.warehouse_movements import WarehouseMovement
from app.models.expenses import Expense
