# schemas/report.py

from pydantic import BaseModel
from datetime import date as date_type
from decimal import Decimal
from typing import Dict, List


class TodaySalesSummary(BaseModel):
    total_amount: Decimal
    total_count: int
    total_quantity: Decimal

class DebtorResponse(BaseModel):
    customer_id: int
    customer_name: str
    debt: Decimal

class SalesChartPoint(BaseModel):
    date: date_type
    sales: Decimal

class DashboardStatsResponse(BaseModel):
    today_sales: TodaySalesSummary
    current_stock: Dict[str, Decimal]
    top_debtors: List[DebtorResponse]
    sales_chart: List[SalesChartPoint]


class ExpenseCategoryTotal(BaseModel):
    category: str
    total: Decimal
    count: int

class MonthlyExpensesResponse(BaseModel):
    period: str
    start_date: date_type
    end_date: date_type
    total_amount: Decimal
    categories: List[ExpenseCategoryTotal]

class MonthlyReportResponse(BaseModel):
    period: str
    start_date: date_type
    end_date: date_type
    total_sales: Decimal
    total_expenses: Decimal
    profit: Decimal
    total_transactions: int
