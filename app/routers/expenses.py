# app/routers/expenses.py

from datetime import date

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.core.auth import get_admin_user, get_current_user, get_manager_user
from app.core.pagination import PageParams
from app.models.enums import ExpenseCategory
from app.schemas.expense import (
    ExpenseCreate,
    ExpenseListResponse,
    ExpenseResponse,
    ExpenseUpdate,
)
from app.schemas.report import MonthlyExpensesResponse
from app.services import expenses as expenses_service

router = APIRouter(prefix="/expenses", tags=["Expenses"])


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
def create_expense(
    expense_data: ExpenseCreate,
    db: Session = Depends(get_db),
    current_user=Depends(get_manager_user),
):
    return expenses_service.create_expense(db, expense_data, current_user)


@router.get("", response_model=ExpenseListResponse)
def list_expenses(
    pagination: PageParams = Depends(),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return expenses_service.list_expenses(db, pagination.page, pagination.limit)


@router.get("/monthly/{year}/{month}", response_model=MonthlyExpensesResponse)
def monthly_expenses(
    year: int = Path(..., ge=2000, le=2100),
    month: int = Path(..., ge=1, le=12),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return expenses_service.get_monthly_expenses(db, year, month)


@router.get("/category/{category}", response_model=ExpenseListResponse)
def expenses_by_category(
    category: ExpenseCategory,
    pagination: PageParams = Depends(),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return expenses_service.list_expenses_by_category(db, category, pagination.page, pagination.limit)


@router.get("/date-range", response_model=list[ExpenseResponse])
def expenses_by_date_range(
    start_date: date = Query(...),
    end_date: date = Query(...),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return expenses_service.list_expenses_by_date_range(db, start_date, end_date)


@router.get("/{expense_id}", response_model=ExpenseResponse)
def get_expense(
    expense_id: int,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return expenses_service.get_expense(db, expense_id)


@router.put("/{expense_id}", response_model=ExpenseResponse)
def update_expense(
    expense_id: int,
    expense_data: ExpenseUpdate,
    db: Session = Depends(get_db),
    current_user=Depends(get_manager_user),
):
    return expenses_service.update_expense(db, expense_id, expense_data)


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_expense(
    expense_id: int,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_user),
):
    expenses_service.delete_expense(db, expense_id)
    return None
