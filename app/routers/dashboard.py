# =========================================================
# DASHBOARD ROUTER
#
# - Today's sales, stock by product type, top debtors,
#   7 day sales chart
# - Monthly sales vs expenses report
# =========================================================

from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.core.auth import get_current_user
from app.schemas.report import DashboardStatsResponse, MonthlyReportResponse
from app.services import reports as reports_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStatsResponse)
def dashboard_stats(
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return reports_service.get_dashboard_stats(db)


@router.get("/monthly-report", response_model=MonthlyReportResponse)
def monthly_report(
    year: int | None = Query(None, ge=2000, le=2100),
    month: int | None = Query(None, ge=1, le=12),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    today = date.today()

    return reports_service.get_monthly_report(
        db,
        year or today.year,
        month or today.month,
    )
