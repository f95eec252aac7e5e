# =========================================================
# DOMAIN ERRORS
# Raised by the service layer, rendered by the handler
# registered in app/main.py as {"detail": ..., "error": ...}
# =========================================================

from fastapi import Request, status
from fastapi.responses import JSONResponse


class AppError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "bad_request"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "not_found"


class InvalidInputError(AppError):
    error = "invalid_input"


class InsufficientStockError(AppError):
    error = "insufficient_stock"


class InvalidAmountError(AppError):
    error = "invalid_amount"


class InvalidQuantityError(InvalidAmountError):
    error = "invalid_quantity"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    error = "conflict"


async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "error": exc.error},
    )
