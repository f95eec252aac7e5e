# Main application file

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError

from app import models  # noqa: F401  registers every table on Base.metadata
from app.database import engine, Base, SessionLocal, creates_schema_on_startup
from app.core.config import settings
from app.core.exceptions import AppError, app_error_handler
from app.core.rate_limiter import limiter
from app.core.seed import seed_initial_data
from app.routers import (
    auth,
    users,
    customers,
    products,
    warehouse,
    sales,
    expenses,
    dashboard,
)


# LOGGING CONFIGURATION

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s | %(levelname)s | %(message)s",
)

logger = logging.getLogger("app")


# STARTUP

@asynccontextmanager
async def lifespan(app: FastAPI):
    if creates_schema_on_startup(settings.DATABASE_URL):
        Base.metadata.create_all(bind=engine)
    else:
        logger.info("Schema is managed by Alembic; run `alembic upgrade head` after deploys")

    if settings.SEED_DEFAULT_DATA:
        db = SessionLocal()
        try:
            seed_initial_data(db)
        finally:
            db.close()

    logger.info(f"Bakery Business API started ({settings.ENV})")
    yield


# APP INIT

app = FastAPI(
    title="Bakery Business API",
    description="Inventory, customers and debt, sales, warehouse and expenses for a bakery and bottled-water business",
    version="1.0.0",
    lifespan=lifespan,
)


# CORS (Token-based auth)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["Authorization", "Content-Type"],
)


# RATE LIMITING

app.state.limiter = limiter
app.add_exception_handler(
    RateLimitExceeded,
    _rate_limit_exceeded_handler
)


# ERROR HANDLING

app.add_exception_handler(AppError, app_error_handler)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Unable to complete the operation", "error": "database_error"},
    )


# REQUEST LOGGING MIDDLEWARE

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    duration = round((time.time() - start_time) * 1000, 2)

    logger.info(
        f"{request.method} {request.url.path} "
        f"Status: {response.status_code} "
        f"Time: {duration}ms"
    )

    return response


# ROUTERS

app.include_router(auth.router)
app.include_router(users.router)
app.include_router(customers.router)
app.include_router(products.router)
app.include_router(warehouse.router)
app.include_router(sales.router)
app.include_router(expenses.router)
app.include_router(dashboard.router)


# ROOT

@app.get("/")
def root():
    logger.info("Health check endpoint called")
    return {"message": "Bakery Business API is running"}
