# Main application file

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from nursery_pos.database import init_db
from nursery_pos.core.config import settings
from nursery_pos.core.errors import register_error_handlers
from nursery_pos.core.rate_limiter import limiter
from nursery_pos.services.billing import Cart
from nursery_pos.routers import (
    cart,
    exports,
    products,
    reports,
    sales,
)
from nursery_pos.routers import settings as shop_settings


# LOGGING CONFIGURATION

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s | %(levelname)s | %(message)s",
)

logger = logging.getLogger("nursery_pos")


# STARTUP

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Database ready")
    yield


# APP INIT

app = FastAPI(
    title="Nursery POS API",
    description="Billing, sales history and reports for a single plant nursery",
    version="1.0.0",
    lifespan=lifespan,
)

# One till, one working cart
app.state.cart = Cart()


# CORS

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)


# RATE LIMITING

app.state.limiter = limiter
app.add_exception_handler(
    RateLimitExceeded,
    _rate_limit_exceeded_handler
)


# DOMAIN ERRORS

register_error_handlers(app)


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

app.include_router(products.router)
app.include_router(shop_settings.router)
app.include_router(cart.router)
app.include_router(sales.router)
app.include_router(reports.router)
app.include_router(exports.router)


# ROOT

@app.get("/")
def root():
    logger.info("Health check endpoint called")
    return {"message": "Nursery POS API is running"}
