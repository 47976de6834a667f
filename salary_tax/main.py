"""FastAPI application entry point.

Starts the Salary Tax Breakdown API on port 5477.

Usage:
    uvicorn salary_tax.main:app --host 0.0.0.0 --port 5477 --reload
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from salary_tax.config import settings
from salary_tax.routers import performance, tax
from salary_tax.routers.performance import (
    format_duration_ms,
    record_response_time,
    reset_start_time,
    uptime_ms,
)

# ── Logging ──────────────────────────────────────────────────────────────
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


# ── Lifespan (startup + shutdown) ────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Salary Tax Breakdown API on port %s …", settings.APP_PORT)
    reset_start_time()
    yield
    logger.info("Application shutdown complete.")


# ── Application factory ──────────────────────────────────────────────────

app = FastAPI(
    title="Salary Tax Breakdown API",
    description=(
        "Indian salary tax breakdown from gross annual CTC.  Computes slab "
        "income tax, cess, professional tax, employee/employer PF and "
        "gratuity, and lays the result out as a rupee-formatted table."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

# ── CORS ────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request-level timing middleware ──────────────────────────────────────

@app.middleware("http")
async def timing_middleware(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Response-Time-Ms"] = f"{elapsed_ms:.2f}"

    # Record for the /performance endpoint
    record_response_time(elapsed_ms)
    logger.debug("%s %s took %.2f ms", request.method, request.url.path, elapsed_ms)
    return response


# ── Global exception handler ─────────────────────────────────────────────

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error. Please check the logs."},
    )


# ── Register routers ─────────────────────────────────────────────────────
app.include_router(tax.router)
app.include_router(performance.router)


# ── Health check ──────────────────────────────────────────────────────────

@app.get("/health", tags=["Health"])
async def health_check():
    return {
        "status": "healthy",
        "port": settings.APP_PORT,
        "uptime": format_duration_ms(uptime_ms()),
    }


# ── Dev entry point ──────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "salary_tax.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=True,
    )
