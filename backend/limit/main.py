from __future__ import annotations

import logging
import math

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from limit.config import settings
from limit.api.routes import router

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="LIMIT Regulation Engine",
    description=(
        "Derive permissible FSI, height, setbacks, ground coverage, parking, "
        "fire safety and accessibility obligations for a plot under GDCR 2017."
    ),
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins + ["http://localhost:8000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


def _json_float(value: float) -> float | str:
    return value if math.isfinite(value) else str(value)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """422 response; rejected Infinity/NaN inputs are echoed back as strings."""
    detail = jsonable_encoder(exc.errors(), custom_encoder={float: _json_float})
    return JSONResponse(status_code=422, content={"detail": detail})


@app.get("/")
async def root():
    return {
        "name": "LIMIT Regulation Engine",
        "version": "1.0.0",
        "endpoints": {
            "api_docs": "/docs",
            "health": "/health",
            "calculate": "POST /api/v1/calculate",
            "norms": "GET /api/v1/norms?intended_use=...",
            "bulk_analyze": "POST /api/v1/bulk/analyze",
            "bulk_export": "POST /api/v1/bulk/export",
            "bulk_template": "GET /api/v1/bulk/template",
            "compare": "POST /api/v1/compare",
        },
    }


@app.get("/health")
async def health():
    """Health check with reference data status."""
    status = {"status": "healthy", "version": "1.0.0"}

    try:
        from limit.regulation_engine.rule_table import get_rule_table
        status["rule_table"] = get_rule_table().version
    except Exception as e:
        status["status"] = "degraded"
        status["rule_table"] = f"error: {e}"

    return status
