"""FRA decision support FastAPI application."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fra_dss.api.evaluations import router as evaluations_router
from fra_dss.api.health import router as health_router
from fra_dss.api.rules import router as rules_router
from fra_dss.config import settings
from fra_dss.storage.base import RuleStoreUnavailableError

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="FRA DSS - Decision Rules Service",
    description="Evaluates Forest Rights Act claim records against stored decision rules",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, tags=["Health"])
app.include_router(evaluations_router, prefix="/api/decision-rules", tags=["Evaluations"])
app.include_router(rules_router, prefix="/api/decision-rules", tags=["Decision Rules"])


@app.exception_handler(RuleStoreUnavailableError)
async def rule_store_unavailable(request: Request, exc: RuleStoreUnavailableError):
    logger.error("Rule store unavailable on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"error": "Rule store unavailable", "message": str(exc)},
    )


@app.get("/")
async def root():
    """Root endpoint."""
    return {"service": "FRA DSS", "version": "0.1.0", "docs": "/docs"}
