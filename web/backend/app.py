#!/usr/bin/env python3
"""
Sensai Web API - FastAPI Application

Career assistant API: profile onboarding, industry insights with a
dashboard view, cover letters and interview practice. Callers are
identified by the X-User-Id header set by the upstream identity provider.

Usage:
    python -m web.backend.app

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from .config import get_config
from .dependencies import get_app_context
from .exceptions import (
    ServiceException,
    service_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import (
    profile_router,
    cover_letters_router,
    insights_router,
    interview_router
)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Only close a context that a request actually built
    if get_app_context.cache_info().currsize:
        logger.info("Closing database connections")
        get_app_context().close()
        get_app_context.cache_clear()


app = FastAPI(
    title="Sensai API",
    description="AI career assistant: industry insights, cover letters and interview practice",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_exception_handler(ServiceException, service_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

for router in (profile_router, insights_router, cover_letters_router, interview_router):
    app.include_router(router)


@app.get("/health")
def health_check():
    """Liveness probe; does not touch the database or the model."""
    return {"status": "healthy", "service": "sensai-web"}


def main():
    """Run the web server with host and port from config."""
    import uvicorn

    config = get_config()
    logger.info(f"Starting Sensai Web Server on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
