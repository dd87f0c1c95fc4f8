"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from finserv_calculators.api.middleware import RequestIDMiddleware, MetricsMiddleware
from finserv_calculators.api.v1 import calculators, eligibility
from finserv_calculators.infrastructure.observability.logging import setup_logging
from finserv_calculators.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Finserv Calculators",
        description="Loan EMI, moratorium, term insurance and eligibility calculators",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(calculators.router, prefix="/v1", tags=["calculators"])
    app.include_router(eligibility.router, prefix="/v1", tags=["eligibility"])

    return app


app = create_app()
