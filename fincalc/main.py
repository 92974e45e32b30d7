"""FastAPI app: mount calculator routes, CORS, request timing and logging."""

import time

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fincalc.config import get_settings
from fincalc.logging_config import configure_logging
from fincalc.routers import investments, loans, performance, tax

logger = structlog.get_logger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, json_format=settings.LOG_JSON)

    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_request_timing(request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        performance.timings.record(request.method, request.url.path, duration_ms)
        logger.debug(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round(duration_ms, 3),
        )
        return response

    prefix = settings.API_PREFIX
    app.include_router(loans.router, prefix=prefix, tags=["loans"])
    app.include_router(investments.router, prefix=prefix, tags=["investments"])
    app.include_router(tax.router, prefix=prefix, tags=["tax"])
    app.include_router(performance.router, prefix=prefix, tags=["performance"])

    @app.get("/health")
    def health():
        return {"status": "ok"}

    logger.info("app_created", environment=settings.ENVIRONMENT, prefix=prefix)
    return app


app = create_app()
