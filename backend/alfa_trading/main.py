import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from alfa_trading.config import Settings, settings
from alfa_trading.dependencies import Services, build_services
from alfa_trading.exceptions import AppError
from alfa_trading.middleware import RateLimitMiddleware
from alfa_trading.responses import failure
from alfa_trading.routers import funds_router, market_router, order_router, signal_router, system_router

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def _validation_message(exc: RequestValidationError) -> str:
    for error in exc.errors():
        if error.get("type") == "missing":
            return "Symbol, type, and quantity are required"
    return "Invalid request body"


def register_exception_handlers(app: FastAPI, app_settings: Settings):
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        details = exc.details if app_settings.expose_error_details else None
        return JSONResponse(status_code=exc.status_code, content=failure(exc.message, details))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        details = [
            f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
            for error in exc.errors()
        ]
        return JSONResponse(status_code=400, content=failure(_validation_message(exc), details))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(status_code=404, content=failure("Route not found"))
        return JSONResponse(
            status_code=exc.status_code,
            content=failure(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        details = str(exc) if app_settings.expose_error_details else None
        return JSONResponse(status_code=500, content=failure("Something went wrong!", details))


def create_app(app_settings: Optional[Settings] = None, services: Optional[Services] = None) -> FastAPI:
    cfg = app_settings or settings
    app = FastAPI(title="ALFA Paper Trading Backend")
    app.state.settings = cfg
    app.state.services = services or build_services(cfg)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.get_cors_origins_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if cfg.rate_limit_enabled:
        app.add_middleware(
            RateLimitMiddleware,
            max_requests=cfg.rate_limit_max_requests,
            window_seconds=cfg.rate_limit_window_seconds,
        )

    app.include_router(system_router.router)  # /health
    app.include_router(funds_router.router)
    app.include_router(signal_router.router)
    app.include_router(order_router.router)
    app.include_router(market_router.router)

    register_exception_handlers(app, cfg)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    configure_logging(settings.log_level)
    logger.info(f"🚀 ALFA Trading Backend running on port {settings.port}")
    logger.info(f"📊 Environment: {settings.environment}")
    uvicorn.run(app, host=settings.host, port=settings.port)
