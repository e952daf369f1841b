"""
src/app.py

FastAPI application entrypoint for the transaction service.

This module wires together:
- Logging configuration (rotating file under LOG_DIR)
- CORS and request logging middleware
- Error mapping for the service's exception taxonomy
- The transactions router under /api
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request

import config
from api.errors import register_exception_handlers
from api.transactions import router as transactions_router
from clients.account_client import AccountServiceClient
from db.session import engine, init_models
from logging_config import get_logger, setup_logging

# Configure logging before creating the app
setup_logging()
logger = get_logger("transaction_service")


def create_app() -> FastAPI:
    app = FastAPI(title="Transaction Service", version="1.0.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOWED_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        allow_credentials=True,
        max_age=3600,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """
        Lightweight request logger to help trace transaction traffic.
        """
        logger.info(
            "HTTP %s %s from %s",
            request.method,
            request.url.path,
            request.client.host if request.client else "?",
        )
        response = await call_next(request)
        logger.info("HTTP %s %s -> %s", request.method, request.url.path, response.status_code)
        return response

    @app.get("/api/health")
    async def health():
        """
        Simple health check endpoint.
        """
        return {"status": "healthy"}

    register_exception_handlers(app)
    app.include_router(transactions_router, prefix="/api")

    @app.on_event("startup")
    async def on_startup():
        logger.info("Transaction service starting up db=%s", config.DATABASE_URL)
        await init_models()
        app.state.account_client = AccountServiceClient()
        logger.info(
            "Account service url=%s timeout=%ss",
            config.ACCOUNT_SERVICE_URL,
            config.ACCOUNT_SERVICE_TIMEOUT,
        )

    @app.on_event("shutdown")
    async def on_shutdown():
        client = getattr(app.state, "account_client", None)
        if client is not None:
            await client.close()
        try:
            await engine.dispose()
        except Exception:
            logger.exception("Error disposing engine on shutdown")
        logger.info("Transaction service shutting down")

    return app


app = create_app()


# Run with: python src/app.py  OR  uvicorn app:app --app-dir src --host 0.0.0.0 --port 8080
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
