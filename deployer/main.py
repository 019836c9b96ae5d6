"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from deployer import __version__
from deployer.api.middleware import RequestLoggingMiddleware
from deployer.api.router import router
from deployer.config import Settings, get_settings
from deployer.core.exceptions import DeployerError
from deployer.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def error_response(status_code: int, message: str, details=None) -> JSONResponse:
    content = {"error": message}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        configure_logging(settings)
        # Refuse to start without a Render credential
        settings.require_render_api_key()
        logger.info(
            "application.starting",
            version=__version__,
            environment=settings.app_env,
            port=settings.api_port,
        )

        yield

        logger.info("application.shutdown")

    app = FastAPI(
        title="Repo Deployer API",
        description="Deploys GitHub repositories as Render web services",
        version=__version__,
        docs_url="/docs" if settings.app_debug else None,
        redoc_url="/redoc" if settings.app_debug else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    @app.exception_handler(DeployerError)
    async def deployer_error_handler(
        request: Request, exc: DeployerError
    ) -> JSONResponse:
        """Handle application-specific errors."""
        if exc.status_code >= 500:
            logger.error(
                "request.failed",
                error=exc.message,
                details=exc.details,
                path=request.url.path,
            )
        return error_response(exc.status_code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report malformed request bodies as client errors."""
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "Invalid request body",
            jsonable_errors(exc),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected errors."""
        logger.error(
            "unhandled_exception",
            error=str(exc),
            path=request.url.path,
            exc_info=True,
        )

        if settings.is_development:
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                str(exc),
                {"type": type(exc).__name__},
            )

        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An unexpected error occurred",
        )

    app.include_router(router)

    return app


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "deployer.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development,
    )
