import logging
import os
import time
from datetime import datetime, timezone

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend_fastapi.api.routes.tasks import router as tasks_router
from backend_fastapi.api.schemas import api_response
from backend_fastapi.logging_config import configure_logging
from infrastructure.container import Container

# Load environment variables from .env file
load_dotenv()
configure_logging(os.getenv("LOG_LEVEL", "info"))

logger = logging.getLogger(__name__)

_VALIDATION_MESSAGES = {
    "body": "Validation error",
    "query": "Invalid query parameters",
}


def _first_error(exc: RequestValidationError) -> tuple[str, str]:
    error = exc.errors()[0]
    location = error["loc"][0] if error["loc"] else "body"
    field = ".".join(str(part) for part in error["loc"][1:])
    message = f"{field}: {error['msg']}" if field else error["msg"]
    return str(location), message


def create_app(
    container: Container | None = None,
    environment: str | None = None,
) -> FastAPI:
    """
    Construye la aplicación FastAPI.

    Argumentos:
        container (Container | None): Raíz de composición; si no llega se crea una.
        environment (str | None): development, production o test (por defecto ENVIRONMENT).

    Retorna:
        FastAPI: La aplicación lista para servir.
    """
    environment = (environment or os.getenv("ENVIRONMENT", "development")).lower()
    api_version = os.getenv("API_VERSION", "v1")
    started_at = time.monotonic()

    app = FastAPI(title="Task Management API", docs_url="/api-docs")
    app.state.container = container or Container()

    # Configure CORS for frontend from environment variables
    cors_origins = os.getenv("CORS_ORIGINS", "*")
    if cors_origins == "*":
        origins = ["*"]
    else:
        origins = [origin.strip() for origin in cors_origins.split(",")]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true",
        allow_methods=os.getenv("CORS_ALLOW_METHODS", "*").split(","),
        allow_headers=os.getenv("CORS_ALLOW_HEADERS", "*").split(","),
    )

    if environment != "test":

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            start = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info(
                f"{request.method} {request.url.path} "
                f"{response.status_code} {elapsed_ms:.1f}ms"
            )
            return response

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        location, message = _first_error(exc)
        if location == "path":
            return api_response(
                False,
                "Invalid task ID format",
                error="Task ID must be a valid UUID",
                status_code=400,
            )
        return api_response(
            False,
            _VALIDATION_MESSAGES.get(location, "Validation error"),
            error=message,
            status_code=400,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return api_response(
                False,
                "Route not found",
                status_code=404,
                path=request.url.path,
            )
        return api_response(False, str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"🔴 Error no controlado en {request.method} {request.url.path}")
        return api_response(
            False,
            "Internal server error",
            error=str(exc) if environment == "development" else "Something went wrong",
            status_code=500,
        )

    @app.get("/health", tags=["health"])
    def health():
        return api_response(
            True,
            "Server is running",
            timestamp=datetime.now(timezone.utc).isoformat(),
            uptime=time.monotonic() - started_at,
        )

    app.include_router(tasks_router, prefix=f"/api/{api_version}")
    return app


app = create_app()
