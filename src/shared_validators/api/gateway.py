"""API Gateway - FastAPI application exposing the shared User validator."""

import json
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared_validators.api.schemas import (
    ErrorResponse,
    HealthResponse,
    UserValidatedResponse,
    UserValidationErrorResponse,
)
from shared_validators.common.config import get_config
from shared_validators.common.exceptions import RequestBodyError
from shared_validators.common.logging import get_logger
from shared_validators.validators import validate_user


config = get_config()
logger = get_logger("shared_validators.api", config.log_level.value)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info(
        f"API server starting at http://{config.api_host}:{config.api_port} "
        f"({config.environment.value})"
    )
    yield
    logger.info("API server shutdown complete")


app = FastAPI(
    title="Shared Validators API",
    description="Validates user payloads with the shared User schema.",
    version="0.1.0",
    lifespan=lifespan,
    docs_url=None if config.is_production else "/docs",
    redoc_url=None if config.is_production else "/redoc",
)


if config.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials="*" not in config.cors_origins,
        allow_methods=["POST", "GET"],
        allow_headers=["Content-Type", "X-Request-ID"],
    )


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

@app.exception_handler(RequestBodyError)
async def request_body_error_handler(request: Request, exc: RequestBodyError) -> JSONResponse:
    """Handle bodies that are not JSON."""
    request_id = getattr(request.state, "request_id", None)
    logger.warning(
        "Rejected request body",
        extra={"request_id": request_id, "error": exc.message}
    )
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            error="invalid_json",
            message=exc.message,
            request_id=request_id,
        ).model_dump(),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected errors.

    Logs full exception for debugging but returns sanitized message to client.
    """
    request_id = getattr(request.state, "request_id", None)
    logger.exception(
        "Unexpected error",
        extra={"request_id": request_id, "error_type": type(exc).__name__}
    )
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="internal_error",
            message="An unexpected error occurred",
            request_id=request_id,
        ).model_dump(),
    )


# =============================================================================
# MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID to each request for tracing."""
    request_id = f"req_{uuid4().hex[:12]}"
    request.state.request_id = request_id

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


async def read_json_body(request: Request) -> Any:
    """Decode the body as JSON of any shape. An empty body reads as ``{}``."""
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError as e:
        raise RequestBodyError(
            "Request body must be valid JSON",
            details={"reason": str(e)},
        ) from e


# =============================================================================
# ENDPOINTS
# =============================================================================

@app.get("/", response_model=HealthResponse)
async def root() -> HealthResponse:
    """Liveness check."""
    return HealthResponse(message="API is running 🚀")


@app.post(
    "/users",
    responses={
        200: {"description": "User is valid", "model": UserValidatedResponse},
        400: {
            "description": "Validation failed, or the body is not JSON",
            "model": UserValidationErrorResponse,
        },
    },
    summary="Validate a user payload",
)
async def create_user(request: Request) -> JSONResponse:
    """Validate the JSON body against the shared User schema.

    Returns 200 with the whitelisted user, or 400 with per-field messages.
    """
    payload = await read_json_body(request)
    result = validate_user(payload)
    request_id = getattr(request.state, "request_id", None)

    if not result.ok:
        logger.info(
            "User validation failed",
            extra={"request_id": request_id, "fields": sorted(result.errors)}
        )
        body = UserValidationErrorResponse(
            errors=result.errors,
            form_errors=result.form_errors or None,
        )
        return JSONResponse(status_code=400, content=body.model_dump(exclude_none=True))

    logger.info("User validated", extra={"request_id": request_id})
    body = UserValidatedResponse(
        message="User validated successfully ✅",
        data=result.value,
    )
    return JSONResponse(status_code=200, content=body.model_dump(exclude_none=True))


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(
        app,
        host=config.api_host,
        port=config.api_port,
        log_level=config.log_level.value.lower(),
    )


# =============================================================================
# DEVELOPMENT SERVER
# =============================================================================

if __name__ == "__main__":
    run()
