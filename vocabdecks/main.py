from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
import logging
import traceback
from vocabdecks.core.config import settings
from vocabdecks.core.database import init_db
from vocabdecks.core.exceptions import (
    VocabDecksException,
    ValidationError,
    NotFoundError,
    AuthenticationError,
    AuthorizationError
)
from vocabdecks.core.security import IdentityMiddleware

# Import models to register them with SQLModel
from vocabdecks import models  # noqa: F401

# Import API router
from vocabdecks.api.v1 import api_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Vocab Decks API", version="1.0.0")


def error_response(status_code: int, code: str, message: str, **extra) -> JSONResponse:
    """Failure envelope shared by all exception handlers."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": {"code": code, "message": message, **extra}},
    )


# Add exception handler for validation errors to log details
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reject malformed input before any action runs."""
    body = await request.body()
    logger.error(f"Validation error on {request.method} {request.url.path}")
    logger.error(f"Request body: {body.decode('utf-8') if body else 'empty'}")
    logger.error(f"Validation errors: {exc.errors()}")
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "BAD_REQUEST",
        "Invalid input.",
        issues=jsonable_encoder(exc.errors()),
    )


# Add exception handler for custom application exceptions
@app.exception_handler(VocabDecksException)
async def vocab_decks_exception_handler(request: Request, exc: VocabDecksException):
    """Handle custom application exceptions."""
    if isinstance(exc, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, AuthenticationError):
        status_code = status.HTTP_401_UNAUTHORIZED
    elif isinstance(exc, AuthorizationError):
        status_code = status.HTTP_403_FORBIDDEN
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    logger.warning(f"Application exception on {request.method} {request.url.path}: {type(exc).__name__}: {str(exc)}")
    return error_response(status_code, exc.code, str(exc))


# Add global exception handler for unhandled errors
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch all unhandled exceptions and return the failure envelope."""
    # Log full traceback
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)

    # In development, show full error details
    if settings.is_development:
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "INTERNAL_SERVER_ERROR",
            str(exc),
            type=type(exc).__name__,
            traceback=traceback.format_exc(),
        )
    # In production, return generic message
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An internal server error occurred. Please try again later.",
    )


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Identity forwarded by the upstream authentication layer
app.add_middleware(IdentityMiddleware, header_name=settings.identity_header)


@app.on_event("startup")
async def startup_event():
    """Initialize database on startup."""
    init_db()


@app.get("/")
async def root():
    return {
        "message": "Vocab Decks API",
        "status": "running",
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        }
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}


# Include API router
app.include_router(api_router, prefix=settings.api_v1_prefix)
