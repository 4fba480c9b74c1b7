"""Exception handlers to translate domain exceptions to HTTP responses."""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from app.domain.exceptions import (
    ActivityNotFound,
    DomainException,
    EventException,
    EventNotFound,
    HealthRecordNotFound,
    InvalidRange,
    NotificationException,
    PetException,
    PetNotFound,
    UserAlreadyExists,
    UserException,
    UserNotFound,
    UserNotIdentified,
    ValidationException,
)
from app.utils.logger import get_logger

logger = get_logger("exception_handlers")


class DomainExceptionHandler:
    """Centralized handler for domain exceptions."""

    # Mapping of domain exceptions to HTTP status codes
    EXCEPTION_STATUS_MAP = {
        # User exceptions
        UserNotFound: status.HTTP_404_NOT_FOUND,
        UserAlreadyExists: status.HTTP_400_BAD_REQUEST,
        UserNotIdentified: status.HTTP_401_UNAUTHORIZED,

        # Pet exceptions
        PetNotFound: status.HTTP_404_NOT_FOUND,
        HealthRecordNotFound: status.HTTP_404_NOT_FOUND,
        ActivityNotFound: status.HTTP_404_NOT_FOUND,

        # Reminder exceptions
        EventNotFound: status.HTTP_404_NOT_FOUND,

        # Validation exceptions
        InvalidRange: status.HTTP_400_BAD_REQUEST,
    }

    # Base exception type status codes
    BASE_EXCEPTION_STATUS_MAP = {
        UserException: status.HTTP_400_BAD_REQUEST,
        PetException: status.HTTP_400_BAD_REQUEST,
        EventException: status.HTTP_400_BAD_REQUEST,
        ValidationException: status.HTTP_400_BAD_REQUEST,
        NotificationException: status.HTTP_503_SERVICE_UNAVAILABLE,
    }

    @classmethod
    def status_for(cls, exc: DomainException) -> int:
        status_code = cls.EXCEPTION_STATUS_MAP.get(type(exc))

        if status_code is None:
            for base_type, base_status in cls.BASE_EXCEPTION_STATUS_MAP.items():
                if isinstance(exc, base_type):
                    status_code = base_status
                    break

        if status_code is None:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return status_code

    @classmethod
    def handle_domain_exception(cls, exc: DomainException) -> HTTPException:
        """Convert domain exception to HTTP exception."""
        response_data = {
            "detail": exc.message,
            "error_code": exc.error_code,
            "type": exc.__class__.__name__,
        }
        return HTTPException(status_code=cls.status_for(exc), detail=response_data)

    @classmethod
    def translate_exception(cls, exc: Exception) -> HTTPException:
        """Main entry point for exception translation."""
        if isinstance(exc, DomainException):
            return cls.handle_domain_exception(exc)

        if isinstance(exc, ValueError):
            return HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"detail": str(exc), "type": "ValueError"},
            )

        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"detail": "Internal server error", "type": "UnexpectedError"},
        )


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    http_exc = DomainExceptionHandler.handle_domain_exception(exc)
    logger.warning(f"{request.method} {request.url.path} -> {http_exc.status_code}: {exc.message}")
    return JSONResponse(status_code=http_exc.status_code, content={"detail": http_exc.detail})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    http_exc = DomainExceptionHandler.translate_exception(exc)
    return JSONResponse(status_code=http_exc.status_code, content={"detail": http_exc.detail})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
