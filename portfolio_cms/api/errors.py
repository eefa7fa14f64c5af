"""RFC 7807 Problem Details error response formatting"""

import logging
from typing import Optional, Dict, Any, List
from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from portfolio_cms.services.exceptions import (
    DomainValidationError,
    NotFoundError,
    OrderingError,
    OrderPersistenceError,
    PortfolioServiceError,
    SlugConflictError,
)
from portfolio_cms.services.storage_service import (
    FileTooLargeError,
    InvalidFileTypeError,
    StorageError,
)

logger = logging.getLogger(__name__)

ERROR_TYPE_BASE = "https://api.galreforms.com/errors"
SIGN_OUT_LINK = {"href": "/api/v1/auth/logout", "method": "POST"}


# Default error types based on status code
ERROR_TYPE_MAP = {
    400: "validation_error",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    409: "conflict",
    429: "rate_limit_exceeded",
    500: "internal_server_error",
    502: "bad_gateway",
    503: "service_unavailable"
}


def problem(
    status_code: int,
    title: str,
    detail: str,
    error_type: Optional[str] = None,
    instance: Optional[str] = None,
    errors: Optional[List[Dict[str, str]]] = None,
    **extra: Any
) -> Dict[str, Any]:
    """
    Build an RFC 7807 problem document

    Args:
        status_code: HTTP status code
        title: Short error title
        detail: Detailed error message
        error_type: Error type slug (defaults to one derived from the status code)
        instance: Request path or identifier
        errors: List of validation errors with field and message
        extra: Additional members (e.g. failed_ids, sign_out)

    Returns:
        Problem document as a dict
    """
    body = {
        "type": f"{ERROR_TYPE_BASE}/{error_type or ERROR_TYPE_MAP.get(status_code, 'error')}",
        "title": title,
        "status": status_code,
        "detail": detail
    }

    if instance:
        body["instance"] = instance

    if errors:
        body["errors"] = errors

    body.update(extra)
    return body


def problem_exception(
    status_code: int,
    title: str,
    detail: str,
    instance: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
    **kwargs: Any
) -> HTTPException:
    """HTTPException whose detail is a problem document"""
    return HTTPException(
        status_code=status_code,
        detail=problem(status_code, title, detail, instance=instance, **kwargs),
        headers=headers,
    )


def unauthorized_error(detail: str = "Authentication required", instance: Optional[str] = None) -> HTTPException:
    """401 Unauthorized"""
    return problem_exception(
        status.HTTP_401_UNAUTHORIZED,
        "Unauthorized",
        detail,
        instance=instance,
        headers={"WWW-Authenticate": "Bearer"},
    )


def forbidden_error(detail: str = "Admin access required", instance: Optional[str] = None) -> HTTPException:
    """403 Forbidden; carries a sign-out link so the client can switch accounts"""
    return problem_exception(
        status.HTTP_403_FORBIDDEN,
        "Forbidden",
        detail,
        instance=instance,
        sign_out=SIGN_OUT_LINK,
    )


def not_found_error(detail: str = "Resource not found", instance: Optional[str] = None) -> HTTPException:
    """404 Not Found"""
    return problem_exception(status.HTTP_404_NOT_FOUND, "Not Found", detail, instance=instance)


def validation_error(
    detail: str = "Validation failed",
    errors: Optional[List[Dict[str, str]]] = None,
    instance: Optional[str] = None
) -> HTTPException:
    """400 Validation Error"""
    return problem_exception(
        status.HTTP_400_BAD_REQUEST, "Validation Error", detail, instance=instance, errors=errors
    )


def service_error_to_http(exc: Exception, instance: Optional[str] = None) -> HTTPException:
    """
    Translate a service-layer or storage exception into its HTTP problem

    Args:
        exc: Exception raised by a service
        instance: Request path

    Returns:
        HTTPException carrying the problem document
    """
    if isinstance(exc, NotFoundError):
        return not_found_error(str(exc), instance)

    if isinstance(exc, SlugConflictError):
        return problem_exception(
            status.HTTP_409_CONFLICT,
            "Conflict",
            str(exc),
            instance=instance,
            error_type="slug_conflict",
            errors=[{"field": "slug", "message": str(exc)}],
        )

    if isinstance(exc, DomainValidationError):
        return validation_error(str(exc), errors=exc.errors, instance=instance)

    if isinstance(exc, OrderingError):
        return problem_exception(
            status.HTTP_400_BAD_REQUEST, "Invalid Reorder", str(exc),
            instance=instance, error_type="ordering_error",
        )

    if isinstance(exc, OrderPersistenceError):
        return problem_exception(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Reorder Partially Applied",
            str(exc),
            instance=instance,
            error_type="partial_reorder",
            failed_ids=[str(item_id) for item_id in exc.failed_ids],
        )

    if isinstance(exc, (InvalidFileTypeError, FileTooLargeError)):
        return validation_error(str(exc), errors=[{"field": "file", "message": str(exc)}], instance=instance)

    if isinstance(exc, StorageError):
        return problem_exception(
            status.HTTP_502_BAD_GATEWAY, "Storage Error", str(exc),
            instance=instance, error_type="storage_error",
        )

    return problem_exception(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        "An internal server error occurred",
        instance=instance,
    )


async def service_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Exception handler registered on the app for PortfolioServiceError and
    StorageError; the body has the same shape as an HTTPException with a
    problem document as detail.
    """
    http_exc = service_error_to_http(exc, request.url.path)
    if http_exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(
        status_code=http_exc.status_code,
        content={"detail": http_exc.detail},
        headers=http_exc.headers,
    )


HANDLED_EXCEPTIONS = (PortfolioServiceError, StorageError)
