"""Map HTTP error responses to exceptions."""

import httpx

from dnsimple.errors.exceptions import (
    AuthenticationError,
    NotFoundError,
    RequestError,
    ValidationError,
)
from dnsimple.errors.models import ErrorDetail


def raise_for_status(response: httpx.Response) -> None:
    """Raise appropriate exception for HTTP error responses.

    Args:
        response: HTTP response object

    Raises:
        RequestError subclass based on status code
    """
    if response.is_success:
        return

    error_detail = ErrorDetail.from_response(response)

    status_code = response.status_code

    exception_map = {
        400: ValidationError,
        401: AuthenticationError,
        404: NotFoundError,
        422: ValidationError,
    }
    exc_class = exception_map.get(status_code, RequestError)

    if error_detail:
        message = error_detail.to_exception_message(status_code)
    else:
        response_text = response.text[:200]
        message = f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"

    if exc_class is ValidationError:
        raise exc_class(
            message=message,
            errors=error_detail.errors if error_detail else None,
            status_code=status_code,
            response=response,
            error_detail=error_detail,
        )

    raise exc_class(
        message=message,
        status_code=status_code,
        response=response,
        error_detail=error_detail,
    )
