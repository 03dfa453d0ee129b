"""Tests for error handling utilities."""

import pytest
from httpx import Response

from dnsimple.errors.exceptions import (
    AuthenticationError,
    NotFoundError,
    RequestError,
    ValidationError,
)
from dnsimple.errors.handler import raise_for_status


@pytest.mark.unit
@pytest.mark.parametrize("status_code", [200, 201, 202, 204])
def test_raise_for_status_success_response(status_code):
    """Test raise_for_status doesn't raise for successful responses."""
    raise_for_status(Response(status_code=status_code))


@pytest.mark.unit
def test_raise_for_status_401_authentication():
    response = Response(status_code=401, text="Unauthorized")

    with pytest.raises(AuthenticationError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 401


@pytest.mark.unit
def test_raise_for_status_404_not_found():
    response = Response(status_code=404, json={"message": "Domain `example.com` not found"})

    with pytest.raises(NotFoundError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 404
    assert exc_info.value.response is response
    assert str(exc_info.value) == "Domain `example.com` not found"


@pytest.mark.unit
@pytest.mark.parametrize("status_code", [400, 422])
def test_raise_for_status_validation(status_code):
    response = Response(
        status_code=status_code,
        json={"message": "Validation failed", "errors": {"content": ["can't be blank"]}},
    )

    with pytest.raises(ValidationError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == status_code
    assert exc_info.value.errors == {"content": ["can't be blank"]}
    assert "content: can't be blank" in str(exc_info.value)


@pytest.mark.unit
def test_raise_for_status_validation_without_errors():
    with pytest.raises(ValidationError) as exc_info:
        raise_for_status(Response(status_code=400, text="bad"))

    assert exc_info.value.errors == {}


@pytest.mark.unit
@pytest.mark.parametrize("status_code", [402, 403, 409, 429, 500, 502, 503])
def test_raise_for_status_other_errors(status_code):
    with pytest.raises(RequestError) as exc_info:
        raise_for_status(Response(status_code=status_code, text="Oops"))

    assert type(exc_info.value) is RequestError
    assert exc_info.value.status_code == status_code
    assert str(exc_info.value) == f"HTTP {status_code}: Oops"


@pytest.mark.unit
def test_raise_for_status_empty_body():
    with pytest.raises(RequestError, match="^HTTP 503$"):
        raise_for_status(Response(status_code=503))


@pytest.mark.unit
def test_raise_for_status_truncates_long_text():
    with pytest.raises(RequestError) as exc_info:
        raise_for_status(Response(status_code=500, text="x" * 1000))

    assert len(str(exc_info.value)) == len("HTTP 500: ") + 200


@pytest.mark.unit
def test_raise_for_status_carries_parsed_body():
    with pytest.raises(RequestError) as exc_info:
        raise_for_status(Response(status_code=429, json={"message": "Slow down", "retry": True}))

    assert exc_info.value.error_detail.body == {"message": "Slow down", "retry": True}
