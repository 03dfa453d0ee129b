"""Error payload models."""

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass
class ErrorDetail:
    """Error body returned by the DNSimple API.

    DNSimple reports failures as ``{"message": "...", "errors": {...}}`` where
    ``errors`` maps attribute names to lists of messages.
    """

    message: str | None = None
    errors: dict[str, Any] | None = None
    body: Any = None  # full parsed body, kept for callers that need more

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorDetail | None":
        """Parse the error body of a response.

        Args:
            response: HTTP response object

        Returns:
            ErrorDetail, or None when the body is not a JSON object
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError):
            # Empty bodies, HTML error pages and the like
            return None

        if not isinstance(data, dict):
            return None

        errors = data.get("errors")
        return cls(
            message=data.get("message"),
            errors=errors if isinstance(errors, dict) else None,
            body=data,
        )

    def to_exception_message(self, status_code: int) -> str:
        """Convert the error body to an exception message."""
        lines = [self.message or f"HTTP {status_code}"]

        if self.errors:
            for attribute, messages in self.errors.items():
                if isinstance(messages, list):
                    messages = ", ".join(str(m) for m in messages)
                lines.append(f"  - {attribute}: {messages}")

        return "\n".join(lines)
