"""
Error hierarchy for the Keycloak admin DTO layer.

This module defines the two error kinds surfaced by this package: failures to
encode or decode a record, and API-level failures reported by the server.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class KeycloakDTOError(Exception):
    """
    Base error class for all DTO-layer exceptions.

    Carries a category and optional guidance for resolving the failure.
    """

    def __init__(
        self,
        message: str,
        category: str,
        user_action: str | None = None,
        cause: Exception | None = None,
    ):
        """
        Initialize DTO error.

        Args:
            message: Human-readable error description
            category: Error category (serialization, api)
            user_action: What the caller should do to resolve the issue
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.category = category
        self.user_action = user_action
        self.cause = cause

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.user_action:
            return f"{base_msg}\nAction required: {self.user_action}"
        return base_msg


class SerializationError(KeycloakDTOError):
    """A record could not be encoded to, or decoded from, its wire form."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        wire_name: str | None = None,
        cause: Exception | None = None,
        user_action: str | None = None,
    ):
        if field:
            message = f"Invalid field '{field}': {message}"
        super().__init__(
            message=message,
            category="serialization",
            user_action=user_action,
            cause=cause,
        )
        self.field = field
        self.wire_name = wire_name


class APIError(KeycloakDTOError):
    """
    Error response returned by the Keycloak server.

    A value type: two errors with the same code and message compare equal.
    ``str()`` yields the server message only.
    """

    def __init__(self, code: int, message: str):
        super().__init__(message=message, category="api")
        self.code = code

    def __str__(self) -> str:
        return self.message

    def __reduce__(self):
        return (type(self), (self.code, self.message))

    def __repr__(self) -> str:
        return f"APIError(code={self.code!r}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, APIError):
            return NotImplemented
        return (self.code, self.message) == (other.code, other.message)

    def __hash__(self) -> int:
        return hash((self.code, self.message))

    @classmethod
    def from_response(cls, response: "httpx.Response") -> "APIError":
        """
        Build an APIError from a failed server response.

        Keycloak reports failures under one of several keys depending on the
        endpoint. The first non-empty one wins, falling back to the HTTP
        reason phrase.

        Args:
            response: The failed HTTP response

        Returns:
            APIError carrying the response status code and message
        """
        message = ""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            for key in ("errorMessage", "error_description", "error"):
                value = body.get(key)
                if isinstance(value, str) and value:
                    message = value
                    break

        if not message:
            message = response.text.strip() or response.reason_phrase

        return cls(code=response.status_code, message=message)
