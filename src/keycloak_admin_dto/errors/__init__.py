"""
Error handling module for the Keycloak admin DTO layer.

Defines the serialization failure raised by the query-parameter adapter and
record decoders, and the API error shape used by transport code.
"""

from .dto_errors import (
    APIError,
    KeycloakDTOError,
    SerializationError,
)

__all__ = [
    "KeycloakDTOError",
    "SerializationError",
    "APIError",
]
