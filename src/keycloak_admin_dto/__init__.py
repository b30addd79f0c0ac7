"""
Keycloak Admin DTO - data-transfer objects for the Keycloak Admin REST API.

This package provides:
- Pydantic representations of users, groups, roles, clients, realms,
  credentials and keys
- Optional query-parameter records and their query-string adapter
- Response envelopes for the certs, issuer, introspection and userinfo
  endpoints
- The serialization and API error types shared with transport code
"""

from .errors import APIError, KeycloakDTOError, SerializationError

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "KeycloakDTOError",
    "SerializationError",
]
