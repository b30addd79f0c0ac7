"""
Models package - Pydantic models for the Keycloak Admin REST API.

Defines data models for:
- Users, credentials and role mappings
- Groups, roles, clients, client scopes and protocol mappers
- Realms, components and realm keys
- Public OIDC endpoint responses (certs, issuer, introspection, userinfo)
- Optional query-parameter records for list endpoints
"""

from .base import KeycloakModel
from .client import (
    Client,
    ClientScope,
    ClientScopeAttributes,
    GetClientsParams,
    ProtocolMappers,
    ProtocolMappersConfig,
)
from .group import GetGroupsParams, Group
from .keys import ActiveKeys, Component, ComponentConfig, Key, KeyStoreConfig
from .params import BaseParams, QueryParam, decode_query_value, encode_query_value
from .realm import RealmRepresentation
from .role import ClientMappingsRepresentation, MappingsRepresentation, Role
from .tokens import (
    CertResponse,
    CertResponseKey,
    IssuerResponse,
    RetrospecTokenResult,
    UserInfo,
)
from .user import (
    Access,
    Attributes,
    CredentialRepresentation,
    ExecuteActionsEmail,
    GetUsersParams,
    MultivaluedHashMap,
    SetPasswordRequest,
    User,
    UserGroup,
)

__all__ = [
    "KeycloakModel",
    "BaseParams",
    "QueryParam",
    "encode_query_value",
    "decode_query_value",
    "User",
    "UserGroup",
    "Access",
    "Attributes",
    "SetPasswordRequest",
    "MultivaluedHashMap",
    "CredentialRepresentation",
    "GetUsersParams",
    "ExecuteActionsEmail",
    "Group",
    "GetGroupsParams",
    "Role",
    "ClientMappingsRepresentation",
    "MappingsRepresentation",
    "Client",
    "ClientScope",
    "ClientScopeAttributes",
    "ProtocolMappers",
    "ProtocolMappersConfig",
    "GetClientsParams",
    "Component",
    "ComponentConfig",
    "KeyStoreConfig",
    "ActiveKeys",
    "Key",
    "RealmRepresentation",
    "CertResponse",
    "CertResponseKey",
    "IssuerResponse",
    "RetrospecTokenResult",
    "UserInfo",
]
