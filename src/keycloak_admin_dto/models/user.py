"""
Pydantic models for Keycloak users and credentials.

Covers the user representation returned by ``/admin/realms/{realm}/users``,
credential and password payloads, and the optional parameters of the user
listing and execute-actions-email endpoints.
"""

from typing import Annotated

from pydantic import Field, JsonValue

from .base import KeycloakModel
from .params import BaseParams, QueryParam
from .types import MultivaluedAttributes

DEFAULT_CREDENTIAL_TYPE = "password"


class User(KeycloakModel):
    """Keycloak user representation."""

    id: str | None = Field(None, description="User ID")
    created_timestamp: int | None = Field(
        None, description="Creation time in milliseconds since the epoch"
    )
    username: str | None = Field(None, description="Username")
    enabled: bool | None = Field(None, description="Whether the user can log in")
    totp: bool | None = Field(None, description="Whether TOTP is configured")
    email_verified: bool | None = Field(None, description="Whether email is verified")
    first_name: str | None = Field(None, description="First name")
    last_name: str | None = Field(None, description="Last name")
    email: str | None = Field(None, description="Email address")
    federation_link: str | None = Field(
        None, description="ID of the user storage provider the user is linked to"
    )
    attributes: MultivaluedAttributes | None = Field(
        None, description="Custom user attributes"
    )
    disableable_credential_types: list[JsonValue] | None = Field(
        None, description="Credential types that can be disabled for the user"
    )
    required_actions: list[JsonValue] | None = Field(
        None, description="Actions the user must complete on next login"
    )
    access: dict[str, bool] | None = Field(
        None, description="Admin permissions of the caller on this user"
    )


class UserGroup(KeycloakModel):
    """Group membership entry returned by ``/users/{id}/groups``."""

    id: str | None = None
    name: str | None = None
    path: str | None = None


class Access(KeycloakModel):
    """Admin permissions of the caller on a user."""

    manage_group_membership: bool | None = None
    view: bool | None = None
    map_roles: bool | None = None
    impersonate: bool | None = None
    manage: bool | None = None


class Attributes(KeycloakModel):
    """LDAP attributes of a federated user."""

    ldap_entry_dn: list[str] | None = Field(None, alias="LDAP_ENTRY_DN")
    ldap_id: list[str] | None = Field(None, alias="LDAP_ID")


class SetPasswordRequest(KeycloakModel):
    """Body of ``PUT /users/{id}/reset-password``."""

    type: str = Field(DEFAULT_CREDENTIAL_TYPE, description="Credential type")
    temporary: bool = Field(
        False, description="Whether the user must change the password on next login"
    )
    password: str | None = Field(None, alias="value", description="New password")


class MultivaluedHashMap(KeycloakModel):
    """Java ``MultivaluedHashMap`` metadata as serialized by Keycloak."""

    empty: bool | None = None
    load_factor: float | None = None
    threshold: int | None = None


class CredentialRepresentation(KeycloakModel):
    """Stored credential of a user."""

    algorithm: str | None = None
    config: MultivaluedHashMap | None = None
    counter: int | None = None
    created_date: int | None = None
    device: str | None = None
    digits: int | None = None
    hash_iterations: int | None = None
    hashed_salted_value: str | None = None
    period: int | None = None
    salt: str | None = None
    temporary: bool | None = None
    type: str | None = None
    value: str | None = None


class GetUsersParams(BaseParams):
    """Optional parameters of ``GET /admin/realms/{realm}/users``."""

    brief_representation: Annotated[bool | None, QueryParam(keep_zero=True)] = Field(
        None, description="Return only basic user fields"
    )
    email: Annotated[str | None, QueryParam()] = None
    first: Annotated[int | None, QueryParam()] = Field(
        None, strict=True, description="Pagination offset"
    )
    first_name: Annotated[str | None, QueryParam()] = None
    last_name: Annotated[str | None, QueryParam()] = None
    max: Annotated[int | None, QueryParam()] = Field(
        None, strict=True, description="Maximum results size"
    )
    search: Annotated[str | None, QueryParam()] = Field(
        None, description="Substring matched against username, names and email"
    )
    username: Annotated[str | None, QueryParam()] = None


class ExecuteActionsEmail(BaseParams):
    """
    Parameters of ``PUT /users/{id}/execute-actions-email``.

    ``user_id`` goes into the URL path and ``actions`` is the request body;
    neither is part of the query string or the dumped payload.
    """

    user_id: str | None = Field(None, exclude=True, description="Target user ID")
    client_id: Annotated[str | None, QueryParam()] = None
    lifespan: Annotated[int | None, QueryParam()] = Field(
        None, strict=True, description="Link lifespan in seconds"
    )
    redirect_uri: Annotated[str | None, QueryParam()] = Field(
        None, alias="redirect_uri"
    )
    actions: list[str] | None = Field(
        None, exclude=True, description="Required actions the user must perform"
    )
