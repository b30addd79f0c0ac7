"""
Pydantic models for Keycloak groups.
"""

from typing import Annotated

from pydantic import Field, JsonValue

from .base import KeycloakModel
from .params import BaseParams, QueryParam


class Group(KeycloakModel):
    """Keycloak group representation."""

    id: str | None = Field(None, description="Group ID")
    name: str | None = Field(None, description="Group name")
    path: str | None = Field(None, description="Full path, e.g. /parent/child")
    sub_groups: list[JsonValue] | None = Field(
        None, description="Child groups as returned by the server"
    )


class GetGroupsParams(BaseParams):
    """Optional parameters of ``GET /admin/realms/{realm}/groups``."""

    first: Annotated[int | None, QueryParam()] = Field(
        None, strict=True, description="Pagination offset"
    )
    max: Annotated[int | None, QueryParam()] = Field(
        None, strict=True, description="Maximum results size"
    )
    search: Annotated[str | None, QueryParam()] = Field(
        None, description="Substring matched against group names"
    )
