"""
Pydantic models for Keycloak roles and role mappings.
"""

from pydantic import Field

from .base import KeycloakModel
from .types import MultivaluedAttributes


class Role(KeycloakModel):
    """Realm or client role representation."""

    id: str | None = Field(None, description="Role ID")
    name: str | None = Field(None, description="Role name")
    scope_param_required: bool | None = None
    composite: bool | None = Field(None, description="Whether the role is composite")
    client_role: bool | None = Field(
        None, description="Whether the role belongs to a client"
    )
    container_id: str | None = Field(
        None, description="ID of the realm or client owning the role"
    )
    description: str | None = None
    attributes: MultivaluedAttributes | None = None


class ClientMappingsRepresentation(KeycloakModel):
    """Roles of one client mapped to a user or group."""

    id: str | None = None
    client: str | None = Field(None, description="Client ID (clientId) of the client")
    mappings: list[Role] | None = None


class MappingsRepresentation(KeycloakModel):
    """Response of ``GET /users/{id}/role-mappings``."""

    client_mappings: dict[str, ClientMappingsRepresentation] | None = None
    realm_mappings: list[Role] | None = None

    def client_role_names(self, client: str) -> list[str]:
        """
        Names of the roles mapped for one client.

        Args:
            client: Client ID (clientId) as keyed in ``client_mappings``

        Returns:
            Role names, empty if the client has no mappings
        """
        if not self.client_mappings or client not in self.client_mappings:
            return []
        mappings = self.client_mappings[client].mappings or []
        return [role.name for role in mappings if role.name]
