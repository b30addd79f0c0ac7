"""
Pydantic models for Keycloak clients, client scopes and protocol mappers.

Client scope attributes and protocol mapper configs use dotted wire names
(``consent.screen.text``, ``claim.name``) and carry booleans as strings, as
the Keycloak REST API does.
"""

from typing import Annotated

from pydantic import Field

from .base import KeycloakModel
from .params import BaseParams, QueryParam


class Client(KeycloakModel):
    """Keycloak client representation (identifiers only)."""

    id: str | None = Field(None, description="Internal client UUID")
    client_id: str | None = Field(None, description="Client identifier (clientId)")


class ClientScopeAttributes(KeycloakModel):
    """Attributes of a client scope."""

    consent_screen_text: str | None = Field(None, alias="consent.screen.text")
    display_on_consent_screen: str | None = Field(
        None, alias="display.on.consent.screen"
    )


class ProtocolMappersConfig(KeycloakModel):
    """Configuration of a protocol mapper."""

    userinfo_token_claim: str | None = Field(None, alias="userinfo.token.claim")
    user_attribute: str | None = Field(None, alias="user.attribute")
    id_token_claim: str | None = Field(None, alias="id.token.claim")
    access_token_claim: str | None = Field(None, alias="access.token.claim")
    claim_name: str | None = Field(None, alias="claim.name")
    json_type_label: str | None = Field(None, alias="jsonType.label")


class ProtocolMappers(KeycloakModel):
    """Protocol mapper attached to a client or client scope."""

    id: str | None = None
    name: str | None = None
    protocol: str | None = Field(None, description="Protocol, e.g. openid-connect")
    protocol_mapper: str | None = Field(
        None, description="Mapper type, e.g. oidc-usermodel-attribute-mapper"
    )
    consent_required: bool | None = None
    protocol_mappers_config: ProtocolMappersConfig | None = Field(
        None, alias="config"
    )


class ClientScope(KeycloakModel):
    """Keycloak client scope representation."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    protocol: str | None = None
    client_scope_attributes: ClientScopeAttributes | None = Field(
        None, alias="attributes"
    )
    protocol_mappers: list[ProtocolMappers] | None = None


class GetClientsParams(BaseParams):
    """Optional parameters of ``GET /admin/realms/{realm}/clients``."""

    client_id: Annotated[str | None, QueryParam()] = Field(
        None, description="Filter by clientId"
    )
    viewable_only: Annotated[bool | None, QueryParam()] = Field(
        None, description="Only return clients the caller may view"
    )
