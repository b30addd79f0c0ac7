"""
Pydantic models for realm components and key providers.

``KeyStoreConfig`` is the response of ``GET /admin/realms/{realm}/keys``.
"""

from pydantic import Field

from .base import KeycloakModel

# Wire names of the active key slots in KeyStoreConfig.active
ACTIVE_KEY_ALGORITHMS = ("HS256", "RS256", "AES")


class ComponentConfig(KeycloakModel):
    """Key provider component configuration."""

    priority: list[str] | None = None
    algorithm: list[str] | None = None


class Component(KeycloakModel):
    """Realm component, e.g. a key provider."""

    id: str | None = None
    name: str | None = None
    provider_id: str | None = Field(None, description="Provider, e.g. rsa-generated")
    provider_type: str | None = Field(
        None, description="SPI type, e.g. org.keycloak.keys.KeyProvider"
    )
    parent_id: str | None = Field(None, description="ID of the owning realm")
    component_config: ComponentConfig | None = Field(None, alias="config")
    sub_type: str | None = None


class ActiveKeys(KeycloakModel):
    """Key IDs of the active key per algorithm."""

    hs256: str | None = Field(None, alias="HS256")
    rs256: str | None = Field(None, alias="RS256")
    aes: str | None = Field(None, alias="AES")


class Key(KeycloakModel):
    """Key held by a realm key provider."""

    provider_id: str | None = None
    provider_priority: int | None = None
    kid: str | None = Field(None, description="Key ID")
    status: str | None = Field(None, description="ACTIVE, PASSIVE or DISABLED")
    type: str | None = Field(None, description="Key type, e.g. RSA")
    algorithm: str | None = None
    public_key: str | None = None
    certificate: str | None = None


class KeyStoreConfig(KeycloakModel):
    """Keys of a realm and the active key per algorithm."""

    active_keys: ActiveKeys | None = Field(None, alias="active")
    key: list[Key] | None = Field(None, alias="keys")

    def get_active_key(self, algorithm: str) -> Key | None:
        """
        Return the active key for an algorithm.

        Args:
            algorithm: One of ``HS256``, ``RS256``, ``AES``

        Returns:
            The matching key, or None if no active key is listed for it

        Raises:
            ValueError: If the algorithm has no active key slot
        """
        if algorithm not in ACTIVE_KEY_ALGORITHMS:
            raise ValueError(
                f"Unknown algorithm {algorithm!r}, expected one of {ACTIVE_KEY_ALGORITHMS}"
            )
        if self.active_keys is None:
            return None

        kid = getattr(self.active_keys, algorithm.lower())
        if not kid:
            return None
        return next((key for key in self.key or [] if key.kid == kid), None)
