"""
Response envelopes of the realm's public OIDC endpoints.

These endpoints use snake_case or kebab-case wire names, so every field that
differs from its Python name declares an explicit alias.
"""

from datetime import UTC, datetime

from pydantic import Field, JsonValue

from .base import KeycloakModel
from .types import KeycloakConfigMap


class CertResponseKey(KeycloakModel):
    """JSON Web Key returned by the certs endpoint."""

    kid: str | None = Field(None, description="Key ID")
    kty: str | None = Field(None, description="Key type, e.g. RSA")
    alg: str | None = Field(None, description="Algorithm, e.g. RS256")
    use: str | None = Field(None, description="Intended use, e.g. sig")
    n: str | None = Field(None, description="RSA modulus (base64url)")
    e: str | None = Field(None, description="RSA public exponent (base64url)")


class CertResponse(KeycloakModel):
    """Response of ``GET /realms/{realm}/protocol/openid-connect/certs``."""

    keys: list[CertResponseKey] | None = None

    def get_key(self, kid: str) -> CertResponseKey | None:
        """Return the key with the given key ID, or None."""
        return next((key for key in self.keys or [] if key.kid == kid), None)


class IssuerResponse(KeycloakModel):
    """Response of ``GET /realms/{realm}``."""

    realm: str | None = None
    public_key: str | None = Field(None, alias="public_key")
    token_service: str | None = Field(None, alias="token-service")
    account_service: str | None = Field(None, alias="account-service")
    tokens_not_before: int | None = Field(None, alias="tokens-not-before")


class RetrospecTokenResult(KeycloakModel):
    """Response of the token introspection endpoint."""

    permissions: KeycloakConfigMap | list[JsonValue] | None = Field(
        None, description="Resource permissions; a list of grants for RPT tokens"
    )
    exp: int | None = Field(None, description="Expiry time (seconds since epoch)")
    nbf: int | None = None
    iat: int | None = None
    aud: str | list[str] | None = None
    active: bool | None = Field(None, description="Whether the token is active")
    auth_time: int | None = Field(None, alias="auth_time")
    jti: str | None = None
    type: str | None = Field(None, alias="typ")

    def is_expired(self, now: datetime | None = None) -> bool:
        """
        Check whether the token expiry lies in the past.

        A result without ``exp`` is never considered expired.

        Args:
            now: Reference time, defaults to the current UTC time

        Returns:
            True if ``exp`` is at or before ``now``
        """
        if self.exp is None:
            return False
        now = now or datetime.now(UTC)
        return self.exp <= int(now.timestamp())


class UserInfo(KeycloakModel):
    """Response of the OIDC userinfo endpoint."""

    sub: str | None = None
    email_verified: bool | None = Field(None, alias="email_verified")
    address: JsonValue = None
    preferred_username: str | None = Field(None, alias="preferred_username")
    email: str | None = None
