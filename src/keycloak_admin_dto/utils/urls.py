"""
URL construction utilities.

This module builds Keycloak admin and realm URLs and attaches query-parameter
records to them, so transport code never assembles query strings by hand.
"""

from collections.abc import Mapping
from urllib.parse import quote

import httpx

from keycloak_admin_dto.models.params import BaseParams
from keycloak_admin_dto.settings import settings


def with_query_params(
    url: str | httpx.URL, params: BaseParams | Mapping[str, str] | None
) -> httpx.URL:
    """
    Merge query parameters into a URL.

    Args:
        url: Request URL, possibly already carrying a query string
        params: Query-parameter record or an already encoded mapping

    Returns:
        URL with the parameters merged in; existing keys are overridden

    Raises:
        SerializationError: If a record cannot be encoded
    """
    url = httpx.URL(url)
    if params is None:
        return url

    query = params.get_query_params() if isinstance(params, BaseParams) else params
    if not query:
        return url
    return url.copy_merge_params(dict(query))


def _join(base_url: str, segments: tuple[str, ...]) -> str:
    base_url = base_url.rstrip("/")
    path = "/".join(quote(segment.strip("/"), safe="") for segment in segments)
    return f"{base_url}/{path}" if path else base_url


def admin_url(
    realm: str,
    *segments: str,
    params: BaseParams | Mapping[str, str] | None = None,
    base_url: str | None = None,
) -> httpx.URL:
    """
    Construct an Admin REST API URL for a realm.

    Args:
        realm: Realm name
        *segments: Path segments below the realm, e.g. ``"users"``, user ID
        params: Optional query parameters
        base_url: Keycloak base URL, defaults to ``settings.server_url``

    Returns:
        The request URL

    Example:
        >>> str(admin_url("demo", "groups", params=GetGroupsParams(max=20),
        ...               base_url="https://kc.example.com"))
        'https://kc.example.com/admin/realms/demo/groups?max=20'
    """
    root = base_url or settings.server_url
    url = _join(root, ("admin", "realms", realm, *segments))
    return with_query_params(url, params)


def realm_url(
    realm: str,
    *segments: str,
    base_url: str | None = None,
) -> httpx.URL:
    """
    Construct a public realm URL, e.g. the issuer or the certs endpoint.

    Args:
        realm: Realm name
        *segments: Path segments below the realm
        base_url: Keycloak base URL, defaults to ``settings.server_url``

    Returns:
        The request URL
    """
    root = base_url or settings.server_url
    return httpx.URL(_join(root, ("realms", realm, *segments)))


def certs_url(realm: str, base_url: str | None = None) -> httpx.URL:
    """URL of the realm's JWKS endpoint, decoded by ``CertResponse``."""
    return realm_url(realm, "protocol", "openid-connect", "certs", base_url=base_url)


def introspection_url(realm: str, base_url: str | None = None) -> httpx.URL:
    """URL of the token introspection endpoint, decoded by ``RetrospecTokenResult``."""
    return realm_url(
        realm,
        "protocol",
        "openid-connect",
        "token",
        "introspect",
        base_url=base_url,
    )


def userinfo_url(realm: str, base_url: str | None = None) -> httpx.URL:
    """URL of the userinfo endpoint, decoded by ``UserInfo``."""
    return realm_url(
        realm, "protocol", "openid-connect", "userinfo", base_url=base_url
    )
