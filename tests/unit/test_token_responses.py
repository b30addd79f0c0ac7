"""
Unit tests for the public OIDC endpoint response envelopes.
"""

from datetime import UTC, datetime

from keycloak_admin_dto.models import (
    CertResponse,
    IssuerResponse,
    RetrospecTokenResult,
    UserInfo,
)
from tests.fixtures.keycloak_resources import INTROSPECTION_PAYLOAD, ISSUER_PAYLOAD


class TestCertResponse:
    """Test cases for the certs endpoint response."""

    def test_single_key(self, cert_payload):
        certs = CertResponse.from_payload(cert_payload)

        assert len(certs.keys) == 1
        key = certs.keys[0]
        assert key.kid == "rs-kid"
        assert key.kty == "RSA"
        assert key.alg == "RS256"
        assert key.use == "sig"
        assert key.n.startswith("sXchDaQebHnPiGvyDOAT4saGEUetSyo9MKLOoWFsueri23bOdgWp4Dy1Wl")
        assert key.e == "AQAB"

    def test_get_key(self, cert_payload):
        certs = CertResponse.from_payload(cert_payload)

        assert certs.get_key("rs-kid").alg == "RS256"
        assert certs.get_key("other") is None
        assert CertResponse().get_key("rs-kid") is None

    def test_unknown_key_members_are_ignored(self, cert_payload):
        """x5c is not modelled."""
        payload = CertResponse.from_payload(cert_payload).to_payload()

        assert "x5c" not in payload["keys"][0]


class TestIssuerResponse:
    """Test cases for the issuer endpoint response."""

    def test_kebab_case_wire_names(self):
        issuer = IssuerResponse.from_payload(ISSUER_PAYLOAD)

        assert issuer.public_key == "MIIBIjANBgkqh"
        assert issuer.token_service.endswith("/protocol/openid-connect")
        assert issuer.account_service.endswith("/account")
        assert issuer.tokens_not_before == 0

    def test_round_trip(self):
        assert IssuerResponse.from_payload(ISSUER_PAYLOAD).to_payload() == ISSUER_PAYLOAD


class TestRetrospecTokenResult:
    """Test cases for the token introspection response."""

    def test_decode(self):
        result = RetrospecTokenResult.from_payload(INTROSPECTION_PAYLOAD)

        assert result.active is True
        assert result.exp == 1700003600
        assert result.auth_time == 1699999990
        assert result.type == "Bearer"
        assert result.permissions == {"resource": "photos"}

    def test_payload_uses_typ(self):
        payload = RetrospecTokenResult(type="Bearer", active=False).to_payload()

        assert payload == {"typ": "Bearer", "active": False}

    def test_rpt_permissions_list(self):
        """Requesting-party tokens carry permissions as a list of grants."""
        grants = [{"rsid": "r1", "rsname": "photos", "scopes": ["view"]}]

        result = RetrospecTokenResult.from_payload(
            {"active": True, "exp": 1, "permissions": grants}
        )

        assert result.permissions == grants
        assert result.to_payload()["permissions"] == grants

    def test_audience_list(self):
        result = RetrospecTokenResult.from_payload({"aud": ["account", "api"]})

        assert result.aud == ["account", "api"]

    def test_inactive_token(self):
        """Keycloak answers an invalid token with only active=false."""
        result = RetrospecTokenResult.from_json('{"active": false}')

        assert result.active is False
        assert result.exp is None

    def test_is_expired(self):
        result = RetrospecTokenResult(exp=1700003600)

        assert result.is_expired(datetime.fromtimestamp(1700003600, UTC))
        assert not result.is_expired(datetime.fromtimestamp(1700000000, UTC))

    def test_without_exp_never_expires(self):
        assert not RetrospecTokenResult(active=True).is_expired()


class TestUserInfo:
    """Test cases for the userinfo endpoint response."""

    def test_snake_case_wire_names(self):
        info = UserInfo.from_payload(
            {
                "sub": "5b7e3a0c",
                "email_verified": True,
                "preferred_username": "alice",
                "email": "alice@example.com",
                "address": {"country": "NL", "locality": "Amsterdam"},
            }
        )

        assert info.preferred_username == "alice"
        assert info.email_verified is True
        assert info.address == {"country": "NL", "locality": "Amsterdam"}

    def test_address_is_free_form(self):
        info = UserInfo.from_payload({"sub": "x", "address": "Main Street 1"})

        assert info.to_payload() == {"sub": "x", "address": "Main Street 1"}
