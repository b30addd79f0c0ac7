"""
Test fixtures for Keycloak Admin API payloads.

This module provides sample response bodies as returned by a Keycloak
server, including fields these models do not declare.
"""

from typing import Any

USER_PAYLOAD: dict[str, Any] = {
    "id": "5b7e3a0c-8f0e-4a55-9d0a-2f4f1c8a9b10",
    "createdTimestamp": 1700000000123,
    "username": "alice",
    "enabled": True,
    "totp": False,
    "emailVerified": True,
    "firstName": "Alice",
    "lastName": "Liddell",
    "email": "alice@example.com",
    "attributes": {"department": ["research"], "locale": ["en"]},
    "disableableCredentialTypes": [],
    "requiredActions": ["UPDATE_PASSWORD"],
    "notBefore": 0,
    "access": {
        "manageGroupMembership": True,
        "view": True,
        "mapRoles": True,
        "impersonate": False,
        "manage": True,
    },
}

GROUP_PAYLOAD: dict[str, Any] = {
    "id": "e3c4b0b2-6f5c-4d7e-8a1b-9c0d1e2f3a4b",
    "name": "engineering",
    "path": "/engineering",
    "subGroupCount": 1,
    "subGroups": [
        {
            "id": "1a2b3c4d-0000-4000-8000-000000000001",
            "name": "platform",
            "path": "/engineering/platform",
            "subGroups": [],
        }
    ],
}

ROLE_MAPPINGS_PAYLOAD: dict[str, Any] = {
    "realmMappings": [
        {"id": "r-1", "name": "offline_access", "composite": False, "clientRole": False}
    ],
    "clientMappings": {
        "account": {
            "id": "c-1",
            "client": "account",
            "mappings": [
                {"id": "r-2", "name": "view-profile", "clientRole": True},
                {"id": "r-3", "name": "manage-account", "clientRole": True},
            ],
        }
    },
}

CLIENT_SCOPE_PAYLOAD: dict[str, Any] = {
    "id": "cs-1",
    "name": "profile",
    "description": "OpenID Connect built-in scope: profile",
    "protocol": "openid-connect",
    "attributes": {
        "consent.screen.text": "${profileScopeConsentText}",
        "display.on.consent.screen": "true",
        "include.in.token.scope": "true",
    },
    "protocolMappers": [
        {
            "id": "pm-1",
            "name": "family name",
            "protocol": "openid-connect",
            "protocolMapper": "oidc-usermodel-attribute-mapper",
            "consentRequired": False,
            "config": {
                "userinfo.token.claim": "true",
                "user.attribute": "lastName",
                "id.token.claim": "true",
                "access.token.claim": "true",
                "claim.name": "family_name",
                "jsonType.label": "String",
            },
        }
    ],
}

KEYS_PAYLOAD: dict[str, Any] = {
    "active": {"HS256": "hs-kid", "RS256": "rs-kid", "AES": "aes-kid"},
    "keys": [
        {
            "providerId": "p-hs",
            "providerPriority": 100,
            "kid": "hs-kid",
            "status": "ACTIVE",
            "type": "OCT",
            "algorithm": "HS256",
        },
        {
            "providerId": "p-rs",
            "providerPriority": 100,
            "kid": "rs-kid",
            "status": "ACTIVE",
            "type": "RSA",
            "algorithm": "RS256",
            "publicKey": "MIIBIjANBgkqh",
            "certificate": "MIICmzCCAYMCBgF",
        },
    ],
}

REALM_PAYLOAD: dict[str, Any] = {
    "id": "demo",
    "realm": "demo",
    "displayName": "Demo Realm",
    "displayNameHtml": "<b>Demo</b>",
    "enabled": True,
    "sslRequired": "external",
    "accessTokenLifespan": 300,
    "ssoSessionIdleTimeout": 1800,
    "quickLoginCheckMilliSeconds": 1000,
    "eventsExpiration": 86400,
    "registrationAllowed": False,
    "bruteForceProtected": True,
    "otpPolicyType": "totp",
    "otpPolicyDigits": 6,
    "otpSupportedApplications": ["totpAppGoogleName", "totpAppFreeOTPName"],
    "smtpServer": {"host": "smtp.example.com", "port": "587", "starttls": "true"},
    "browserSecurityHeaders": {"xFrameOptions": "SAMEORIGIN"},
    "attributes": {"frontendUrl": "https://sso.example.com"},
    "components": {
        "org.keycloak.keys.KeyProvider": [
            {"name": "rsa-generated", "providerId": "rsa-generated", "config": {"priority": ["100"]}}
        ]
    },
    "roles": {"realm": [{"name": "offline_access"}], "client": {}},
    "clients": [{"clientId": "account", "enabled": True}],
    "clientScopeMappings": {"account": [{"client": "account-console", "roles": ["manage-account"]}]},
    "defaultRoles": ["offline_access", "uma_authorization"],
    "organizationsEnabled": False,
}

CERT_PAYLOAD: dict[str, Any] = {
    "keys": [
        {
            "kid": "rs-kid",
            "kty": "RSA",
            "alg": "RS256",
            "use": "sig",
            "n": "sXchDaQebHnPiGvyDOAT4saGEUetSyo9MKLOoWFsueri23bOdgWp4Dy1Wl",
            "e": "AQAB",
            "x5c": ["MIICmzCCAYMCBgF"],
        }
    ]
}

ISSUER_PAYLOAD: dict[str, Any] = {
    "realm": "demo",
    "public_key": "MIIBIjANBgkqh",
    "token-service": "https://sso.example.com/realms/demo/protocol/openid-connect",
    "account-service": "https://sso.example.com/realms/demo/account",
    "tokens-not-before": 0,
}

INTROSPECTION_PAYLOAD: dict[str, Any] = {
    "exp": 1700003600,
    "iat": 1700000000,
    "nbf": 0,
    "auth_time": 1699999990,
    "jti": "0b1f1c9e-7c55-4f3a-9a47-0c6e1e0e3b3a",
    "aud": "account",
    "typ": "Bearer",
    "active": True,
    "permissions": {"resource": "photos"},
    "scope": "openid profile",
}
