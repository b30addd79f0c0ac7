"""
Type aliases for structural typing in Keycloak admin models.

This module defines type aliases that provide semantic clarity about the
expected structure of dynamic fields, without being overly restrictive.
"""

# =============================================================================
# Keycloak API Types
# =============================================================================
# Keycloak's REST API uses flat string-to-string mappings for many config
# blocks. Even boolean and numeric values are represented as strings:
#   - "display.on.consent.screen": "true" (not True)
#   - "HS256": "<kid>"

type KeycloakConfigMap = dict[str, str]
"""
Flat string-to-string configuration map used by Keycloak REST API.

Used for:
- Realm attributes
- Browser security headers
- SMTP server settings
- Token introspection permissions
"""

type MultivaluedAttributes = dict[str, list[str]]
"""
Attribute map where every key holds a list of values.

Used for:
- User attributes
- Role attributes
"""
