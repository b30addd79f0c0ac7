"""
Pydantic model for the Keycloak realm representation.

``RealmRepresentation`` mirrors the body of ``GET /admin/realms/{realm}`` and
of realm imports. Nested collections whose shape this package does not model
(clients, users, flows, components) are carried as JSON values so that a
decoded realm re-encodes without loss.
"""

from pydantic import Field, JsonValue

from .base import KeycloakModel
from .types import KeycloakConfigMap


class RealmRepresentation(KeycloakModel):
    """Keycloak realm representation."""

    access_code_lifespan: int | None = None
    access_code_lifespan_login: int | None = None
    access_code_lifespan_user_action: int | None = None
    access_token_lifespan: int | None = Field(
        None, description="Access token lifespan in seconds"
    )
    access_token_lifespan_for_implicit_flow: int | None = None
    account_theme: str | None = None
    action_token_generated_by_admin_lifespan: int | None = None
    action_token_generated_by_user_lifespan: int | None = None
    admin_events_details_enabled: bool | None = None
    admin_events_enabled: bool | None = None
    admin_theme: str | None = None
    attributes: KeycloakConfigMap | None = None
    authentication_flows: list[JsonValue] | None = None
    authenticator_config: list[JsonValue] | None = None
    browser_flow: str | None = None
    browser_security_headers: KeycloakConfigMap | None = None
    brute_force_protected: bool | None = None
    client_authentication_flow: str | None = None
    client_scope_mappings: dict[str, JsonValue] | None = None
    client_scopes: list[JsonValue] | None = None
    clients: list[JsonValue] | None = None
    components: JsonValue = None
    default_default_client_scopes: list[str] | None = None
    default_groups: list[str] | None = None
    default_locale: str | None = None
    default_optional_client_scopes: list[str] | None = None
    default_roles: list[str] | None = None
    default_signature_algorithm: str | None = None
    direct_grant_flow: str | None = None
    display_name: str | None = Field(None, description="Realm display name")
    display_name_html: str | None = None
    docker_authentication_flow: str | None = None
    duplicate_emails_allowed: bool | None = None
    edit_username_allowed: bool | None = None
    email_theme: str | None = None
    enabled: bool | None = Field(None, description="Whether the realm is enabled")
    enabled_event_types: list[str] | None = None
    events_enabled: bool | None = None
    events_expiration: int | None = None
    events_listeners: list[str] | None = None
    failure_factor: int | None = None
    federated_users: list[JsonValue] | None = None
    groups: list[JsonValue] | None = None
    id: str | None = None
    identity_provider_mappers: list[JsonValue] | None = None
    identity_providers: list[JsonValue] | None = None
    internationalization_enabled: bool | None = None
    keycloak_version: str | None = None
    login_theme: str | None = None
    login_with_email_allowed: bool | None = None
    max_delta_time_seconds: int | None = None
    max_failure_wait_seconds: int | None = None
    minimum_quick_login_wait_seconds: int | None = None
    not_before: int | None = None
    offline_session_idle_timeout: int | None = None
    offline_session_max_lifespan: int | None = None
    offline_session_max_lifespan_enabled: bool | None = None
    otp_policy_algorithm: str | None = None
    otp_policy_digits: int | None = None
    otp_policy_initial_counter: int | None = None
    otp_policy_look_ahead_window: int | None = None
    otp_policy_period: int | None = None
    otp_policy_type: str | None = None
    otp_supported_applications: list[str] | None = None
    password_policy: str | None = None
    permanent_lockout: bool | None = None
    protocol_mappers: list[JsonValue] | None = None
    quick_login_check_milli_seconds: int | None = None
    realm: str | None = Field(None, description="Realm name")
    refresh_token_max_reuse: int | None = None
    registration_allowed: bool | None = None
    registration_email_as_username: bool | None = None
    registration_flow: str | None = None
    remember_me: bool | None = None
    required_actions: list[JsonValue] | None = None
    reset_credentials_flow: str | None = None
    reset_password_allowed: bool | None = None
    revoke_refresh_token: bool | None = None
    roles: JsonValue = None
    scope_mappings: list[JsonValue] | None = None
    smtp_server: KeycloakConfigMap | None = None
    ssl_required: str | None = Field(None, description="none, external or all")
    sso_session_idle_timeout: int | None = None
    sso_session_idle_timeout_remember_me: int | None = None
    sso_session_max_lifespan: int | None = None
    sso_session_max_lifespan_remember_me: int | None = None
    supported_locales: list[str] | None = None
    user_federation_mappers: list[JsonValue] | None = None
    user_federation_providers: list[JsonValue] | None = None
    user_managed_access_allowed: bool | None = None
    users: list[JsonValue] | None = None
    verify_email: bool | None = None
    wait_increment_seconds: int | None = None
