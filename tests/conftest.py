"""Shared pytest fixtures for Keycloak admin DTO tests."""

import copy
import logging

import pytest

from tests.fixtures import keycloak_resources


@pytest.fixture
def user_payload():
    """A user as returned by GET /admin/realms/{realm}/users/{id}."""
    return copy.deepcopy(keycloak_resources.USER_PAYLOAD)


@pytest.fixture
def realm_payload():
    """A realm as returned by GET /admin/realms/{realm}."""
    return copy.deepcopy(keycloak_resources.REALM_PAYLOAD)


@pytest.fixture
def cert_payload():
    """A JWKS document as returned by the certs endpoint."""
    return copy.deepcopy(keycloak_resources.CERT_PAYLOAD)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a logging setup test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def reset_correlation_id():
    """Clear the correlation ID context variable after the test."""
    from keycloak_admin_dto.observability.logging import correlation_id

    token = correlation_id.set("")
    yield
    correlation_id.reset(token)
