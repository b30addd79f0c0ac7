"""
Base model shared by every Keycloak admin representation.

Python attributes use snake_case; the Keycloak wire names are pydantic
aliases, generated as camelCase unless a field declares its own alias.
Unknown fields sent by the server are ignored.
"""

import logging
from collections.abc import Mapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from keycloak_admin_dto.errors import SerializationError
from keycloak_admin_dto.observability.logging import preview_payload
from keycloak_admin_dto.settings import settings

logger = logging.getLogger(__name__)


class KeycloakModel(BaseModel):
    """Base class for Keycloak REST API representations."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> Self:
        """
        Validate a decoded JSON object returned by the server.

        Args:
            data: Decoded response body

        Returns:
            Validated model instance

        Raises:
            SerializationError: If the payload does not match the schema
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise _decode_error(cls, data, e) from e

    @classmethod
    def from_json(cls, raw: str | bytes) -> Self:
        """
        Parse a raw JSON response body.

        Args:
            raw: Response body as text or bytes

        Returns:
            Validated model instance

        Raises:
            SerializationError: If the body is not valid JSON or does not match
                the schema
        """
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            raise _decode_error(cls, raw, e) from e

    def to_payload(self) -> dict[str, Any]:
        """Dump the model in wire shape, leaving out unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Dump the model as a wire-shaped JSON string."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


def _decode_error(
    model: type[BaseModel], payload: object, error: ValidationError
) -> SerializationError:
    logger.warning(
        f"Failed to decode {model.__name__}: {error.error_count()} validation error(s)",
        extra={
            "model": model.__name__,
            "operation": "decode",
            "error_type": type(error).__name__,
            "payload_preview": preview_payload(
                payload, settings.log_payload_preview_limit
            ),
        },
    )
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or None
    return SerializationError(
        f"invalid {model.__name__} payload: {first['msg']}",
        field=location,
        cause=error,
    )
