"""
Optional query-parameter records and their string-map adapter.

Admin API list endpoints take optional filter and pagination arguments in the
query string. Each endpoint gets a ``BaseParams`` subclass whose query fields
are marked with ``QueryParam``; ``get_query_params()`` turns the record into
the ``dict[str, str]`` attached to the request URL.

Encoding rules:
- ``True``/``False`` become ``"true"``/``"false"``
- integers become base-10 strings
- strings pass through unchanged
- ``None`` is always omitted; ``""``, ``0`` and ``False`` are omitted unless
  the field is declared ``QueryParam(keep_zero=True)``

Fields without the marker (path segments, request body values) are never
written to the map.

Example:
    >>> GetGroupsParams(search="alice").get_query_params()
    {'search': 'alice'}
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Self, get_args

from pydantic import ConfigDict, ValidationError
from pydantic.fields import FieldInfo

from keycloak_admin_dto.errors import SerializationError

from .base import KeycloakModel

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class QueryParam:
    """
    Marks a ``BaseParams`` field as a query-string parameter.

    Attributes:
        keep_zero: Emit ``""``, ``0`` and ``False`` instead of omitting them.
            Used for tri-state options where an explicit ``False`` differs
            from leaving the server default in place.
    """

    keep_zero: bool = False


def encode_query_value(value: Any) -> str:
    """
    Encode a single query value as a string.

    Args:
        value: bool, int or str (enum members are encoded by value)

    Returns:
        The string form of the value

    Raises:
        SerializationError: If the value type has no string encoding
    """
    if isinstance(value, Enum):
        value = value.value

    # bool is checked first: it is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, str):
        return str.__str__(value)

    raise SerializationError(
        f"no query-string encoding for type {type(value).__name__}"
    )


def decode_query_value(text: str, target_type: type) -> bool | int | str:
    """
    Decode a query string value produced by ``encode_query_value``.

    Args:
        text: The encoded value
        target_type: ``bool``, ``int`` or ``str``

    Returns:
        The decoded value

    Raises:
        SerializationError: If the text is not a valid encoding for the type
    """
    if target_type is bool:
        if text == "true":
            return True
        if text == "false":
            return False
        raise SerializationError(f"expected 'true' or 'false', got {text!r}")
    if target_type is int:
        if not _INTEGER_PATTERN.fullmatch(text):
            raise SerializationError(f"expected a base-10 integer, got {text!r}")
        return int(text)
    if target_type is str:
        return text

    raise SerializationError(
        f"no query-string decoding for type {getattr(target_type, '__name__', target_type)}"
    )


def _query_marker(field_info: FieldInfo) -> QueryParam | None:
    for item in field_info.metadata:
        if isinstance(item, QueryParam):
            return item
    return None


def _scalar_type(value: Any) -> type:
    if isinstance(value, Enum):
        value = value.value
    for candidate in (bool, int, str):
        if isinstance(value, candidate):
            return candidate
    return type(value)


def _annotation_scalar_type(field_name: str, field_info: FieldInfo) -> type:
    annotation = field_info.annotation
    candidates = [arg for arg in get_args(annotation) if arg is not type(None)]
    target = candidates[0] if len(candidates) == 1 else annotation
    if isinstance(target, type):
        for candidate in (bool, int, str):
            if issubclass(target, candidate):
                return candidate
    raise SerializationError(
        f"no query-string decoding for annotation {annotation!r}", field=field_name
    )


def _is_default(value: Any, marker: QueryParam) -> bool:
    if value is None:
        return True
    if marker.keep_zero:
        return False
    if isinstance(value, Enum):
        value = value.value
    return isinstance(value, (bool, int, str)) and not value


class BaseParams(KeycloakModel):
    """
    Base class for optional query-parameter records.

    Subclasses declare query fields as ``Annotated[T | None, QueryParam()]``
    where ``T`` is ``bool``, ``int`` or ``str``. The pydantic alias is the
    wire name.
    """

    model_config = ConfigDict(validate_assignment=True)

    def get_query_params(self) -> dict[str, str]:
        """
        Convert the record to a query-string map.

        Returns:
            New mapping of wire name to encoded value, holding only the fields
            set to a non-default value

        Raises:
            SerializationError: If a marked field holds a value that cannot be
                encoded, or whose encoding does not decode back to it
        """
        params: dict[str, str] = {}

        for name, field_info in type(self).model_fields.items():
            marker = _query_marker(field_info)
            if marker is None:
                continue

            value = getattr(self, name)
            if _is_default(value, marker):
                continue

            wire_name = field_info.alias or name
            try:
                encoded = encode_query_value(value)
                expected = value.value if isinstance(value, Enum) else value
                if decode_query_value(encoded, _scalar_type(value)) != expected:
                    raise SerializationError(
                        f"encoded value {encoded!r} does not round-trip"
                    )
            except SerializationError as e:
                logger.error(
                    f"Cannot encode query parameter {wire_name} of {type(self).__name__}",
                    extra={
                        "model": type(self).__name__,
                        "operation": "encode_query",
                        "field": name,
                        "wire_name": wire_name,
                        "error_type": type(e).__name__,
                    },
                )
                raise SerializationError(
                    e.message, field=name, wire_name=wire_name, cause=e
                ) from e

            params[wire_name] = encoded

        logger.debug(
            f"Encoded {len(params)} query parameter(s) for {type(self).__name__}",
            extra={
                "model": type(self).__name__,
                "operation": "encode_query",
                "param_count": len(params),
            },
        )
        return params

    @classmethod
    def from_query_params(cls, params: Mapping[str, str]) -> Self:
        """
        Build a record from a query-string map.

        Keys that do not name a query field of this record are ignored.

        Args:
            params: Mapping of wire name to encoded value

        Returns:
            The decoded record

        Raises:
            SerializationError: If a value is not a valid encoding for its field
        """
        values: dict[str, Any] = {}

        for name, field_info in cls.model_fields.items():
            if _query_marker(field_info) is None:
                continue
            wire_name = field_info.alias or name
            if wire_name not in params:
                continue
            target_type = _annotation_scalar_type(name, field_info)
            try:
                values[name] = decode_query_value(params[wire_name], target_type)
            except SerializationError as e:
                raise SerializationError(
                    e.message, field=name, wire_name=wire_name, cause=e
                ) from e

        try:
            return cls.model_validate(values)
        except ValidationError as e:
            first = e.errors()[0]
            raise SerializationError(
                f"invalid {cls.__name__} query parameters: {first['msg']}",
                cause=e,
            ) from e
