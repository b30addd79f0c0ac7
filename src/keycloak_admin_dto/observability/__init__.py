"""
Observability package - structured logging for the DTO layer.
"""

from .logging import (
    get_correlation_id,
    set_correlation_id,
    setup_logging_from_settings,
    setup_structured_logging,
)

__all__ = [
    "get_correlation_id",
    "set_correlation_id",
    "setup_logging_from_settings",
    "setup_structured_logging",
]
