"""API schema definitions."""

from redirecthandler.api.schemas.base import APIBaseSchema, to_camel_case
from redirecthandler.api.schemas.responses import HealthResponse, ReadyResponse

__all__ = [
    # Base
    "APIBaseSchema",
    "to_camel_case",
    # Responses
    "HealthResponse",
    "ReadyResponse",
]
