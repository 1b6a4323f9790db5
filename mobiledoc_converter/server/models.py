"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: One model per request/response body. Every field carries a
description for the /docs UI.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- RootDirection values match config.ROOT_DIRECTION_RULES exactly
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class RootDirection(str, Enum):
    """Rule for deriving the root node's text direction."""

    first_child = "first_child"
    appended = "appended"


class ConversionRequest(BaseModel):
    """A Mobiledoc document to convert.

    RULES:
    - mobiledoc is the serialized Mobiledoc JSON string; null or "" gives
      the blank Lexical document
    - Omitted settings fall back to the server's configured defaults
    """

    mobiledoc: Optional[str] = Field(
        default=None,
        description="Serialized Mobiledoc JSON document.",
    )
    root_direction: Optional[RootDirection] = Field(
        default=None,
        description="Root direction rule: 'first_child' (legacy) or 'appended'.",
    )
    strict_nesting: Optional[bool] = Field(
        default=None,
        description="Reject markups left open at the end of a section.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "mobiledoc": (
                    '{"version":"0.3.1","atoms":[],"cards":[],"markups":[],'
                    '"sections":[[1,"p",[[0,[],0,"Hello world"]]]]}'
                ),
            }
        ]
    }}


class ConversionResponse(BaseModel):
    """The converted Lexical editor state."""

    lexical: str = Field(description="Serialized Lexical editor state JSON.")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
