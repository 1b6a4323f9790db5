"""FastAPI application exposing Mobiledoc → Lexical conversion over HTTP.

WHY: Services that store posts (admin backends, migration workers) need
to convert content without embedding this package. A small HTTP API
with OpenAPI docs serves them.

HOW: POST /conversions takes a Mobiledoc JSON string and returns the
Lexical JSON string. Conversion errors map to 422 with an ErrorResponse
body. GET /health is the liveness probe.

RULES:
- Conversion runs synchronously; it is pure and fast, no job queue
- ConversionError and schema validation failures → 422
- Any other failure is logged with its traceback and answered with 500
- Unset request settings fall back to config defaults
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging

import jsonschema
from fastapi import FastAPI, HTTPException

from mobiledoc_converter import __version__
from mobiledoc_converter.config import (
    API_HOST,
    API_PORT,
    DEFAULT_ROOT_DIRECTION,
    DEFAULT_STRICT_NESTING,
)
from mobiledoc_converter.core.converter import ConversionOptions, mobiledoc_to_lexical
from mobiledoc_converter.exceptions import ConversionError
from mobiledoc_converter.server.models import (
    ConversionRequest,
    ConversionResponse,
    ErrorResponse,
    HealthResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Mobiledoc to Lexical Converter API",
    description=(
        "Converts Mobiledoc documents into Lexical editor state. Paragraphs, "
        "headings, quotes, inline formatting, links and soft line breaks are "
        "converted; image, list and card sections are skipped."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


def _options_from_request(request: ConversionRequest) -> ConversionOptions:
    """Build ConversionOptions, filling unset fields from config."""
    root_direction = (
        request.root_direction.value if request.root_direction is not None
        else DEFAULT_ROOT_DIRECTION
    )
    strict_nesting = (
        request.strict_nesting if request.strict_nesting is not None
        else DEFAULT_STRICT_NESTING
    )
    return ConversionOptions(root_direction=root_direction, strict_nesting=strict_nesting)


@app.post(
    "/conversions",
    response_model=ConversionResponse,
    responses={
        422: {"model": ErrorResponse, "description": "Document could not be converted."},
        500: {"model": ErrorResponse, "description": "Unexpected conversion failure."},
    },
    tags=["conversions"],
    summary="Convert a Mobiledoc document",
    description=(
        "Converts a serialized Mobiledoc document into a serialized Lexical "
        "editor state. A null or empty document converts to the blank state."
    ),
)
async def create_conversion(request: ConversionRequest) -> ConversionResponse:
    options = _options_from_request(request)
    try:
        lexical = mobiledoc_to_lexical(request.mobiledoc, options)
    except ConversionError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except jsonschema.ValidationError as exc:
        logger.exception("Converted document failed Lexical schema validation")
        raise HTTPException(
            status_code=422,
            detail="Converted document failed validation: {}".format(exc.message),
        )
    except Exception:
        logger.exception("Unexpected failure converting Mobiledoc document")
        raise HTTPException(status_code=500, detail="Internal conversion error")
    return ConversionResponse(lexical=lexical)


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the mobiledoc-api console script."""
    import uvicorn
    uvicorn.run(app, host=API_HOST, port=API_PORT)
