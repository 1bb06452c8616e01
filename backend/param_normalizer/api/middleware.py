"""
Request body normalizer for FastAPI routes.

Usage:

    PRODUCT_SCHEMA = {
        "name": {"type": "string", "required": True},
        "price": {"type": "number", "required": True},
    }

    @router.post("/products")
    def create_product(body: dict = Depends(param_normalizer(PRODUCT_SCHEMA))):
        ...

The dependency replaces the request body with the processed params
(returned to the route and stored on request.state.body) or rejects the
request with ParamValidationError, which the app renders as a 400.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Awaitable, Callable, Dict
from urllib.parse import parse_qsl

from fastapi import Request

from param_normalizer.core.errors import ParamValidationError, RequestBodyError
from param_normalizer.domain.normalize import process_params
from param_normalizer.domain.schema import SchemaInput, build_schema

logger = logging.getLogger(__name__)

_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def param_normalizer(
    schema: SchemaInput,
) -> Callable[[Request], Awaitable[Dict[str, Any]]]:
    # Fail at route definition time on a malformed schema
    specs = build_schema(schema)

    async def normalize_body(request: Request) -> Dict[str, Any]:
        body = await read_body(request)
        logger.debug("req.body path=%s body=%s", request.url.path, body)

        result = process_params(body, specs)
        logger.debug("process_params path=%s result=%s", request.url.path, result)

        if not result.validated.status:
            logger.warning(
                "params rejected path=%s errors=%d",
                request.url.path,
                len(result.validated.errors),
            )
            raise ParamValidationError(result.validated.errors)

        request.state.body = result.processed
        return result.processed

    return normalize_body


async def read_body(request: Request) -> Dict[str, Any]:
    raw = await request.body()
    if not raw.strip():
        return {}

    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() == _FORM_CONTENT_TYPE:
        text = raw.decode("utf-8", errors="replace")
        return dict(parse_qsl(text, keep_blank_values=True))

    try:
        body = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise RequestBodyError(f"Request body is not valid JSON: {exc}") from exc

    if not isinstance(body, dict):
        raise RequestBodyError("Request body must be a JSON object.")
    return body
