"""
Todo API — OpenAPI Document Aggregator
=======================================

What:  Builds the OpenAPI document served at `<explorer>/swagger.json`.
Why:   The document is derived from the same route declarations that
       register the handlers, so documentation and behavior cannot drift.
How:   FastAPI's `get_openapi()` walks the application's routes (explorer
       routes opt out with `include_in_schema=False`) and collects the
       `Todo`, `TodoPartial` and `HttpError` components they reference.
       The result is cached on `app.state` after the first request.

Validation responses:
    FastAPI documents an automatic 422 for every route with parameters or a
    body. This service answers request validation failures with a 400
    `HttpError` (declared in each route's response table), so the 422
    entries are removed, and so is every component no remaining `$ref`
    reaches (FastAPI's `HTTPValidationError` / `ValidationError`, and any
    definition pydantic emits for a field kept out of the schema).
"""

import json
import logging
from typing import Any, Dict, Sequence, Set

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from starlette.routing import BaseRoute

from todo_api.exceptions import InternalServerError

logger = logging.getLogger(__name__)

SCHEMA_REF_PREFIX = "#/components/schemas/"


def collect_schema_refs(node: Any, schemas: Dict[str, Any], found: Set[str]) -> Set[str]:
    """Names of the components reachable from `node`, following nested refs."""
    if isinstance(node, dict):
        ref = node.get("$ref")
        if isinstance(ref, str) and ref.startswith(SCHEMA_REF_PREFIX):
            name = ref[len(SCHEMA_REF_PREFIX):]
            if name not in found:
                found.add(name)
                collect_schema_refs(schemas.get(name), schemas, found)
        for value in node.values():
            collect_schema_refs(value, schemas, found)
    elif isinstance(node, list):
        for item in node:
            collect_schema_refs(item, schemas, found)
    return found


def build_openapi_document(
    title: str,
    version: str,
    routes: Sequence[BaseRoute],
) -> Dict[str, Any]:
    """
    Generate the OpenAPI document for `routes`.

    Returns:
        The document as a plain dict, with each operation's responses
        exactly as declared on its route.
    """
    document = get_openapi(title=title, version=version, routes=routes)

    for path_item in document.get("paths", {}).values():
        for operation in path_item.values():
            operation.get("responses", {}).pop("422", None)

    schemas = document.get("components", {}).get("schemas", {})
    reachable = collect_schema_refs(document.get("paths", {}), schemas, set())
    for name in set(schemas) - reachable:
        del schemas[name]

    return document


def get_openapi_document(app: FastAPI) -> Dict[str, Any]:
    """Return the application's document, generating it on first use."""
    document = getattr(app.state, "openapi_document", None)
    if document is None:
        document = build_openapi_document(app.title, app.version, app.routes)
        app.state.openapi_document = document
    return document


def render_openapi_json(app: FastAPI) -> str:
    """
    Serialize the application's OpenAPI document to JSON.

    Raises:
        InternalServerError: The document could not be generated or serialized
    """
    try:
        return json.dumps(get_openapi_document(app))
    except Exception as err:
        logger.error("OpenAPI generation failed: %s", err, exc_info=True)
        raise InternalServerError(
            message=f"Error generating OpenAPI spec: {err}",
        ) from err
