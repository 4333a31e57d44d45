"""
Todo API — API Explorer Routes
===============================

What:  Serves the OpenAPI document and the Swagger UI explorer pages.
Why:   Lets developers read and try the API from a browser.
How:   Mounted by create_app() under `settings.explorer_prefix` (default
       /explorer). Both routes are left out of the document they serve.

Routes:
    GET <prefix>/swagger.json  → generated OpenAPI document
    GET <prefix>/{path}        → explorer asset lookup (404 HttpError if unknown)
"""

from fastapi import APIRouter, Depends, Request, Response

from todo_api.exceptions import NotFoundError
from todo_api.schemas.explorer import SwaggerUIConfig
from todo_api.services.explorer_service import find_asset
from todo_api.services.openapi_service import render_openapi_json

router = APIRouter(tags=["Explorer"], include_in_schema=False)


def get_swagger_config(request: Request) -> SwaggerUIConfig:
    """Shared explorer configuration, built once in create_app()."""
    return request.app.state.swagger_config


@router.get("/swagger.json")
async def get_swagger_json(request: Request) -> Response:
    """
    Return the OpenAPI document.

    Raises:
        InternalServerError: The document could not be serialized (500)
    """
    spec = render_openapi_json(request.app)
    return Response(content=spec, media_type="application/json")


@router.get("/{path:path}")
async def get_explorer_asset(
    path: str,
    config: SwaggerUIConfig = Depends(get_swagger_config),
) -> Response:
    asset = await find_asset(path, config)
    if asset is None:
        raise NotFoundError(resource="asset", message=f"path not found: {path}")
    return Response(content=asset.content, media_type=asset.content_type)
