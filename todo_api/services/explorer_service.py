"""
Todo API — API Explorer Assets
===============================

What:  Resolves explorer paths to the bundled Swagger UI distribution.
Why:   The explorer is served by the application itself, next to the
       document it browses, and works without network access.
How:   Static files (swagger-ui.css, swagger-ui-bundle.js, favicons, ...)
       are read from the swagger-ui dist shipped by the `swagger-ui-bundle`
       package. The two files that carry configuration, `index.html` and
       `swagger-initializer.js`, are rendered from the shared, read-only
       `SwaggerUIConfig` instead, so the UI loads `<prefix>/swagger.json`
       with the configured layout.

Asset lookup:
    ""  or "index.html"       → rendered page, loading the local assets
    "swagger-initializer.js"  → rendered SwaggerUIBundle(...) call
    any file in the dist      → its bytes, content type from mimetypes
    anything else             → None (the route answers 404)
"""

import json
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from string import Template
from typing import Optional

import aiofiles
from swagger_ui_bundle import swagger_ui_path

from todo_api.exceptions import InternalServerError
from todo_api.schemas.explorer import SwaggerUIConfig

logger = logging.getLogger(__name__)

DIST_ROOT = Path(swagger_ui_path).resolve()

DEFAULT_CONTENT_TYPE = "application/octet-stream"

INDEX_TEMPLATE = Template("""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8">
    <title>$title</title>
    <link rel="stylesheet" type="text/css" href="$prefix/swagger-ui.css" />
    <link rel="icon" type="image/png" href="$prefix/favicon-32x32.png" sizes="32x32" />
    <link rel="icon" type="image/png" href="$prefix/favicon-16x16.png" sizes="16x16" />
  </head>
  <body>
    <div id="swagger-ui"></div>
    <script src="$prefix/swagger-ui-bundle.js" charset="UTF-8"></script>
    <script src="$prefix/swagger-ui-standalone-preset.js" charset="UTF-8"></script>
    <script src="$prefix/swagger-initializer.js" charset="UTF-8"></script>
  </body>
</html>
""")

INITIALIZER_TEMPLATE = Template("""window.onload = function() {
  window.ui = SwaggerUIBundle({
    url: $url,
    dom_id: "#swagger-ui",
    deepLinking: true,
    presets: [
      SwaggerUIBundle.presets.apis,
      SwaggerUIStandalonePreset
    ],
    plugins: [
      SwaggerUIBundle.plugins.DownloadUrl
    ],
    layout: $layout,
    oauth2RedirectUrl: window.location.origin + $oauth2_redirect_url
  });
};
""")


@dataclass(frozen=True)
class ExplorerAsset:
    """A resolved explorer file: raw bytes plus the content type to serve them with."""

    content: bytes
    content_type: str


def render_index(config: SwaggerUIConfig) -> ExplorerAsset:
    page = INDEX_TEMPLATE.substitute(title=config.title, prefix=config.prefix)
    return ExplorerAsset(content=page.encode("utf-8"), content_type="text/html; charset=utf-8")


def render_initializer(config: SwaggerUIConfig) -> ExplorerAsset:
    script = INITIALIZER_TEMPLATE.substitute(
        url=json.dumps(config.url),
        layout=json.dumps(config.layout),
        oauth2_redirect_url=json.dumps(config.oauth2_redirect_url),
    )
    return ExplorerAsset(
        content=script.encode("utf-8"),
        content_type="application/javascript; charset=utf-8",
    )


RENDERED_ASSETS = {
    "": render_index,
    "index.html": render_index,
    "swagger-initializer.js": render_initializer,
}


def resolve_dist_file(path: str) -> Optional[Path]:
    """Map `path` to a file inside the dist, or None. Never escapes the dist root."""
    candidate = (DIST_ROOT / path).resolve()
    if DIST_ROOT not in candidate.parents or not candidate.is_file():
        return None
    return candidate


async def find_asset(path: str, config: SwaggerUIConfig) -> Optional[ExplorerAsset]:
    """
    Look up `path` in the explorer asset set.

    Returns:
        The asset, or None if `path` is not part of the set.

    Raises:
        InternalServerError: The asset exists but could not be read or rendered
    """
    renderer = RENDERED_ASSETS.get(path)
    if renderer is not None:
        return renderer(config)

    file_path = resolve_dist_file(path)
    if file_path is None:
        return None

    try:
        async with aiofiles.open(file_path, "rb") as f:
            content = await f.read()
    except OSError as err:
        logger.error("Explorer asset %r could not be read: %s", path, err)
        raise InternalServerError(message=f"Error serving Swagger UI: {err}") from err

    content_type, _ = mimetypes.guess_type(file_path.name)
    return ExplorerAsset(content=content, content_type=content_type or DEFAULT_CONTENT_TYPE)
