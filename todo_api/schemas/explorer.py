"""
Todo API — API Explorer Configuration
======================================

What:  Immutable configuration for the bundled Swagger UI explorer.
Why:   Built once during application startup and read by every explorer
       request; `frozen=True` means there is no mutation path after that.
Who:   Created by create_app(), stored on `app.state.swagger_config`,
       consumed by the explorer service when rendering index.html and
       swagger-initializer.js.
"""

from pydantic import BaseModel, Field


class SwaggerUIConfig(BaseModel):
    """Settings handed to Swagger UI when the explorer is rendered."""

    prefix: str = Field(description="URL prefix the explorer assets are served under")
    url: str = Field(description="URL of the OpenAPI document the UI loads")
    layout: str = Field(default="BaseLayout", description="Swagger UI layout name")
    title: str = Field(default="Todo API", description="HTML page title")
    oauth2_redirect_url: str = Field(description="Path of the OAuth2 redirect page")

    model_config = {"frozen": True}

    @classmethod
    def for_prefix(cls, prefix: str, title: str) -> "SwaggerUIConfig":
        """Config pointing at `<prefix>/swagger.json` with the base layout."""
        return cls(
            prefix=prefix,
            url=f"{prefix}/swagger.json",
            title=title,
            oauth2_redirect_url=f"{prefix}/oauth2-redirect.html",
        )
