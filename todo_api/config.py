"""
Todo API — Application Configuration
=====================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py (bootstrap, logging) and the explorer router.
When:  Loaded once at module import time.

The defaults reproduce the fixed binding of the service (all interfaces,
port 8080); every value can be overridden through the environment.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Application ───────────────────────────────────────────────────────
    app_name: str = Field(default="Todo API", description="Title used in the OpenAPI document")

    # ── Server ────────────────────────────────────────────────────────────
    # What: Interface and port uvicorn binds to when started through run()
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8080, ge=1, le=65535)

    # What: Controls verbosity of application logging
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── API Explorer ──────────────────────────────────────────────────────
    # What: URL prefix under which swagger.json and the Swagger UI assets live
    explorer_prefix: str = Field(default="/explorer")

    @field_validator("explorer_prefix")
    @classmethod
    def validate_explorer_prefix(cls, v: str) -> str:
        """Normalizes the prefix to a leading slash and no trailing slash."""
        stripped = v.strip("/")
        if not stripped:
            raise ValueError("explorer_prefix must not be empty")
        return f"/{stripped}"

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # BACKEND_PORT and backend_port both work
    }


# Singleton instance, imported throughout the application
settings = Settings()
