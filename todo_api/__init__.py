"""
Todo API — Application Package Initializer
===========================================

What: Marks the `todo_api` directory as a Python package.
Why:  Enables module imports like `from todo_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The service follows a layered architecture:

    ┌─────────────────────────────────────┐
    │     Routes (todos, explorer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (TodoService, OpenAPI)   │  ← Not-found mapping, doc generation
    ├─────────────────────────────────────┤
    │        Schemas (pydantic)           │  ← API contracts + OpenAPI components
    ├─────────────────────────────────────┤
    │        Store (TodoStore)            │  ← Swappable storage backend
    └─────────────────────────────────────┘

    Routes declare their method, path, request model and response table
    exactly once; FastAPI uses that single declaration both to register the
    route and to generate the OpenAPI document.
"""

__version__ = "0.1.0"
