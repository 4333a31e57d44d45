# Schemas package init
"""
Todo API — Pydantic Schemas
============================

Schema Inventory:
    - todo.py:      Todo, TodoPartial (resource model)
    - error.py:     HttpError (error envelope)
    - explorer.py:  SwaggerUIConfig (explorer configuration)
"""

from todo_api.schemas.error import HttpError
from todo_api.schemas.explorer import SwaggerUIConfig
from todo_api.schemas.todo import Todo, TodoPartial

__all__ = ["HttpError", "SwaggerUIConfig", "Todo", "TodoPartial"]
