"""
Todo API — Todo Request/Response Schemas
=========================================

What:  Pydantic models defining the todo API contract.
Why:   Strict input validation, automatic serialization, and OpenAPI doc generation.
How:   FastAPI uses these models to validate request bodies, serialize
       responses, and emit the `Todo` / `TodoPartial` components of the
       OpenAPI document.
Who:   Used by the todo routes, TodoService and the store.
"""

from pydantic import BaseModel, Field


class Todo(BaseModel):
    """
    What:  A stored task.
    Who:   Returned by every todo route (as a list for GET /todos).

    Lifecycle:
        Created by the store on POST /todos (completed = False),
        retitled by PUT /todos/{todo_id}, removed by DELETE /todos/{todo_id}.
    """

    id: int = Field(description="The todo id")
    title: str = Field(description="The todo title")
    completed: bool = Field(description="The todo completed status")


class TodoPartial(BaseModel):
    """
    What:  Client-supplied fields for creating or updating a todo.
    Who:   Request body of POST /todos and PUT /todos/{todo_id}.

    On update only `title` is replaced; `completed` keeps its stored value.
    """

    title: str = Field(description="The todo title")
