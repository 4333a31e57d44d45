"""
Todo API — Todo Route Handlers
===============================

What:  GET/POST /todos and GET/PUT/DELETE /todos/{todo_id}.
Why:   The resource endpoints of the service.
How:   Each decorator is the single declaration of its route: method, path,
       request model, success status and response table. FastAPI registers
       the handler from it and the OpenAPI document is generated from it.
Who:   Any HTTP client; documented under the API explorer.

Error responses (handled by global exception handlers):
    HTTP 400: Body or path id failed schema validation (RequestValidationError)
    HTTP 404: No todo with that id (NotFoundError)
"""

from typing import List

from fastapi import APIRouter, Depends, status

from todo_api.schemas.error import HttpError
from todo_api.schemas.todo import Todo, TodoPartial
from todo_api.services.todo_service import TodoService, get_todo_service

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/todos", tags=["Todos"])

INVALID_REQUEST = {"description": "Request failed schema validation", "model": HttpError}
TODO_NOT_FOUND = {"description": "Todo not found", "model": HttpError}


@router.get(
    "",
    response_model=List[Todo],
    responses={
        200: {"description": "List of Todo"},
    },
    summary="List todos",
)
async def get_todos(svc: TodoService = Depends(get_todo_service)) -> List[Todo]:
    return await svc.list_todos()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=Todo,
    responses={
        201: {"description": "Todo created"},
        400: INVALID_REQUEST,
    },
    summary="Create a todo",
)
async def create_todo(
    payload: TodoPartial,
    svc: TodoService = Depends(get_todo_service),
) -> Todo:
    """New todos start with `completed = false`."""
    return await svc.create_todo(payload)


@router.get(
    "/{todo_id}",
    response_model=Todo,
    responses={
        200: {"description": "Todo found"},
        400: INVALID_REQUEST,
        404: TODO_NOT_FOUND,
    },
    summary="Get a todo by id",
)
async def get_todo(todo_id: int, svc: TodoService = Depends(get_todo_service)) -> Todo:
    return await svc.get_todo(todo_id)


@router.put(
    "/{todo_id}",
    response_model=Todo,
    responses={
        200: {"description": "Todo updated"},
        400: INVALID_REQUEST,
        404: TODO_NOT_FOUND,
    },
    summary="Update a todo",
)
async def update_todo(
    todo_id: int,
    payload: TodoPartial,
    svc: TodoService = Depends(get_todo_service),
) -> Todo:
    """
    Replace the todo's title.

    The body has the same shape as on creation; `completed` is not part of
    it and keeps its stored value.
    """
    return await svc.update_todo(todo_id, payload)


@router.delete(
    "/{todo_id}",
    response_model=Todo,
    responses={
        200: {"description": "Todo deleted"},
        400: INVALID_REQUEST,
        404: TODO_NOT_FOUND,
    },
    summary="Delete a todo",
)
async def delete_todo(todo_id: int, svc: TodoService = Depends(get_todo_service)) -> Todo:
    """Returns the removed todo. A repeated delete of the same id is a 404."""
    return await svc.delete_todo(todo_id)
