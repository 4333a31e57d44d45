"""
Todo API — Todo Service (Business Logic)
=========================================

What:  Business layer between the todo routes and the store.
Why:   Keeps HTTP concerns out of storage and storage concerns out of routes.
How:   Delegates to a `TodoStore` and converts a store miss (None) into
       `NotFoundError`, which the global handler answers with a 404 envelope.
Who:   Built per request by the `get_todo_service` dependency.
"""

import logging
from typing import List

from fastapi import Depends

from todo_api.exceptions import NotFoundError
from todo_api.schemas.todo import Todo, TodoPartial
from todo_api.store import TodoStore, get_todo_store

logger = logging.getLogger(__name__)


class TodoService:
    """
    Todo operations over an injected store.

    Raises:
        NotFoundError: get/update/delete on an id the store does not hold
    """

    def __init__(self, store: TodoStore):
        self.store = store

    async def list_todos(self) -> List[Todo]:
        return await self.store.list()

    async def create_todo(self, payload: TodoPartial) -> Todo:
        todo = await self.store.create(payload)
        logger.info("Created todo %d", todo.id)
        return todo

    async def get_todo(self, todo_id: int) -> Todo:
        todo = await self.store.get(todo_id)
        if todo is None:
            raise NotFoundError(resource="todo", resource_id=todo_id)
        return todo

    async def update_todo(self, todo_id: int, payload: TodoPartial) -> Todo:
        todo = await self.store.update(todo_id, payload)
        if todo is None:
            raise NotFoundError(resource="todo", resource_id=todo_id)
        logger.info("Updated todo %d", todo_id)
        return todo

    async def delete_todo(self, todo_id: int) -> Todo:
        todo = await self.store.delete(todo_id)
        if todo is None:
            raise NotFoundError(resource="todo", resource_id=todo_id)
        logger.info("Deleted todo %d", todo_id)
        return todo


def get_todo_service(store: TodoStore = Depends(get_todo_store)) -> TodoService:
    return TodoService(store)
