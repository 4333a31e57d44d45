"""
Todo API — Todo Storage
========================

What:  The storage interface for todos and its in-memory implementation.
Why:   Handlers and services talk to `TodoStore` only, so a durable backend
       can replace the in-memory one without touching routes or services.
How:   `InMemoryTodoStore` keeps todos in a dict guarded by an asyncio.Lock;
       ids come from a counter starting at 1 and are never reused.
Who:   One store per application instance, created by create_app() and
       exposed to routes through the `get_todo_store` dependency.

Concurrency:
    All requests run on one event loop. Every operation takes the lock, so
    a request never observes another request's half-applied mutation, and
    a durable store that awaits I/O inside these methods keeps the same
    guarantee.
"""

import asyncio
import itertools
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from fastapi import Request

from todo_api.schemas.todo import Todo, TodoPartial


class TodoStore(ABC):
    """Abstract async storage for todos. Lookups return None on a miss."""

    @abstractmethod
    async def list(self) -> List[Todo]:
        """Return every stored todo, ordered by id."""

    @abstractmethod
    async def get(self, todo_id: int) -> Optional[Todo]:
        """Return the todo with `todo_id`, or None."""

    @abstractmethod
    async def create(self, payload: TodoPartial) -> Todo:
        """Store a new, not yet completed todo and return it."""

    @abstractmethod
    async def update(self, todo_id: int, payload: TodoPartial) -> Optional[Todo]:
        """Replace the title of `todo_id`; return the updated todo, or None."""

    @abstractmethod
    async def delete(self, todo_id: int) -> Optional[Todo]:
        """Remove `todo_id`; return the removed todo, or None."""


class InMemoryTodoStore(TodoStore):
    """Process-local store. Contents are lost when the process exits."""

    def __init__(self) -> None:
        self._todos: Dict[int, Todo] = {}
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()

    async def list(self) -> List[Todo]:
        async with self._lock:
            return [self._todos[todo_id] for todo_id in sorted(self._todos)]

    async def get(self, todo_id: int) -> Optional[Todo]:
        async with self._lock:
            return self._todos.get(todo_id)

    async def create(self, payload: TodoPartial) -> Todo:
        async with self._lock:
            todo = Todo(id=next(self._ids), title=payload.title, completed=False)
            self._todos[todo.id] = todo
            return todo

    async def update(self, todo_id: int, payload: TodoPartial) -> Optional[Todo]:
        async with self._lock:
            current = self._todos.get(todo_id)
            if current is None:
                return None
            # Todo instances are shared with callers; replace, never mutate
            updated = current.model_copy(update={"title": payload.title})
            self._todos[todo_id] = updated
            return updated

    async def delete(self, todo_id: int) -> Optional[Todo]:
        async with self._lock:
            return self._todos.pop(todo_id, None)


def get_todo_store(request: Request) -> TodoStore:
    """
    FastAPI dependency returning the application's store.

    Usage in route handlers:
        @router.get("/todos")
        async def get_todos(store: TodoStore = Depends(get_todo_store)):
            ...
    """
    return request.app.state.todo_store
