"""
Todo API — Todo Service and Store Unit Tests
=============================================

What:  Tests for TodoService business logic over the in-memory store.
How:   Calls the service directly (no HTTP), plus a mocked store to check
       that misses become NotFoundError.

What we test:
    ✅ Ids are sequential and never reused
    ✅ Update replaces the title and keeps `completed`
    ✅ Missing ids raise NotFoundError for get/update/delete
    ✅ Delete is not repeatable
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from todo_api.exceptions import NotFoundError
from todo_api.schemas.todo import Todo, TodoPartial
from todo_api.services.todo_service import TodoService


class TestInMemoryTodoStore:
    """Tests for the store itself."""

    @pytest.mark.asyncio
    async def test_create_assigns_sequential_ids(self, store):
        first = await store.create(TodoPartial(title="one"))
        second = await store.create(TodoPartial(title="two"))

        assert (first.id, second.id) == (1, 2)
        assert first.completed is False

    @pytest.mark.asyncio
    async def test_ids_are_not_reused_after_delete(self, store):
        first = await store.create(TodoPartial(title="one"))
        await store.delete(first.id)
        second = await store.create(TodoPartial(title="two"))

        assert second.id == 2

    @pytest.mark.asyncio
    async def test_list_is_ordered_by_id(self, store):
        for title in ("a", "b", "c"):
            await store.create(TodoPartial(title=title))
        await store.delete(2)

        todos = await store.list()

        assert [todo.id for todo in todos] == [1, 3]

    @pytest.mark.asyncio
    async def test_update_keeps_completed(self, store):
        todo = await store.create(TodoPartial(title="old"))
        store._todos[todo.id] = todo.model_copy(update={"completed": True})

        updated = await store.update(todo.id, TodoPartial(title="new"))

        assert updated == Todo(id=todo.id, title="new", completed=True)

    @pytest.mark.asyncio
    async def test_misses_return_none(self, store):
        assert await store.get(42) is None
        assert await store.update(42, TodoPartial(title="x")) is None
        assert await store.delete(42) is None

    @pytest.mark.asyncio
    async def test_concurrent_creates_get_distinct_ids(self, store):
        todos = await asyncio.gather(
            *(store.create(TodoPartial(title=f"t{i}")) for i in range(20))
        )

        assert sorted(todo.id for todo in todos) == list(range(1, 21))


class TestTodoService:
    """Tests for TodoService over a real in-memory store."""

    @pytest.fixture(autouse=True)
    def _service(self, store):
        self.service = TodoService(store)

    @pytest.mark.asyncio
    async def test_create_then_get(self, todo_payload):
        created = await self.service.create_todo(todo_payload)

        fetched = await self.service.get_todo(created.id)

        assert fetched == created
        assert fetched.title == "Buy milk"

    @pytest.mark.asyncio
    async def test_list_todos_empty(self):
        assert await self.service.list_todos() == []

    @pytest.mark.asyncio
    async def test_update_todo(self, todo_payload):
        created = await self.service.create_todo(todo_payload)

        updated = await self.service.update_todo(created.id, TodoPartial(title="Buy oat milk"))

        assert updated.id == created.id
        assert updated.title == "Buy oat milk"

    @pytest.mark.asyncio
    async def test_get_missing_raises_not_found(self):
        with pytest.raises(NotFoundError) as exc_info:
            await self.service.get_todo(7)

        assert exc_info.value.context == {"resource": "todo", "resource_id": 7}
        assert exc_info.value.message == "todo with ID '7' was not found"

    @pytest.mark.asyncio
    async def test_update_missing_raises_not_found(self, todo_payload):
        with pytest.raises(NotFoundError):
            await self.service.update_todo(7, todo_payload)

    @pytest.mark.asyncio
    async def test_delete_twice_raises_not_found(self, todo_payload):
        created = await self.service.create_todo(todo_payload)

        deleted = await self.service.delete_todo(created.id)

        assert deleted == created
        with pytest.raises(NotFoundError):
            await self.service.delete_todo(created.id)


class TestTodoServiceWithMockStore:
    """The service must not assume anything about the store beyond the interface."""

    @pytest.mark.asyncio
    async def test_store_miss_becomes_not_found(self):
        store = AsyncMock()
        store.get.return_value = None

        with pytest.raises(NotFoundError):
            await TodoService(store).get_todo(3)

        store.get.assert_awaited_once_with(3)

    @pytest.mark.asyncio
    async def test_store_hit_is_returned(self):
        todo = Todo(id=3, title="x", completed=False)
        store = AsyncMock()
        store.delete.return_value = todo

        assert await TodoService(store).delete_todo(3) is todo
