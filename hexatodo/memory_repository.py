"""Todo repository held in memory."""

from __future__ import annotations

import dataclasses

from hexatodo.ports import TodoNotFoundError, TodoRepository
from hexatodo.todo import Todo


class InMemoryTodoRepository(TodoRepository):
    """Keeps todos in a list; create numbers them from 1 by current count."""

    def __init__(self) -> None:
        self._todos: list[Todo] = []

    def _position(self, todo_id: int) -> int:
        for index, item in enumerate(self._todos):
            if item.id == todo_id:
                return index
        raise TodoNotFoundError("Todo not found")

    def create(self, todo: Todo) -> Todo:
        new_todo = dataclasses.replace(todo, id=len(self._todos) + 1)
        self._todos.append(dataclasses.replace(new_todo))
        return new_todo

    def update(self, todo: Todo) -> Todo:
        self._todos[self._position(todo.id)] = dataclasses.replace(todo)
        return todo

    def delete(self, todo_id: int) -> None:
        del self._todos[self._position(todo_id)]

    def find_all(self) -> list[Todo]:
        return [dataclasses.replace(todo) for todo in self._todos]

    def find_by_id(self, todo_id: int) -> Todo:
        return dataclasses.replace(self._todos[self._position(todo_id)])