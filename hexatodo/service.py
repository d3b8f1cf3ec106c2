"""Application service over a todo repository."""

from __future__ import annotations

from hexatodo.ports import TodoRepository
from hexatodo.todo import Todo


class TodoService:
    """Use cases for managing todos, backed by a repository."""

    def __init__(self, repository: TodoRepository) -> None:
        self.repository = repository

    def create(self, todo: Todo) -> Todo:
        return self.repository.create(todo)

    def update(self, todo: Todo) -> Todo:
        return self.repository.update(todo)

    def delete(self, todo_id: int) -> None:
        self.repository.delete(todo_id)

    def find_all(self) -> list[Todo]:
        return self.repository.find_all()

    def find_by_id(self, todo_id: int) -> Todo:
        return self.repository.find_by_id(todo_id)