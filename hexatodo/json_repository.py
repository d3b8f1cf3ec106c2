"""Todo repository kept in a pretty-printed JSON file."""

from __future__ import annotations

import json
import os
from pathlib import Path

from hexatodo.ports import RepositoryError, TodoNotFoundError, TodoRepository
from hexatodo.todo import Todo


class JsonRepository(TodoRepository):
    """Stores all todos as a JSON array in a single file.

    A missing or unreadable file counts as an empty list.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def _load(self) -> list[Todo]:
        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return []
        if not content:
            return []
        try:
            raw = json.loads(content)
            if not isinstance(raw, list):
                raise ValueError("expected a JSON array of todos")
            return [Todo.from_dict(item) for item in raw]
        except ValueError as exc:
            raise RepositoryError(f"Erreur lors de la lecture du fichier JSON: {exc}") from exc

    def _save(self, todos: list[Todo]) -> None:
        text = json.dumps([todo.to_dict() for todo in todos], indent=2, ensure_ascii=False)
        try:
            self.path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise RepositoryError(f"Erreur lors de l'écriture dans le fichier: {exc}") from exc

    @staticmethod
    def _not_found(todo_id: int) -> TodoNotFoundError:
        return TodoNotFoundError(f"Todo avec l'ID {todo_id} non trouvé")

    @staticmethod
    def _position(todos: list[Todo], todo_id: int) -> int | None:
        return next((index for index, item in enumerate(todos) if item.id == todo_id), None)

    def create(self, todo: Todo) -> Todo:
        todos = self._load()
        todos.append(todo)
        self._save(todos)
        return todo

    def update(self, todo: Todo) -> Todo:
        todos = self._load()
        index = self._position(todos, todo.id)
        if index is None:
            raise self._not_found(todo.id)
        todos[index] = todo
        self._save(todos)
        return todo

    def delete(self, todo_id: int) -> None:
        todos = self._load()
        index = self._position(todos, todo_id)
        if index is None:
            raise self._not_found(todo_id)
        del todos[index]
        self._save(todos)

    def find_all(self) -> list[Todo]:
        return self._load()

    def find_by_id(self, todo_id: int) -> Todo:
        found = next((todo for todo in self._load() if todo.id == todo_id), None)
        if found is None:
            raise self._not_found(todo_id)
        return found