"""The storage port that repositories implement."""

from __future__ import annotations

from abc import ABC, abstractmethod

from hexatodo.todo import Todo


class RepositoryError(Exception):
    """A repository could not carry out an operation."""


class TodoNotFoundError(RepositoryError, LookupError):
    """No todo has the requested id."""


class TodoRepository(ABC):
    """Where todos are kept."""

    @abstractmethod
    def create(self, todo: Todo) -> Todo:
        """Store a new todo and return it as stored."""

    @abstractmethod
    def update(self, todo: Todo) -> Todo:
        """Replace the todo with the same id."""

    @abstractmethod
    def delete(self, todo_id: int) -> None:
        """Remove the todo with this id."""

    @abstractmethod
    def find_all(self) -> list[Todo]:
        """Return every stored todo in storage order."""

    @abstractmethod
    def find_by_id(self, todo_id: int) -> Todo:
        """Return the todo with this id."""