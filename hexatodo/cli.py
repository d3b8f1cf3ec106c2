"""Interactive text menu for managing todos."""

from __future__ import annotations

import argparse
import re
import sys
from datetime import datetime
from typing import TextIO

from hexatodo.json_repository import JsonRepository
from hexatodo.ports import RepositoryError
from hexatodo.service import TodoService
from hexatodo.todo import Todo

DEFAULT_DATA_PATH = "data/todos.json"

_MENU = (
    "\n === Gestionnaire de tâches === ",
    "Vous pouvez effectuer plusieurs actions :",
    "   1. Créer une nouvelle tâche",
    "   2. Mettre à jour une tâche",
    "   3. Supprimer une tâche",
    "   4. Afficher toutes les tâches",
    "   5. Rechercher une tâche par ID",
    "   6. Quitter",
)

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_unsigned(text: str, limit: int) -> int | None:
    text = text.strip()
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= limit else None


def _format_moment(moment: datetime) -> str:
    text = moment.strftime("%Y-%m-%d %H:%M:%S")
    if moment.microsecond:
        if moment.microsecond % 1000 == 0:
            text += f".{moment.microsecond // 1000:03d}"
        else:
            text += f".{moment.microsecond:06d}"
    return text + " UTC"


def create_todo(stdin: TextIO | None = None, stdout: TextIO | None = None) -> Todo:
    """Ask for a title and a description and return a new todo."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    print("Entrez le titre de la tâche :", file=stdout)
    title = stdin.readline()
    print("Entrez la description de la tâche :", file=stdout)
    description = stdin.readline()
    return Todo.new(title.strip(), description.strip())


def update_todo(todo: Todo, stdin: TextIO | None = None, stdout: TextIO | None = None) -> Todo:
    """Return a copy of the todo with a title and description read as entered."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    print(f"Modifier le titre {todo.title}", file=stdout)
    title = stdin.readline()
    description = stdin.readline()
    return Todo(
        id=todo.id,
        title=title,
        completed=todo.completed,
        description=description,
        created_at=todo.created_at,
        updated_at=todo.updated_at,
    )


def _ask_id(stdin: TextIO, stdout: TextIO) -> int:
    print("Entrez un id :", file=stdout)
    todo_id = _parse_unsigned(stdin.readline(), 2**64 - 1)
    if todo_id is None:
        raise ValueError("Id introuvable")
    return todo_id


def run(service: TodoService, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Run the menu loop until the user quits or input ends.

    Raises ValueError when an entered id is not a number.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    def say(*parts: object) -> None:
        print(*parts, file=stdout)

    for line in _MENU:
        say(line)

    while True:
        say("\n Choisissez une action : ")
        line = stdin.readline()
        if not line:
            break
        action = _parse_unsigned(line, 255)
        if action is None:
            say("Entrée invalide")
            continue
        if not 1 <= action <= 6:
            say("\n Doit être compris entre 1 et 6 !")
            continue

        if action == 1:
            new_todo = create_todo(stdin, stdout)
            try:
                service.create(new_todo)
            except RepositoryError as exc:
                say(exc)
            else:
                say("Todo ajoutée !")
        elif action == 2:
            todo_id = _ask_id(stdin, stdout)
            try:
                todo = service.find_by_id(todo_id)
            except RepositoryError:
                say("Todo introuvable")
                break
            service.update(update_todo(todo, stdin, stdout))
            say("Todo mise à jour !")
        elif action == 3:
            todo_id = _ask_id(stdin, stdout)
            try:
                todo = service.find_by_id(todo_id)
            except RepositoryError:
                say("Identifiant inconnu !")
            else:
                service.delete(todo.id)
                say(f"Todo supprimé {todo.title}")
        elif action == 4:
            try:
                todos = service.find_all()
            except RepositoryError as exc:
                say(exc)
            else:
                for todo in todos:
                    state = "OK" if todo.completed else "NOK"
                    say(f"{state} - {todo.id}: {todo.title} ")
        elif action == 5:
            todo_id = _ask_id(stdin, stdout)
            try:
                todo = service.find_by_id(todo_id)
            except RepositoryError as exc:
                say(exc)
            else:
                status = "OK " if todo.completed else "NOK"
                say(f"{status} - {todo.title}")
                say(f"Description : \n {todo.description}")
                say(f"Dernière MàJ : {_format_moment(todo.updated_at)}")
        else:
            break

    say("Au revoir !")


def main(argv: list[str] | None = None) -> int:
    """Start the menu over a JSON file of todos."""
    parser = argparse.ArgumentParser(prog="hexatodo", description="Gestionnaire de tâches.")
    parser.add_argument(
        "--data",
        default=DEFAULT_DATA_PATH,
        help=f"JSON file holding the todos (default: {DEFAULT_DATA_PATH})",
    )
    args = parser.parse_args(argv)
    service = TodoService(JsonRepository(args.data))
    try:
        run(service)
    except (ValueError, RepositoryError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())