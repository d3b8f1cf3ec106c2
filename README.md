# hexatodo

A small task manager. Tasks (`hexatodo.todo.Todo`) are handled by a
`hexatodo.service.TodoService` that works against any `hexatodo.ports.TodoRepository`.
There are two repositories to choose from:

- `hexatodo.json_repository.JsonRepository` keeps tasks in a JSON file.
- `hexatodo.memory_repository.InMemoryTodoRepository` keeps them in memory.

The package needs only the standard library.

## Installation

```
pip install .
```

## Interactive use

```
hexatodo
hexatodo --data path/to/todos.json
```

This opens a menu in French. By default, tasks are stored in `data/todos.json`,
relative to the current directory. Use `--data` to choose another file. The file
does not need to exist yet, but the directory that holds it does. Otherwise, saving
fails and the menu prints the error.

The menu choices are:

1. Create a task. You are asked for a title and a description. Leading and trailing
   spaces are removed from both.
2. Update a task. You are asked for an id, then for a new title and a new
   description, one line each. These are stored exactly as you type them. If the id
   is unknown, the menu prints `Todo introuvable` and closes.
3. Delete a task by id.
4. List all tasks, one per line, as `OK - id: title` or `NOK - id: title`.
5. Show one task by id, with its description and the time it was last updated (UTC).
6. Quit.

A choice that is not a number prints `Entrée invalide`. A number outside 1–6 prints a
reminder of the allowed range. The menu also closes when input ends.

If you enter an id that is not a number, the command prints `Id introuvable` and
exits with status 1. It does the same if a file error is not handled inside the
menu.

The menu functions can also be driven from code. `hexatodo.cli.run(service, stdin,
stdout)` runs the loop over any text streams. `create_todo(stdin, stdout)` and
`update_todo(todo, stdin, stdout)` handle the two prompts.

## Use as a library

```python
from hexatodo.todo import Todo
from hexatodo.json_repository import JsonRepository
from hexatodo.service import TodoService
from hexatodo.ports import TodoNotFoundError

service = TodoService(JsonRepository("todos.json"))
todo = service.create(Todo.new("Groceries", "Milk, bread"))
print(service.find_by_id(todo.id))   # NOK - Groceries

try:
    service.delete(12345)
except TodoNotFoundError as exc:
    print(exc)
```

`TodoService` offers `create`, `update`, `delete`, `find_all` and `find_by_id`. Each
one passes straight through to the repository.

`Todo` is a dataclass with these fields: `id`, `title`, `completed`, `description`,
`created_at` and `updated_at`.

- `Todo.new(title, description)` gives the task a random 64-bit id and sets both
  timestamps to the current UTC time.
- `Todo.to_dict()` and `Todo.from_dict(data)` convert to and from the JSON form, in
  which timestamps are whole Unix seconds. `from_dict` raises `ValueError` for missing
  or badly typed fields.
- `str(todo)` gives `OK - title` or `NOK - title`.

### Errors

When a repository cannot find a task, it raises `TodoNotFoundError`. This is a
subclass of both `RepositoryError` and `LookupError`.

`JsonRepository` raises `RepositoryError` when the file holds invalid JSON or invalid
todos, or cannot be written. A file that is missing, empty or unreadable counts as an
empty list.

### In-memory repository

`InMemoryTodoRepository.create` replaces the task's id with the number of tasks it
already holds, plus one. The first task gets id 1. This makes it handy in tests. It
hands out copies, so changing a returned task does not change what is stored.

## What it does not do

- The menu cannot mark a task as done. To do that, set `completed` on a `Todo` and
  pass it to `TodoService.update` in code.
- The only storage is the JSON file or memory. There is no database back end.

## Tests

```
pip install .[test]
pytest
```