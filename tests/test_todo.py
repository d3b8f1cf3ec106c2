from datetime import datetime, timezone

import pytest

from hexatodo.todo import Todo


def _fixed_todo(**changes):
    moment = datetime.fromtimestamp(1700000000, timezone.utc)
    values = dict(
        id=3,
        title="Courses",
        completed=False,
        description="Lait et pain",
        created_at=moment,
        updated_at=moment,
    )
    values.update(changes)
    return Todo(**values)


def test_new_is_open_with_given_text():
    todo = Todo.new("Titre", "Une description")
    assert todo.title == "Titre"
    assert todo.description == "Une description"
    assert todo.completed is False
    assert 0 <= todo.id < 2**64
    assert todo.created_at.tzinfo is not None
    assert todo.created_at <= datetime.now(timezone.utc)


def test_new_ids_differ():
    ids = {Todo.new("a", "b").id for _ in range(20)}
    assert len(ids) > 1


def test_str_open_and_done():
    assert str(_fixed_todo(title="Courses")) == "NOK - Courses"
    assert str(_fixed_todo(title="Courses", completed=True)) == "OK - Courses"


def test_to_dict_uses_whole_seconds():
    data = _fixed_todo().to_dict()
    assert data["created_at"] == 1700000000
    assert data["updated_at"] == 1700000000
    assert list(data) == ["id", "title", "completed", "description", "created_at", "updated_at"]


def test_round_trip():
    todo = _fixed_todo(completed=True)
    assert Todo.from_dict(todo.to_dict()) == todo


def test_round_trip_drops_fractions():
    moment = datetime.fromtimestamp(1700000000.75, timezone.utc)
    todo = _fixed_todo(created_at=moment, updated_at=moment)
    back = Todo.from_dict(todo.to_dict())
    assert back.created_at == datetime.fromtimestamp(1700000000, timezone.utc)


def test_from_dict_ignores_unknown_fields():
    data = _fixed_todo().to_dict()
    data["extra"] = "ignored"
    assert Todo.from_dict(data) == _fixed_todo()


@pytest.mark.parametrize("key", ["id", "title", "completed", "description", "created_at", "updated_at"])
def test_from_dict_missing_field(key):
    data = _fixed_todo().to_dict()
    del data[key]
    with pytest.raises(ValueError, match=key):
        Todo.from_dict(data)


@pytest.mark.parametrize(
    "key, value",
    [
        ("id", -1),
        ("id", 2**64),
        ("id", "1"),
        ("title", 5),
        ("completed", "yes"),
        ("created_at", "now"),
        ("updated_at", 1.5),
    ],
)
def test_from_dict_rejects_bad_values(key, value):
    data = _fixed_todo().to_dict()
    data[key] = value
    with pytest.raises(ValueError):
        Todo.from_dict(data)


def test_from_dict_rejects_non_object():
    with pytest.raises(ValueError):
        Todo.from_dict([1, 2, 3])