import sqlite3

import pytest

from src.todo import ConnectionPool, QueryError, TodoEntry, TodoRepository


@pytest.fixture
def pool(tmp_path):
    pool = ConnectionPool(tmp_path / "todo.db", size=2)
    yield pool
    pool.close()


@pytest.fixture
def repo(pool):
    repo = TodoRepository(pool)
    repo.ensure_schema()
    return repo


def test_empty_list(repo):
    assert repo.list() == []


def test_insert_then_list_round_trip(repo):
    todo_id = repo.insert("buy milk")

    assert repo.list() == [TodoEntry(id=todo_id, text="buy milk")]


def test_ids_are_distinct_and_increasing(repo):
    ids = [repo.insert(f"item {i}") for i in range(5)]

    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)
    assert [entry.id for entry in repo.list()] == ids


def test_text_is_stored_as_is(repo):
    texts = ["", "  padded  ", "牛乳を買う", "<b>bold</b>", "same", "same"]
    for text in texts:
        repo.insert(text)

    assert [entry.text for entry in repo.list()] == texts


def test_delete_removes_only_the_matching_entry(repo):
    first = repo.insert("a")
    second = repo.insert("b")
    third = repo.insert("c")

    assert repo.delete(second) == 1
    assert repo.list() == [TodoEntry(first, "a"), TodoEntry(third, "c")]


def test_delete_is_idempotent(repo):
    keep = repo.insert("keep")
    gone = repo.insert("gone")

    assert repo.delete(gone) == 1
    assert repo.delete(gone) == 0
    assert repo.delete(999) == 0
    assert repo.list() == [TodoEntry(keep, "keep")]


def test_ids_are_not_reused_after_delete(repo):
    first = repo.insert("a")
    repo.delete(first)

    assert repo.insert("b") > first


def test_ensure_schema_is_idempotent(tmp_path):
    db_path = tmp_path / "todo.db"
    pool = ConnectionPool(db_path, size=1)
    repo = TodoRepository(pool)
    repo.ensure_schema()
    todo_id = repo.insert("survives")
    repo.ensure_schema()
    pool.close()

    reopened = ConnectionPool(db_path, size=1)
    try:
        repo = TodoRepository(reopened)
        repo.ensure_schema()
        assert repo.list() == [TodoEntry(todo_id, "survives")]
    finally:
        reopened.close()


def test_query_failure_is_wrapped(pool):
    repo = TodoRepository(pool)  # schema intentionally missing

    with pytest.raises(QueryError) as excinfo:
        repo.list()
    assert isinstance(excinfo.value.__cause__, sqlite3.Error)

    with pytest.raises(QueryError):
        repo.insert("x")
    with pytest.raises(QueryError):
        repo.delete(1)


def test_not_null_constraint_is_a_query_error(repo):
    with pytest.raises(QueryError):
        repo.insert(None)


def test_connection_returned_after_query_error(pool):
    repo = TodoRepository(pool)

    with pytest.raises(QueryError):
        repo.list()
    assert pool.available == pool.size
