from __future__ import annotations

import logging
import sqlite3

from .exceptions import QueryError
from .models import TodoEntry
from .pool import ConnectionPool

logger = logging.getLogger(__name__)


class TodoRepository:
    """SQLiteベースのTODO管理。コネクションはプールから借りる。"""

    def __init__(self, pool: ConnectionPool):
        self.pool = pool

    def ensure_schema(self) -> None:
        """todoテーブルを作成する（存在すれば何もしない）"""
        with self.pool.connection() as conn:
            try:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS todo (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        text TEXT NOT NULL
                    )
                    """
                )
            except sqlite3.Error as exc:
                raise QueryError(f"Failed to create table `todo`: {exc}") from exc

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> TodoEntry:
        return TodoEntry(id=row["id"], text=row["text"])

    def list(self) -> list[TodoEntry]:
        with self.pool.connection() as conn:
            try:
                rows = conn.execute("SELECT id, text FROM todo ORDER BY id").fetchall()
            except sqlite3.Error as exc:
                raise QueryError(f"Failed to list todos: {exc}") from exc
        return [self._row_to_entry(row) for row in rows]

    def insert(self, text: str) -> int:
        with self.pool.connection() as conn:
            try:
                cursor = conn.execute("INSERT INTO todo (text) VALUES (?)", (text,))
            except sqlite3.Error as exc:
                raise QueryError(f"Failed to insert todo: {exc}") from exc
        todo_id = cursor.lastrowid
        logger.debug("Inserted todo %d", todo_id)
        return todo_id

    def delete(self, todo_id: int) -> int:
        """削除件数を返す。存在しないIDなら0（エラーではない）"""
        with self.pool.connection() as conn:
            try:
                cursor = conn.execute("DELETE FROM todo WHERE id = ?", (todo_id,))
            except sqlite3.Error as exc:
                raise QueryError(f"Failed to delete todo {todo_id}: {exc}") from exc
        logger.debug("Deleted todo %d (rows=%d)", todo_id, cursor.rowcount)
        return cursor.rowcount
