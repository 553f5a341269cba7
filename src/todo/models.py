from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TodoEntry:
    """永続化済みTodoエントリの表現。idはストレージ側で採番される。"""

    id: int
    text: str
