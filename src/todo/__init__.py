"""Todo storage shared by the web server and the maintenance CLI."""

from .exceptions import PoolError, QueryError, RenderError, TodoAppError
from .models import TodoEntry
from .pool import ConnectionPool
from .repository import TodoRepository

__all__ = [
    "ConnectionPool",
    "PoolError",
    "QueryError",
    "RenderError",
    "TodoAppError",
    "TodoEntry",
    "TodoRepository",
]
