"""Route registration helpers."""

from .todo import register_todo_routes

__all__ = ["register_todo_routes"]
