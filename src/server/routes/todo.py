"""Todo endpoints."""

from __future__ import annotations

import asyncio
import logging

from fastapi import Depends, FastAPI
from fastapi.responses import HTMLResponse, RedirectResponse

from src.todo import TodoRepository

from ..dependencies import get_add_form, get_delete_form, get_todo_repository
from ..schemas import AddTodoForm, DeleteTodoForm
from ..views import render_index

logger = logging.getLogger(__name__)


def _redirect_to_index() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


def register_todo_routes(app: FastAPI) -> None:
    """Register the list/add/delete routes."""

    @app.get("/", response_class=HTMLResponse)
    async def index(repo: TodoRepository = Depends(get_todo_repository)) -> HTMLResponse:
        """Render every todo entry."""
        entries = await asyncio.to_thread(repo.list)
        body = render_index(entries)
        return HTMLResponse(content=body, status_code=200)

    @app.post("/add")
    async def add_todo(
        form: AddTodoForm = Depends(get_add_form),
        repo: TodoRepository = Depends(get_todo_repository),
    ) -> RedirectResponse:
        """Insert a todo and go back to the list."""
        todo_id = await asyncio.to_thread(repo.insert, form.text)
        logger.info("Added todo %d", todo_id)
        return _redirect_to_index()

    @app.post("/delete")
    async def delete_todo(
        form: DeleteTodoForm = Depends(get_delete_form),
        repo: TodoRepository = Depends(get_todo_repository),
    ) -> RedirectResponse:
        """Delete a todo by id; unknown ids are ignored."""
        deleted = await asyncio.to_thread(repo.delete, form.id)
        logger.info("Deleted todo %d (rows=%d)", form.id, deleted)
        return _redirect_to_index()
