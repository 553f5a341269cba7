"""Dependency helpers shared across FastAPI routes."""

from __future__ import annotations

from typing import Any, Dict, Type, TypeVar
from urllib.parse import parse_qsl

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from src.todo import TodoRepository

from .schemas import AddTodoForm, DeleteTodoForm

FormModel = TypeVar("FormModel", bound=BaseModel)

URLENCODED = "application/x-www-form-urlencoded"


def get_todo_repository(request: Request) -> TodoRepository:
    """Return the repository created by the application lifespan."""
    return request.app.state.repository


def _form_error(loc: str, msg: str) -> RequestValidationError:
    return RequestValidationError([{"type": "value_error", "loc": ("body", loc), "msg": msg}])


async def _read_form(request: Request) -> Dict[str, Any]:
    """Read the form body, rejecting invalid UTF-8 and repeated fields."""
    if request.headers.get("content-type", "").startswith(URLENCODED):
        body = await request.body()
        try:
            parse_qsl(
                body.decode("latin-1"),
                keep_blank_values=True,
                encoding="utf-8",
                errors="strict",
            )
        except UnicodeDecodeError as exc:
            raise _form_error("body", "form body is not valid UTF-8") from exc

    form = await request.form()
    data: Dict[str, Any] = {}
    for key in form.keys():
        values = form.getlist(key)
        if len(values) > 1:
            raise _form_error(key, "field given more than once")
        data[key] = values[0]
    return data


async def _parse_form(request: Request, model: Type[FormModel]) -> FormModel:
    data = await _read_form(request)
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc


async def get_add_form(request: Request) -> AddTodoForm:
    """Parse the ``/add`` form body. Empty text is accepted as-is."""
    return await _parse_form(request, AddTodoForm)


async def get_delete_form(request: Request) -> DeleteTodoForm:
    """Parse the ``/delete`` form body."""
    return await _parse_form(request, DeleteTodoForm)
