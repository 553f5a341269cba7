"""Pydantic schemas for the form-encoded request bodies."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator

U32_MAX = 2**32 - 1
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


class AddTodoForm(BaseModel):
    """Form body for adding a todo."""

    text: str = Field(..., description="Todo text, stored as-is (may be empty)")


class DeleteTodoForm(BaseModel):
    """Form body for deleting a todo."""

    id: int = Field(..., ge=0, le=U32_MAX, description="Unsigned id of the todo")

    @field_validator("id", mode="before")
    @classmethod
    def _digits_only(cls, value: Any) -> Any:
        # "1_0", "1.0" や前後の空白は整数に寄せず拒否する
        if isinstance(value, str) and not _UNSIGNED_RE.fullmatch(value):
            raise ValueError("id must be an unsigned decimal integer")
        return value
