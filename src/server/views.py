"""HTML rendering for the todo list page."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from src.todo import RenderError, TodoEntry

TEMPLATES_DIR = Path(__file__).parent / "templates"
TEMPLATES = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_index(
    entries: Sequence[TodoEntry],
    templates: Optional[Jinja2Templates] = None,
) -> str:
    """Render the list page with one delete form per entry."""
    templates = templates or TEMPLATES
    try:
        return templates.get_template("index.html").render(entries=entries)
    except TemplateError as exc:
        raise RenderError(f"Failed to render index.html: {exc}") from exc
