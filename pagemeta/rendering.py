"""Template rendering with head metadata injection."""
from pathlib import Path
from typing import Any, Dict, Optional, Union

from fastapi import Request
from fastapi.templating import Jinja2Templates

from pagemeta.hooks import HookRegistry

VIEW_COMPILE_HOOK = "view.compile"

TEMPLATES_DIR = Path(__file__).parent / "templates"


class PageRenderer:
    """Renders Jinja2 pages, firing ``view.compile`` pre-hooks first.

    Pre-hooks receive the request's tag table and the render state
    ``{"page": {"head": str, "title": str}}``; whatever they leave in
    ``page`` is handed to the template as ``page``.
    """

    def __init__(self, registry: HookRegistry, directory: Union[str, Path] = TEMPLATES_DIR):
        self.hooks = registry
        self.templates = Jinja2Templates(directory=str(directory))

    def render(self, request: Request, name: str, context: Optional[Dict[str, Any]] = None):
        builder = request.state.meta
        render = {"page": {"head": "", "title": builder.page_title}}

        self.hooks.run_pre(VIEW_COMPILE_HOOK, builder.table, render)

        page_context = dict(context or {})
        page_context["page"] = render["page"]
        return self.templates.TemplateResponse(request=request, name=name, context=page_context)
