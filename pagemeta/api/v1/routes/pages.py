"""Server-rendered pages."""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from pagemeta.middleware.meta import get_meta
from pagemeta.services.metadata.builder import MetaBuilder

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def home_page(request: Request, meta: MetaBuilder = Depends(get_meta)):
    """Home page with the site's default head metadata."""
    meta.og("type", "website", "og:type")
    return request.app.state.renderer.render(request, "index.html")
