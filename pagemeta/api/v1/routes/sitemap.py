"""Cached XML sitemap feed."""
import logging
from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sitemap"])


@router.get("/sitemap.xml")
async def get_sitemap(request: Request):
    """Serve the most recently generated sitemap.

    Until the first generation finishes there is nothing to serve, and the
    request goes down the regular not-found path.
    """
    document = request.app.state.sitemap_generator.document
    if document is None:
        logger.debug("Sitemap requested before first generation")
        raise HTTPException(status_code=404, detail="Not Found")

    return Response(
        content=document.xml,
        media_type="application/xml",
        headers={"Cache-Control": f"public, max-age={document.max_age}"}
    )
