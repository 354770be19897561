"""Health check endpoints."""
from fastapi import APIRouter, Request
from typing import Dict, Any

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check(request: Request) -> Dict[str, Any]:
    """
    Simple health check for load balancer.

    Also reports whether a sitemap document has been generated yet.
    """
    generator = request.app.state.sitemap_generator
    return {"status": "ok", "sitemap": generator.document is not None}
