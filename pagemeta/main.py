import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pagemeta.api.v1.routes.health import router as health_router
from pagemeta.api.v1.routes.pages import router as pages_router
from pagemeta.api.v1.routes.sitemap import router as sitemap_router
from pagemeta.config import Settings, get_settings
from pagemeta.exceptions import ValidationError
from pagemeta.hooks import HookRegistry, hooks
from pagemeta.middleware.meta import MetaMiddleware
from pagemeta.rendering import VIEW_COMPILE_HOOK, PageRenderer
from pagemeta.services.metadata.builder import Translate
from pagemeta.services.metadata.renderer import append_to_head
from pagemeta.services.sitemap.generator import SitemapGenerator
from pagemeta.services.sitemap.scheduler import SitemapScheduler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    logger.info("Starting up application...")

    scheduler = app.state.sitemap_scheduler
    if scheduler is not None:
        scheduler.start()

    yield

    # Shutdown
    logger.info("Shutting down application...")
    if scheduler is not None:
        await scheduler.stop()


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Report malformed metadata input from route code as 422."""
    logger.warning(f"Rejected metadata input on {request.url.path}: {exc}")
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[HookRegistry] = None,
    translate: Optional[Translate] = None,
) -> FastAPI:
    """Create FastAPI application and include routers.

    Args:
        settings: Settings to use instead of the environment-loaded ones
        registry: Hook registry for extensions; a fresh one if omitted
        translate: Translation callable applied to titles and keywords
    """
    settings = settings or get_settings()
    registry = registry if registry is not None else HookRegistry()

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title=settings.TITLE,
        version="0.1.0",
        lifespan=lifespan
    )

    registry.pre(VIEW_COMPILE_HOOK, append_to_head)

    generator = SitemapGenerator(settings=settings, registry=registry)
    app.state.settings = settings
    app.state.hooks = registry
    app.state.renderer = PageRenderer(registry)
    app.state.sitemap_generator = generator
    app.state.sitemap_scheduler = (
        SitemapScheduler(generator, settings.SITEMAP_INTERVAL_SECONDS)
        if settings.SITEMAP_ENABLED
        else None
    )

    app.add_middleware(MetaMiddleware, settings=settings, translate=translate)
    app.add_exception_handler(ValidationError, validation_error_handler)

    app.include_router(pages_router)
    app.include_router(sitemap_router)
    app.include_router(health_router)
    return app


app = create_app(registry=hooks)
