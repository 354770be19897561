"""Middleware giving each request its own head metadata builder."""
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from pagemeta.config import Settings, get_settings
from pagemeta.services.metadata.builder import MetaBuilder, Translate


def negotiate_language(accept_language: Optional[str], default: str) -> str:
    """Pick the preferred language from an ``Accept-Language`` header.

    The highest ``q`` value wins; ties keep header order. Tags with
    ``q=0`` (or an unparsable ``q``) are not acceptable and are skipped. A
    missing header, a bare ``*`` or no acceptable tag falls back to
    ``default``.
    """
    if not accept_language:
        return default

    best, best_q = None, -1.0
    for part in accept_language.split(","):
        pieces = [piece.strip() for piece in part.split(";")]
        tag = pieces[0]
        if not tag or tag == "*":
            continue
        q = 1.0
        for param in pieces[1:]:
            if param.startswith("q="):
                try:
                    q = float(param[2:])
                except ValueError:
                    q = 0.0
        if q <= 0:
            continue
        if q > best_q:
            best, best_q = tag, q

    return best or default


def canonical_url(settings: Settings, request: Request) -> str:
    """Page url on the configured domain, query string included."""
    url = f"{settings.site_url}{request.url.path}"
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return url


class MetaMiddleware(BaseHTTPMiddleware):
    """Attach a populated ``MetaBuilder`` to ``request.state.meta``.

    The builder starts with the site title, canonical ``og:url``,
    ``og:locale`` from the negotiated language and the default Twitter card.
    """

    def __init__(self, app: ASGIApp, settings: Optional[Settings] = None, translate: Optional[Translate] = None):
        super().__init__(app)
        self.settings = settings or get_settings()
        self.translate = translate

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        language = negotiate_language(request.headers.get("accept-language"), self.settings.DEFAULT_LOCALE)

        builder = MetaBuilder(
            translate=self.translate,
            description_max_length=self.settings.DESCRIPTION_MAX_LENGTH,
            twitter_card=self.settings.TWITTER_CARD,
        )
        builder.defaults(canonical_url(self.settings, request), language, self.settings.TITLE)

        request.state.language = language
        request.state.meta = builder

        return await call_next(request)


def get_meta(request: Request) -> MetaBuilder:
    """FastAPI dependency returning the request's metadata builder."""
    return request.state.meta
