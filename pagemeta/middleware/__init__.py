"""Request middleware."""
from pagemeta.middleware.meta import MetaMiddleware, get_meta, negotiate_language

__all__ = ["MetaMiddleware", "get_meta", "negotiate_language"]
