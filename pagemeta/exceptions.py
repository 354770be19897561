"""Exceptions raised by the metadata builder and the sitemap generator."""


class PagemetaError(Exception):
    """Base class for pagemeta errors."""


class ValidationError(PagemetaError, ValueError):
    """Malformed tag or sitemap input."""


class GenerationError(PagemetaError):
    """Sitemap generation failed or timed out.

    The previously cached document stays in place when this is raised.
    """
