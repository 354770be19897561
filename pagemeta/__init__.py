"""Head metadata middleware and cached sitemap feed for FastAPI sites."""
