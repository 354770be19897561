"""Tests for the metadata middleware and head injection."""
import pytest
from fastapi import Depends, Request
from fastapi.testclient import TestClient

from pagemeta.main import create_app
from pagemeta.middleware.meta import get_meta, negotiate_language
from pagemeta.services.metadata.builder import MetaBuilder


def _add_probe_routes(app):
    """Routes that expose or extend the request's builder."""

    @app.get("/probe/{path:path}")
    async def probe(request: Request, meta: MetaBuilder = Depends(get_meta)):
        return meta.table.to_dict()

    @app.get("/article")
    async def article_page(request: Request, meta: MetaBuilder = Depends(get_meta)):
        meta.title("Release notes").description("word " * 40).article("author", "Jane")
        return request.app.state.renderer.render(request, "index.html")

    @app.get("/broken")
    async def broken_page(meta: MetaBuilder = Depends(get_meta)):
        meta.description(None)
        return {}


@pytest.fixture
def probe_client(test_app):
    _add_probe_routes(test_app)
    return TestClient(test_app)


@pytest.mark.unit
class TestNegotiateLanguage:
    """Test Accept-Language negotiation."""

    def test_missing_header_uses_default(self):
        assert negotiate_language(None, "en") == "en"
        assert negotiate_language("", "en") == "en"

    def test_first_language_wins_on_equal_quality(self):
        assert negotiate_language("fr-FR, de", "en") == "fr-FR"

    def test_highest_quality_wins(self):
        assert negotiate_language("de;q=0.5, nl;q=0.9", "en") == "nl"

    def test_wildcard_uses_default(self):
        assert negotiate_language("*", "en") == "en"

    def test_invalid_quality_is_ignored(self):
        assert negotiate_language("de;q=abc, it;q=0.2", "en") == "it"

    def test_zero_quality_is_not_acceptable(self):
        assert negotiate_language("fr;q=0", "en") == "en"
        assert negotiate_language("fr;q=0, de;q=0.1", "en") == "de"
        assert negotiate_language("fr;q=0.0, *", "en") == "en"


@pytest.mark.integration
class TestDefaultPopulation:
    """Test the records every request starts with."""

    def test_fresh_request_has_default_records(self, probe_client):
        table = probe_client.get("/probe/docs/intro").json()
        meta = table["meta"]

        assert meta["og:url"]["content"] == "https://example.com/probe/docs/intro"
        assert meta["og:locale"]["content"] == "en"
        assert meta["twitter:summary"] == {
            "id": "twitter:summary",
            "name": "twitter:card",
            "content": "summary",
        }
        assert meta["twitter:site"]["content"] == "Example Site"
        assert meta["og:title"]["content"] == "Example Site"
        assert meta["title"]["itemprop"] == "name"

    def test_query_string_is_part_of_canonical_url(self, probe_client):
        table = probe_client.get("/probe/search?q=tea").json()
        assert table["meta"]["og:url"]["content"] == "https://example.com/probe/search?q=tea"

    def test_locale_follows_accept_language(self, probe_client):
        table = probe_client.get("/probe/x", headers={"Accept-Language": "de-DE,de;q=0.9"}).json()
        assert table["meta"]["og:locale"]["content"] == "de-DE"

    def test_requests_do_not_share_records(self, probe_client):
        probe_client.get("/article")
        table = probe_client.get("/probe/x").json()
        assert table["meta"]["og:title"]["content"] == "Example Site"
        assert not any(
            record.get("property") == "article:author" for record in table["meta"].values()
        )

    def test_translate_callable_is_applied_to_title(self, test_settings, registry):
        app = create_app(settings=test_settings, registry=registry, translate=str.upper)
        _add_probe_routes(app)
        table = TestClient(app).get("/probe/x").json()
        assert table["meta"]["og:title"]["content"] == "EXAMPLE SITE"
        assert table["meta"]["twitter:site"]["content"] == "Example Site"


@pytest.mark.integration
class TestHeadRendering:
    """Test head markup produced for rendered pages."""

    def test_home_page_head_contains_defaults(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")

        html = response.text
        assert "<title>Example Site</title>" in html
        assert '<meta property="og:url" content="https://example.com/" />' in html
        assert '<meta property="og:type" content="website" />' in html
        assert '<meta name="twitter:card" content="summary" />' in html
        assert 'id="' not in html

    def test_twitter_records_render_before_open_graph(self, client):
        html = client.get("/").text
        assert html.index('name="twitter:site"') < html.index('property="og:url"')

    def test_page_metadata_is_rendered(self, probe_client):
        html = probe_client.get("/article").text

        assert "<title>Release notes</title>" in html
        assert '<meta property="og:title" content="Release notes" />' in html
        assert '<meta property="article:author" content="Jane" />' in html
        assert html.count('property="og:title"') == 1

    def test_invalid_metadata_input_is_rejected(self, probe_client):
        response = probe_client.get("/broken")
        assert response.status_code == 422
        assert "Description must be a string" in response.json()["detail"]

    def test_extra_view_compile_hooks_run_after_tags(self, test_app, registry):
        registry.pre("view.compile", lambda table, render: render["page"].update(
            head=render["page"]["head"] + '<link rel="canonical" href="https://example.com/" />'
        ))
        html = TestClient(test_app).get("/").text
        assert html.index('property="og:url"') < html.index('rel="canonical"')
