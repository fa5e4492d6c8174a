"""Tests for the user-enumeration guards."""

import pytest

from wp_essentials.context import RequestContext
from wp_essentials.exceptions import EssentialsError, RequestTerminated
from wp_essentials.filters import block_author_query, block_author_redirect


class TestBlockAuthorQuery:
    @pytest.mark.parametrize(
        "query_string",
        [
            "author=1",
            "author=0",
            "author=007",
            "AUTHOR=12",
            "p=5&Author=3",
            "author=42&feed=rss",
            "xauthor=9",
        ],
    )
    def test_terminates_author_queries(self, query_string):
        context = RequestContext(query_string=query_string, request_uri=f"/?{query_string}")
        with pytest.raises(RequestTerminated):
            block_author_query(context=context)

    @pytest.mark.parametrize(
        "query_string",
        ["", "author=", "author=admin", "s=author", "author_name=admin", "p=1"],
    )
    def test_other_queries_proceed(self, query_string):
        context = RequestContext(query_string=query_string)
        assert block_author_query(context=context) is None

    def test_admin_context_is_exempt(self):
        context = RequestContext(query_string="author=1", is_admin=True)
        assert block_author_query(context=context) is None

    def test_termination_is_an_essentials_error(self):
        with pytest.raises(EssentialsError):
            block_author_query(context=RequestContext(query_string="author=1"))


class TestBlockAuthorRedirect:
    @pytest.mark.parametrize(
        "requested_url",
        [
            "https://example.com/?author=1",
            "https://example.com/?author=1/",
            "https://example.com/?author=1///",
            "https://example.com/?AUTHOR=0",
            "/?author=0012",
        ],
    )
    def test_terminates_author_permalink_probe(self, requested_url):
        with pytest.raises(RequestTerminated):
            block_author_redirect("https://example.com/author/admin/", requested_url)

    @pytest.mark.parametrize(
        "requested_url",
        [
            "https://example.com/?p=1",
            "https://example.com/author/admin/",
            "https://example.com/?author=admin",
            "https://example.com/?s=author=1",
            "",
        ],
    )
    def test_returns_redirect_unchanged(self, requested_url):
        redirect = "https://example.com/canonical/"
        assert block_author_redirect(redirect, requested_url) is redirect

    def test_redirect_value_may_be_false(self):
        assert block_author_redirect(False, "/?p=1") is False  # type: ignore[arg-type]
