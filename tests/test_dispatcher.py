"""Tests for the Tool Dispatcher, end to end against spy gateways."""

import asyncio

import pytest

from core.call_specs import EditPostSpec, PostSelector
from core.dispatcher import ToolDispatcher
from core.models import Post, ResultEnvelope
from gateway.http import GhostAPIError
from tests.conftest import SpyAdmin, SpyContent


def dispatch(dispatcher, name, args=None) -> ResultEnvelope:
    return asyncio.run(dispatcher.dispatch(name, args))


def only_text(envelope: ResultEnvelope) -> str:
    assert len(envelope.content_items) == 1
    assert envelope.content_items[0].kind == "text"
    return envelope.content_items[0].text


class TestUnknownAndInvalid:
    @pytest.mark.parametrize("name", ["publish", "", "CREATE_POST", "create_post "])
    def test_unknown_tool(self, admin, content, name):
        envelope = dispatch(ToolDispatcher(admin, content), name, {})
        assert only_text(envelope) == f"Error: Unknown tool: {name}"
        assert admin.calls == [] and content.calls == []

    @pytest.mark.parametrize("args", [{"content": "<p>C</p>"}, {"title": "T"}, {}])
    def test_create_without_title_or_content_never_calls_ghost(self, admin, content, args):
        envelope = dispatch(ToolDispatcher(admin, content), "create_post", args)
        assert only_text(envelope).startswith("Error: Invalid arguments for create_post")
        assert admin.calls == []

    def test_search_limit_200_rejected(self, admin, content):
        envelope = dispatch(ToolDispatcher(admin, content), "search_posts", {"limit": 200})
        assert envelope.is_error
        assert content.calls == []


class TestCreatePost:
    def test_success_text(self, content):
        admin = SpyAdmin(post=Post(id="1", slug="t", url="https://x/t", status="draft"))
        envelope = dispatch(ToolDispatcher(admin, content), "create_post", {"title": "T", "content": "<p>C</p>"})
        assert only_text(envelope) == (
            "Post created successfully!\n\nID: 1\nSlug: t\nURL: https://x/t\nStatus: draft"
        )
        (call, spec), = admin.calls
        assert call == "add_post"
        assert spec.html == "<p>C</p>"
        assert spec.status == "draft"


class TestUpdatePost:
    def test_partial_update_sends_only_id_and_status(self, content):
        admin = SpyAdmin(post=Post(title="T", status="published", url="https://x/t"))
        envelope = dispatch(
            ToolDispatcher(admin, content), "update_post", {"id": "p1", "status": "published"}
        )
        assert only_text(envelope) == (
            "Post updated successfully!\n\nTitle: T\nStatus: published\nURL: https://x/t"
        )
        (call, spec), = admin.calls
        assert call == "edit_post"
        assert spec == EditPostSpec(id="p1", status="published")
        assert spec.to_payload() == {"id": "p1", "status": "published"}


class TestSearchPosts:
    def test_all_status_has_no_filter(self, admin, content):
        dispatch(ToolDispatcher(admin, content), "search_posts", {"status": "all"})
        (_, spec), = content.calls
        assert spec.filter is None

    def test_draft_status_is_filtered(self, admin, content):
        dispatch(ToolDispatcher(admin, content), "search_posts", {"status": "draft"})
        (_, spec), = content.calls
        assert spec.filter.status == "draft"

    def test_lists_posts(self, admin, content):
        envelope = dispatch(ToolDispatcher(admin, content), "search_posts", {})
        assert only_text(envelope) == (
            "Found 2 posts:\n\n"
            "- Hello (published)\n  ID: a1\n  Slug: hello\n  First post\n\n"
            "- Draft One (draft)\n  ID: a2\n  Slug: draft-one\n  No excerpt"
        )


class TestGetPost:
    def test_renders_full_post(self, admin):
        content = SpyContent(
            post=Post(
                title="Hello",
                status="published",
                published_at="2024-01-02T03:04:05.000Z",
                url="https://x/hello",
                html="<p>Hi</p>",
            )
        )
        envelope = dispatch(ToolDispatcher(admin, content), "get_post", {"id": "hello"})
        assert only_text(envelope) == (
            "# Hello\n\nStatus: published\nPublished: 2024-01-02T03:04:05.000Z\n"
            "URL: https://x/hello\n\n## Content:\n<p>Hi</p>"
        )
        (_, spec), = content.calls
        assert spec.selector == PostSelector(slug="hello")

    def test_unpublished_post(self, admin):
        content = SpyContent(post=Post(title="D", status="draft", url="u", html=""))
        text = only_text(dispatch(ToolDispatcher(admin, content), "get_post", {"id": "d"}))
        assert "Published: Not published" in text


class TestDeletePost:
    def test_confirms_deletion(self, admin, content):
        envelope = dispatch(ToolDispatcher(admin, content), "delete_post", {"id": "9"})
        assert only_text(envelope) == "Post 9 deleted successfully."
        assert admin.calls == [("delete_post", "9")]

    def test_not_found_becomes_error_text(self, content):
        admin = SpyAdmin(error=GhostAPIError("Post not found.", status_code=404, error_type="NotFoundError"))
        envelope = dispatch(ToolDispatcher(admin, content), "delete_post", {"id": "9"})
        assert only_text(envelope) == "Error: Post not found."


class TestListTags:
    def test_lists_tags_with_counts(self, admin, content):
        envelope = dispatch(ToolDispatcher(admin, content), "list_tags", {})
        assert only_text(envelope) == (
            "Tags (2):\n\n- News (news) - 3 posts\n- Empty (empty) - 0 posts"
        )
        (_, spec), = content.calls
        assert spec.limit == 20

    @pytest.mark.parametrize("limit", [0, 101])
    def test_out_of_range_limit_never_calls_ghost(self, admin, content, limit):
        envelope = dispatch(ToolDispatcher(admin, content), "list_tags", {"limit": limit})
        assert only_text(envelope).startswith("Error: Invalid arguments for list_tags: limit: ")
        assert content.calls == []


class TestAnalytics:
    @pytest.mark.parametrize("days", [1, 30, 365])
    def test_never_calls_ghost(self, admin, content, days):
        envelope = dispatch(ToolDispatcher(admin, content), "get_analytics", {"days": days})
        assert only_text(envelope).startswith(f"Analytics for last {days} days:\n\n")
        assert admin.calls == [] and content.calls == []

    def test_zero_days_rejected(self, admin, content):
        assert dispatch(ToolDispatcher(admin, content), "get_analytics", {"days": 0}).is_error


class TestFaultAbsorption:
    def test_exception_without_message_uses_fallback(self, content):
        admin = SpyAdmin(error=RuntimeError())
        envelope = dispatch(ToolDispatcher(admin, content), "create_post", {"title": "T", "content": "C"})
        assert only_text(envelope) == "Error: Unknown error occurred"

    @pytest.mark.parametrize(
        "name, args",
        [
            ("search_posts", {}),
            ("get_post", {"id": "x"}),
            ("list_tags", {}),
        ],
    )
    def test_read_failures_are_absorbed(self, admin, name, args):
        content = SpyContent(error=ConnectionError("connection refused"))
        envelope = dispatch(ToolDispatcher(admin, content), name, args)
        assert only_text(envelope) == "Error: connection refused"
        assert len(content.calls) == 1
