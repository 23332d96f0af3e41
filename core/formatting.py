# =============================================================================
# core/formatting.py  —  Result Formatter (entity -> human-readable text)
# =============================================================================
#
# One fixed template per tool.  Clients (and tests) match on this text, so
# the wording, blank lines and bullet layout are part of the contract.
# =============================================================================

from typing import Optional

from core.models import Post, Tag

UNKNOWN_ERROR = "Unknown error occurred"


def _s(value: Optional[object]) -> str:
    return "" if value is None else str(value)


def format_created_post(post: Post) -> str:
    return (
        "Post created successfully!\n\n"
        f"ID: {_s(post.id)}\n"
        f"Slug: {_s(post.slug)}\n"
        f"URL: {_s(post.url)}\n"
        f"Status: {_s(post.status)}"
    )


def format_updated_post(post: Post) -> str:
    return (
        "Post updated successfully!\n\n"
        f"Title: {_s(post.title)}\n"
        f"Status: {_s(post.status)}\n"
        f"URL: {_s(post.url)}"
    )


def format_post_list(posts: list[Post]) -> str:
    items = "\n\n".join(
        f"- {_s(post.title)} ({_s(post.status)})\n"
        f"  ID: {_s(post.id)}\n"
        f"  Slug: {_s(post.slug)}\n"
        f"  {post.excerpt or 'No excerpt'}"
        for post in posts
    )
    return f"Found {len(posts)} posts:\n\n{items}"


def format_post(post: Post) -> str:
    return (
        f"# {_s(post.title)}\n\n"
        f"Status: {_s(post.status)}\n"
        f"Published: {post.published_at or 'Not published'}\n"
        f"URL: {_s(post.url)}\n\n"
        f"## Content:\n{_s(post.html)}"
    )


def format_deleted_post(post_id: str) -> str:
    return f"Post {post_id} deleted successfully."


def format_tag_list(tags: list[Tag]) -> str:
    items = "\n".join(
        f"- {_s(tag.name)} ({_s(tag.slug)}) - {tag.post_count or 0} posts" for tag in tags
    )
    return f"Tags ({len(tags)}):\n\n{items}"


def format_analytics(days: int) -> str:
    # Ghost has no analytics endpoint; this is answered without calling it.
    return (
        f"Analytics for last {days} days:\n\n"
        "Note: Ghost doesn't provide analytics via API. Consider integrating:\n"
        "- Plausible Analytics\n"
        "- Fathom Analytics\n"
        "- Google Analytics\n\n"
        "For now, you can check analytics in your Ghost Admin dashboard."
    )


def format_resource_text(post: Post) -> str:
    return f"# {_s(post.title)}\n\n{_s(post.html)}"


def error_message(exc: BaseException) -> str:
    return str(exc) or UNKNOWN_ERROR
