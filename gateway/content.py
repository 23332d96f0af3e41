# =============================================================================
# gateway/content.py  —  Ghost Content API client (the public read surface)
# =============================================================================
#
# Every request is authenticated by the content key in the query string.
# Structured search filters are rendered here as Ghost NQL, e.g.
#   status:draft+tag:[news,tech]+title:~'ghost'
# =============================================================================

from typing import Any, Optional
from urllib.parse import quote

import httpx

from core.call_specs import BrowsePostsSpec, BrowseTagsSpec, ReadPostSpec
from core.models import Post, PostFilter, Tag
from gateway.http import GhostAPIError, send

CONTENT_API_PATH = "/ghost/api/content"


def render_filter(post_filter: Optional[PostFilter]) -> Optional[str]:
    """Render a structured filter as Ghost NQL, e.g. ``status:draft+tag:[news,tech]``."""
    if post_filter is None or post_filter.is_empty():
        return None
    clauses = []
    if post_filter.status:
        clauses.append(f"status:{post_filter.status}")
    if post_filter.tags:
        clauses.append(f"tag:[{','.join(post_filter.tags)}]")
    if post_filter.query:
        escaped = post_filter.query.replace("\\", "\\\\").replace("'", "\\'")
        clauses.append(f"title:~'{escaped}'")
    return "+".join(clauses)


class GhostContentClient:
    """Read-only access to posts and tags, authenticated by the content key."""

    def __init__(self, client: httpx.AsyncClient, content_api_key: str):
        self._client = client
        self._key = content_api_key

    async def browse_posts(self, spec: BrowsePostsSpec) -> list[Post]:
        params: dict[str, Any] = {"key": self._key, "limit": spec.limit}
        nql = render_filter(spec.filter)
        if nql:
            params["filter"] = nql
        if spec.fields:
            params["fields"] = ",".join(spec.fields)
        body = await send(self._client, "GET", f"{CONTENT_API_PATH}/posts/", params=params)
        return [Post.from_api(item) for item in body.get("posts", [])]

    async def read_post(self, spec: ReadPostSpec) -> Post:
        selector = spec.selector
        if selector.id:
            path = f"{CONTENT_API_PATH}/posts/{quote(selector.id, safe='')}/"
        elif selector.slug:
            path = f"{CONTENT_API_PATH}/posts/slug/{quote(selector.slug, safe='')}/"
        else:
            raise GhostAPIError("A post id or slug is required")

        params = {"key": self._key, "formats": ",".join(spec.formats)}
        body = await send(self._client, "GET", path, params=params)
        posts = body.get("posts") or []
        if not posts:
            raise GhostAPIError("Post not found", status_code=404, error_type="NotFoundError")
        return Post.from_api(posts[0])

    async def browse_tags(self, spec: BrowseTagsSpec) -> list[Tag]:
        params = {"key": self._key, "limit": spec.limit, "include": "count.posts"}
        body = await send(self._client, "GET", f"{CONTENT_API_PATH}/tags/", params=params)
        return [Tag.from_api(item) for item in body.get("tags", [])]
