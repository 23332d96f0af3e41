"""Shared fixtures: recording stand-ins for the two Ghost surfaces."""

import pytest

from core.models import Post, Tag


class SpyAdmin:
    """Records every admin call; returns canned posts or raises a canned error."""

    def __init__(self, post=None, error=None):
        self.calls = []
        self.post = post or Post(id="1", slug="t", title="T", url="https://x/t", status="draft")
        self.error = error

    async def add_post(self, spec):
        self.calls.append(("add_post", spec))
        if self.error:
            raise self.error
        return self.post

    async def edit_post(self, spec):
        self.calls.append(("edit_post", spec))
        if self.error:
            raise self.error
        return self.post

    async def delete_post(self, post_id):
        self.calls.append(("delete_post", post_id))
        if self.error:
            raise self.error


class SpyContent:
    def __init__(self, posts=None, post=None, tags=None, error=None):
        self.calls = []
        self.posts = posts if posts is not None else []
        self.post = post or Post(id="1", slug="t", title="T", status="published", html="<p>C</p>")
        self.tags = tags if tags is not None else []
        self.error = error

    async def browse_posts(self, spec):
        self.calls.append(("browse_posts", spec))
        if self.error:
            raise self.error
        return self.posts

    async def read_post(self, spec):
        self.calls.append(("read_post", spec))
        if self.error:
            raise self.error
        return self.post

    async def browse_tags(self, spec):
        self.calls.append(("browse_tags", spec))
        if self.error:
            raise self.error
        return self.tags


@pytest.fixture
def admin():
    return SpyAdmin()


@pytest.fixture
def content():
    return SpyContent(
        posts=[
            Post(id="a1", slug="hello", title="Hello", status="published", excerpt="First post"),
            Post(id="a2", slug="draft-one", title="Draft One", status="draft"),
        ],
        tags=[Tag(name="News", slug="news", post_count=3), Tag(name="Empty", slug="empty")],
    )
