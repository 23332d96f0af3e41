# =============================================================================
# core/gateway.py  —  What the core needs from Ghost (and nothing more)
# =============================================================================
#
# The dispatcher and the resource resolver never import httpx.  They talk to
# two structural protocols; gateway/ provides the real HTTP implementations
# and the tests provide recording spies.
#
# Every method is a coroutine: a call suspends the handler while Ghost
# answers, and other protocol messages may be served in the meantime.  There
# is no locking and no timeout layer here.
# =============================================================================

from typing import Protocol, runtime_checkable

from core.call_specs import (
    AddPostSpec,
    BrowsePostsSpec,
    BrowseTagsSpec,
    EditPostSpec,
    ReadPostSpec,
)
from core.models import Post, Tag


class GatewayError(Exception):
    """A downstream failure: network, authentication, not-found, ..."""


@runtime_checkable
class AdminGateway(Protocol):
    """Authenticated write surface (Ghost Admin API)."""

    async def add_post(self, spec: AddPostSpec) -> Post:
        ...

    async def edit_post(self, spec: EditPostSpec) -> Post:
        ...

    async def delete_post(self, post_id: str) -> None:
        ...


@runtime_checkable
class ReadGateway(Protocol):
    """Public read surface (Ghost Content API)."""

    async def browse_posts(self, spec: BrowsePostsSpec) -> list[Post]:
        ...

    async def read_post(self, spec: ReadPostSpec) -> Post:
        ...

    async def browse_tags(self, spec: BrowseTagsSpec) -> list[Tag]:
        ...
