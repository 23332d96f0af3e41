# =============================================================================
# core/resources.py  —  Resource Resolver (posts as ghost:// resources)
# =============================================================================
#
# Unlike tool calls, resource reads are ALLOWED to fail loudly: a malformed
# URI raises InvalidResourceURI, and downstream faults propagate unchanged.
# There is no sensible text envelope for "you addressed something that
# doesn't exist".
#
# The preview list is fetched fresh on every call; nothing is cached.
# =============================================================================

import re

from core import call_specs, formatting
from core.gateway import ReadGateway
from core.models import ResourceContents, ResourceDescriptor

RESOURCE_SCHEME = "ghost"
RESOURCE_MIME_TYPE = "text/html"
URI_PATTERN = re.compile(r"^ghost://posts/(.+)$")


class InvalidResourceURI(ValueError):
    """The URI is not of the form ghost://posts/<slug>."""


def post_uri(slug: str) -> str:
    return f"{RESOURCE_SCHEME}://posts/{slug}"


def parse_post_uri(uri: str) -> str:
    """Return the slug from a post URI, or raise InvalidResourceURI."""
    match = URI_PATTERN.match(uri or "")
    if not match:
        raise InvalidResourceURI("Invalid resource URI")
    return match.group(1)


class ResourceResolver:
    def __init__(self, content: ReadGateway):
        self._content = content

    async def list_resources(self) -> list[ResourceDescriptor]:
        posts = await self._content.browse_posts(call_specs.build_resource_preview_spec())
        return [
            ResourceDescriptor(
                uri=post_uri(post.slug or ""),
                name=post.title or "",
                description=post.excerpt or "No excerpt available",
                mime_type=RESOURCE_MIME_TYPE,
            )
            for post in posts[: call_specs.RESOURCE_PREVIEW_LIMIT]
        ]

    async def read_resource(self, uri: str) -> ResourceContents:
        slug = parse_post_uri(uri)
        post = await self._content.read_post(call_specs.build_resource_read_spec(slug))
        return ResourceContents(
            uri=uri,
            mime_type=RESOURCE_MIME_TYPE,
            text=formatting.format_resource_text(post),
        )
