# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that
# flows between the protocol layer, the dispatcher, and Ghost.  Nothing here
# is persisted: Ghost owns the durable state, and every object below lives
# only as long as the request that created it.
#
# TWO FAMILIES OF MODELS:
#   - Catalog / protocol shapes (OperationDescriptor, ResultEnvelope,
#     ResourceDescriptor, ResourceContents): what we hand UP to the client.
#   - Ghost entities (Post, Tag): a partial view of what Ghost hands DOWN
#     to us.  Only the fields our text templates read are kept.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional


# -----------------------------------------------------------------------------
# OperationDescriptor: one entry in the tool catalog
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class OperationDescriptor:
    """A named tool with its description and JSON input schema."""

    name: str                          # Unique key, e.g. "create_post"
    description: str                   # One-liner shown to the client
    input_shape: dict[str, Any]        # JSON Schema advertised as inputSchema


# -----------------------------------------------------------------------------
# ResultEnvelope: the ONLY shape a tool call ever returns
# -----------------------------------------------------------------------------
# Success and failure look the same on the wire.  A failure is a single text
# item whose text starts with "Error: ".
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TextItem:
    text: str
    kind: str = "text"


@dataclass(frozen=True)
class ResultEnvelope:
    """Ordered text items returned for a tool call."""

    content_items: tuple[TextItem, ...] = ()

    @classmethod
    def of_text(cls, text: str) -> "ResultEnvelope":
        return cls(content_items=(TextItem(text=text),))

    @classmethod
    def of_error(cls, message: str) -> "ResultEnvelope":
        return cls.of_text(f"Error: {message}")

    @property
    def is_error(self) -> bool:
        return bool(self.content_items) and self.content_items[0].text.startswith("Error: ")


# -----------------------------------------------------------------------------
# Resources: addressable, read-only posts
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ResourceDescriptor:
    uri: str                           # "ghost://posts/<slug>"
    name: str                          # Post title
    description: str                   # Excerpt, or a placeholder
    mime_type: str = "text/html"


@dataclass(frozen=True)
class ResourceContents:
    uri: str
    mime_type: str
    text: str


# -----------------------------------------------------------------------------
# Post: partial view of a Ghost post
# -----------------------------------------------------------------------------
@dataclass
class Post:
    """The fields of a Ghost post that our templates actually read."""

    id: Optional[str] = None
    slug: Optional[str] = None
    title: Optional[str] = None
    status: Optional[str] = None
    url: Optional[str] = None
    excerpt: Optional[str] = None
    published_at: Optional[str] = None
    html: Optional[str] = None
    updated_at: Optional[str] = None   # Needed by the Admin API to edit

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Post":
        """Build a Post from a Ghost JSON object, ignoring unknown keys."""
        return cls(
            id=data.get("id"),
            slug=data.get("slug"),
            title=data.get("title"),
            status=data.get("status"),
            url=data.get("url"),
            # Ghost returns custom_excerpt when one was set explicitly
            excerpt=data.get("excerpt") or data.get("custom_excerpt"),
            published_at=data.get("published_at"),
            html=data.get("html"),
            updated_at=data.get("updated_at"),
        )


# -----------------------------------------------------------------------------
# Tag: partial view of a Ghost tag
# -----------------------------------------------------------------------------
@dataclass
class Tag:
    name: Optional[str] = None
    slug: Optional[str] = None
    post_count: Optional[int] = None   # count.posts, only present when included

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Tag":
        count = data.get("count") or {}
        return cls(
            name=data.get("name"),
            slug=data.get("slug"),
            post_count=count.get("posts"),
        )


@dataclass
class PostFilter:
    """Structured search filter.  Rendered to Ghost NQL by the read client."""

    status: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    query: Optional[str] = None

    def is_empty(self) -> bool:
        return self.status is None and not self.tags and not self.query
