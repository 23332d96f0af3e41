# =============================================================================
# core/call_specs.py  —  Downstream call shapes, one builder per tool
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns validated tool arguments into the exact record a Ghost client
#   receives.  Each tool gets its own closed dataclass and its own builder
#   function, so the renames (content -> html, excerpt -> custom_excerpt)
#   and the omission rules are written down exactly once.
#
# OMISSION, NOT NULL:
#   A field that is None in a spec is left out of the payload entirely.
#   For update_post that is what "don't touch this field" means to Ghost;
#   sending null would clear it instead.
#
# THE featured QUIRK:
#   update_post copies most optional fields only when they are truthy, so an
#   empty title or excerpt is treated as "not given".  featured is copied
#   whenever it was given, so featured=False un-features a post.
# =============================================================================

import re
from dataclasses import dataclass, fields
from typing import Any, Optional

from core.models import PostFilter
from core.schemas import (
    CreatePostArgs,
    DeletePostArgs,
    GetPostArgs,
    ListTagsArgs,
    SearchPostsArgs,
    UpdatePostArgs,
)

SEARCH_FIELDS = ("id", "title", "slug", "status", "published_at", "excerpt")
RESOURCE_PREVIEW_LIMIT = 5

_OBJECT_ID = re.compile(r"^[0-9a-f]{24}$")


def _payload(spec: Any) -> dict[str, Any]:
    return {f.name: getattr(spec, f.name) for f in fields(spec) if getattr(spec, f.name) is not None}


# -----------------------------------------------------------------------------
# Admin surface
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class AddPostSpec:
    title: str
    html: str
    status: str
    tags: Optional[tuple[str, ...]] = None
    custom_excerpt: Optional[str] = None
    featured: Optional[bool] = None

    def to_payload(self) -> dict[str, Any]:
        payload = _payload(self)
        if self.tags is not None:
            payload["tags"] = list(self.tags)
        return payload


@dataclass(frozen=True)
class EditPostSpec:
    id: str
    title: Optional[str] = None
    html: Optional[str] = None
    status: Optional[str] = None
    tags: Optional[tuple[str, ...]] = None
    custom_excerpt: Optional[str] = None
    featured: Optional[bool] = None

    def to_payload(self) -> dict[str, Any]:
        payload = _payload(self)
        if self.tags is not None:
            payload["tags"] = list(self.tags)
        return payload


def build_add_post_spec(args: CreatePostArgs) -> AddPostSpec:
    return AddPostSpec(
        title=args.title,
        html=args.content,
        status=args.status,
        tags=tuple(args.tags) if args.tags is not None else None,
        custom_excerpt=args.excerpt,
        featured=args.featured,
    )


def build_edit_post_spec(args: UpdatePostArgs) -> EditPostSpec:
    return EditPostSpec(
        id=args.id,
        title=args.title or None,
        html=args.content or None,
        status=args.status or None,
        tags=tuple(args.tags) if args.tags else None,
        custom_excerpt=args.excerpt or None,
        featured=args.featured,
    )


def build_delete_post_id(args: DeletePostArgs) -> str:
    return args.id


# -----------------------------------------------------------------------------
# Read surface
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class BrowsePostsSpec:
    limit: int
    filter: Optional[PostFilter] = None
    fields: Optional[tuple[str, ...]] = None


@dataclass(frozen=True)
class PostSelector:
    """Exactly one of id / slug is set."""

    id: Optional[str] = None
    slug: Optional[str] = None


@dataclass(frozen=True)
class ReadPostSpec:
    selector: PostSelector
    formats: tuple[str, ...] = ("html",)


@dataclass(frozen=True)
class BrowseTagsSpec:
    limit: int


def build_browse_posts_spec(args: SearchPostsArgs) -> BrowsePostsSpec:
    post_filter = PostFilter(
        status=args.status if args.status != "all" else None,
        tags=list(args.tags or []),
        query=args.query or None,
    )
    return BrowsePostsSpec(
        limit=args.limit,
        filter=None if post_filter.is_empty() else post_filter,
        fields=SEARCH_FIELDS,
    )


def build_read_post_spec(args: GetPostArgs) -> ReadPostSpec:
    """get_post takes an id or a slug in the same field.

    Ghost object ids are 24 lowercase hex characters; anything else is
    looked up as a slug.
    """
    if _OBJECT_ID.match(args.id):
        return ReadPostSpec(selector=PostSelector(id=args.id), formats=("html",))
    return ReadPostSpec(selector=PostSelector(slug=args.id), formats=("html",))


def build_browse_tags_spec(args: ListTagsArgs) -> BrowseTagsSpec:
    return BrowseTagsSpec(limit=args.limit)


def build_resource_preview_spec() -> BrowsePostsSpec:
    return BrowsePostsSpec(limit=RESOURCE_PREVIEW_LIMIT)


def build_resource_read_spec(slug: str) -> ReadPostSpec:
    return ReadPostSpec(selector=PostSelector(slug=slug), formats=("html", "plaintext"))
