# =============================================================================
# core/schemas.py  —  Schema Registry (one validation model per tool)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds, for every tool, two things that must agree with each other:
#     1. The JSON input shape we ADVERTISE in the tool catalog.
#     2. The pydantic model we VALIDATE untrusted arguments against.
#
#   validate() never raises.  It returns either a validated pydantic model
#   (defaults applied) or a ValidationFailure carrying a human-readable
#   message about the first violated constraint.
#
# STRICT MODE:
#   Arguments come from an LLM client, so we don't coerce: "10" is not a
#   limit, 1 is not a title, "true" is not a boolean.  Unknown keys are
#   dropped silently.
# =============================================================================

from dataclasses import dataclass
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.models import OperationDescriptor


class UnknownOperationError(KeyError):
    """Raised by describe() for a tool name that is not in the registry."""


@dataclass(frozen=True)
class ValidationFailure:
    message: str


class _ToolArgs(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)


# -----------------------------------------------------------------------------
# Argument models
# -----------------------------------------------------------------------------
class CreatePostArgs(_ToolArgs):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    status: Literal["draft", "published"] = "draft"
    tags: Optional[list[str]] = None
    excerpt: Optional[str] = None
    featured: Optional[bool] = None


class UpdatePostArgs(_ToolArgs):
    id: str = Field(min_length=1)
    title: Optional[str] = None
    content: Optional[str] = None
    status: Optional[Literal["draft", "published"]] = None
    tags: Optional[list[str]] = None
    excerpt: Optional[str] = None
    featured: Optional[bool] = None


class SearchPostsArgs(_ToolArgs):
    query: Optional[str] = None
    status: Literal["draft", "published", "all"] = "all"
    limit: int = Field(default=10, ge=1, le=100)
    tags: Optional[list[str]] = None


class GetPostArgs(_ToolArgs):
    id: str = Field(min_length=1)      # Ghost object id OR slug


class DeletePostArgs(_ToolArgs):
    id: str = Field(min_length=1)


class ListTagsArgs(_ToolArgs):
    limit: int = Field(default=20, ge=1, le=100)


class AnalyticsArgs(_ToolArgs):
    days: int = Field(default=30, ge=1, le=365)


ValidatedArgs = Union[
    CreatePostArgs,
    UpdatePostArgs,
    SearchPostsArgs,
    GetPostArgs,
    DeletePostArgs,
    ListTagsArgs,
    AnalyticsArgs,
]


# -----------------------------------------------------------------------------
# Advertised input shapes
# -----------------------------------------------------------------------------
_STRING_LIST = {"type": "array", "items": {"type": "string"}}

_OPERATIONS: tuple[tuple[OperationDescriptor, type[_ToolArgs]], ...] = (
    (
        OperationDescriptor(
            name="create_post",
            description="Create a new Ghost blog post",
            input_shape={
                "type": "object",
                "properties": {
                    "title": {"type": "string", "description": "Post title"},
                    "content": {"type": "string", "description": "Post content in HTML or Markdown"},
                    "status": {"type": "string", "enum": ["draft", "published"], "default": "draft"},
                    "tags": _STRING_LIST,
                    "excerpt": {"type": "string", "description": "Custom excerpt"},
                    "featured": {"type": "boolean", "description": "Feature this post"},
                },
                "required": ["title", "content"],
            },
        ),
        CreatePostArgs,
    ),
    (
        OperationDescriptor(
            name="update_post",
            description="Update an existing Ghost blog post",
            input_shape={
                "type": "object",
                "properties": {
                    "id": {"type": "string", "description": "Post ID"},
                    "title": {"type": "string"},
                    "content": {"type": "string"},
                    "status": {"type": "string", "enum": ["draft", "published"]},
                    "tags": _STRING_LIST,
                    "excerpt": {"type": "string"},
                    "featured": {"type": "boolean"},
                },
                "required": ["id"],
            },
        ),
        UpdatePostArgs,
    ),
    (
        OperationDescriptor(
            name="search_posts",
            description="Search and list Ghost blog posts",
            input_shape={
                "type": "object",
                "properties": {
                    "query": {"type": "string", "description": "Search query"},
                    "status": {"type": "string", "enum": ["draft", "published", "all"], "default": "all"},
                    "limit": {"type": "integer", "minimum": 1, "maximum": 100, "default": 10},
                    "tags": _STRING_LIST,
                },
            },
        ),
        SearchPostsArgs,
    ),
    (
        OperationDescriptor(
            name="get_post",
            description="Get a specific Ghost blog post by ID or slug",
            input_shape={
                "type": "object",
                "properties": {
                    "id": {"type": "string", "description": "Post ID or slug"},
                },
                "required": ["id"],
            },
        ),
        GetPostArgs,
    ),
    (
        OperationDescriptor(
            name="delete_post",
            description="Delete a Ghost blog post",
            input_shape={
                "type": "object",
                "properties": {
                    "id": {"type": "string", "description": "Post ID"},
                },
                "required": ["id"],
            },
        ),
        DeletePostArgs,
    ),
    (
        OperationDescriptor(
            name="list_tags",
            description="List all tags in Ghost",
            input_shape={
                "type": "object",
                "properties": {
                    "limit": {"type": "integer", "minimum": 1, "maximum": 100, "default": 20},
                },
            },
        ),
        ListTagsArgs,
    ),
    (
        OperationDescriptor(
            name="get_analytics",
            description="Get basic analytics for your Ghost blog",
            input_shape={
                "type": "object",
                "properties": {
                    "days": {"type": "integer", "minimum": 1, "maximum": 365, "default": 30},
                },
            },
        ),
        AnalyticsArgs,
    ),
)


class SchemaRegistry:
    """Lookup and validation for the fixed set of tools.

    Stateless apart from the table it is built with; safe to share between
    concurrent calls.
    """

    def __init__(self, operations=_OPERATIONS):
        self._descriptors = {descriptor.name: descriptor for descriptor, _ in operations}
        self._models = {descriptor.name: model for descriptor, model in operations}

    def names(self) -> list[str]:
        return list(self._descriptors)

    def is_known(self, name: str) -> bool:
        return name in self._descriptors

    def descriptors(self) -> tuple[OperationDescriptor, ...]:
        return tuple(self._descriptors.values())

    def describe(self, name: str) -> OperationDescriptor:
        try:
            return self._descriptors[name]
        except KeyError:
            raise UnknownOperationError(name) from None

    def validate(self, name: str, raw_args: Any) -> Union[ValidatedArgs, ValidationFailure]:
        """Check raw arguments against the tool's model.

        ``None`` is treated as an empty argument object, since MCP clients may
        omit ``arguments`` entirely for tools without required fields.
        """
        model = self._models.get(name)
        if model is None:
            return ValidationFailure(f"Unknown tool: {name}")
        if raw_args is None:
            raw_args = {}
        if not isinstance(raw_args, dict):
            return ValidationFailure(f"Invalid arguments for {name}: expected an object")

        try:
            return model.model_validate(raw_args)
        except ValidationError as exc:
            return ValidationFailure(_first_error_message(name, exc))


def _first_error_message(name: str, exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    if location:
        return f"Invalid arguments for {name}: {location}: {first['msg']}"
    return f"Invalid arguments for {name}: {first['msg']}"


# Module-level default used by the dispatcher and catalog
registry = SchemaRegistry()
