# =============================================================================
# core/dispatcher.py  —  Tool Dispatcher (name + raw arguments -> envelope)
# =============================================================================
#
# HOW A CALL FLOWS:
#   1. Unknown name?          -> "Error: Unknown tool: <name>"
#   2. Arguments invalid?     -> "Error: <validation message>"
#   3. Build the call spec    (core/call_specs.py)
#   4. Call Ghost ONCE        (admin surface for writes, read surface for reads)
#   5. Format the entity      (core/formatting.py)
#
# dispatch() NEVER RAISES:
#   Each step produces an Ok or an Err.  A downstream fault (network, auth,
#   not-found, anything) is turned into an Err right where the gateway is
#   awaited, so the client always receives a normal-looking envelope.
#   No retries: one attempt per call.  get_analytics never touches Ghost.
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, TypeVar, Union

from core import call_specs, formatting
from core.gateway import AdminGateway, ReadGateway
from core.models import ResultEnvelope
from core.schemas import (
    AnalyticsArgs,
    CreatePostArgs,
    DeletePostArgs,
    GetPostArgs,
    ListTagsArgs,
    SchemaRegistry,
    SearchPostsArgs,
    UpdatePostArgs,
    ValidationFailure,
    registry as default_registry,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    message: str


Result = Union[Ok[T], Err]


class ToolDispatcher:
    """Routes validated tool calls to Ghost and renders the outcome as text."""

    def __init__(
        self,
        admin: AdminGateway,
        content: ReadGateway,
        registry: SchemaRegistry = default_registry,
    ):
        self._admin = admin
        self._content = content
        self._registry = registry
        self._handlers: dict[str, Callable[..., Awaitable[Result[str]]]] = {
            "create_post": self._create_post,
            "update_post": self._update_post,
            "search_posts": self._search_posts,
            "get_post": self._get_post,
            "delete_post": self._delete_post,
            "list_tags": self._list_tags,
            "get_analytics": self._get_analytics,
        }

    async def dispatch(self, name: str, raw_args: object = None) -> ResultEnvelope:
        result = await self._run(name, raw_args)
        if isinstance(result, Err):
            return ResultEnvelope.of_error(result.message)
        return ResultEnvelope.of_text(result.value)

    async def _run(self, name: str, raw_args: object) -> Result[str]:
        handler = self._handlers.get(name)
        if handler is None or not self._registry.is_known(name):
            return Err(f"Unknown tool: {name}")

        validated = self._registry.validate(name, raw_args)
        if isinstance(validated, ValidationFailure):
            return Err(validated.message)

        return await handler(validated)

    # ── Handlers ──────────────────────────────────────────────────────────

    async def _create_post(self, args: CreatePostArgs) -> Result[str]:
        spec = call_specs.build_add_post_spec(args)
        return await _attempt(lambda: self._admin.add_post(spec), formatting.format_created_post)

    async def _update_post(self, args: UpdatePostArgs) -> Result[str]:
        spec = call_specs.build_edit_post_spec(args)
        return await _attempt(lambda: self._admin.edit_post(spec), formatting.format_updated_post)

    async def _search_posts(self, args: SearchPostsArgs) -> Result[str]:
        spec = call_specs.build_browse_posts_spec(args)
        return await _attempt(lambda: self._content.browse_posts(spec), formatting.format_post_list)

    async def _get_post(self, args: GetPostArgs) -> Result[str]:
        spec = call_specs.build_read_post_spec(args)
        return await _attempt(lambda: self._content.read_post(spec), formatting.format_post)

    async def _delete_post(self, args: DeletePostArgs) -> Result[str]:
        post_id = call_specs.build_delete_post_id(args)
        return await _attempt(
            lambda: self._admin.delete_post(post_id),
            lambda _: formatting.format_deleted_post(post_id),
        )

    async def _list_tags(self, args: ListTagsArgs) -> Result[str]:
        spec = call_specs.build_browse_tags_spec(args)
        return await _attempt(lambda: self._content.browse_tags(spec), formatting.format_tag_list)

    async def _get_analytics(self, args: AnalyticsArgs) -> Result[str]:
        return Ok(formatting.format_analytics(args.days))


async def _attempt(call: Callable[[], Awaitable[T]], render: Callable[[T], str]) -> Result[str]:
    """Await one gateway call and render it, converting any fault into Err."""
    try:
        entity = await call()
        return Ok(render(entity))
    except Exception as exc:
        logger.warning("Downstream call failed: %s: %s", type(exc).__name__, exc)
        return Err(formatting.error_message(exc))
