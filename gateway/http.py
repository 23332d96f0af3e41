# =============================================================================
# gateway/http.py  —  Shared httpx plumbing for the Ghost clients
# =============================================================================
#
# One httpx.AsyncClient carries the timeout, Accept-Version and User-Agent
# for both API surfaces.  send() turns every failure mode into a single
# GhostAPIError so the dispatcher has one message to show:
#
#   transport error    → "Could not reach Ghost: ..."
#   {"errors": [...]}  → Ghost's own message and error type
#   any other non-2xx  → "Ghost API returned <status>"
# =============================================================================

from typing import Any, Optional

import httpx

from core.config import GhostSettings
from core.gateway import GatewayError

USER_AGENT = "ghost-mcp/0.1.0"


class GhostAPIError(GatewayError):
    """A failed Ghost API call.

    ``status_code`` is ``None`` when the request never got a response.
    ``error_type`` is Ghost's own classification, e.g. ``NotFoundError``.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, error_type: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.error_type = error_type


def build_async_client(
    settings: GhostSettings,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create the ``httpx.AsyncClient`` shared by both Ghost surfaces."""
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.ghost_http_timeout_seconds),
        headers={
            "Accept-Version": settings.ghost_api_version,
            "User-Agent": USER_AGENT,
        },
        transport=transport,
    )


async def send(client: httpx.AsyncClient, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
    """Perform one request and return the decoded JSON body (``{}`` for 204)."""
    try:
        response = await client.request(method, path, **kwargs)
    except httpx.HTTPError as exc:
        raise GhostAPIError(f"Could not reach Ghost: {exc}") from exc

    if response.is_success:
        if response.status_code == 204 or not response.content:
            return {}
        return response.json()

    raise _error_from_response(response)


def _error_from_response(response: httpx.Response) -> GhostAPIError:
    message = f"Ghost API returned {response.status_code}"
    error_type = None
    try:
        body = response.json()
    except ValueError:
        body = None
    errors = (body.get("errors") or []) if isinstance(body, dict) else []
    if errors and isinstance(errors[0], dict):
        message = errors[0].get("message") or message
        error_type = errors[0].get("type")
    return GhostAPIError(message, status_code=response.status_code, error_type=error_type)
