# =============================================================================
# gateway/__init__.py
# =============================================================================
# HTTP implementations of the two Ghost surfaces declared in core/gateway.py.
#
#   GhostAdminClient   → Admin API   (create / edit / delete, JWT-authenticated)
#   GhostContentClient → Content API (browse / read, content-key in the query)
#
# Both share one httpx.AsyncClient built by build_async_client().
# =============================================================================

from gateway.admin import GhostAdminClient
from gateway.content import GhostContentClient, render_filter
from gateway.http import GhostAPIError, build_async_client

__all__ = [
    "GhostAdminClient",
    "GhostContentClient",
    "GhostAPIError",
    "build_async_client",
    "render_filter",
]
