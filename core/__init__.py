# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the tool logic for the Ghost MCP server.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or httpx.  Ghost is reached
#   through the two protocols in core/gateway.py, so the dispatcher, the
#   formatter and the resource resolver can be tested with plain stubs.
#
#   schemas.py     → Schema Registry (what each tool accepts)
#   call_specs.py  → validated arguments → Ghost call shapes
#   formatting.py  → Ghost entities → the text we send back
#   dispatcher.py  → Tool Dispatcher (never raises)
#   resources.py   → Resource Resolver (ghost://posts/<slug>)
#   catalog.py     → Catalog Publisher
#   config.py      → startup configuration
# =============================================================================
