# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP binding.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between the MCP protocol and core/.
#   It registers the catalog, forwards raw arguments to the dispatcher, and
#   converts envelopes into MCP text content.
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate arguments (core/schemas.py does)
#   - They do NOT talk to Ghost (gateway/ does, behind core/gateway.py)
#   - They do NOT build text (core/formatting.py does)
# =============================================================================
