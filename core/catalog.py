# =============================================================================
# core/catalog.py  —  Catalog Publisher
# =============================================================================
# Serves the static tool list.  No I/O, no failure path: the list is built
# from the Schema Registry once and returned as-is on every call.
# =============================================================================

from core.models import OperationDescriptor
from core.schemas import SchemaRegistry, registry as default_registry


class CatalogPublisher:
    def __init__(self, registry: SchemaRegistry = default_registry):
        self._operations = registry.descriptors()

    def list_operations(self) -> tuple[OperationDescriptor, ...]:
        return self._operations
