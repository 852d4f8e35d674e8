"""Provider schema acquisition and attribute metadata."""

from .metadata import AttributeMetadata, AttributeType, collapse_type
from .generator import write_provider_schema, run_init
from .store import SchemaStore

__all__ = [
    "AttributeMetadata",
    "AttributeType",
    "collapse_type",
    "write_provider_schema",
    "run_init",
    "SchemaStore",
]
