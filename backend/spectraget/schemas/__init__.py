"""Named parameter schemas — JSON-file definitions for endpoints."""

from spectraget.schemas.loader import (
    SchemaNotFoundError,
    clear_schema_cache,
    get_all_schemas,
    load_schema,
)

__all__ = ["SchemaNotFoundError", "clear_schema_cache", "get_all_schemas", "load_schema"]
