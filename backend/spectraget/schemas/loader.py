"""Schema loader — reads named parameter schemas from JSON files.

Each file holds one endpoint's schema:

    {"name": "signup", "description": "...", "parameters": [{"name": "email", ...}]}

Files are read once per directory and cached.
"""

import json
from pathlib import Path
from typing import Optional

import structlog

from spectraget.config import get_settings
from spectraget.validators.models import ParameterSpec, build_schema

logger = structlog.get_logger()

# Cache loaded schema files to avoid re-reading from disk, keyed by directory
_schema_cache: dict[Path, dict[str, list[ParameterSpec]]] = {}


class SchemaNotFoundError(ValueError):
    """Raised when no schema file defines the requested name."""


def _schemas_dir(path: Optional[Path]) -> Path:
    return Path(path) if path is not None else Path(get_settings().SCHEMAS_PATH)


def _load_all_schemas(path: Optional[Path] = None) -> dict[str, list[ParameterSpec]]:
    """Load and cache all JSON schema files from the schemas directory."""
    directory = _schemas_dir(path)
    if directory in _schema_cache:
        return _schema_cache[directory]

    schemas: dict[str, list[ParameterSpec]] = {}
    for json_file in sorted(directory.glob("*.json")):
        try:
            data = json.loads(json_file.read_text(encoding="utf-8"))
            schema_name = data.get("name", json_file.stem)
            schemas[schema_name] = build_schema(data["parameters"])
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            # JSONDecodeError and pydantic.ValidationError are ValueErrors
            logger.warning(
                "schema_file_skipped",
                file=str(json_file),
                error=str(e),
                error_type=type(e).__name__,
            )
            continue
        logger.info("schema_loaded", schema=schema_name, parameters=len(schemas[schema_name]))

    _schema_cache[directory] = schemas
    return schemas


def load_schema(schema_name: str, path: Optional[Path] = None) -> list[ParameterSpec]:
    """Load a named schema.

    Args:
        schema_name: Schema identifier (e.g., "signup", "search")
        path: Directory to read from; defaults to ``Settings.SCHEMAS_PATH``

    Raises:
        SchemaNotFoundError: if no file defines the name
    """
    schemas = _load_all_schemas(path)
    if schema_name not in schemas:
        raise SchemaNotFoundError(f"Schema '{schema_name}' not found")
    return schemas[schema_name]


def get_all_schemas(path: Optional[Path] = None) -> list[str]:
    """List all available schema names."""
    return list(_load_all_schemas(path).keys())


def clear_schema_cache() -> None:
    """Forget loaded files so the next lookup re-reads the directory."""
    _schema_cache.clear()
