"""Build example values from (dereferenced) OpenAPI schemas."""

from typing import Any

from request_snippets.logging_config import get_logger

logger = get_logger(__name__)

MAX_DEPTH = 32


def synthesize(schema: Any, depth: int = 0, max_depth: int = MAX_DEPTH) -> Any:
    """Return a representative value for schema.

    An explicit ``example`` wins over everything else. Object properties keep
    their declared order. Schemas nested deeper than ``max_depth`` (usually a
    self-referencing model) become None.
    """
    if depth > max_depth:
        logger.debug("Schema nesting exceeds %d levels, stopping", max_depth)
        return None
    if schema is None:
        return {}
    if not isinstance(schema, dict):
        return None

    if "example" in schema:
        return schema["example"]

    schema_type = schema.get("type")
    properties = schema.get("properties")
    if schema_type == "object" and isinstance(properties, dict):
        return {
            name: synthesize(prop, depth + 1, max_depth)
            for name, prop in properties.items()
        }

    items = schema.get("items")
    if schema_type == "array" and items is not None:
        return [synthesize(items, depth + 1, max_depth)]

    if schema_type == "string":
        enum = schema.get("enum")
        return enum[0] if enum else "string"
    if schema_type in ("number", "integer"):
        return 0
    if schema_type == "boolean":
        return False
    if schema_type == "array":
        return []
    if schema_type == "object":
        return {}
    return None
