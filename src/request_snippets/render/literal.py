"""Render parsed JSON values as native literals of a target language."""

import json
import math
from typing import Any

from request_snippets.logging_config import get_logger
from request_snippets.render.escaper import quote, rules_for

logger = get_logger(__name__)

INDENT = "  "
MAX_DEPTH = 32


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {text}")
    return value


def load_json_body(body: str | None) -> tuple[bool, Any]:
    """Parse a raw request body as strict JSON.

    Returns (True, value) on success and (False, None) otherwise; a body
    that is not JSON, overflows a float or nests too deeply for the parser
    is shown as an opaque string by every renderer.
    """
    if body is None:
        return False, None
    try:
        return True, json.loads(body, parse_constant=_reject_constant, parse_float=_finite_float)
    except (ValueError, RecursionError):
        logger.debug("Body is not valid JSON, rendering it as a string")
        return False, None


def serialize(value: Any, target: str, indent: int = 0, max_depth: int = MAX_DEPTH) -> str:
    """Serialize value into the literal syntax of target.

    Mappings and sequences become multi-line blocks with two spaces per
    level; the closing bracket sits at ``indent``.
    """
    rules = rules_for(target)
    if indent > max_depth:
        logger.debug("Literal nesting exceeds %d levels, truncating", max_depth)
        return rules.null

    if isinstance(value, dict):
        if not value:
            return "{}"
        pad = INDENT * (indent + 1)
        entries = [
            f"{pad}{quote(str(key), target)}{rules.key_separator}"
            f"{serialize(item, target, indent + 1, max_depth)}"
            for key, item in value.items()
        ]
        return "{\n" + ",\n".join(entries) + "\n" + INDENT * indent + "}"

    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        pad = INDENT * (indent + 1)
        entries = [f"{pad}{serialize(item, target, indent + 1, max_depth)}" for item in value]
        return "[\n" + ",\n".join(entries) + "\n" + INDENT * indent + "]"

    if isinstance(value, str):
        return quote(value, target)
    # bool before int: True is an int
    if isinstance(value, bool):
        return rules.true if value else rules.false
    if isinstance(value, (int, float)):
        return json.dumps(value)
    if value is None:
        return rules.null
    return quote(str(value), target)
