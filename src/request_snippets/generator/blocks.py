"""Building blocks shared by the language emitters."""

from typing import NamedTuple

from request_snippets.models import RequestDescriptor
from request_snippets.render.escaper import quote, rules_for
from request_snippets.render.literal import load_json_body, serialize


class Payload(NamedTuple):
    literal: str
    structured: bool  # False: the raw body as a string literal


def render_payload(request: RequestDescriptor, target: str) -> Payload | None:
    """Return the body as a target literal, or None when nothing is sent."""
    if not request.carries_body:
        return None
    ok, parsed = load_json_body(request.body)
    if ok:
        return Payload(serialize(parsed, target), True)
    return Payload(quote(request.body, target), False)


def header_block(headers: dict[str, str], target: str, pad: str, closing: str = "") -> str:
    """Render a flat header mapping, one entry per line."""
    if not headers:
        return "{}"
    separator = rules_for(target).key_separator
    entries = [
        f"{pad}{quote(key, target)}{separator}{quote(value, target)}"
        for key, value in headers.items()
    ]
    return "{\n" + ",\n".join(entries) + "\n" + closing + "}"
