"""Python snippets: requests and httpx."""

from request_snippets.models import RequestDescriptor
from request_snippets.render.escaper import quote

from .blocks import header_block, render_payload

TARGET = "python"

SHORTCUT_METHODS = {"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"}


def _call(receiver: str, request: RequestDescriptor, kwargs: list[str]) -> str:
    """``receiver.post(url, ...)`` or ``receiver.request("PURGE", url, ...)``."""
    if request.verb in SHORTCUT_METHODS:
        head = f"{receiver}.{request.verb.lower()}(url"
    else:
        head = f"{receiver}.request({quote(request.verb, TARGET)}, url"
    return ", ".join([head] + kwargs) + ")"


def _prelude(
    module: str, request: RequestDescriptor, headers: dict[str, str], raw_kwarg: str = "data"
) -> tuple[list[str], list[str]]:
    """Import, url and headers lines plus the call's keyword arguments.

    A body that is not JSON goes out verbatim through ``raw_kwarg``.
    """
    lines = [
        f"import {module}",
        "",
        f"url = {quote(request.url, TARGET)}",
        f"headers = {header_block(headers, TARGET, '    ')}",
    ]
    kwargs = ["headers=headers"]
    payload = render_payload(request, TARGET)
    if payload is not None:
        if payload.structured:
            lines.append(f"payload = {payload.literal}")
            kwargs.append("json=payload")
        else:
            kwargs.append(f"{raw_kwarg}={payload.literal}")
    return lines, kwargs


def generate_requests(request: RequestDescriptor, headers: dict[str, str]) -> str:
    lines, kwargs = _prelude("requests", request, headers)
    lines += [
        "",
        f"response = {_call('requests', request, kwargs)}",
        "print(response.json())",
    ]
    return "\n".join(lines)


def generate_httpx(request: RequestDescriptor, headers: dict[str, str]) -> str:
    lines, kwargs = _prelude("httpx", request, headers, raw_kwarg="content")
    lines += [
        "",
        "with httpx.Client() as client:",
        f"    response = {_call('client', request, kwargs)}",
        "    print(response.json())",
    ]
    return "\n".join(lines)


VARIANTS = {
    "requests": generate_requests,
    "httpx": generate_httpx,
}


def emit(variant: str, request: RequestDescriptor, headers: dict[str, str]) -> str:
    return VARIANTS[variant](request, headers)
