"""JavaScript snippets: fetch and axios."""

from request_snippets.models import RequestDescriptor
from request_snippets.render.escaper import quote

from .blocks import Payload, header_block, render_payload

TARGET = "javascript"


def _declarations(request: RequestDescriptor, headers: dict[str, str]) -> tuple[list[str], Payload | None]:
    lines = [
        f"const url = {quote(request.url, TARGET)};",
        f"const headers = {header_block(headers, TARGET, '  ')};",
    ]
    payload = render_payload(request, TARGET)
    if payload is not None and payload.structured:
        lines.append(f"const payload = {payload.literal};")
    return lines, payload


def generate_fetch(request: RequestDescriptor, headers: dict[str, str]) -> str:
    lines, payload = _declarations(request, headers)
    options = [f"  method: {quote(request.verb, TARGET)}", "  headers: headers"]
    if payload is not None:
        body = "JSON.stringify(payload)" if payload.structured else payload.literal
        options.append(f"  body: {body}")

    lines += [
        "",
        "const response = await fetch(url, {",
        ",\n".join(options),
        "});",
        "",
        "const data = await response.json();",
        "console.log(data);",
    ]
    return "\n".join(lines)


def generate_axios(request: RequestDescriptor, headers: dict[str, str]) -> str:
    lines, payload = _declarations(request, headers)
    config = [f"  method: {quote(request.verb.lower(), TARGET)}", "  url: url", "  headers: headers"]
    if payload is not None:
        config.append(f"  data: {'payload' if payload.structured else payload.literal}")

    lines = ["const axios = require('axios');", ""] + lines + [
        "",
        "const response = await axios({",
        ",\n".join(config),
        "});",
        "",
        "console.log(response.data);",
    ]
    return "\n".join(lines)


VARIANTS = {
    "fetch": generate_fetch,
    "axios": generate_axios,
}


def emit(variant: str, request: RequestDescriptor, headers: dict[str, str]) -> str:
    return VARIANTS[variant](request, headers)
