"""curl and PowerShell renderings of a request."""

import json
from enum import Enum

from request_snippets.models import RequestDescriptor
from request_snippets.render.escaper import escape, quote
from request_snippets.render.literal import load_json_body


class ShellStyle(str, Enum):
    MULTILINE = "multiline"
    SINGLE = "single"
    ESCAPED = "escaped"
    POWERSHELL = "powershell"


DOWNLOADS = {
    ShellStyle.MULTILINE: ("text/x-sh", ".sh"),
    ShellStyle.SINGLE: ("text/x-sh", ".sh"),
    ShellStyle.ESCAPED: ("text/x-sh", ".sh"),
    ShellStyle.POWERSHELL: ("text/plain", ".ps1"),
}

CONTINUATION = " \\\n  "


def download_info(style: ShellStyle | str) -> tuple[str, str]:
    """Return (mime type, file extension) for a saved command."""
    return DOWNLOADS[ShellStyle(style)]


def _body_text(body: str) -> str:
    ok, parsed = load_json_body(body)
    if ok:
        return json.dumps(parsed, separators=(",", ":"), ensure_ascii=False)
    return body


def curl_tokens(request: RequestDescriptor, headers: dict[str, str]) -> list[str]:
    tokens = [f"curl -X {request.verb}", f'"{request.url}"']
    for key, value in headers.items():
        tokens.append(f'-H "{key}: {value}"')
    if request.carries_body:
        tokens.append(f"-d '{_body_text(request.body)}'")
    return tokens


def _powershell(request: RequestDescriptor, headers: dict[str, str]) -> str:
    lines = ["$headers = @{"]
    for key, value in headers.items():
        lines.append(f"    {quote(key, 'powershell')} = {quote(value, 'powershell')}")
    lines.append("}")

    call = (
        f"Invoke-WebRequest -Uri {quote(request.url, 'powershell')} "
        f"-Method {request.verb} -Headers $headers"
    )
    if request.carries_body:
        lines.append(f"$body = {quote(_body_text(request.body), 'powershell')}")
        call += " -Body $body -ContentType 'application/json'"
    lines.append(call)
    return "\n".join(lines)


def format_shell_command(
    request: RequestDescriptor,
    headers: dict[str, str],
    style: ShellStyle | str = ShellStyle.MULTILINE,
) -> str:
    """Render request as a shell command in the given style."""
    style = ShellStyle(style)
    if style == ShellStyle.POWERSHELL:
        return _powershell(request, headers)

    tokens = curl_tokens(request, headers)
    if style == ShellStyle.MULTILINE:
        return CONTINUATION.join(tokens)
    if style == ShellStyle.SINGLE:
        return " ".join(tokens)
    return " ".join(f'"{escape(token, "shell")}"' for token in tokens)
