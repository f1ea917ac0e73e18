"""Call surface used by the documentation UI.

Each function takes plain dicts (as posted by the runner) or models and
returns plain data.
"""

from typing import Any

from pydantic import ValidationError

from request_snippets.auth import prepare_headers
from request_snippets.errors import SnippetError
from request_snippets.generator import registry, shell
from request_snippets.generator.shell import ShellStyle
from request_snippets.logging_config import get_logger
from request_snippets.models import AuthDescriptor, RequestDescriptor
from request_snippets.parser.example import synthesize

logger = get_logger(__name__)


def _as_request(request_data: RequestDescriptor | dict) -> RequestDescriptor:
    if isinstance(request_data, RequestDescriptor):
        return request_data
    data = {k: v for k, v in request_data.items() if v is not None}
    return RequestDescriptor(**data)


def generate_code(
    language: str,
    variant: str | None,
    request_data: RequestDescriptor | dict,
    auth: AuthDescriptor | dict | None = None,
) -> dict[str, str]:
    """Return {"code": source} or {"error": message}, never both."""
    try:
        request = _as_request(request_data)
        headers = prepare_headers(request.headers, auth)
        snippet = registry.generate(language, variant, request, headers)
    except SnippetError as e:
        return {"error": str(e)}
    except ValidationError as e:
        logger.debug("Rejected request data: %s", e)
        return {"error": f"Invalid request data: {e.error_count()} error(s)"}
    return {"code": snippet.source_text}


def list_supported_languages() -> dict[str, dict[str, Any]]:
    return {
        spec.id: {"name": spec.display_name, "variants": list(spec.variants)}
        for spec in registry.list_languages()
    }


def format_shell_command(
    request_data: RequestDescriptor | dict,
    headers: dict[str, str],
    style: ShellStyle | str = ShellStyle.MULTILINE,
) -> str:
    return shell.format_shell_command(_as_request(request_data), headers, style)


def synthesize_example(schema: Any) -> Any:
    return synthesize(schema)
