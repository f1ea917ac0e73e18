"""OpenAPI / Swagger definitions parser.

Reads the definitions document behind the documentation site (YAML or JSON,
OpenAPI 3.x or Swagger 2.0) into ApiEndpoint models. Schemas are expected to
be dereferenced already; ``$ref`` entries are left untouched.
"""

from pathlib import Path

import yaml

from request_snippets.errors import DocumentError
from request_snippets.logging_config import get_logger

from .base import ApiEndpoint, Param

logger = get_logger(__name__)

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH")


def load_document(file_path: Path) -> dict:
    """Read an OpenAPI document from disk."""
    try:
        text = Path(file_path).read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentError(f"Cannot read {file_path}: {e}") from e

    # YAML is a superset of JSON, one loader covers both
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentError(f"Cannot parse {file_path}: {e}") from e

    if not isinstance(doc, dict) or not ("openapi" in doc or "swagger" in doc):
        raise DocumentError(f"{file_path} is not an OpenAPI document")
    return doc


def parse_openapi(source: Path | dict) -> list[ApiEndpoint]:
    """Parse an OpenAPI file (or loaded document) into a list of ApiEndpoint."""
    doc = source if isinstance(source, dict) else load_document(source)

    endpoints = []
    paths = doc.get("paths") or {}

    for path, methods in paths.items():
        shared = methods.get("parameters", [])
        for method, operation in methods.items():
            if method.upper() not in HTTP_METHODS:
                continue

            params = _parse_parameters(shared + operation.get("parameters", []))
            request_body = _parse_request_body(operation)
            content_type = _detect_content_type(operation.get("requestBody"))

            endpoints.append(
                ApiEndpoint(
                    method=method.upper(),
                    path=path,
                    summary=operation.get("summary", ""),
                    parameters=params,
                    request_body=request_body,
                    responses=_parse_responses(operation.get("responses", {})),
                    tags=operation.get("tags", []),
                    content_type=content_type,
                )
            )

    logger.debug("Parsed %d endpoints", len(endpoints))
    return endpoints


def find_endpoint(endpoints: list[ApiEndpoint], method: str, path: str) -> ApiEndpoint | None:
    for ep in endpoints:
        if ep.method == method.upper() and ep.path == path:
            return ep
    return None


def server_urls(doc: dict) -> list[str]:
    """List server base URLs (OpenAPI ``servers`` or Swagger host/basePath)."""
    urls = [s["url"] for s in doc.get("servers", []) if s.get("url")]
    if not urls and doc.get("host"):
        scheme = (doc.get("schemes") or ["https"])[0]
        urls.append(f"{scheme}://{doc['host']}{doc.get('basePath', '')}")
    return urls


def _parse_parameters(params: list[dict]) -> list[Param]:
    # operation-level entries override path-level ones with the same name/location
    merged: dict[tuple[str, str], dict] = {}
    for p in params:
        if "name" not in p:
            continue
        merged[(p["name"], p.get("in", "query"))] = p

    result = []
    for (name, location), p in merged.items():
        if location == "body":
            continue
        schema = p.get("schema", {})
        result.append(
            Param(
                name=name,
                location=location,
                required=p.get("required", location == "path"),
                param_type=schema.get("type", p.get("type", "string")),
                description=p.get("description", ""),
            )
        )
    return result


def _parse_request_body(operation: dict) -> dict | None:
    body = operation.get("requestBody")
    if not body:
        # Swagger 2.0 keeps the body schema on an "in: body" parameter
        for p in operation.get("parameters", []):
            if p.get("in") == "body":
                return p.get("schema")
        return None
    content = body.get("content", {})
    for content_type in ("application/json", "multipart/form-data"):
        if content_type in content:
            return content[content_type].get("schema")
    # Fallback: return first available schema
    for ct_data in content.values():
        return ct_data.get("schema")
    return None


def _detect_content_type(body: dict | None) -> str:
    if not body:
        return "application/json"
    content = body.get("content", {})
    if "multipart/form-data" in content:
        return "multipart/form-data"
    return "application/json"


def _parse_responses(responses: dict) -> dict:
    result = {}
    for status_code, resp in responses.items():
        entry = {"description": resp.get("description", "")}
        schema = resp.get("schema")
        for ct_data in resp.get("content", {}).values():
            schema = ct_data.get("schema")
            break
        if schema is not None:
            entry["schema"] = schema
        result[str(status_code)] = entry
    return result
