"""CLI entry point for request-snippets."""

import json
from pathlib import Path

import click

from request_snippets.auth import prepare_headers
from request_snippets.config import load_config
from request_snippets.errors import SnippetError
from request_snippets.generator import registry
from request_snippets.generator.shell import ShellStyle, download_info, format_shell_command
from request_snippets.generator.validator import validate_snippet
from request_snippets.logging_config import configure_logging
from request_snippets.models import AuthDescriptor, AuthType, RequestDescriptor
from request_snippets.parser.example import synthesize
from request_snippets.parser.openapi import find_endpoint, load_document, parse_openapi, server_urls
from request_snippets.render.literal import serialize
from request_snippets.urls import build_url, infer_parameters


def _split_pairs(pairs: tuple[str, ...], sep: str, what: str) -> dict[str, str]:
    result = {}
    for pair in pairs:
        if sep not in pair:
            raise click.BadParameter(f"expected NAME{sep}VALUE, got {pair!r}", param_hint=what)
        key, value = pair.split(sep, 1)
        result[key.strip()] = value.strip()
    return result


def _build_request(ctx: click.Context, opts: dict) -> tuple[RequestDescriptor, dict[str, str]]:
    """Turn the shared request options into a request and its final headers."""
    config = ctx.obj["config"]
    values = _split_pairs(opts["param"], "=", "--param")
    url = opts["url"]
    method = opts["method"]

    if opts["doc"]:
        if not opts["path"]:
            raise click.UsageError("--doc requires --path")
        doc = load_document(opts["doc"])
        endpoint = find_endpoint(parse_openapi(doc), method, opts["path"])
        if endpoint is None:
            raise click.UsageError(f"No {method.upper()} {opts['path']} in {opts['doc']}")
        template = config.server_url(server_urls(doc)) + endpoint.path
        url = build_url(template, endpoint.parameters, values)
    elif url:
        url = build_url(url, infer_parameters(url, values), values)
    else:
        raise click.UsageError("Provide --url or --doc/--path")

    auth = None
    if opts["auth_value"]:
        auth = AuthDescriptor(type=opts["auth_type"], value=opts["auth_value"])

    request = RequestDescriptor(
        method=method,
        url=url,
        headers=_split_pairs(opts["header"], ":", "--header"),
        body=opts["data"],
    )
    return request, prepare_headers(request.headers, auth)


def request_options(f):
    options = [
        click.option("--url", default=None, help="Request URL (may contain {name} placeholders)."),
        click.option("-X", "--method", default="GET", show_default=True, help="HTTP method."),
        click.option("-H", "--header", multiple=True, help="Header as 'Name: value'. Repeatable."),
        click.option("-d", "--data", default=None, help="Raw request body."),
        click.option("-p", "--param", multiple=True, help="Path/query parameter as name=value. Repeatable."),
        click.option("--doc", type=click.Path(exists=True, path_type=Path), default=None, help="OpenAPI document to take the endpoint from."),
        click.option("--path", default=None, help="Endpoint path in --doc, e.g. /pets/{petId}."),
        click.option("--auth-type", type=click.Choice([t.value for t in AuthType]), default="bearer", show_default=True),
        click.option("--auth-value", default=None, help="Credential (token, key or user:pass)."),
    ]
    for option in reversed(options):
        f = option(f)
    return f


@click.group()
@click.option("--config", "config_file", type=click.Path(path_type=Path), default=None, help="Path to request_snippets.yml.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, config_file: Path | None, verbose: bool):
    """Request Snippets: render API requests as shell commands and client code."""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = load_config(config_file)
    except SnippetError as e:
        raise click.ClickException(str(e))


@main.command()
def languages():
    """List supported languages and variants."""
    for spec in registry.list_languages():
        marker = "" if spec.implemented else " *"
        click.echo(f"{spec.id:<12} {spec.display_name:<12} {', '.join(spec.variants)}{marker}")
    click.echo("(* listed only, no generator yet)")


@main.command()
@click.argument("language", required=False)
@click.option("--variant", default=None, help="Library variant (defaults to the language's first).")
@click.option("--check", is_flag=True, help="Syntax-check the generated snippet where possible.")
@request_options
@click.pass_context
def code(ctx: click.Context, language: str | None, variant: str | None, check: bool, **opts):
    """Generate client code for a request."""
    language = language or ctx.obj["config"].default_language
    try:
        request, headers = _build_request(ctx, opts)
        snippet = registry.generate(language, variant, request, headers)
    except SnippetError as e:
        raise click.ClickException(str(e))

    if check:
        error = validate_snippet(snippet)
        if error:
            raise click.ClickException(f"Generated {snippet.language}/{snippet.variant} code is invalid: {error}")
    click.echo(snippet.source_text)


@main.command()
@click.option("--style", type=click.Choice([s.value for s in ShellStyle]), default=None, help="Command style (default from config).")
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None, help="Write the command to a file.")
@request_options
@click.pass_context
def curl(ctx: click.Context, style: str | None, output: Path | None, **opts):
    """Render a request as a curl or PowerShell command."""
    style = ShellStyle(style or ctx.obj["config"].shell_style)
    try:
        request, headers = _build_request(ctx, opts)
    except SnippetError as e:
        raise click.ClickException(str(e))

    command = format_shell_command(request, headers, style)
    if output is None:
        click.echo(command)
        return

    mime, extension = download_info(style)
    if not output.suffix:
        output = output.with_suffix(extension)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(command + "\n", encoding="utf-8")
    click.echo(f"Saved {mime} command to {output}")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-X", "--method", default=None, help="Only endpoints with this method.")
@click.option("--path", default=None, help="Only this endpoint path.")
@click.option("--language", "target", type=click.Choice(["json", "javascript", "python", "ruby"]), default="json", show_default=True)
@click.option("--responses", is_flag=True, help="Also show response body examples.")
def example(doc_path: Path, method: str | None, path: str | None, target: str, responses: bool):
    """Print example request bodies synthesized from an OpenAPI document."""
    try:
        endpoints = parse_openapi(doc_path)
    except SnippetError as e:
        raise click.ClickException(str(e))

    shown = 0
    for ep in endpoints:
        if method and ep.method != method.upper():
            continue
        if path and ep.path != path:
            continue

        schemas = []
        if ep.request_body is not None:
            schemas.append(("request", ep.request_body))
        if responses:
            schemas += [(status, r["schema"]) for status, r in ep.responses.items() if "schema" in r]
        if not schemas:
            continue

        click.echo(f"## {ep.method} {ep.path}")
        for label, schema in schemas:
            value = synthesize(schema)
            rendered = json.dumps(value, indent=2, default=str) if target == "json" else serialize(value, target)
            click.echo(f"# {label}")
            click.echo(rendered)
        shown += 1

    if not shown:
        click.echo("No matching endpoints with body schemas.")
