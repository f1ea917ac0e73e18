"""Ruby snippets: Net::HTTP and HTTParty."""

from request_snippets.models import RequestDescriptor
from request_snippets.render.escaper import quote

from .blocks import Payload, header_block, render_payload

TARGET = "ruby"

# Verbs with a request class under Net::HTTP and a shortcut on HTTParty
STANDARD_METHODS = {"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"}


def _body_expression(payload: Payload) -> str:
    return "payload.to_json" if payload.structured else payload.literal


def _custom_request_class(verb: str) -> list[str]:
    return [
        "class CustomRequest < Net::HTTPRequest",
        f"  METHOD = {quote(verb, TARGET)}",
        "  REQUEST_HAS_BODY = false",
        "  RESPONSE_HAS_BODY = true",
        "end",
        "",
    ]


def generate_net_http(request: RequestDescriptor, headers: dict[str, str]) -> str:
    payload = render_payload(request, TARGET)
    lines = [
        "require 'net/http'",
        "require 'uri'",
        "require 'json'",
        "",
        f"uri = URI({quote(request.url, TARGET)})",
        "",
        "http = Net::HTTP.new(uri.host, uri.port)",
        "http.use_ssl = uri.scheme == 'https'",
        "",
    ]
    if request.verb in STANDARD_METHODS:
        lines.append(f"request = Net::HTTP::{request.verb.capitalize()}.new(uri)")
    else:
        lines.append(f"request = Net::HTTPGenericRequest.new({quote(request.verb, TARGET)}, false, true, uri)")
    for key, value in headers.items():
        lines.append(f"request[{quote(key, TARGET)}] = {quote(value, TARGET)}")
    if payload is not None:
        if payload.structured:
            lines.append(f"payload = {payload.literal}")
        lines.append(f"request.body = {_body_expression(payload)}")

    lines += [
        "",
        "response = http.request(request)",
        "puts JSON.parse(response.body)",
    ]
    return "\n".join(lines)


def generate_httparty(request: RequestDescriptor, headers: dict[str, str]) -> str:
    payload = render_payload(request, TARGET)
    lines = ["require 'httparty'", "require 'json'", ""]
    if payload is not None and payload.structured:
        lines += [f"payload = {payload.literal}", ""]

    arguments = [
        f"  {quote(request.url, TARGET)}",
        f"  headers: {header_block(headers, TARGET, '    ', '  ')}",
    ]
    if payload is not None:
        arguments.append(f"  body: {_body_expression(payload)}")

    if request.verb in STANDARD_METHODS:
        lines += [
            f"response = HTTParty.{request.verb.lower()}(",
            ",\n".join(arguments),
            ")",
        ]
    else:
        lines += _custom_request_class(request.verb)
        lines += [
            "response = HTTParty::Request.new(",
            "  CustomRequest,",
            ",\n".join(arguments),
            ").perform",
        ]
    lines += ["", "puts JSON.parse(response.body)"]
    return "\n".join(lines)


VARIANTS = {
    "net_http": generate_net_http,
    "httparty": generate_httparty,
}


def emit(variant: str, request: RequestDescriptor, headers: dict[str, str]) -> str:
    return VARIANTS[variant](request, headers)
