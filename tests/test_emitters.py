import ast
import json
import logging

import pytest

from request_snippets.errors import EmitterNotImplemented, UnsupportedLanguage
from request_snippets.generator import javascript, python, registry, ruby
from request_snippets.generator.validator import validate_snippet
from request_snippets.models import RequestDescriptor

HEADERS = {"Content-Type": "application/json", "Authorization": "Bearer abc", "X-Note": "it's"}
BODY = '{"name": "Fido", "tags": ["a", "b"], "owner": {"id": 1, "vip": true, "nick": null}}'


def _post(body=BODY, method="POST"):
    return RequestDescriptor(method=method, url="https://api.example.com/pets", body=body)


def _assignment(source: str, name: str):
    """Return the evaluated right-hand side of ``name = <literal>``."""
    for node in ast.walk(ast.parse(source)):
        if isinstance(node, ast.Assign) and getattr(node.targets[0], "id", None) == name:
            return ast.literal_eval(node.value)
    raise AssertionError(f"{name} is not assigned")


class TestPythonRequests:
    def test_body_round_trips(self):
        code = python.emit("requests", _post(), HEADERS)
        assert _assignment(code, "payload") == json.loads(BODY)
        assert "response = requests.post(url, headers=headers, json=payload)" in code
        assert code.endswith("print(response.json())")

    def test_headers_rendered_once(self):
        code = python.emit("requests", _post(), HEADERS)
        assert _assignment(code, "headers") == HEADERS
        for key, value in HEADERS.items():
            assert code.count(f'"{key}": "{value}"') == 1

    def test_opaque_body_passed_directly(self):
        code = python.emit("requests", _post("name=Fido"), {})
        assert "payload" not in code
        assert 'requests.post(url, headers=headers, data="name=Fido")' in code
        assert "headers = {}" in code

    def test_get_ignores_body(self):
        code = python.emit("requests", _post(method="get"), HEADERS)
        assert "payload" not in code
        assert "requests.get(url, headers=headers)" in code

    def test_uncommon_verb_uses_request(self):
        code = python.emit("requests", RequestDescriptor(method="purge", url="https://x"), {})
        assert 'requests.request("PURGE", url, headers=headers)' in code
        ast.parse(code)

    def test_url_escaped(self):
        request = RequestDescriptor(method="GET", url='https://x/a"b')
        assert 'url = "https://x/a\\"b"' in python.emit("requests", request, {})


class TestPythonHttpx:
    def test_sync_client(self):
        code = python.emit("httpx", _post(method="put"), HEADERS)
        assert code.startswith("import httpx\n")
        assert "with httpx.Client() as client:" in code
        assert "    response = client.put(url, headers=headers, json=payload)" in code
        assert _assignment(code, "payload") == json.loads(BODY)

    def test_opaque_body_uses_content(self):
        code = python.emit("httpx", _post("name=Fido"), {})
        assert 'client.post(url, headers=headers, content="name=Fido")' in code
        assert "data=" not in code
        ast.parse(code)


class TestJavaScript:
    def test_fetch(self):
        code = javascript.emit("fetch", _post(), HEADERS)
        assert "const url = 'https://api.example.com/pets';" in code
        assert "  'X-Note': 'it\\'s'" in code
        assert "const payload = {\n  'name': 'Fido'," in code
        assert "  method: 'POST'" in code
        assert "  body: JSON.stringify(payload)" in code
        assert "const response = await fetch(url, {" in code
        assert code.endswith("console.log(data);")

    def test_fetch_headers_once(self):
        code = javascript.emit("fetch", _post(), HEADERS)
        assert code.count("'Authorization': 'Bearer abc'") == 1

    def test_fetch_opaque_body(self):
        code = javascript.emit("fetch", _post("a=1"), {})
        assert "  body: 'a=1'" in code
        assert "const payload" not in code

    def test_axios(self):
        code = javascript.emit("axios", _post(method="patch"), HEADERS)
        assert code.startswith("const axios = require('axios');")
        assert "  method: 'patch'" in code
        assert "  data: payload" in code
        assert code.endswith("console.log(response.data);")

    def test_axios_without_body(self):
        code = javascript.emit("axios", RequestDescriptor(method="GET", url="https://x"), {})
        assert "data:" not in code
        assert "const headers = {};" in code


class TestRuby:
    def test_net_http(self):
        code = ruby.emit("net_http", _post(), HEADERS)
        assert "uri = URI('https://api.example.com/pets')" in code
        assert "request = Net::HTTP::Post.new(uri)" in code
        assert "request['Authorization'] = 'Bearer abc'" in code
        assert "request['X-Note'] = 'it\\'s'" in code
        assert "payload = {\n  'name' => 'Fido'," in code
        assert "    'nick' => nil" in code
        assert "request.body = payload.to_json" in code
        assert code.endswith("puts JSON.parse(response.body)")

    def test_net_http_delete(self):
        code = ruby.emit("net_http", _post(method="delete"), {})
        assert "Net::HTTP::Delete.new(uri)" in code
        assert "request.body" not in code

    def test_net_http_opaque_body(self):
        code = ruby.emit("net_http", _post("raw"), {})
        assert "request.body = 'raw'" in code

    def test_httparty(self):
        code = ruby.emit("httparty", _post(), HEADERS)
        assert "response = HTTParty.post(" in code
        assert "  'https://api.example.com/pets'," in code
        assert "  headers: {\n    'Content-Type' => 'application/json'," in code
        assert "  body: payload.to_json" in code
        assert code.count("'Authorization' => 'Bearer abc'") == 1

    def test_net_http_uncommon_verb(self):
        code = ruby.emit("net_http", RequestDescriptor(method="purge", url="https://x"), {"X-Key": "k"})
        assert "request = Net::HTTPGenericRequest.new('PURGE', false, true, uri)" in code
        assert "Net::HTTP::Purge" not in code
        assert "request['X-Key'] = 'k'" in code

    def test_httparty_uncommon_verb(self):
        code = ruby.emit("httparty", RequestDescriptor(method="purge", url="https://x"), {})
        assert "HTTParty.purge" not in code
        assert "class CustomRequest < Net::HTTPRequest\n  METHOD = 'PURGE'" in code
        assert "response = HTTParty::Request.new(\n  CustomRequest,\n  'https://x',\n  headers: {}\n).perform" in code


class TestRegistry:
    def test_resolve_default_variant(self):
        spec, variant, _ = registry.resolve("python")
        assert spec.display_name == "Python"
        assert variant == "requests"

    def test_resolve_is_case_insensitive(self):
        spec, variant, _ = registry.resolve("Python", "HTTPX")
        assert (spec.id, variant) == ("python", "httpx")

    def test_unknown_variant_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING, logger="request_snippets"):
            _, variant, _ = registry.resolve("ruby", "faraday")
        assert variant == "net_http"
        assert "faraday" in caplog.text

    def test_unknown_language(self):
        with pytest.raises(UnsupportedLanguage) as exc:
            registry.resolve("cobol")
        assert "cobol" in str(exc.value)
        assert "python" in exc.value.available

    def test_metadata_only_language(self):
        with pytest.raises(EmitterNotImplemented):
            registry.resolve("php", "guzzle")

    def test_catalog_order_and_flags(self):
        specs = registry.list_languages()
        assert [s.id for s in specs][:3] == ["javascript", "python", "ruby"]
        assert {s.id for s in specs if s.implemented} == {"javascript", "python", "ruby"}
        assert all(s.variants for s in specs)

    def test_generate_returns_snippet(self):
        snippet = registry.generate("javascript", "axios", _post(), HEADERS)
        assert (snippet.language, snippet.variant) == ("javascript", "axios")
        assert "axios(" in snippet.source_text

    def test_every_python_variant_is_valid(self):
        for variant in ("requests", "httpx"):
            for method in ("GET", "POST", "DELETE"):
                snippet = registry.generate("python", variant, _post(method=method), HEADERS)
                assert validate_snippet(snippet) is None
