from pathlib import Path

import pytest
from click.testing import CliRunner

from request_snippets.cli import main
from request_snippets.config import API_SERVER_ENV, CONFIG_ENV

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    monkeypatch.delenv(API_SERVER_ENV, raising=False)
    monkeypatch.chdir(tmp_path)


class TestCliLanguages:
    def test_lists_catalog(self):
        result = CliRunner().invoke(main, ["languages"])
        assert result.exit_code == 0
        assert "python" in result.output
        assert "fetch, axios" in result.output
        assert "okhttp *" in result.output


class TestCliCode:
    def test_python_with_path_param(self):
        result = CliRunner().invoke(main, [
            "code", "python",
            "--url", "https://api.example.com/pets/{petId}",
            "-p", "petId=7",
            "-X", "put",
            "-d", '{"name": "Fido"}',
            "--auth-type", "api_key", "--auth-value", "secret",
            "--check",
        ])
        assert result.exit_code == 0, result.output
        assert 'url = "https://api.example.com/pets/7"' in result.output
        assert '"X-API-Key": "secret"' in result.output
        assert "requests.put(url, headers=headers, json=payload)" in result.output

    def test_default_language_from_config(self, tmp_path):
        (tmp_path / "request_snippets.yml").write_text("default_language: ruby\n")
        result = CliRunner().invoke(main, ["code", "--url", "https://x", "-H", "Accept: text/plain"])
        assert result.exit_code == 0, result.output
        assert "request['Accept'] = 'text/plain'" in result.output

    def test_unknown_language(self):
        result = CliRunner().invoke(main, ["code", "cobol", "--url", "https://x"])
        assert result.exit_code == 1
        assert "Unsupported language: cobol" in result.output

    def test_url_required(self):
        result = CliRunner().invoke(main, ["code", "python"])
        assert result.exit_code != 0
        assert "--url" in result.output

    def test_bad_header(self):
        result = CliRunner().invoke(main, ["code", "python", "--url", "https://x", "-H", "nocolon"])
        assert result.exit_code != 0


class TestCliCurl:
    def test_from_document(self):
        result = CliRunner().invoke(main, [
            "curl", "--style", "single",
            "--doc", str(FIXTURES / "petstore.yaml"),
            "--path", "/pets/{petId}",
            "-p", "petId=3", "-p", "fields=name", "-p", "ignored=1",
        ])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == (
            'curl -X GET "https://petstore.example.com/v1/pets/3?fields=name" '
            '-H "Content-Type: application/json"'
        )

    def test_unknown_endpoint(self):
        result = CliRunner().invoke(main, [
            "curl", "--doc", str(FIXTURES / "petstore.yaml"), "--path", "/owners",
        ])
        assert result.exit_code != 0
        assert "No GET /owners" in result.output

    def test_powershell_file_gets_extension(self, tmp_path):
        output = tmp_path / "out" / "request"
        result = CliRunner().invoke(main, [
            "curl", "--style", "powershell", "--url", "https://x", "-o", str(output),
        ])
        assert result.exit_code == 0, result.output
        saved = tmp_path / "out" / "request.ps1"
        assert saved.exists()
        assert "Invoke-WebRequest -Uri 'https://x'" in saved.read_text()
        assert "text/plain" in result.output


class TestCliExample:
    def test_request_body_example(self):
        result = CliRunner().invoke(main, ["example", str(FIXTURES / "petstore.yaml"), "-X", "post"])
        assert result.exit_code == 0, result.output
        assert "## POST /pets" in result.output
        assert '"status": "available"' in result.output
        assert '"email": "owner@example.com"' in result.output

    def test_response_examples_as_python(self):
        result = CliRunner().invoke(main, [
            "example", str(FIXTURES / "petstore.yaml"),
            "--path", "/pets", "-X", "get", "--responses", "--language", "python",
        ])
        assert result.exit_code == 0, result.output
        assert "# 200" in result.output
        assert '"name": "string"' in result.output

    def test_no_match(self):
        result = CliRunner().invoke(main, ["example", str(FIXTURES / "petstore.yaml"), "--path", "/none"])
        assert result.exit_code == 0
        assert "No matching endpoints" in result.output
