"""Runner configuration: API server and offered auth types.

Looked up in this order: explicit path, $REQUEST_SNIPPETS_CONFIG,
./request_snippets.yml. A missing file means defaults.
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from request_snippets.errors import ConfigError
from request_snippets.generator.shell import ShellStyle
from request_snippets.logging_config import get_logger
from request_snippets.models import AuthType

logger = get_logger(__name__)

CONFIG_FILENAME = "request_snippets.yml"
CONFIG_ENV = "REQUEST_SNIPPETS_CONFIG"
API_SERVER_ENV = "REQUEST_SNIPPETS_API_SERVER"


class SnippetConfig(BaseModel):
    api_server: str = ""
    api_servers: list[str] = []
    auth_types: list[AuthType] = list(AuthType)
    default_language: str = "javascript"
    shell_style: ShellStyle = ShellStyle.MULTILINE

    def server_url(self, declared: list[str] | None = None) -> str:
        """Configured server, else the first configured or declared one."""
        candidates = [self.api_server] + self.api_servers + (declared or [])
        return next((url for url in candidates if url), "")


def _find_config_file(config_file: str | Path | None) -> Path | None:
    if config_file:
        return Path(config_file)
    if os.getenv(CONFIG_ENV):
        return Path(os.environ[CONFIG_ENV])
    candidate = Path.cwd() / CONFIG_FILENAME
    return candidate if candidate.exists() else None


def load_config(config_file: str | Path | None = None) -> SnippetConfig:
    path = _find_config_file(config_file)
    data = {}
    if path is not None:
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot load {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping")
        logger.debug("Loaded config from %s", path)

    if os.getenv(API_SERVER_ENV):
        data["api_server"] = os.environ[API_SERVER_ENV]

    try:
        return SnippetConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
