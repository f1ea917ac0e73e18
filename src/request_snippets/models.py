"""Data models shared by the renderers.

The UI (or CLI) builds a RequestDescriptor and optionally an AuthDescriptor;
everything downstream treats them as read-only values.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

MUTATING_METHODS = ("POST", "PUT", "PATCH")


class AuthType(str, Enum):
    BEARER = "bearer"
    API_KEY = "api_key"
    BASIC = "basic"
    OAUTH2 = "oauth2"


class RequestDescriptor(BaseModel):
    """One HTTP request as shown in the live runner."""

    method: str = "GET"
    url: str
    headers: dict[str, str] = {}  # keys kept as supplied, insertion order
    body: str | None = None

    @property
    def verb(self) -> str:
        return self.method.upper()

    @property
    def carries_body(self) -> bool:
        """True when the body should be rendered at all."""
        return self.verb in MUTATING_METHODS and bool(self.body)


class AuthDescriptor(BaseModel):
    """Credentials entered in the runner; never stored."""

    type: AuthType
    value: str = ""


class LanguageSpec(BaseModel):
    """Catalog entry for one target language."""

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str
    variants: tuple[str, ...]
    implemented: bool = True

    @property
    def default_variant(self) -> str:
        return self.variants[0]


class GeneratedSnippet(BaseModel):
    model_config = ConfigDict(frozen=True)

    language: str
    variant: str
    source_text: str = Field(default="")
