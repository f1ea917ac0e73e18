"""Static catalog of target languages and their snippet emitters.

Languages without an emitter are listed for the language picker but
cannot generate code yet.
"""

from enum import Enum
from typing import Callable, NamedTuple

from request_snippets.errors import EmitterNotImplemented, UnsupportedLanguage
from request_snippets.logging_config import get_logger
from request_snippets.models import GeneratedSnippet, LanguageSpec, RequestDescriptor

from . import javascript, python, ruby

logger = get_logger(__name__)

Emitter = Callable[[str, RequestDescriptor, dict[str, str]], str]


class Language(str, Enum):
    JAVASCRIPT = "javascript"
    PYTHON = "python"
    RUBY = "ruby"
    PHP = "php"
    GO = "go"
    JAVA = "java"
    CSHARP = "csharp"
    SWIFT = "swift"
    KOTLIN = "kotlin"


class LanguageEntry(NamedTuple):
    spec: LanguageSpec
    emit: Emitter | None


def _entry(language: Language, name: str, variants: tuple[str, ...], emit: Emitter | None = None) -> LanguageEntry:
    spec = LanguageSpec(
        id=language.value,
        display_name=name,
        variants=variants,
        implemented=emit is not None,
    )
    return LanguageEntry(spec, emit)


CATALOG: dict[Language, LanguageEntry] = {
    Language.JAVASCRIPT: _entry(Language.JAVASCRIPT, "JavaScript", ("fetch", "axios"), javascript.emit),
    Language.PYTHON: _entry(Language.PYTHON, "Python", ("requests", "httpx"), python.emit),
    Language.RUBY: _entry(Language.RUBY, "Ruby", ("net_http", "httparty"), ruby.emit),
    Language.PHP: _entry(Language.PHP, "PHP", ("curl", "guzzle")),
    Language.GO: _entry(Language.GO, "Go", ("net_http",)),
    Language.JAVA: _entry(Language.JAVA, "Java", ("okhttp", "httpclient")),
    Language.CSHARP: _entry(Language.CSHARP, "C#", ("httpclient",)),
    Language.SWIFT: _entry(Language.SWIFT, "Swift", ("urlsession",)),
    Language.KOTLIN: _entry(Language.KOTLIN, "Kotlin", ("okhttp",)),
}


def lookup(language: str) -> LanguageEntry:
    """Return the catalog entry for a language id (case-insensitive)."""
    try:
        return CATALOG[Language(str(language).lower())]
    except ValueError:
        raise UnsupportedLanguage(language, [lang.value for lang in CATALOG]) from None


def resolve(language: str, variant: str | None = None) -> tuple[LanguageSpec, str, Emitter]:
    """Pick the emitter for (language, variant).

    Unknown variants fall back to the language's default variant.
    """
    entry = lookup(language)
    if entry.emit is None:
        raise EmitterNotImplemented(entry.spec.id)

    chosen = (variant or "").lower()
    if chosen not in entry.spec.variants:
        if variant:
            logger.warning(
                "Unknown %s variant %r, using %r",
                entry.spec.id,
                variant,
                entry.spec.default_variant,
            )
        chosen = entry.spec.default_variant
    return entry.spec, chosen, entry.emit


def generate(
    language: str,
    variant: str | None,
    request: RequestDescriptor,
    headers: dict[str, str],
) -> GeneratedSnippet:
    spec, chosen, emit = resolve(language, variant)
    return GeneratedSnippet(
        language=spec.id,
        variant=chosen,
        source_text=emit(chosen, request, headers),
    )


def list_languages() -> list[LanguageSpec]:
    return [entry.spec for entry in CATALOG.values()]
