"""Exceptions raised by the snippet engine and its loaders."""


class SnippetError(Exception):
    """Base class for request-snippets errors."""


class UnsupportedLanguage(SnippetError):
    """Raised when a language id is not in the catalog."""

    def __init__(self, language: str, available: list[str] | None = None):
        self.language = language
        self.available = available or []
        message = f"Unsupported language: {language}"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)


class EmitterNotImplemented(UnsupportedLanguage):
    """Raised for catalog languages that only carry metadata."""

    def __init__(self, language: str):
        self.language = language
        self.available = []
        SnippetError.__init__(self, f"Generator not implemented for language: {language}")


class DocumentError(SnippetError):
    """Raised when an API definitions document cannot be used."""


class ConfigError(SnippetError):
    """Raised when the configuration file is malformed."""
