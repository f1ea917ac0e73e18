"""Syntax checks for generated artifacts."""

import ast

from request_snippets.models import GeneratedSnippet


def validate_python(files: dict[str, str]) -> dict[str, str]:
    """Check Python sources for syntax errors.

    Returns dict of {filename: error_message} for files with errors.
    """
    errors = {}
    for filename, content in files.items():
        if not filename.endswith(".py"):
            continue
        if not content.strip():
            continue
        try:
            ast.parse(content, filename=filename)
        except SyntaxError as e:
            errors[filename] = f"SyntaxError: {e.msg} (line {e.lineno})"
    return errors


def validate_snippet(snippet: GeneratedSnippet) -> str | None:
    """Return an error message for a broken snippet, None when it looks fine.

    Only Python output is checked; other targets have no parser here.
    """
    if snippet.language != "python":
        return None
    name = f"{snippet.variant}.py"
    return validate_python({name: snippet.source_text}).get(name)
