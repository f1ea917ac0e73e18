"""Per-target string escaping.

Each target is described by a LiteralRules row. escape() always runs the
steps in the same order: backslash, delimiter, newline. Swapping the first
two would double the backslashes that the delimiter step introduces.
"""

from typing import NamedTuple

from request_snippets.errors import UnsupportedLanguage


class LiteralRules(NamedTuple):
    delimiter: str
    escaped_delimiter: str
    escape_backslash: bool = True
    escape_newline: bool = True
    null: str = "null"
    true: str = "true"
    false: str = "false"
    key_separator: str = ": "


RULES: dict[str, LiteralRules] = {
    "javascript": LiteralRules("'", "\\'"),
    "python": LiteralRules('"', '\\"', null="None", true="True", false="False"),
    "ruby": LiteralRules("'", "\\'", null="nil", key_separator=" => "),
    "json": LiteralRules('"', '\\"'),
    "shell": LiteralRules('"', '\\"'),
    # single-quoted PowerShell strings have no escape sequences
    "powershell": LiteralRules(
        "'",
        "''",
        escape_backslash=False,
        escape_newline=False,
        null="$null",
        true="$true",
        false="$false",
        key_separator=" = ",
    ),
}


def rules_for(target: str) -> LiteralRules:
    try:
        return RULES[target]
    except KeyError:
        raise UnsupportedLanguage(target, sorted(RULES)) from None


def escape(raw: str, target: str) -> str:
    """Escape raw text for use inside a string literal of the target."""
    rules = rules_for(target)
    text = str(raw)
    if rules.escape_backslash:
        text = text.replace("\\", "\\\\")
    text = text.replace(rules.delimiter, rules.escaped_delimiter)
    if rules.escape_newline:
        text = text.replace("\n", "\\n")
    return text


def quote(raw: str, target: str) -> str:
    """Return raw as a complete, delimited string literal."""
    delimiter = rules_for(target).delimiter
    return f"{delimiter}{escape(raw, target)}{delimiter}"
