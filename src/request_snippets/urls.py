"""Build the request URL from a path template and parameter values."""

from urllib.parse import quote

from request_snippets.parser.base import Param


def build_url(url_template: str, parameters: list[Param], values: dict[str, str]) -> str:
    """Substitute path parameters, then append query parameters.

    Only declared parameters are used. Values are percent-encoded and empty
    values are skipped.
    """
    url = url_template
    declared = {(p.name, p.location) for p in parameters}

    for name, value in values.items():
        if value and (name, "path") in declared:
            url = url.replace(f"{{{name}}}", quote(str(value), safe=""))

    query = [
        f"{name}={quote(str(value), safe='')}"
        for name, value in values.items()
        if value and (name, "query") in declared
    ]
    if query:
        url += ("&" if "?" in url else "?") + "&".join(query)
    return url


def infer_parameters(url_template: str, values: dict[str, str]) -> list[Param]:
    """Declare ad-hoc values: {name} in the template means path, else query."""
    params = []
    for name in values:
        in_path = f"{{{name}}}" in url_template
        params.append(
            Param(
                name=name,
                location="path" if in_path else "query",
                required=in_path,
                param_type="string",
            )
        )
    return params
