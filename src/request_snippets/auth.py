"""Fold runner credentials into request headers."""

import base64

from request_snippets.models import AuthDescriptor, AuthType

DEFAULT_CONTENT_TYPE = "application/json"


def with_default_content_type(headers: dict[str, str] | None) -> dict[str, str]:
    """Prepend Content-Type: application/json unless the caller set it.

    Only an exact-case "Content-Type" key overrides the default.
    """
    return {"Content-Type": DEFAULT_CONTENT_TYPE, **(headers or {})}


def auth_header(auth: AuthDescriptor) -> tuple[str, str]:
    """Return the (name, value) pair for a credential."""
    if auth.type == AuthType.API_KEY:
        return "X-API-Key", auth.value
    if auth.type == AuthType.BASIC:
        encoded = base64.b64encode(auth.value.encode("utf-8")).decode("ascii")
        return "Authorization", f"Basic {encoded}"
    # bearer and oauth2 both send the token as-is
    return "Authorization", f"Bearer {auth.value}"


def inject(
    headers: dict[str, str] | None,
    auth: AuthDescriptor | dict | None = None,
) -> dict[str, str]:
    """Return a copy of headers with the credential header set."""
    result = dict(headers or {})
    if auth is None:
        return result
    if isinstance(auth, dict):
        auth = AuthDescriptor(**auth)
    if not auth.value:
        return result
    name, value = auth_header(auth)
    result[name] = value
    return result


def prepare_headers(
    headers: dict[str, str] | None,
    auth: AuthDescriptor | dict | None = None,
) -> dict[str, str]:
    """Default Content-Type first, then the credential."""
    return inject(with_default_content_type(headers), auth)
