"""Data models for endpoints read from an API definitions document.

The live runner uses them to know which parameters go into the path or
the query string, and which schemas to synthesize examples from.
"""

from pydantic import BaseModel


class Param(BaseModel):
    """A single API parameter (query, path, header, or cookie)."""

    name: str
    location: str  # query / path / header / cookie
    required: bool
    param_type: str  # string / integer / boolean / array / object
    description: str = ""


class ApiEndpoint(BaseModel):
    """A single API endpoint with all its metadata."""

    method: str  # GET / POST / PUT / DELETE / PATCH
    path: str  # /api/users/{id}
    summary: str
    parameters: list[Param]
    request_body: dict | None  # dereferenced schema
    responses: dict  # {status_code: {description, schema}}
    tags: list[str]
    content_type: str = "application/json"
