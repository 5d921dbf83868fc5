"""ETag support for static downloads."""

import hashlib

from fastapi import Request, status
from fastapi.responses import Response


def compute_etag(content: str | bytes) -> str:
    """Compute ETag from content (weak ETag with W/ prefix)."""
    if isinstance(content, str):
        content_bytes = content.encode("utf-8")
    else:
        content_bytes = content

    hash_value = hashlib.md5(content_bytes).hexdigest()
    return f'W/"{hash_value}"'


def check_if_none_match(request: Request, etag: str) -> bool:
    """
    Check If-None-Match header against computed ETag.

    Returns True if client has matching ETag (should return 304).
    """
    if_none_match = request.headers.get("If-None-Match")
    if not if_none_match:
        return False

    server_etag = _normalize(etag)
    return any(_normalize(candidate) == server_etag for candidate in if_none_match.split(","))


def _normalize(etag: str) -> str:
    return etag.strip().replace("W/", "").strip('"')


def create_not_modified_response(etag: str) -> Response:
    """Create 304 Not Modified response with ETag header."""
    return Response(
        status_code=status.HTTP_304_NOT_MODIFIED,
        headers={"ETag": etag},
    )
