"""Shared helpers for URL construction and content-type inference."""

from __future__ import annotations

import mimetypes
import os
from pathlib import PurePath
from urllib.parse import quote, urljoin

from pydantic import AnyUrl, TypeAdapter, ValidationError

from ..errors import InvalidPathError, UrlError

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# ':' stays encoded so a first segment like "c:foo" is never read as a scheme.
_PATH_SAFE_CHARS = "/!$&'()*+,;=@~"

_URL_ADAPTER = TypeAdapter(AnyUrl)


def _parse_url(url: str) -> AnyUrl:
    if not isinstance(url, str) or not url.strip():
        raise UrlError(str(url), "empty URL")
    try:
        return _URL_ADAPTER.validate_python(url)
    except ValidationError as exc:
        reason = exc.errors()[0].get("msg") if exc.errors() else None
        raise UrlError(url, reason) from exc


def validate_url(url: str) -> str:
    """Return ``url`` unchanged if it is an absolute URL, else raise ``UrlError``."""

    _parse_url(url)
    return url


def normalize_url(url: str) -> str:
    """Return the serialized form of ``url`` (percent-encoded, normalized)."""

    return str(_parse_url(url))


def ensure_relative(path: PurePath) -> PurePath:
    """Reject absolute paths and paths that climb out with ``..``."""

    if path.is_absolute() or path.anchor:
        raise InvalidPathError(path)
    if ".." in path.parts:
        raise InvalidPathError(path, "Path escapes the base directory")
    return path


def join_url(base_url: str, relative_path: PurePath) -> str:
    """Join a relative filesystem path onto ``base_url`` using URL-join rules."""

    ensure_relative(relative_path)
    # Undecodable file names keep their raw bytes, e.g. b"caf\xe9" -> "caf%E9".
    encoded = quote(os.fsencode(relative_path.as_posix()), safe=_PATH_SAFE_CHARS)
    joined = urljoin(base_url, encoded)
    return normalize_url(joined)


def guess_content_type(path: PurePath | str) -> str:
    """Infer a content type from the file extension only."""

    content_type, _ = mimetypes.guess_type(PurePath(path).name, strict=False)
    return content_type or DEFAULT_CONTENT_TYPE


__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "ensure_relative",
    "guess_content_type",
    "join_url",
    "normalize_url",
    "validate_url",
]
