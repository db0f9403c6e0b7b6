"""Exception hierarchy for bundle assembly."""

from __future__ import annotations

import errno
from pathlib import PurePath
from typing import Optional, Union

PathLike = Union[str, PurePath]


class WebBundleError(RuntimeError):
    """Base class for every error raised while assembling a bundle."""


class MissingFieldError(WebBundleError):
    """Raised when a bundle is finalized without a required field."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required bundle field '{field}'.")


class InvalidPathError(WebBundleError):
    """Raised when a path expected to be relative is not."""

    def __init__(self, path: PathLike, reason: str = "Path is not relative") -> None:
        self.path = path
        super().__init__(f"{reason}: {path}")


class UrlError(WebBundleError):
    """Raised when a string cannot be used as an absolute URL."""

    def __init__(self, url: str, reason: Optional[str] = None) -> None:
        self.url = url
        message = f"Invalid URL: {url!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class IoError(WebBundleError):
    """Raised when a file cannot be read. The ``OSError`` is kept as ``__cause__``."""

    NOT_FOUND = "not-found"
    PERMISSION_DENIED = "permission-denied"
    OTHER = "other"

    def __init__(self, path: PathLike, kind: str, detail: str = "") -> None:
        self.path = path
        self.kind = kind
        message = f"Unable to read {path} ({kind})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    @classmethod
    def from_os_error(cls, path: PathLike, exc: OSError) -> "IoError":
        if isinstance(exc, FileNotFoundError) or exc.errno == errno.ENOENT:
            kind = cls.NOT_FOUND
        elif isinstance(exc, PermissionError) or exc.errno in (errno.EACCES, errno.EPERM):
            kind = cls.PERMISSION_DENIED
        else:
            kind = cls.OTHER
        return cls(path, kind, exc.strerror or str(exc))


class ConfigurationError(WebBundleError):
    """Raised when bundle inputs (directories, config files) are unusable."""


class TraversalError(ConfigurationError):
    """Raised when walking a directory tree fails."""

    def __init__(self, path: PathLike, detail: str = "") -> None:
        self.path = path
        message = f"Unable to traverse {path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


__all__ = [
    "ConfigurationError",
    "InvalidPathError",
    "IoError",
    "MissingFieldError",
    "TraversalError",
    "UrlError",
    "WebBundleError",
]
