"""Bundle assembly."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from ..errors import MissingFieldError
from .exchanges import ExchangeCollector
from .models import Bundle, Exchange, Version
from .utils import validate_url

logger = logging.getLogger(__name__)


class Builder:
    """Accumulates bundle metadata and exchanges, then finalizes a ``Bundle``.

    Example::

        bundle = (
            Builder()
            .version(Version.VERSION_B2)
            .primary_url("https://example.com/index.html")
            .exchanges_from_dir("assets", "https://example.com/")
            .build()
        )
    """

    def __init__(self) -> None:
        self._version: Optional[Version] = None
        self._primary_url: Optional[str] = None
        self._manifest: Optional[str] = None
        self._exchanges: List[Exchange] = []

    def version(self, version: Version | str) -> "Builder":
        self._version = Version.parse(version)
        return self

    def primary_url(self, primary_url: str) -> "Builder":
        self._primary_url = validate_url(primary_url)
        return self

    def manifest(self, manifest: str) -> "Builder":
        self._manifest = validate_url(manifest)
        return self

    def exchange(self, exchange: Exchange) -> "Builder":
        self._exchanges.append(exchange)
        return self

    def exchanges_from_dir(self, directory: Path | str, base_url: str) -> "Builder":
        """Append exchanges for every file under ``directory``.

        The path of each file relative to ``directory`` is joined onto
        ``base_url`` to form its URL. Raises ``TraversalError`` (a
        ``ConfigurationError``) when the directory cannot be walked.
        """

        collected = ExchangeCollector(directory, base_url).walk().build()
        logger.debug("Added %d exchanges from %s", len(collected), directory)
        self._exchanges.extend(collected)
        return self

    set_version = version
    set_primary_url = primary_url
    set_manifest_url = manifest
    add_exchange = exchange
    add_exchanges_from_directory = exchanges_from_dir

    def build(self) -> Bundle:
        if self._version is None:
            raise MissingFieldError("version")
        if self._primary_url is None:
            raise MissingFieldError("primary_url")
        return Bundle(
            version=self._version,
            primary_url=self._primary_url,
            manifest=self._manifest,
            exchanges=tuple(self._exchanges),
        )


__all__ = ["Builder"]
