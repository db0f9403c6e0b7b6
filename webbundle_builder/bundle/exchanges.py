"""Turn the files under a directory into bundle exchanges.

Every file body is buffered in memory and kept until the collector (or the
bundle built from it) is discarded, so peak memory grows with the total size
of the collected tree.
"""

from __future__ import annotations

import logging
import os
from http import HTTPStatus
from pathlib import Path, PurePath
from typing import Iterator, List

from ..errors import IoError, TraversalError
from .models import Exchange, Request, Response
from .utils import ensure_relative, guess_content_type, join_url, validate_url

logger = logging.getLogger(__name__)


class ExchangeCollector:
    """Collects one exchange per regular file below ``base_dir``.

    A file at ``base_dir/js/hello.js`` is addressed as ``urljoin(base_url, "js/hello.js")``.
    Symbolic links are skipped with a warning; any read or traversal failure
    aborts the whole walk.
    """

    def __init__(self, base_dir: Path | str, base_url: str) -> None:
        self.base_dir = Path(base_dir)
        self.base_url = validate_url(base_url)
        self.exchanges: List[Exchange] = []

    def walk(self) -> "ExchangeCollector":
        """Visit the whole tree, collecting an exchange for each regular file."""

        logger.debug("Collecting exchanges from %s (base URL %s)", self.base_dir, self.base_url)
        for path in self._iter_files():
            self.exchange(path.relative_to(self.base_dir))
        return self

    traverse = walk

    def exchange(self, relative_path: PurePath | str) -> "ExchangeCollector":
        """Append the exchange for a single file given relative to ``base_dir``."""

        relative = ensure_relative(PurePath(relative_path))
        request = Request(uri=join_url(self.base_url, relative))
        response = self.create_response(relative)
        self.exchanges.append(Exchange(request=request, response=response))
        logger.debug("Collected %s (%s bytes)", request.uri, len(response.body))
        return self

    def exchange_from_relative_path(self, relative_path: PurePath | str) -> Exchange:
        """Build and collect the exchange for ``relative_path`` and return it."""

        self.exchange(relative_path)
        return self.exchanges[-1]

    def create_response(self, relative_path: PurePath | str) -> Response:
        relative = ensure_relative(PurePath(relative_path))
        path = self.base_dir / relative
        try:
            body = path.read_bytes()
        except OSError as exc:
            raise IoError.from_os_error(path, exc) from exc

        headers = {
            "content-length": str(len(body)),
            "content-type": guess_content_type(path),
        }
        return Response(status=HTTPStatus.OK, headers=headers, body=body)

    def build(self) -> List[Exchange]:
        return self.exchanges

    collected = build

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _iter_files(self) -> Iterator[Path]:
        if self.base_dir.is_symlink():
            logger.warning("Base directory is a symbolic link. Following. %s", self.base_dir)
        if not self.base_dir.exists():
            raise TraversalError(self.base_dir, "directory does not exist")
        if not self.base_dir.is_dir():
            raise TraversalError(self.base_dir, "not a directory")

        pending = [self.base_dir]
        while pending:
            directory = pending.pop()
            try:
                with os.scandir(directory) as entries:
                    children = list(entries)
            except OSError as exc:
                raise TraversalError(directory, exc.strerror or str(exc)) from exc

            for entry in children:
                try:
                    if entry.is_symlink():
                        logger.warning("Path is a symbolic link. Skipping. %s", entry.path)
                        continue
                    is_dir = entry.is_dir(follow_symlinks=False)
                    is_file = entry.is_file(follow_symlinks=False)
                except OSError as exc:
                    raise TraversalError(entry.path, exc.strerror or str(exc)) from exc
                if is_dir:
                    pending.append(Path(entry.path))
                elif is_file:
                    yield Path(entry.path)


def collect_exchanges(base_dir: Path | str, base_url: str) -> List[Exchange]:
    """Walk ``base_dir`` and return its exchanges in traversal order."""

    return ExchangeCollector(base_dir, base_url).walk().build()


__all__ = ["ExchangeCollector", "collect_exchanges"]
