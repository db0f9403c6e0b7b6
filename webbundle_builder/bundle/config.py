"""YAML bundle configuration helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from ..errors import ConfigurationError
from ..schemas.bundle import BundleConfig
from .builder import Builder
from .models import Bundle

logger = logging.getLogger(__name__)


def load_config(path: Path) -> BundleConfig:
    """Load and validate a bundle config from YAML."""

    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Unable to read bundle config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Malformed bundle config {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise ConfigurationError(f"Bundle config {path} must be a mapping.")
    try:
        return BundleConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid bundle config {path}: {exc}") from exc


def build_bundle_from_config(config: BundleConfig, *, root: Optional[Path] = None) -> Bundle:
    """Assemble a bundle; relative source directories resolve against ``root``."""

    base = Path(root) if root is not None else Path.cwd()
    builder = Builder().version(config.version).primary_url(config.primary_url)
    if config.manifest_url:
        builder.manifest(config.manifest_url)
    for source in config.sources:
        directory = Path(source.directory)
        if not directory.is_absolute():
            directory = base / directory
        logger.info("Collecting %s as %s", directory, source.base_url)
        builder.exchanges_from_dir(directory, source.base_url)
    return builder.build()


def build_bundle_from_file(path: Path) -> Bundle:
    config = load_config(path)
    return build_bundle_from_config(config, root=path.parent)


__all__ = ["build_bundle_from_config", "build_bundle_from_file", "load_config"]
