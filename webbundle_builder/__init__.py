"""Assemble Web Bundle exchanges from directory trees."""

__version__ = "0.1.0"
from .bundle.builder import Builder
from .bundle.config import build_bundle_from_config, build_bundle_from_file, load_config
from .bundle.exchanges import ExchangeCollector, collect_exchanges
from .bundle.models import Bundle, Exchange, Request, Response, Version
from .bundle.summary import dump_summary, summarize_bundle
from .errors import (
    ConfigurationError,
    InvalidPathError,
    IoError,
    MissingFieldError,
    TraversalError,
    UrlError,
    WebBundleError,
)
from .schemas.bundle import BundleConfig, BundleSummary, DirectorySource, ExchangeSummary

__all__ = [
    "__version__",
    "Builder",
    "Bundle",
    "BundleConfig",
    "BundleSummary",
    "DirectorySource",
    "Exchange",
    "ExchangeCollector",
    "ExchangeSummary",
    "Request",
    "Response",
    "Version",
    "build_bundle_from_config",
    "build_bundle_from_file",
    "collect_exchanges",
    "dump_summary",
    "load_config",
    "summarize_bundle",
    "ConfigurationError",
    "InvalidPathError",
    "IoError",
    "MissingFieldError",
    "TraversalError",
    "UrlError",
    "WebBundleError",
]
