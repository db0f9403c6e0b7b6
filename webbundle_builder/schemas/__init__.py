"""Schema definitions for bundle configuration and summaries."""

from .bundle import BundleConfig, BundleSummary, DirectorySource, ExchangeSummary

__all__ = [
    "BundleConfig",
    "BundleSummary",
    "DirectorySource",
    "ExchangeSummary",
]
