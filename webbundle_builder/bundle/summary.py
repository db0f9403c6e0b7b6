"""Summaries of assembled bundles."""

from __future__ import annotations

from pathlib import Path

from ..schemas.bundle import BundleSummary, ExchangeSummary
from .models import Bundle


def summarize_bundle(bundle: Bundle) -> BundleSummary:
    """Describe a bundle's metadata and exchanges, without the bodies."""

    exchanges = [
        ExchangeSummary(
            url=exchange.url,
            status=int(exchange.response.status),
            content_type=exchange.response.content_type,
            content_length=exchange.response.content_length,
        )
        for exchange in bundle.exchanges
    ]
    return BundleSummary(
        version=bundle.version,
        primary_url=bundle.primary_url,
        manifest_url=bundle.manifest,
        exchange_count=len(exchanges),
        total_bytes=sum(len(exchange.response.body) for exchange in bundle.exchanges),
        exchanges=exchanges,
    )


def dump_summary(summary: BundleSummary, path: Path) -> None:
    """Write a summary to disk as JSON."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(summary.model_dump_json(indent=2) + "\n", encoding="utf-8")


__all__ = ["dump_summary", "summarize_bundle"]
