from __future__ import annotations

from pathlib import Path

import pytest

from webbundle_builder.bundle.builder import Builder
from webbundle_builder.bundle.exchanges import ExchangeCollector
from webbundle_builder.bundle.models import Bundle, Version
from webbundle_builder.errors import ConfigurationError, MissingFieldError, UrlError


def test_build_fails_without_metadata() -> None:
    with pytest.raises(MissingFieldError) as excinfo:
        Builder().build()
    assert excinfo.value.field == "version"


def test_build_fails_without_primary_url() -> None:
    with pytest.raises(MissingFieldError) as excinfo:
        Builder().version(Version.VERSION_1).build()
    assert excinfo.value.field == "primary_url"
    assert "primary_url" in str(excinfo.value)


def test_build_fails_without_version() -> None:
    with pytest.raises(MissingFieldError) as excinfo:
        Builder().primary_url("https://example.com").build()
    assert excinfo.value.field == "version"


def test_build_keeps_inputs() -> None:
    bundle = Builder().version(Version.VERSION_1).primary_url("https://example.com").build()

    assert bundle.version == Version.VERSION_1
    assert bundle.primary_url == "https://example.com"
    assert bundle.manifest is None
    assert bundle.exchanges == ()


def test_setter_aliases_and_manifest() -> None:
    bundle = (
        Bundle.builder()
        .set_version("b2")
        .set_primary_url("https://example.com/index.html")
        .set_manifest_url("https://example.com/manifest.webmanifest")
        .build()
    )

    assert bundle.version is Version.VERSION_B2
    assert bundle.manifest_url == "https://example.com/manifest.webmanifest"


def test_primary_url_must_be_absolute() -> None:
    with pytest.raises(UrlError):
        Builder().primary_url("/index.html")


def test_unknown_version_is_rejected() -> None:
    with pytest.raises(ValueError):
        Builder().version("b9")


def test_exchanges_from_dir(builder_dir: Path) -> None:
    bundle = (
        Builder()
        .version(Version.VERSION_B2)
        .primary_url("https://example.com/index.html")
        .exchanges_from_dir(builder_dir, "https://example.com/")
        .build()
    )

    assert set(bundle.urls()) == {"https://example.com/index.html", "https://example.com/js/hello.js"}
    index = bundle.find("https://example.com/index.html")
    assert index is not None
    assert index.response.body == (builder_dir / "index.html").read_bytes()


def test_exchanges_keep_insertion_order(builder_dir: Path, site_dir: Path) -> None:
    manual = ExchangeCollector(builder_dir, "https://manual.example/").exchange("js/hello.js").build()[0]

    bundle = (
        Builder()
        .version(Version.VERSION_B2)
        .primary_url("https://example.org/index.html")
        .add_exchange(manual)
        .add_exchanges_from_directory(site_dir, "https://example.org/")
        .exchange(manual)
        .build()
    )

    urls = bundle.urls()
    assert len(urls) == 4
    assert urls[0] == urls[-1] == manual.url
    assert set(urls[1:3]) == {"https://example.org/index.html", "https://example.org/js/hello.js"}


def test_exchanges_from_missing_dir_raises_configuration_error(tmp_path: Path) -> None:
    builder = Builder().version(Version.VERSION_B2).primary_url("https://example.com/")

    with pytest.raises(ConfigurationError):
        builder.exchanges_from_dir(tmp_path / "missing", "https://example.com/")

    assert builder.build().exchanges == ()
