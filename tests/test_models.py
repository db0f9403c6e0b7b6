from __future__ import annotations

import dataclasses

import pytest

from webbundle_builder.bundle.models import Bundle, Exchange, Request, Response, Version


def _exchange(url: str, body: bytes = b"hi") -> Exchange:
    return Exchange(
        request=Request(uri=url),
        response=Response(status=200, headers={"Content-Length": str(len(body))}, body=body),
    )


def test_response_headers_are_read_only() -> None:
    response = _exchange("https://example.com/a").response

    assert response.headers["content-length"] == "2"
    with pytest.raises(TypeError):
        response.headers["x-extra"] = "1"  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        response.body = b"changed"  # type: ignore[misc]


def test_with_header_returns_new_response() -> None:
    response = _exchange("https://example.com/a").response

    extended = response.with_header("Cache-Control", "no-store")

    assert extended.headers["cache-control"] == "no-store"
    assert "cache-control" not in response.headers
    assert extended.body == response.body


def test_bundle_exchanges_are_a_tuple() -> None:
    exchanges = [_exchange("https://example.com/b"), _exchange("https://example.com/a")]
    bundle = Bundle(version=Version.VERSION_B2, primary_url="https://example.com/a", exchanges=exchanges)
    exchanges.clear()

    assert bundle.urls() == ["https://example.com/b", "https://example.com/a"]
    assert bundle.find("https://example.com/missing") is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [("1", Version.VERSION_1), ("B1", Version.VERSION_B1), (" b2 ", Version.VERSION_B2), (1, Version.VERSION_1)],
)
def test_version_parse(value: object, expected: Version) -> None:
    assert Version.parse(value) is expected  # type: ignore[arg-type]
