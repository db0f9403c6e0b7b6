"""Value types making up an in-memory bundle."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from http import HTTPStatus
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, Optional, Tuple

if TYPE_CHECKING:
    from .builder import Builder


class Version(str, Enum):
    """Bundle format versions."""

    VERSION_B1 = "b1"
    VERSION_B2 = "b2"
    VERSION_1 = "1"

    @classmethod
    def parse(cls, value: "Version | str") -> "Version":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown bundle version '{value}' (expected one of: {choices})") from None


@dataclass(frozen=True, slots=True)
class Request:
    uri: str
    method: str = "GET"
    body: bytes = b""


@dataclass(frozen=True, slots=True)
class Response:
    status: int
    headers: Mapping[str, str]
    body: bytes

    def __post_init__(self) -> None:
        normalized = {name.lower(): str(value) for name, value in self.headers.items()}
        object.__setattr__(self, "headers", MappingProxyType(normalized))

    @property
    def ok(self) -> bool:
        return self.status == HTTPStatus.OK

    @property
    def content_type(self) -> Optional[str]:
        return self.headers.get("content-type")

    @property
    def content_length(self) -> Optional[int]:
        value = self.headers.get("content-length")
        return int(value) if value is not None else None

    def with_header(self, name: str, value: str) -> "Response":
        """Return a copy carrying one more header."""

        headers = dict(self.headers)
        headers[name.lower()] = value
        return replace(self, headers=headers)


@dataclass(frozen=True, slots=True)
class Exchange:
    """One request/response pair addressable inside a bundle."""

    request: Request
    response: Response

    @property
    def url(self) -> str:
        return self.request.uri


@dataclass(frozen=True, slots=True)
class Bundle:
    """Finalized bundle metadata plus its exchanges in insertion order."""

    version: Version
    primary_url: str
    manifest: Optional[str] = None
    exchanges: Tuple[Exchange, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "exchanges", tuple(self.exchanges))

    @property
    def manifest_url(self) -> Optional[str]:
        return self.manifest

    @classmethod
    def builder(cls) -> "Builder":
        from .builder import Builder

        return Builder()

    def urls(self) -> list[str]:
        return [exchange.url for exchange in self.exchanges]

    def find(self, url: str) -> Optional[Exchange]:
        """Return the first exchange addressed at ``url``."""

        for exchange in self.exchanges:
            if exchange.url == url:
                return exchange
        return None


__all__ = ["Bundle", "Exchange", "Request", "Response", "Version"]
