"""Pydantic models describing bundle configuration and summaries."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..bundle.models import Version


class DirectorySource(BaseModel):
    directory: str = Field(..., description="Directory to collect, relative to the config file.")
    base_url: str = Field(..., description="URL prefix joined with each file's relative path.")

    model_config = ConfigDict(extra="forbid")


class BundleConfig(BaseModel):
    version: Version = Version.VERSION_B2
    primary_url: str
    manifest_url: Optional[str] = None
    sources: List[DirectorySource] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, value: object) -> Version:
        return Version.parse(value)  # type: ignore[arg-type]


class ExchangeSummary(BaseModel):
    url: str
    status: int
    content_type: Optional[str] = None
    content_length: Optional[int] = None

    model_config = ConfigDict(extra="forbid")


class BundleSummary(BaseModel):
    version: Version
    primary_url: str
    manifest_url: Optional[str] = None
    exchange_count: int = 0
    total_bytes: int = 0
    exchanges: List[ExchangeSummary] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")
