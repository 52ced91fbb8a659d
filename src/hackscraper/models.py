"""Domain models used across the pipeline."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, field_validator

DEFAULT_URL = "https://news.ycombinator.com/"


class PageSource(BaseModel):
    """The page to retrieve."""

    model_config = ConfigDict(frozen=True)

    url: HttpUrl = Field(default=DEFAULT_URL, validate_default=True)

    def __str__(self) -> str:
        return str(self.url)


class RawDocument(BaseModel):
    """Unparsed HTML body of a successful response."""

    url: str
    html: str
    status_code: int


class ExtractedRecord(BaseModel):
    """A single story pulled from the front page."""

    model_config = ConfigDict(frozen=True)

    rank: Optional[str] = None
    title: str
    url: str

    @field_validator("title", "url")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value
