"""Configuration models and helpers for the front page scraper."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, Tuple

from pydantic import BaseModel, Field, HttpUrl, ValidationError

from hackscraper.errors import ConfigError
from hackscraper.models import DEFAULT_URL, PageSource

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_USER_AGENT",
    "ExtractorLayout",
    "OutputStyle",
    "ScrapeMode",
    "ScraperConfig",
]

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "data" / "scraper.json"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/129.0.0.0 Safari/537.36"
)


class ScrapeMode(str, Enum):
    """What the pipeline pulls out of the page."""

    STORIES = "stories"
    LINKS = "links"


class ExtractorLayout(str, Enum):
    """Structural shape used to locate stories on the page."""

    ITEM = "item"
    POSITIONAL = "positional"
    STORYLINK = "storylink"


class OutputStyle(str, Enum):
    """How extracted stories are printed."""

    LINES = "lines"
    TABLE = "table"


class ScraperConfig(BaseModel):
    """Settings for a single scraping run."""

    url: HttpUrl = Field(
        default=DEFAULT_URL,
        validate_default=True,
        description="Front page to fetch",
    )
    mode: ScrapeMode = Field(
        default=ScrapeMode.STORIES,
        description="Extract stories or dump every link on the page",
    )
    layout: ExtractorLayout = Field(
        default=ExtractorLayout.ITEM,
        description="Selector set used to find stories",
    )
    output: OutputStyle = Field(default=OutputStyle.LINES, description="Output format")
    strict: bool = Field(
        default=True,
        description=(
            "Abort the run on the first story missing a required field. "
            "When false, such stories are skipped with a warning."
        ),
    )
    color: bool = Field(default=True, description="Style table rows with ANSI colours")
    timeout: Tuple[float, float] = Field(
        default=(10, 60),
        description="Connect and read timeout in seconds",
    )
    user_agent: str = Field(default=DEFAULT_USER_AGENT)

    @property
    def source(self) -> PageSource:
        """Return the :class:`PageSource` the pipeline should fetch."""

        return PageSource(url=self.url)

    @classmethod
    def from_file(cls, path: Path | str | None = None) -> "ScraperConfig":
        """Load configuration data from a JSON file.

        Without an explicit ``path`` :data:`DEFAULT_CONFIG_PATH` is read. Only
        that implicit default may be missing; defaults are used in that case.
        """

        config_path = Path(path) if path else DEFAULT_CONFIG_PATH

        data: dict[str, Any] = {}
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            if path:
                raise ConfigError(f"Configuration file not found: {config_path}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in configuration file: {config_path}") from exc

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file must contain an object: {config_path}")

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"Configuration file is invalid: {config_path}\n{exc}") from exc
