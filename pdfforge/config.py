"""Environment driven settings for pdfforge."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path
from typing import Callable, Mapping, TypeVar

from .core.model import PageGeometry

ENV_PREFIX = "PDFFORGE_"
DEFAULT_FONT_URL = (
    "https://github.com/googlefonts/roboto/raw/main/src/hinted/Roboto-Regular.ttf"
)
DEFAULT_FONT_PATH = Path("~/.cache/pdfforge/fonts/Roboto-Regular.ttf")

_T = TypeVar("_T")


def _read(
    env: Mapping[str, str],
    name: str,
    default: _T,
    parse: Callable[[str], _T],
) -> _T:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return parse(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} has an invalid value: {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    """Runtime configuration shared by the library, CLI and backend."""

    font_path: Path = DEFAULT_FONT_PATH
    font_url: str = DEFAULT_FONT_URL
    font_size: float = 11.0
    page_width: float = 595.28
    page_height: float = 841.89
    margin: float = 50.0
    line_height: float = 14.0
    max_workers: int = 4
    max_upload_mb: int = 25
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from ``PDFFORGE_*`` environment variables."""

        source = os.environ if env is None else env
        defaults = cls()
        return cls(
            font_path=_read(source, "FONT_PATH", defaults.font_path, Path),
            font_url=_read(source, "FONT_URL", defaults.font_url, str),
            font_size=_read(source, "FONT_SIZE", defaults.font_size, float),
            page_width=_read(source, "PAGE_WIDTH", defaults.page_width, float),
            page_height=_read(source, "PAGE_HEIGHT", defaults.page_height, float),
            margin=_read(source, "MARGIN", defaults.margin, float),
            line_height=_read(source, "LINE_HEIGHT", defaults.line_height, float),
            max_workers=_read(source, "MAX_WORKERS", defaults.max_workers, int),
            max_upload_mb=_read(source, "MAX_UPLOAD_MB", defaults.max_upload_mb, int),
            log_level=_read(source, "LOG_LEVEL", defaults.log_level, str.upper),
        )

    @property
    def resolved_font_path(self) -> Path:
        return Path(self.font_path).expanduser()

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

    def geometry(self) -> PageGeometry:
        return PageGeometry(
            width=self.page_width,
            height=self.page_height,
            margin=self.margin,
            line_height=self.line_height,
            font_size=self.font_size,
        )

    def with_updates(self, **changes: object) -> "Settings":
        return replace(self, **changes)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings read once from the environment."""

    return Settings.from_env()


__all__ = ["Settings", "get_settings", "ENV_PREFIX", "DEFAULT_FONT_URL", "DEFAULT_FONT_PATH"]
