"""Core interfaces and context objects shared by pdfforge tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ...core.utils import resolve_path


@dataclass
class ConversionContext:
    """Holds shared execution state for a tool invocation."""

    output_path: Path | None = None
    resources: dict[str, Any] = field(default_factory=dict)
    config: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.output_path, (str, Path)):
            self.output_path = resolve_path(self.output_path)

    def input_paths(self) -> list[Path]:
        """Return the resolved ``config["inputs"]`` paths."""

        return [resolve_path(path) for path in self.config.get("inputs") or ()]


class BaseTool:
    """Base class for all pluggable pdfforge tools."""

    name: str

    def __init__(self, context: ConversionContext) -> None:
        self.context = context

    def run(self) -> Any:  # pragma: no cover - to be implemented by subclasses
        raise NotImplementedError
