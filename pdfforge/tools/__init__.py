"""Namespace for pluggable pdfforge tools."""

from __future__ import annotations

from .common.pipeline import registry


def load_builtin_plugins() -> None:
    from .merger import merge  # noqa: F401
    from .converter import convert  # noqa: F401
    from .fonts import fetch  # noqa: F401


__all__ = ["registry", "load_builtin_plugins"]
