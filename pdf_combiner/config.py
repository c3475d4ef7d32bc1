"""Environment driven settings for :mod:`pdf_combiner`."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

_TRUTHY = {"1", "true", "yes", "on"}

DOWNLOAD_DIR_ENV = "PDF_COMBINER_DOWNLOAD_DIR"
OPEN_BROWSER_ENV = "PDF_COMBINER_OPEN_BROWSER"
OUTPUT_MODE_ENV = "PDF_COMBINER_OUTPUT_MODE"
LOG_LEVEL_ENV = "PDF_COMBINER_LOG_LEVEL"


def _default_download_dir() -> Path:
    return Path("~/Downloads").expanduser()


def _flag(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class CombinerSettings:
    """
    Runtime settings shared by the engine and the CLI.

    Attributes:
        download_dir: Directory receiving files written in ``download`` mode
        open_browser: Whether ``browser`` mode launches the system viewer
        output_mode: Output mode used by the CLI when none is given
        log_level: Logging level name used by the CLI
    """
    download_dir: Path = field(default_factory=_default_download_dir)
    open_browser: bool = True
    output_mode: str = "file"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CombinerSettings":
        env = os.environ if environ is None else environ

        download_dir = env.get(DOWNLOAD_DIR_ENV)
        return cls(
            download_dir=Path(download_dir).expanduser() if download_dir else _default_download_dir(),
            open_browser=_flag(env.get(OPEN_BROWSER_ENV), True),
            output_mode=(env.get(OUTPUT_MODE_ENV) or "file").strip().lower(),
            log_level=(env.get(LOG_LEVEL_ENV) or "WARNING").strip().upper(),
        )


__all__ = ["CombinerSettings"]
