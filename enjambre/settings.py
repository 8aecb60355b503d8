"""Command-line configuration loaded from the environment."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_bool(raw: str | None, default: bool) -> bool:
    if raw == "true":
        return True
    if raw == "false":
        return False
    return default


def _parse_count(raw: str | None, default: int) -> int:
    if raw is not None and _UNSIGNED.fullmatch(raw):
        return int(raw)
    return default


@dataclass
class CliConfig:
    gemini_api_key: str | None = None
    default_adapter: str = "gemini"
    max_concurrent_tasks: int = 4
    enable_neural_selection: bool = True
    enable_adaptive_learning: bool = True
    log_level: str = "info"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CliConfig:
        """Build a configuration from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            gemini_api_key=env.get("GEMINI_API_KEY"),
            default_adapter=env.get("DEFAULT_ADAPTER", defaults.default_adapter),
            max_concurrent_tasks=_parse_count(
                env.get("MAX_CONCURRENT_TASKS"), defaults.max_concurrent_tasks
            ),
            enable_neural_selection=_parse_bool(
                env.get("ENABLE_NEURAL_SELECTION"), defaults.enable_neural_selection
            ),
            enable_adaptive_learning=_parse_bool(
                env.get("ENABLE_ADAPTIVE_LEARNING"), defaults.enable_adaptive_learning
            ),
            log_level=env.get("LOG_LEVEL", defaults.log_level),
        )


def config_dir(home: str | os.PathLike[str] | None = None) -> Path | None:
    """Return the configuration directory under the home directory, if one is known."""
    if home is None:
        try:
            home = Path.home()
        except RuntimeError:
            return None
    return Path(home) / ".enjambre"