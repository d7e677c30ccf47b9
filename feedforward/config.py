"""
Configuration management for feedforward runs.
TOML-based defaults for the architecture, input vector and output target.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:  # Python < 3.11
    import tomli as tomllib  # type: ignore

from .console import DEFAULT_DELAY_MS
from .serialization import SUPPORTED_FORMATS

logger = logging.getLogger("feedforward.config")

CONFIG_FILENAME = ".feedforward.toml"

DEMO_LAYER_SIZES: list[int] = [4, 3, 2]
DEMO_INPUT: list[float] = [0.1, 0.4, 0.2, 0.3]
DEFAULT_OUTPUT = "neuralNetwork.json"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


@dataclass
class FeedforwardConfig:
    """Configuration for a feedforward run."""

    layers: list[int] = field(default_factory=lambda: list(DEMO_LAYER_SIZES))
    input: list[float] = field(default_factory=lambda: list(DEMO_INPUT))
    seed: int | None = None
    output: str = DEFAULT_OUTPUT
    format: str | None = None
    delay_ms: int = DEFAULT_DELAY_MS

    @classmethod
    def load(cls, path: Path | None = None) -> FeedforwardConfig:
        """
        Load configuration from file or use defaults.

        Search order:
        1. Specified path (if provided)
        2. .feedforward.toml in current directory
        3. pyproject.toml [tool.feedforward] section
        4. Default config
        """
        config = cls()

        if path and path.exists():
            config._load_from_file(path)
            return config

        local_toml = Path(CONFIG_FILENAME)
        if local_toml.exists():
            config._load_from_file(local_toml)
            return config

        pyproject_toml = Path("pyproject.toml")
        if pyproject_toml.exists():
            config._load_from_pyproject(pyproject_toml)
            return config

        return config

    def _load_from_file(self, path: Path) -> None:
        """Load configuration from a TOML file."""
        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
            self._parse_config(data)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.debug("Failed to load config from %s: %s", path, exc)

    def _load_from_pyproject(self, path: Path) -> None:
        """Load configuration from pyproject.toml [tool.feedforward] section."""
        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.debug("Failed to load config from pyproject.toml: %s", exc)
            return
        section = data.get("tool", {}).get("feedforward")
        if isinstance(section, dict):
            self._parse_config(section)

    def _parse_config(self, data: dict[str, Any]) -> None:
        """Parse configuration dictionary into this object."""
        layers = data.get("layers")
        if layers is not None:
            if isinstance(layers, list) and all(isinstance(v, int) and not isinstance(v, bool) for v in layers):
                self.layers = list(layers)
            else:
                logger.warning("Ignoring invalid 'layers' setting: %r", layers)

        values = data.get("input")
        if values is not None:
            if isinstance(values, list) and all(_is_number(v) for v in values):
                self.input = [float(v) for v in values]
            else:
                logger.warning("Ignoring invalid 'input' setting: %r", values)

        seed = data.get("seed")
        if seed is not None:
            if isinstance(seed, int) and not isinstance(seed, bool):
                self.seed = seed
            else:
                logger.warning("Ignoring invalid 'seed' setting: %r", seed)

        output = data.get("output")
        if output is not None:
            if isinstance(output, str) and output:
                self.output = output
            else:
                logger.warning("Ignoring invalid 'output' setting: %r", output)

        fmt = data.get("format")
        if fmt is not None:
            if fmt in SUPPORTED_FORMATS:
                self.format = fmt
            else:
                logger.warning("Ignoring unsupported 'format' setting: %r", fmt)

        delay_ms = data.get("delay_ms")
        if delay_ms is not None:
            if isinstance(delay_ms, int) and not isinstance(delay_ms, bool) and delay_ms >= 0:
                self.delay_ms = delay_ms
            else:
                logger.warning("Ignoring invalid 'delay_ms' setting: %r", delay_ms)


_global_config: FeedforwardConfig | None = None


def get_config() -> FeedforwardConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = FeedforwardConfig.load()
    return _global_config


def set_config(config: FeedforwardConfig) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _global_config
    _global_config = None
