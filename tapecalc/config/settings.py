"""
Settings: loads calculator and layout defaults from YAML at startup and
exposes them read-only.

The settings object is a module-level singleton; call get_settings() to
obtain it. Values are loaded and validated once at import time, so a bad
defaults file fails immediately instead of at the first calculation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, cast

import yaml

from tapecalc.measure.types import DisplayFormat, DisplayOptions, TapePrecision, coerce_precision

logger = logging.getLogger(__name__)

_DEFAULTS_PATH = Path(__file__).parent / "data" / "defaults.yaml"


class Settings:
    """
    Read-only calculator and layout defaults.

    Instantiate directly with a custom path (e.g. in tests); otherwise use
    get_settings() for the module singleton.

    Attributes:
        precision: Default tape graduation for rounding.
        display: Default DisplayOptions for rendering results.
        default_cap_inches: Custom-interval upper bound when no total is given.
        max_marks: Limit on marks produced by one custom-interval run.
    """

    def __init__(self, path: Path = _DEFAULTS_PATH) -> None:
        self._path = path

        self.precision: TapePrecision
        self.display: DisplayOptions
        self.default_cap_inches: float
        self.max_marks: int

        self._load(self._load_yaml())
        logger.info("Loaded settings from %s", path)

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self) -> dict[str, Any]:
        try:
            with open(self._path) as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Settings file not found: {self._path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse settings file {self._path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {self._path} must contain a mapping")
        return cast(dict[str, Any], data)

    def _load(self, data: dict[str, Any]) -> None:
        try:
            self.precision = coerce_precision(data.get("precision", TapePrecision.SIXTEENTH))
        except ValueError as exc:
            raise ValueError(f"Invalid settings file {self._path}: {exc}") from None

        display = self._section(data, "display")
        try:
            display_format = DisplayFormat(display.get("format", DisplayFormat.REDUCED))
        except ValueError:
            raise ValueError(
                f"Invalid settings file {self._path}: unknown display format "
                f"{display.get('format')!r}"
            ) from None
        self.display = DisplayOptions(
            format=display_format,
            show_feet=bool(display.get("show_feet", False)),
        )

        intervals = self._section(data, "intervals")
        cap = intervals.get("default_cap_inches", 300)
        max_marks = intervals.get("max_marks", 100)
        if not isinstance(cap, (int, float)) or cap <= 0:
            raise ValueError(
                f"Invalid settings file {self._path}: default_cap_inches must be "
                f"positive, got {cap!r}"
            )
        if not isinstance(max_marks, int) or max_marks < 1:
            raise ValueError(
                f"Invalid settings file {self._path}: max_marks must be >= 1, got {max_marks!r}"
            )
        self.default_cap_inches = float(cap)
        self.max_marks = max_marks

    def _section(self, data: dict[str, Any], key: str) -> dict[str, Any]:
        section = data.get(key) or {}
        if not isinstance(section, dict):
            raise ValueError(f"Invalid settings file {self._path}: {key} must be a mapping")
        return cast(dict[str, Any], section)


# ── Module-level singleton ─────────────────────────────────────────────────────

_settings: Settings = Settings()


def get_settings() -> Settings:
    """Return the module-level settings singleton."""
    return _settings
