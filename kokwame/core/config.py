from __future__ import annotations

import json
import math
from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from kokwame.analysis.severity import DEFAULT_HIGH, DEFAULT_LOW
from kokwame.core.errors import ConfigError, UnknownOption


class Border(Enum):
    """Border styles of the info popup."""
    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"
    ROUNDED = "rounded"
    SOLID = "solid"
    SHADOW = "shadow"


@dataclass(frozen=True)
class Options:
    # Should Kokwame be a diagnostic producer?
    is_diagnostic_producer: bool = False
    border: Border = Border.ROUNDED
    threshold_low: float = DEFAULT_LOW
    threshold_high: float = DEFAULT_HIGH

    def __post_init__(self) -> None:
        if not isinstance(self.is_diagnostic_producer, bool):
            raise ConfigError(
                f"Option [is_diagnostic_producer] must be a boolean, got {self.is_diagnostic_producer!r}"
            )
        if not isinstance(self.border, Border):
            try:
                object.__setattr__(self, "border", Border(self.border))
            except ValueError:
                choices = ", ".join(b.value for b in Border)
                raise ConfigError(f"Option [border] must be one of {choices}, got {self.border!r}") from None
        for key in ("threshold_low", "threshold_high"):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"Option [{key}] must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigError(f"Option [{key}] must be a finite number, got {value!r}")
        if self.threshold_low >= self.threshold_high:
            raise ConfigError(
                f"Option [threshold_low] ({self.threshold_low}) must be lower than "
                f"[threshold_high] ({self.threshold_high})"
            )

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> "Options":
        mapping = dict(mapping or {})
        known = {f.name for f in fields(cls)}
        for key in mapping:
            if key not in known:
                raise UnknownOption(key)
        return cls(**mapping)

    @classmethod
    def load(cls, path: str | None) -> "Options":
        if not path:
            return cls()
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {path}")
        raw = config_path.read_text(encoding="utf-8")
        try:
            if config_path.suffix.lower() in {".json"}:
                data = json.loads(raw)
            else:
                data = yaml.safe_load(raw) or {}
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot parse config file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        if isinstance(data.get("kokwame"), dict):
            data = data["kokwame"]
        return cls.from_mapping(data)

    def merged(self, overrides: Mapping[str, Any]) -> "Options":
        known = {f.name for f in fields(self)}
        for key in overrides:
            if key not in known:
                raise UnknownOption(key)
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_diagnostic_producer": self.is_diagnostic_producer,
            "border": self.border.value,
            "threshold_low": self.threshold_low,
            "threshold_high": self.threshold_high,
        }
