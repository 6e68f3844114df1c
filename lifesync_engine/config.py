"""Tunable scoring heuristics."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, replace

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConfig:
    """Heuristic constants used by the outcome projector and performance split.

    ``base_hours`` of dimension-weighted daily time earns ``base_points``;
    the base score scales linearly from there and is capped at
    ``max_base_score``.
    """

    base_hours: float = 4.0
    base_points: float = 70.0
    max_base_score: float = 100.0
    compliance_window_days: int = 30
    performing_threshold: int = 70

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Config '{item.name}': expected a number")
            if value <= 0:
                raise ValueError(f"Config '{item.name}': must be positive")
        if self.performing_threshold > 100:
            raise ValueError("Config 'performing_threshold': must be at most 100")


DEFAULT_CONFIG = EngineConfig()

_INT_FIELDS = {"compliance_window_days", "performing_threshold"}


def _coerce(name: str, value) -> float | int:
    if isinstance(value, bool):
        raise ValueError(f"Config '{name}': expected a number")
    try:
        number = int(value) if name in _INT_FIELDS else float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Config '{name}': expected a number") from exc
    return number


def config_from_dict(payload: dict) -> EngineConfig:
    """Build a config from a mapping, keeping defaults for absent keys."""

    if not isinstance(payload, dict):
        raise ValueError("Config payload must be an object")

    known = {f.name for f in fields(EngineConfig)}
    unknown = sorted(set(payload) - known)
    if unknown:
        raise ValueError(f"Unknown config keys {unknown}")

    overrides = {name: _coerce(name, value) for name, value in payload.items()}
    return replace(DEFAULT_CONFIG, **overrides)


def load_config(file_path: str) -> EngineConfig:
    """Load a JSON config file."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    config = config_from_dict(payload)
    log.debug("Loaded engine config from %s: %s", file_path, config)
    return config
