"""Core data schema for categories, activities and completion logs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

FREE = "free"
TIME_BOUND = "time-bound"
ACTIVITY_KINDS = (FREE, TIME_BOUND)

LogBook = dict[str, frozenset[str]]


def normalize_id(value: Any) -> str:
    """Return the canonical string form of a category/activity id.

    Integral floats such as ``1.0`` collapse to ``"1"``.
    """

    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def normalize_logs(logs: Optional[Mapping[str, Iterable[Any]]]) -> LogBook:
    """Map each ISO date to the frozen set of completed activity ids."""

    if not logs:
        return {}
    return {str(day): frozenset(normalize_id(value) for value in (ids or ())) for day, ids in logs.items()}


@dataclass
class Category:
    """Owner of activities; its name drives energy and outcome classification."""

    id: str
    name: str
    color: str = "#6366f1"

    def __post_init__(self) -> None:
        self.id = normalize_id(self.id)


@dataclass
class Activity:
    """Recurring activity tracked once per calendar day."""

    id: str
    category_id: str
    name: str
    kind: str = FREE
    scheduled_time: Optional[str] = None
    daily_hours: float = 0.0

    def __post_init__(self) -> None:
        self.id = normalize_id(self.id)
        self.category_id = normalize_id(self.category_id)


@dataclass
class TimePeriod:
    """Named slice of the 8am-to-8am day holding the activities scheduled in it."""

    id: str
    label: str
    lower: int
    upper: int
    activities: list[Activity] = field(default_factory=list)


@dataclass
class EnergyBalance:
    """Completed hours split by the energy type of their category."""

    draining_hours: float = 0.0
    restorative_hours: float = 0.0
    neutral_hours: float = 0.0

    def to_dict(self) -> dict:
        return {
            "draining_hours": self.draining_hours,
            "restorative_hours": self.restorative_hours,
            "neutral_hours": self.neutral_hours,
        }


@dataclass
class OutcomeMatrix:
    """Projected scores per horizon and dimension plus the inputs behind them."""

    matrix: dict[str, dict[str, int]]
    total_hours_tracked: float
    compliance_rate: int
    dimension_hours: dict[str, float]
    base_scores: dict[str, float]

    def to_dict(self) -> dict:
        return {
            "matrix": {horizon: dict(scores) for horizon, scores in self.matrix.items()},
            "meta": {
                "total_hours_tracked": self.total_hours_tracked,
                "compliance_rate": self.compliance_rate,
                "dimension_hours": dict(self.dimension_hours),
                "base_scores": dict(self.base_scores),
            },
        }


@dataclass
class Dataset:
    """Everything one user supplies to the engine."""

    categories: list[Category] = field(default_factory=list)
    activities: list[Activity] = field(default_factory=list)
    logs: LogBook = field(default_factory=dict)
