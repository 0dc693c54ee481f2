"""Threshold rules evaluated against the current reading."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, List

from models.records import Reading


@dataclass(frozen=True, slots=True)
class AlertRecord:
    """A triggered alert together with its troubleshooting guidance."""

    message: str
    suggestion: str


@dataclass(frozen=True, slots=True)
class ThresholdRule:
    """Binds one reading field to a strict comparison against a constant."""

    field: str
    compare: Callable[[Any, Any], Any]
    threshold: float
    message: str
    suggestion: str

    def triggers(self, reading: Reading) -> bool:
        value = getattr(reading, self.field)
        try:
            return bool(self.compare(value, self.threshold))
        except TypeError:
            # Values Python cannot order against a number never trigger.
            return False

    def alert(self) -> AlertRecord:
        return AlertRecord(message=self.message, suggestion=self.suggestion)


# Evaluation order is part of the observable output; do not sort.
RULES: tuple[ThresholdRule, ...] = (
    ThresholdRule(
        field="temperature",
        compare=operator.gt,
        threshold=40,
        message="⚠ High Temperature Alert!",
        suggestion="Check for overheating. Ensure proper ventilation and cooling systems are working.",
    ),
    ThresholdRule(
        field="sound_level",
        compare=operator.gt,
        threshold=50,
        message="🔊 High Sound Level Alert!",
        suggestion=(
            "Check machinery for unusual noise. Lubricate moving parts and inspect "
            "for loose components."
        ),
    ),
    ThresholdRule(
        field="weight",
        compare=operator.gt,
        threshold=8,
        message="⚖ Overload Alert!",
        suggestion=(
            "Reduce the load to prevent structural damage. Ensure load capacity is not exceeded."
        ),
    ),
    ThresholdRule(
        field="distance",
        compare=operator.lt,
        threshold=10,
        message="📏 Object Too Close!",
        suggestion="Maintain a safe distance to avoid collisions. Check sensor alignment.",
    ),
    ThresholdRule(
        field="voltage",
        compare=operator.gt,
        threshold=5,
        message="🔌 High Voltage Alert!",
        suggestion="Check for power surges. Inspect power supply and voltage regulators.",
    ),
    ThresholdRule(
        field="vibration",
        compare=operator.gt,
        threshold=700,
        message="📳 Abnormal Vibration Alert!",
        suggestion=(
            "Inspect motor mounts, check for loose components, and balance rotating parts."
        ),
    ),
)


def evaluate(reading: Reading) -> List[AlertRecord]:
    """Return the alerts raised by ``reading`` in rule-table order."""
    return [rule.alert() for rule in RULES if rule.triggers(reading)]
