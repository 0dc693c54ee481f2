"""Unit tests for the threshold alert evaluator."""

from __future__ import annotations

import pytest

from models.records import Reading
from services.evaluator import RULES, evaluate


def _safe_reading(**overrides) -> Reading:
    """A reading that triggers no rule unless overridden."""

    values = {"distance": 50}
    values.update(overrides)
    return Reading(**values)


def _messages(reading: Reading) -> list[str]:
    return [alert.message for alert in evaluate(reading)]


def test_safe_reading_raises_no_alerts() -> None:
    assert evaluate(_safe_reading()) == []


def test_default_reading_raises_distance_alert() -> None:
    assert _messages(Reading()) == ["📏 Object Too Close!"]


@pytest.mark.parametrize(
    ("field", "at_threshold", "past_threshold"),
    [
        ("temperature", 40, 40.0001),
        ("sound_level", 50, 50.0001),
        ("weight", 8, 8.0001),
        ("distance", 10, 9.9999),
        ("voltage", 5, 5.0001),
        ("vibration", 700, 700.0001),
    ],
)
def test_thresholds_are_strict(field: str, at_threshold: float, past_threshold: float) -> None:
    rule = next(rule for rule in RULES if rule.field == field)

    assert rule.message not in _messages(_safe_reading(**{field: at_threshold}))
    assert _messages(_safe_reading(**{field: past_threshold})) == [rule.message]


def test_alerts_follow_rule_table_order() -> None:
    reading = Reading(
        temperature=45,
        weight=9,
        distance=1,
        voltage=12,
        sound_level=80,
        vibration=900,
    )

    assert _messages(reading) == [
        "⚠ High Temperature Alert!",
        "🔊 High Sound Level Alert!",
        "⚖ Overload Alert!",
        "📏 Object Too Close!",
        "🔌 High Voltage Alert!",
        "📳 Abnormal Vibration Alert!",
    ]


def test_evaluate_is_deterministic() -> None:
    reading = Reading(temperature=41, vibration=701)

    first = evaluate(reading)
    second = evaluate(reading)

    assert first == second
    assert first is not second


def test_alert_records_carry_suggestions() -> None:
    (alert,) = evaluate(_safe_reading(voltage=6))

    assert alert.message == "🔌 High Voltage Alert!"
    assert alert.suggestion.startswith("Check for power surges.")


def test_non_numeric_values_do_not_break_evaluation() -> None:
    reading = Reading(temperature="hot", distance=None, sound_level=[1, 2], vibration={"x": 1})

    assert evaluate(reading) == []


def test_booleans_compare_as_integers() -> None:
    assert _messages(_safe_reading(distance=True)) == ["📏 Object Too Close!"]
    assert _messages(_safe_reading(temperature=True)) == []
