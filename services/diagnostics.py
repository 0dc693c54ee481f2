"""Human-readable diagnostics emitted after each ingestion."""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from models.records import Reading
from services.evaluator import AlertRecord

_BANNER = "===== SENSOR DATA RECEIVED ====="


class DiagnosticsSink(Protocol):
    def publish(self, reading: Reading, alerts: Sequence[AlertRecord]) -> None:
        ...


def format_snapshot(reading: Reading, alerts: Sequence[AlertRecord]) -> list[str]:
    lines = [
        _BANNER,
        f"🌡 Temperature: {reading.temperature}°C",
        f"⚖ Load Weight: {reading.weight} kg",
        f"📏 Distance: {reading.distance} cm",
        f"🔌 Voltage: {reading.voltage} V",
        f"🔊 Sound Level: {reading.sound_level} dB",
        f"📳 Vibration: {reading.vibration}",
        "=" * len(_BANNER),
    ]
    if alerts:
        lines.append("🚨 ALERTS:")
        for alert in alerts:
            lines.append(alert.message)
            lines.append(f"💡 Troubleshooting: {alert.suggestion}")
    else:
        lines.append("✅ All sensors are within normal range.")
    return lines


class LoggingDiagnosticsSink:
    """Writes the snapshot to a logger, one record per ingestion."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def publish(self, reading: Reading, alerts: Sequence[AlertRecord]) -> None:
        self._logger.info(
            "\n".join(format_snapshot(reading, alerts)),
            extra={"alert_count": len(alerts)},
        )
