from __future__ import annotations

from typing import Any, Dict, Iterable, List

import typer

_SENSOR_LABELS = (
    ("temperature", "Temperature", "°C"),
    ("weight", "Load Weight", "kg"),
    ("distance", "Distance", "cm"),
    ("voltage", "Voltage", "V"),
    ("soundLevel", "Sound Level", "dB"),
    ("vibration", "Vibration", ""),
)


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_alerts(alerts: List[Dict[str, Any]]) -> None:
    echo_heading("Alerts")
    if not alerts:
        typer.secho("All sensors are within normal range.", fg=typer.colors.GREEN)
        return
    for alert in alerts:
        typer.secho(f"  - {alert.get('alert')}", fg=typer.colors.RED)
        typer.echo(f"    Troubleshooting: {alert.get('suggestion')}")


def render_ingest(payload: Dict[str, Any]) -> None:
    typer.secho(payload.get("message", ""), fg=typer.colors.GREEN)
    typer.echo()
    render_alerts(payload.get("alerts") or [])


def render_status(payload: Dict[str, Any]) -> None:
    sensor_data = payload.get("sensorData") or {}
    echo_heading("Sensor Data")
    echo_key_values(
        (label, f"{sensor_data.get(key)} {unit}".rstrip())
        for key, label, unit in _SENSOR_LABELS
    )
    typer.echo()
    render_alerts(payload.get("alerts") or [])
