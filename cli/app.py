from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import typer

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_ingest, render_status


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Utilities for pushing telemetry to and reading alerts from the sensor service.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        typer.secho("CLI state is uninitialized.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Service base URL (defaults to SENSOR_API_BASE_URL env or http://localhost:5000).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for each request.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(base_url=base_url, timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("push")
def push_command(
    ctx: typer.Context,
    temperature: Optional[float] = typer.Option(None, help="Temperature in °C."),
    weight: Optional[float] = typer.Option(None, help="Load weight in kg."),
    distance: Optional[float] = typer.Option(None, help="Proximity distance in cm."),
    voltage: Optional[float] = typer.Option(None, help="Supply voltage in V."),
    sound_level: Optional[float] = typer.Option(None, "--sound-level", help="Sound level in dB."),
    vibration: Optional[float] = typer.Option(None, help="Vibration magnitude."),
) -> None:
    """Send a reading; only the given fields are updated."""
    state = _get_state(ctx)
    candidates = {
        "temperature": temperature,
        "weight": weight,
        "distance": distance,
        "voltage": voltage,
        "soundLevel": sound_level,
        "vibration": vibration,
    }
    fields: Dict[str, Any] = {key: value for key, value in candidates.items() if value is not None}
    typer.echo(f"Sending {len(fields)} field(s) to {state.config.base_url} ...")
    payload = state.client.push_reading(fields)
    render_ingest(payload)


@app.command("status")
def status_command(ctx: typer.Context) -> None:
    """Show the latest reading and its active alerts."""
    state = _get_state(ctx)
    payload = state.client.get_status()
    render_status(payload)
