from __future__ import annotations

from typing import Any, Dict, List

import httpx
import pytest
import typer
from typer.testing import CliRunner

from cli.app import app
from cli.client import ApiClient
from cli.config import CLIConfig, load_config


class StubClient:
    def __init__(self, config) -> None:
        self.config = config
        self.pushed: List[Dict[str, Any]] = []
        self.ingest_payload: Dict[str, Any] = {
            "message": "Sensor data received successfully!",
            "alerts": [
                {
                    "alert": "⚠ High Temperature Alert!",
                    "suggestion": "Check for overheating.",
                }
            ],
        }
        self.status_payload: Dict[str, Any] = {
            "sensorData": {
                "temperature": 21,
                "weight": 2,
                "distance": 30,
                "voltage": 3.3,
                "soundLevel": 40,
                "vibration": 100,
            },
            "alerts": [],
        }
        self.closed = False

    def push_reading(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        self.pushed.append(fields)
        return self.ingest_payload

    def get_status(self) -> Dict[str, Any]:
        return self.status_payload

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


def _install_stub(monkeypatch, stub: StubClient) -> None:
    def factory(config):
        stub.config = config
        return stub

    monkeypatch.setattr("cli.app.ApiClient", factory)


def test_push_sends_only_given_fields(monkeypatch, runner: CliRunner) -> None:
    stub = StubClient(config=None)
    _install_stub(monkeypatch, stub)

    result = runner.invoke(app, ["push", "--temperature", "45", "--sound-level", "12.5"])

    assert result.exit_code == 0
    assert stub.pushed == [{"temperature": 45.0, "soundLevel": 12.5}]
    assert "Sensor data received successfully!" in result.stdout
    assert "High Temperature Alert!" in result.stdout
    assert "Troubleshooting: Check for overheating." in result.stdout
    assert stub.closed is True


def test_status_renders_sensor_data(monkeypatch, runner: CliRunner) -> None:
    stub = StubClient(config=None)
    _install_stub(monkeypatch, stub)

    result = runner.invoke(app, ["--base-url", "http://device-hub:5000/", "status"])

    assert result.exit_code == 0
    assert stub.config.base_url == "http://device-hub:5000"
    assert "Temperature: 21 °C" in result.stdout
    assert "Sound Level: 40 dB" in result.stdout
    assert "Vibration: 100" in result.stdout
    assert "All sensors are within normal range." in result.stdout


def test_load_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("SENSOR_API_BASE_URL", "http://sensors.local:9000/")
    monkeypatch.setenv("CLI_REQUEST_TIMEOUT", "-1")

    config = load_config()

    assert config.base_url == "http://sensors.local:9000"
    assert config.timeout == 10.0


def test_client_reports_rejected_push() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422, json={"detail": "Field 'voltage' must be numeric, got 'x'."})

    client = ApiClient(CLIConfig())
    client.close()
    client._client = httpx.Client(
        base_url="http://testserver", transport=httpx.MockTransport(handler)
    )

    with pytest.raises(typer.Exit) as excinfo:
        client.push_reading({"voltage": "x"})

    assert excinfo.value.exit_code == 1
    client.close()
