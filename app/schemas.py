"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field

from models.records import Reading
from services.evaluator import AlertRecord


class AlertPayload(BaseModel):
    """A triggered alert as reported to clients."""

    alert: str
    suggestion: str

    @classmethod
    def from_record(cls, record: AlertRecord) -> "AlertPayload":
        return cls(alert=record.message, suggestion=record.suggestion)


class SensorData(BaseModel):
    """Current values of the six telemetry fields."""

    model_config = ConfigDict(populate_by_name=True)

    temperature: Any = Field(0, description="Temperature in °C.")
    weight: Any = Field(0, description="Load weight in kg.")
    distance: Any = Field(0, description="Proximity distance in cm.")
    voltage: Any = Field(0, description="Supply voltage in V.")
    sound_level: Any = Field(0, alias="soundLevel", description="Sound level in dB.")
    vibration: Any = Field(0, description="Vibration magnitude.")

    @classmethod
    def from_reading(cls, reading: Reading) -> "SensorData":
        return cls.model_validate(reading.to_wire())


class IngestResponse(BaseModel):
    """Acknowledgement returned to the device after an ingestion."""

    message: str
    alerts: List[AlertPayload] = Field(default_factory=list)


class QueryResponse(BaseModel):
    """Current state and alerts returned to polling clients."""

    model_config = ConfigDict(populate_by_name=True)

    sensor_data: SensorData = Field(..., alias="sensorData")
    alerts: List[AlertPayload] = Field(default_factory=list)
