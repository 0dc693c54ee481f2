"""HTTP route definitions for the service."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, status

from app.schemas import AlertPayload, IngestResponse, QueryResponse, SensorData
from services.decoding import InvalidFieldType
from services.telemetry import TelemetryService, build_default_service

router = APIRouter()


def get_service() -> TelemetryService:
    return build_default_service()


@router.post(
    "/sensor-data",
    status_code=status.HTTP_200_OK,
    response_model=IngestResponse,
    summary="Receive a partial telemetry update from the device.",
)
def ingest_sensor_data(
    payload: Dict[str, Any] = Body(..., description="Any subset of the six telemetry fields."),
    service: TelemetryService = Depends(get_service),
) -> IngestResponse:
    try:
        result = service.ingest(payload)
    except InvalidFieldType as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc
    return IngestResponse(
        message=result.message,
        alerts=[AlertPayload.from_record(alert) for alert in result.alerts],
    )


@router.get(
    "/get-sensor",
    response_model=QueryResponse,
    summary="Fetch the latest reading and its active alerts.",
)
def get_sensor_data(
    service: TelemetryService = Depends(get_service),
) -> QueryResponse:
    result = service.query()
    return QueryResponse(
        sensor_data=SensorData.from_reading(result.reading),
        alerts=[AlertPayload.from_record(alert) for alert in result.alerts],
    )


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /health for service status."}
