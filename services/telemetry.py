"""Ingestion and query handling for device telemetry."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, List, Mapping, Optional

from datastore.reading_store import ReadingStore
from models.records import Reading
from services.decoding import ValuePolicy, decode_payload
from services.diagnostics import DiagnosticsSink, LoggingDiagnosticsSink
from services.evaluator import AlertRecord, evaluate
from settings import get_settings

logger = logging.getLogger(__name__)

INGEST_ACK = "Sensor data received successfully!"


@dataclass(frozen=True)
class IngestResult:
    message: str
    alerts: List[AlertRecord]


@dataclass(frozen=True)
class QueryResult:
    reading: Reading
    alerts: List[AlertRecord]


class TelemetryService:
    """Connects the reading store to the alert evaluator."""

    def __init__(
        self,
        store: ReadingStore,
        policy: ValuePolicy = ValuePolicy.passthrough,
        sink: Optional[DiagnosticsSink] = None,
    ) -> None:
        self.store = store
        self.policy = policy
        self.sink = sink

    def ingest(self, payload: Mapping[str, Any]) -> IngestResult:
        """Merge a partial update into the store and evaluate the result.

        Raises ``InvalidFieldType`` when the active policy rejects a value, in
        which case the store is left untouched.
        """
        changes = decode_payload(payload, self.policy)
        reading = self.store.apply(changes)
        alerts = evaluate(reading)
        logger.debug("Telemetry ingested", extra={"alert_count": len(alerts)})
        self._publish(reading, alerts)
        return IngestResult(message=INGEST_ACK, alerts=alerts)

    def query(self) -> QueryResult:
        """Report the current reading and its alerts without mutating state."""
        reading = self.store.snapshot()
        return QueryResult(reading=reading, alerts=evaluate(reading))

    def _publish(self, reading: Reading, alerts: List[AlertRecord]) -> None:
        if self.sink is None:
            return
        try:
            self.sink.publish(reading, alerts)
        except Exception:  # noqa: BLE001 - diagnostics must not fail ingestion
            logger.exception("Diagnostics sink failed", extra={"reason": "sink error"})


@lru_cache
def build_default_service() -> TelemetryService:
    """Factory that wires the service from the process settings."""
    settings = get_settings()
    sink = LoggingDiagnosticsSink() if settings.diagnostics_enabled else None
    return TelemetryService(store=ReadingStore(), policy=settings.value_policy, sink=sink)
