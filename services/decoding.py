"""Translate raw ingestion payloads into reading field updates."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Mapping

from models.records import WIRE_FIELDS

logger = logging.getLogger(__name__)


class ValuePolicy(str, Enum):
    """How non-numeric field values are treated on ingestion."""

    passthrough = "passthrough"
    coerce = "coerce"
    strict = "strict"


class InvalidFieldType(ValueError):
    """Raised when a field value is rejected by the active value policy."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(f"Field {field!r} must be numeric, got {value!r}.")
        self.field = field
        self.value = value


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _decode_value(field: str, value: Any, policy: ValuePolicy) -> Any:
    if policy is ValuePolicy.passthrough or _is_number(value):
        return value
    if policy is ValuePolicy.coerce and isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass
    raise InvalidFieldType(field, value)


def decode_payload(payload: Mapping[str, Any], policy: ValuePolicy) -> Dict[str, Any]:
    """Map wire keys to reading attributes, applying ``policy`` to each value.

    Unknown keys are dropped. The whole payload is rejected if any known
    field fails the policy.
    """
    decoded: Dict[str, Any] = {}
    for key, value in payload.items():
        attr = WIRE_FIELDS.get(key)
        if attr is None:
            logger.debug("Ignoring unknown telemetry field", extra={"field": key})
            continue
        try:
            decoded[attr] = _decode_value(key, value, policy)
        except InvalidFieldType:
            logger.warning(
                "Rejecting telemetry payload",
                extra={
                    "field": key,
                    "invalid_value": repr(value),
                    "policy": policy.value,
                    "reason": "non-numeric value",
                },
            )
            raise
    return decoded
