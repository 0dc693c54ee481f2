"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True, slots=True)
class Reading:
    """The latest telemetry snapshot reported by the device.

    Values are held exactly as they were accepted by the decode step, so under
    the passthrough policy a field may carry a non-numeric value.
    """

    temperature: Any = 0
    weight: Any = 0
    distance: Any = 0
    voltage: Any = 0
    sound_level: Any = 0
    vibration: Any = 0

    def to_wire(self) -> Dict[str, Any]:
        return {wire: getattr(self, attr) for wire, attr in WIRE_FIELDS.items()}


# Wire name -> attribute name, in the order fields are reported.
WIRE_FIELDS: Dict[str, str] = {
    "temperature": "temperature",
    "weight": "weight",
    "distance": "distance",
    "voltage": "voltage",
    "soundLevel": "sound_level",
    "vibration": "vibration",
}

READING_FIELDS = tuple(WIRE_FIELDS.values())
