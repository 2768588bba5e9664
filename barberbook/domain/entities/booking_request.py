from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from barberbook.domain.entities.identity import Identity
from barberbook.domain.entities.selection_state import SelectionState
from barberbook.domain.entities.service_type import ServiceType


@dataclass(frozen=True)
class BookingRequest:
    service: ServiceType
    date: date
    time: str
    user_id: int

    @classmethod
    def from_selection(cls, selection: SelectionState, identity: Identity) -> "BookingRequest":
        if not selection.is_complete:
            raise ValueError("Booking request needs service, date and time")
        return cls(
            service=selection.service,  # type: ignore[arg-type]
            date=selection.date,  # type: ignore[arg-type]
            time=selection.time,  # type: ignore[arg-type]
            user_id=identity.user_id,
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "service": self.service.value,
            "date": self.date.isoformat(),
            "time": self.time,
            "userId": self.user_id,
        }
