from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from barberbook.domain.entities.availability import AvailabilityKey
from barberbook.domain.entities.service_type import ServiceType


@dataclass(frozen=True)
class SelectionState:
    service: ServiceType | None = None
    date: date | None = None
    time: str | None = None  # HH:MM, always one of available_times
    available_times: tuple[str, ...] = ()

    @property
    def availability_key(self) -> AvailabilityKey | None:
        if self.service is None or self.date is None:
            return None
        return AvailabilityKey(date=self.date, service=self.service)

    @property
    def is_complete(self) -> bool:
        return self.service is not None and self.date is not None and self.time is not None
