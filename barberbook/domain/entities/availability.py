from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from barberbook.domain.entities.service_type import ServiceType


@dataclass(frozen=True)
class AvailabilityKey:
    date: date
    service: ServiceType


@dataclass(frozen=True)
class AvailabilityQuery:
    key: AvailabilityKey
    generation: int  # fetch_generation of the state that issued the query
