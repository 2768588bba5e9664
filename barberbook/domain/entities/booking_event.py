from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from barberbook.domain.entities.service_type import ServiceType


@dataclass(frozen=True)
class ServiceSelected:
    service: ServiceType


@dataclass(frozen=True)
class DateSelected:
    date: date


@dataclass(frozen=True)
class DateRejected:
    reason: str


@dataclass(frozen=True)
class TimeSelected:
    time: str


@dataclass(frozen=True)
class SelectionReset:
    pass


@dataclass(frozen=True)
class AvailabilityLoaded:
    generation: int
    times: tuple[str, ...]


@dataclass(frozen=True)
class AvailabilityFailed:
    generation: int


@dataclass(frozen=True)
class SubmissionStarted:
    pass


@dataclass(frozen=True)
class SubmissionSucceeded:
    pass


@dataclass(frozen=True)
class SubmissionFailed:
    message: str


BookingEvent = (
    ServiceSelected
    | DateSelected
    | DateRejected
    | TimeSelected
    | SelectionReset
    | AvailabilityLoaded
    | AvailabilityFailed
    | SubmissionStarted
    | SubmissionSucceeded
    | SubmissionFailed
)
