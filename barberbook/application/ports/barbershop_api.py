from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from barberbook.domain.entities.availability import AvailabilityKey
from barberbook.domain.entities.booking_request import BookingRequest
from barberbook.domain.entities.identity import Identity


class BarbershopApiPort(ABC):
    @abstractmethod
    async def find_available_times(self, key: AvailabilityKey) -> list[Any]:
        """Query open slots for a date and service. Returns raw time representations.

        Raises AvailabilityFetchError on transport or non-success responses.
        """
        raise NotImplementedError

    @abstractmethod
    async def create_booking(self, request: BookingRequest, identity: Identity) -> None:
        """Create a booking. Returns only when the backend acknowledged creation.

        Raises BookingSubmissionError otherwise.
        """
        raise NotImplementedError
