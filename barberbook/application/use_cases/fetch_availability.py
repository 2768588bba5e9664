from __future__ import annotations

import logging
from dataclasses import dataclass

from barberbook.application.exceptions import AvailabilityFetchError
from barberbook.application.ports.barbershop_api import BarbershopApiPort
from barberbook.application.utils.slot_time import normalize_slot_times
from barberbook.domain.entities.availability import AvailabilityKey


@dataclass(frozen=True)
class AvailabilityResult:
    key: AvailabilityKey
    times: tuple[str, ...]
    ok: bool


class FetchAvailabilityUseCase:
    def __init__(self, api: BarbershopApiPort) -> None:
        self._api = api
        self._logger = logging.getLogger(__name__)

    async def execute(self, key: AvailabilityKey) -> AvailabilityResult:
        """Query open slots for the key. Failures are logged and reported as an empty, not-ok result."""
        try:
            raw_times = await self._api.find_available_times(key)
        except AvailabilityFetchError as e:
            self._logger.error(
                "Failed to fetch available slots",
                extra={"date": key.date.isoformat(), "service": key.service.value, "error": str(e)},
            )
            return AvailabilityResult(key=key, times=(), ok=False)
        except Exception as e:
            self._logger.error(
                "Unexpected error fetching available slots",
                extra={"date": key.date.isoformat(), "service": key.service.value, "error": str(e)},
                exc_info=True,
            )
            return AvailabilityResult(key=key, times=(), ok=False)

        times = normalize_slot_times(raw_times)
        self._logger.info(
            "Available slots fetched",
            extra={"date": key.date.isoformat(), "service": key.service.value, "slots": len(times)},
        )
        return AvailabilityResult(key=key, times=times, ok=True)
