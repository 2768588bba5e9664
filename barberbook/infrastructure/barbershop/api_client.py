from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from barberbook.application.exceptions import AvailabilityFetchError, BookingSubmissionError
from barberbook.application.ports.barbershop_api import BarbershopApiPort
from barberbook.core.config import settings
from barberbook.domain.entities.availability import AvailabilityKey
from barberbook.domain.entities.booking_request import BookingRequest
from barberbook.domain.entities.identity import Identity
from barberbook.infrastructure.barbershop.schemas import ErrorResponseSchema


class BarbershopApiClient(BarbershopApiPort):
    def __init__(
        self,
        base_url: str | None = None,
        availability_path: str | None = None,
        create_path: str | None = None,
        service_field: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._availability_path = availability_path or settings.AVAILABILITY_PATH
        self._create_path = create_path or settings.CREATE_APPOINTMENT_PATH
        self._service_field = service_field or settings.AVAILABILITY_SERVICE_FIELD
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.BARBERSHOP_API_BASE_URL,
            timeout=timeout or settings.HTTP_TIMEOUT_SECONDS,
            transport=transport,
        )
        self._logger = logging.getLogger(__name__)

    async def find_available_times(self, key: AvailabilityKey) -> list[Any]:
        payload = {"date": key.date.isoformat(), self._service_field: key.service.value}
        try:
            response = await self._client.post(self._availability_path, json=payload)
        except httpx.HTTPError as e:
            raise AvailabilityFetchError(f"Availability request failed: {e}") from e

        if response.status_code != 200:
            raise AvailabilityFetchError(f"Availability request returned status {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise AvailabilityFetchError("Availability response is not JSON") from e

        if not isinstance(data, list):
            raise AvailabilityFetchError("Availability response is not a list of times")
        return data

    async def create_booking(self, request: BookingRequest, identity: Identity) -> None:
        try:
            response = await self._client.post(
                self._create_path,
                json=request.to_payload(),
                headers=identity.authorization_header,
            )
        except httpx.HTTPError as e:
            raise BookingSubmissionError(None) from e

        if response.status_code == 201:
            return

        server_message = self._error_message(response) if response.status_code >= 400 else None
        self._logger.warning(
            "Booking not created",
            extra={"status": response.status_code, "error": server_message},
        )
        raise BookingSubmissionError(server_message, status_code=response.status_code)

    async def aclose(self) -> None:
        await self._client.aclose()

    def _error_message(self, response: httpx.Response) -> str | None:
        try:
            return ErrorResponseSchema.model_validate(response.json()).message or None
        except (ValidationError, ValueError):
            return None
