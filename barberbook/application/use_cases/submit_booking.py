from __future__ import annotations

import logging
from dataclasses import dataclass

from barberbook.application.exceptions import BookingSubmissionError
from barberbook.application.ports.barbershop_api import BarbershopApiPort
from barberbook.application.ports.confirmation import ConfirmationPort
from barberbook.application.ports.service_catalog import ServiceCatalogPort
from barberbook.domain.entities.booking_request import BookingRequest
from barberbook.domain.entities.identity import Identity
from barberbook.domain.entities.selection_state import SelectionState

SUCCESS_MESSAGE = "The appointment is created successfully!"
GENERIC_FAILURE_MESSAGE = "Error creating appointment. Please try again."


@dataclass(frozen=True)
class SubmissionResult:
    created: bool
    message: str


class SubmitBookingUseCase:
    def __init__(
        self,
        api: BarbershopApiPort,
        confirmation: ConfirmationPort,
        catalog: ServiceCatalogPort,
    ) -> None:
        self._api = api
        self._confirmation = confirmation
        self._catalog = catalog
        self._logger = logging.getLogger(__name__)

    def confirm(self, selection: SelectionState) -> bool:
        """Ask the user to confirm the booking. Nothing is sent before this returns True."""
        return self._confirmation.confirm(self._build_confirmation_prompt(selection))

    async def send(self, selection: SelectionState, identity: Identity) -> SubmissionResult:
        request = BookingRequest.from_selection(selection, identity)
        try:
            await self._api.create_booking(request, identity)
        except BookingSubmissionError as e:
            self._logger.error(
                "Failed to create appointment",
                extra={"status": e.status_code, "error": str(e), "user_id": identity.user_id},
            )
            return SubmissionResult(created=False, message=e.server_message or GENERIC_FAILURE_MESSAGE)
        except Exception as e:
            self._logger.error(
                "Unexpected error creating appointment",
                extra={"error": str(e), "user_id": identity.user_id},
                exc_info=True,
            )
            return SubmissionResult(created=False, message=GENERIC_FAILURE_MESSAGE)

        self._logger.info(
            "Appointment created",
            extra={
                "service": request.service.value,
                "date": request.date.isoformat(),
                "time": request.time,
                "user_id": identity.user_id,
            },
        )
        return SubmissionResult(created=True, message=SUCCESS_MESSAGE)

    def _build_confirmation_prompt(self, selection: SelectionState) -> str:
        if not selection.is_complete:
            return ""

        service_name = selection.service.value  # type: ignore[union-attr]
        entry = self._catalog.get_service(selection.service)  # type: ignore[arg-type]
        if entry:
            service_name = entry.display_name

        date_str = selection.date.strftime("%A, %B %d")  # type: ignore[union-attr]
        return f"Are you sure you want to book {service_name} on {date_str} at {selection.time}?"
