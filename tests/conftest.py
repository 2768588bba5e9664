"""
Shared fakes for the booking workflow: an in-memory barbershop API whose
availability responses can be held back, and recording UI ports.
"""

from __future__ import annotations

import asyncio
from datetime import date
from typing import Any

import pytest

from barberbook.application.exceptions import AvailabilityFetchError, BookingSubmissionError
from barberbook.application.ports.barbershop_api import BarbershopApiPort
from barberbook.application.ports.confirmation import ConfirmationPort
from barberbook.application.ports.navigator import NavigatorPort
from barberbook.application.ports.notifier import NotifierPort
from barberbook.application.use_cases.booking_workflow import BookingWorkflow
from barberbook.application.use_cases.fetch_availability import FetchAvailabilityUseCase
from barberbook.application.use_cases.submit_booking import SubmitBookingUseCase
from barberbook.application.utils.date_rules import CalendarRules
from barberbook.domain.entities.availability import AvailabilityKey
from barberbook.domain.entities.booking_request import BookingRequest
from barberbook.domain.entities.identity import Identity
from barberbook.infrastructure.catalog.service_catalog_store import ServiceCatalogStore


class FakeBarbershopApi(BarbershopApiPort):
    def __init__(self) -> None:
        self.availability: dict[AvailabilityKey, list[Any]] = {}
        self.failing: set[AvailabilityKey] = set()
        self.fetch_calls: list[AvailabilityKey] = []
        self.bookings: list[tuple[BookingRequest, Identity]] = []
        self.booking_error: BookingSubmissionError | None = None
        self._gates: dict[AvailabilityKey, asyncio.Event] = {}

    def hold(self, key: AvailabilityKey) -> None:
        """Keep fetches for this key pending until release()."""
        self._gates[key] = asyncio.Event()

    def release(self, key: AvailabilityKey) -> None:
        self._gates[key].set()

    async def find_available_times(self, key: AvailabilityKey) -> list[Any]:
        self.fetch_calls.append(key)
        gate = self._gates.get(key)
        if gate is not None:
            await gate.wait()
        if key in self.failing:
            raise AvailabilityFetchError("connection refused")
        return list(self.availability.get(key, []))

    async def create_booking(self, request: BookingRequest, identity: Identity) -> None:
        self.bookings.append((request, identity))
        if self.booking_error is not None:
            raise self.booking_error


class ScriptedConfirmation(ConfirmationPort):
    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.prompts: list[str] = []

    def confirm(self, message: str) -> bool:
        self.prompts.append(message)
        return self.answer


class RecordingNotifier(NotifierPort):
    def __init__(self) -> None:
        self.successes: list[str] = []
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def success(self, message: str) -> None:
        self.successes.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)


class RecordingNavigator(NavigatorPort):
    def __init__(self) -> None:
        self.visited: list[str] = []

    def to_login(self) -> None:
        self.visited.append("login")

    def to_appointments(self) -> None:
        self.visited.append("appointments")


@pytest.fixture
def today() -> date:
    return date(2024, 5, 15)  # Wednesday


@pytest.fixture
def api() -> FakeBarbershopApi:
    return FakeBarbershopApi()


@pytest.fixture
def confirmation() -> ScriptedConfirmation:
    return ScriptedConfirmation()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def identity() -> Identity:
    return Identity(user_id=7, access_token="token-abc")


@pytest.fixture
def make_workflow(api, confirmation, notifier, navigator, identity, today):
    def _make(
        identity: Identity | None = identity,
        rules: CalendarRules | None = None,
        booking_api: BarbershopApiPort | None = None,
    ) -> BookingWorkflow:
        backend = booking_api or api
        return BookingWorkflow(
            fetch_availability=FetchAvailabilityUseCase(api=backend),
            submit_booking=SubmitBookingUseCase(
                api=backend,
                confirmation=confirmation,
                catalog=ServiceCatalogStore(),
            ),
            notifier=notifier,
            navigator=navigator,
            identity=identity,
            rules=rules or CalendarRules(),
            today=lambda: today,
        )

    return _make


@pytest.fixture
def workflow(make_workflow) -> BookingWorkflow:
    return make_workflow()
