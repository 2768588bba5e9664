from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import date
from enum import Enum

from barberbook.application.ports.navigator import NavigatorPort
from barberbook.application.ports.notifier import NotifierPort
from barberbook.application.use_cases.fetch_availability import FetchAvailabilityUseCase
from barberbook.application.use_cases.submit_booking import (
    GENERIC_FAILURE_MESSAGE,
    SubmissionResult,
    SubmitBookingUseCase,
)
from barberbook.application.utils.booking_transitions import availability_query, transition
from barberbook.application.utils.date_rules import (
    CalendarRules,
    DateDecision,
    calendar_day,
    earliest_bookable_date,
    validate_booking_date,
)
from barberbook.domain.entities.availability import AvailabilityQuery
from barberbook.domain.entities.booking_event import (
    AvailabilityFailed,
    AvailabilityLoaded,
    BookingEvent,
    DateRejected,
    DateSelected,
    SelectionReset,
    ServiceSelected,
    SubmissionFailed,
    SubmissionStarted,
    SubmissionSucceeded,
    TimeSelected,
)
from barberbook.domain.entities.booking_state import BookingPhase, BookingState
from barberbook.domain.entities.identity import Identity
from barberbook.domain.entities.selection_state import SelectionState
from barberbook.domain.entities.service_type import ServiceType


class SubmitOutcome(str, Enum):
    NOT_READY = "not_ready"  # service, date or time missing
    IN_PROGRESS = "in_progress"  # another submission is outstanding
    REDIRECTED = "redirected"  # no identity, sent to login
    DECLINED = "declined"
    CREATED = "created"
    FAILED = "failed"


class BookingWorkflow:
    """
    One user's booking session: service, date and time selection, availability
    fetches and submission.

    Selection methods are synchronous and must be called from inside the running
    event loop; availability fetches they trigger run as background tasks and are
    applied only if their (date, service) key is still the current one.
    """

    def __init__(
        self,
        fetch_availability: FetchAvailabilityUseCase,
        submit_booking: SubmitBookingUseCase,
        notifier: NotifierPort,
        navigator: NavigatorPort,
        identity: Identity | None,
        rules: CalendarRules,
        today: Callable[[], date],
    ) -> None:
        self._fetch_availability = fetch_availability
        self._submit_booking = submit_booking
        self._notifier = notifier
        self._navigator = navigator
        self._identity = identity
        self._rules = rules
        self._today = today
        self._state = BookingState()
        self._fetch_tasks: set[asyncio.Task[None]] = set()
        self._logger = logging.getLogger(__name__)

    @property
    def state(self) -> BookingState:
        return self._state

    @property
    def selection(self) -> SelectionState:
        return self._state.selection

    @property
    def available_times(self) -> tuple[str, ...]:
        return self._state.selection.available_times

    @property
    def phase(self) -> BookingPhase:
        return self._state.phase

    @property
    def can_submit(self) -> bool:
        return self._identity is not None and self._state.can_submit

    @property
    def min_date(self) -> date | None:
        return earliest_bookable_date(self._today(), self._rules)

    def ensure_identity(self) -> bool:
        """Redirect to login when there is no identity. Returns True if the workflow may proceed."""
        if self._identity is not None:
            return True
        self._logger.info("No identity present, redirecting to login")
        self._navigator.to_login()
        return False

    def select_service(self, service: ServiceType) -> BookingState:
        return self._dispatch(ServiceSelected(service))

    def select_date(self, candidate: date) -> DateDecision:
        decision = validate_booking_date(candidate, self._today(), self._rules)
        if not decision.accepted:
            self._logger.info(
                "Date rejected",
                extra={"date": candidate.isoformat(), "reason": decision.reason},
            )
            self._notifier.warning(decision.reason)
            self._dispatch(DateRejected(decision.reason))
            return decision

        self._dispatch(DateSelected(calendar_day(candidate)))
        return decision

    def select_time(self, time: str) -> bool:
        before = self._state
        after = self._dispatch(TimeSelected(time))
        if after is before:
            self._logger.warning("Time is not one of the available slots", extra={"time": time})
            return False
        return True

    def reset(self) -> BookingState:
        return self._dispatch(SelectionReset())

    def cancel(self) -> BookingState:
        self._logger.info("Booking cancelled")
        return self.reset()

    async def submit(self) -> SubmitOutcome:
        if self._state.submitting:
            self._logger.warning("Submission already in progress")
            return SubmitOutcome.IN_PROGRESS
        if not self._state.can_submit:
            self._logger.warning("Submission requires service, date and time")
            return SubmitOutcome.NOT_READY
        identity = self._identity
        if identity is None:
            self.ensure_identity()
            return SubmitOutcome.REDIRECTED

        selection = self._state.selection
        if not self._submit_booking.confirm(selection):
            self._logger.info("Booking not confirmed")
            return SubmitOutcome.DECLINED

        self._dispatch(SubmissionStarted())
        result: SubmissionResult | None = None
        try:
            result = await self._submit_booking.send(selection, identity)
        finally:
            if result is None:
                self._dispatch(SubmissionFailed(GENERIC_FAILURE_MESSAGE))

        if not result.created:
            self._dispatch(SubmissionFailed(result.message))
            self._notifier.error(result.message)
            return SubmitOutcome.FAILED

        self._dispatch(SubmissionSucceeded())
        self._notifier.success(result.message)
        self._navigator.to_appointments()
        return SubmitOutcome.CREATED

    async def wait_for_availability(self) -> None:
        """Wait until every availability fetch issued so far has finished."""
        while self._fetch_tasks:
            await asyncio.gather(*list(self._fetch_tasks))

    def _dispatch(self, event: BookingEvent) -> BookingState:
        before = self._state
        after = transition(before, event)
        self._state = after

        query = availability_query(before, after)
        if query is not None:
            self._start_fetch(query)
        return after

    def _start_fetch(self, query: AvailabilityQuery) -> None:
        self._logger.debug(
            "Fetching available slots",
            extra={
                "date": query.key.date.isoformat(),
                "service": query.key.service.value,
                "generation": query.generation,
            },
        )
        task = asyncio.get_running_loop().create_task(self._run_fetch(query))
        self._fetch_tasks.add(task)
        task.add_done_callback(self._fetch_tasks.discard)

    async def _run_fetch(self, query: AvailabilityQuery) -> None:
        result = await self._fetch_availability.execute(query.key)
        if result.ok:
            event: BookingEvent = AvailabilityLoaded(query.generation, result.times)
        else:
            event = AvailabilityFailed(query.generation)

        before = self._state
        after = self._dispatch(event)
        if after is before:
            self._logger.info(
                "Discarding stale availability",
                extra={
                    "date": query.key.date.isoformat(),
                    "service": query.key.service.value,
                    "generation": query.generation,
                },
            )
