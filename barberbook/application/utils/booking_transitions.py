from __future__ import annotations

from dataclasses import replace

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
from barberbook.domain.entities.booking_state import BookingState
from barberbook.domain.entities.selection_state import SelectionState


def transition(state: BookingState, event: BookingEvent) -> BookingState:
    """
    Apply one event to the booking state. Pure: returns a new state, or the same
    object when the event does not apply (stale fetch result, incomplete selection, ...).
    """
    if isinstance(event, ServiceSelected):
        selection = replace(state.selection, service=event.service, time=None)
        return _with_selection(state, selection)

    if isinstance(event, DateSelected):
        if event.date == state.selection.date:
            return replace(state, last_error=None)
        selection = replace(state.selection, date=event.date, time=None)
        return _with_selection(state, selection)

    if isinstance(event, DateRejected):
        selection = replace(state.selection, date=None, time=None)
        return _with_selection(state, selection)

    if isinstance(event, TimeSelected):
        selection = state.selection
        if selection.availability_key is None or event.time not in selection.available_times:
            return state
        return replace(state, selection=replace(selection, time=event.time), last_error=None)

    if isinstance(event, SelectionReset):
        return reset_booking_state(state)

    if isinstance(event, AvailabilityLoaded):
        if not _is_current_fetch(state, event.generation):
            return state
        selection = replace(state.selection, available_times=tuple(event.times))
        return replace(state, selection=selection, fetching=False)

    if isinstance(event, AvailabilityFailed):
        if not _is_current_fetch(state, event.generation):
            return state
        selection = replace(state.selection, available_times=(), time=None)
        return replace(state, selection=selection, fetching=False)

    if isinstance(event, SubmissionStarted):
        if not state.can_submit:
            return state
        return replace(state, submitting=True, last_error=None)

    if isinstance(event, SubmissionSucceeded):
        return replace(state, submitting=False, submitted=True, last_error=None)

    if isinstance(event, SubmissionFailed):
        return replace(state, submitting=False, last_error=event.message)

    raise TypeError(f"Unknown booking event: {event!r}")


def reset_booking_state(state: BookingState) -> BookingState:
    """Reset selection and slot list to initial state.

    The fetch generation moves on whenever a fetch could still be in flight, and an
    outstanding submission keeps blocking a duplicate one.
    """
    generation = state.fetch_generation
    if state.fetching or state.selection.availability_key is not None:
        generation += 1
    return BookingState(
        selection=SelectionState(),
        fetch_generation=generation,
        fetching=False,
        submitting=state.submitting,
        submitted=False,
        last_error=None,
    )


def availability_query(before: BookingState, after: BookingState) -> AvailabilityQuery | None:
    """Fetch rule evaluated after every transition.

    A query is due when service and date are both set and the (date, service) key
    changed, which the transition marks by bumping the fetch generation.
    """
    key = after.selection.availability_key
    if key is None or after.fetch_generation == before.fetch_generation:
        return None
    return AvailabilityQuery(key=key, generation=after.fetch_generation)


def _with_selection(state: BookingState, selection: SelectionState) -> BookingState:
    if selection.availability_key == state.selection.availability_key:
        return replace(state, selection=selection, last_error=None)
    return replace(
        state,
        selection=replace(selection, available_times=(), time=None),
        fetch_generation=state.fetch_generation + 1,
        fetching=selection.availability_key is not None,
        last_error=None,
    )


def _is_current_fetch(state: BookingState, generation: int) -> bool:
    return generation == state.fetch_generation and state.selection.availability_key is not None
