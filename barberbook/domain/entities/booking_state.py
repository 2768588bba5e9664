from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from barberbook.domain.entities.selection_state import SelectionState


class BookingPhase(str, Enum):
    EMPTY = "empty"
    SERVICE_CHOSEN = "service_chosen"
    DATE_CHOSEN = "date_chosen"
    SERVICE_AND_DATE_CHOSEN = "service_and_date_chosen"
    FULLY_SELECTED = "fully_selected"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
    FAILED = "failed"


@dataclass(frozen=True)
class BookingState:
    selection: SelectionState = field(default_factory=SelectionState)
    fetch_generation: int = 0  # bumped on every availability key change, never decreases
    fetching: bool = False
    submitting: bool = False
    submitted: bool = False
    last_error: str | None = None  # message shown for the last failed submission

    @property
    def phase(self) -> BookingPhase:
        selection = self.selection
        if self.submitted:
            return BookingPhase.SUBMITTED
        if self.submitting:
            return BookingPhase.SUBMITTING
        if selection.is_complete:
            return BookingPhase.FAILED if self.last_error else BookingPhase.FULLY_SELECTED
        if selection.service is not None and selection.date is not None:
            return BookingPhase.SERVICE_AND_DATE_CHOSEN
        if selection.service is not None:
            return BookingPhase.SERVICE_CHOSEN
        if selection.date is not None:
            return BookingPhase.DATE_CHOSEN
        return BookingPhase.EMPTY

    @property
    def can_submit(self) -> bool:
        return self.selection.is_complete and not self.submitting and not self.submitted
