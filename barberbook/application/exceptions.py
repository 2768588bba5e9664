class AvailabilityFetchError(RuntimeError):
    """Raised when the availability query fails (transport error, non-success status or bad body)."""
    pass


class BookingSubmissionError(RuntimeError):
    """Raised when the backend does not acknowledge a booking.

    ``server_message`` carries the human-readable message from the error body, if any.
    """

    def __init__(self, server_message: str | None = None, status_code: int | None = None) -> None:
        super().__init__(server_message or f"Booking submission failed (status={status_code})")
        self.server_message = server_message
        self.status_code = status_code
