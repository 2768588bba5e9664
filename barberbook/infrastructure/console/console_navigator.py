from __future__ import annotations

import logging

from barberbook.application.ports.navigator import NavigatorPort


class ConsoleNavigator(NavigatorPort):
    """Records where the workflow sent the user; the console loop exits once set."""

    def __init__(self) -> None:
        self.destination: str | None = None
        self._logger = logging.getLogger(__name__)

    def to_login(self) -> None:
        self._go("/login")
        print("Please log in first (set --user-id and --token).")

    def to_appointments(self) -> None:
        self._go("/appointments")
        print("Opening your appointments.")

    def _go(self, destination: str) -> None:
        self.destination = destination
        self._logger.info("Navigating away from booking", extra={"status": destination})
