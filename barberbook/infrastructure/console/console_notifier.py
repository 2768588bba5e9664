from __future__ import annotations

import logging

from barberbook.application.ports.notifier import NotifierPort


class ConsoleNotifier(NotifierPort):
    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def success(self, message: str) -> None:
        print(f"(ok) {message}")

    def error(self, message: str) -> None:
        self._logger.debug("Error shown to user", extra={"error": message})
        print(f"(error) {message}")

    def warning(self, message: str) -> None:
        print(f"(!) {message}")
