from __future__ import annotations

from barberbook.application.ports.confirmation import ConfirmationPort


class ConsoleConfirmation(ConfirmationPort):
    def confirm(self, message: str) -> bool:
        try:
            answer = input(f"{message} [y/N] ").strip().lower()
        except EOFError:
            return False
        return answer in ("y", "yes")
