from abc import ABC, abstractmethod


class ConfirmationPort(ABC):
    @abstractmethod
    def confirm(self, message: str) -> bool:
        raise NotImplementedError
