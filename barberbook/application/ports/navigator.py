from abc import ABC, abstractmethod


class NavigatorPort(ABC):
    @abstractmethod
    def to_login(self) -> None:
        """Leave the workflow for the login view."""
        raise NotImplementedError

    @abstractmethod
    def to_appointments(self) -> None:
        """Leave the workflow for the appointments listing view."""
        raise NotImplementedError
