from __future__ import annotations

from abc import ABC, abstractmethod

from barberbook.domain.entities.service_catalog import ServiceCatalogEntry
from barberbook.domain.entities.service_type import ServiceType


class ServiceCatalogPort(ABC):
    @abstractmethod
    def get_service(self, service: ServiceType) -> ServiceCatalogEntry | None:
        """Get service catalog entry by service type."""
        raise NotImplementedError

    @abstractmethod
    def list_services(self) -> list[ServiceCatalogEntry]:
        """All bookable services in display order."""
        raise NotImplementedError