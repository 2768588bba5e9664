from __future__ import annotations

from barberbook.application.ports.service_catalog import ServiceCatalogPort
from barberbook.domain.entities.service_catalog import ServiceCatalogEntry
from barberbook.domain.entities.service_type import ServiceType

SERVICE_CATALOG: dict[ServiceType, ServiceCatalogEntry] = {
    ServiceType.HAIRCUT: ServiceCatalogEntry(
        service=ServiceType.HAIRCUT,
        display_name="Haircut",
        duration_minutes=30,
        price=20,
    ),
    ServiceType.BEARD: ServiceCatalogEntry(
        service=ServiceType.BEARD,
        display_name="Beard",
        duration_minutes=30,
        price=10,
    ),
    ServiceType.HAIRCUT_AND_BEARD: ServiceCatalogEntry(
        service=ServiceType.HAIRCUT_AND_BEARD,
        display_name="Haircut and Beard",
        duration_minutes=60,
        price=30,
    ),
}


class ServiceCatalogStore(ServiceCatalogPort):
    def __init__(self, catalog: dict[ServiceType, ServiceCatalogEntry] | None = None) -> None:
        self._catalog = catalog or SERVICE_CATALOG

    def get_service(self, service: ServiceType) -> ServiceCatalogEntry | None:
        return self._catalog.get(service)

    def list_services(self) -> list[ServiceCatalogEntry]:
        return list(self._catalog.values())
