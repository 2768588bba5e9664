from __future__ import annotations

from dataclasses import dataclass

from barberbook.domain.entities.service_type import ServiceType


@dataclass(frozen=True)
class ServiceCatalogEntry:
    service: ServiceType
    display_name: str
    duration_minutes: int
    price: int
    currency: str = "lv"

    @property
    def label(self) -> str:
        return f"{self.display_name} - {self.duration_minutes}min. {self.price}{self.currency}"
