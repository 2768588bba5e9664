from __future__ import annotations

from enum import Enum


class ServiceType(str, Enum):
    HAIRCUT = "HAIR"
    BEARD = "BEARD"
    HAIRCUT_AND_BEARD = "HAIR_AND_BEARD"

    @classmethod
    def from_text(cls, text: str) -> "ServiceType | None":
        """Resolve user text or a wire value to a service type. Returns None if unknown."""
        normalized = "_".join(text.strip().upper().replace("&", " AND ").replace("+", " AND ").split())
        aliases = {
            "HAIR": cls.HAIRCUT,
            "HAIRCUT": cls.HAIRCUT,
            "BEARD": cls.BEARD,
            "HAIR_AND_BEARD": cls.HAIRCUT_AND_BEARD,
            "HAIRCUT_AND_BEARD": cls.HAIRCUT_AND_BEARD,
        }
        return aliases.get(normalized)
