"""
Tests for service parsing, the service catalog and identity wiring.
"""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from barberbook.core.config import Settings, settings
from barberbook.domain.entities.identity import Identity
from barberbook.domain.entities.service_type import ServiceType
from barberbook.infrastructure.catalog.service_catalog_store import ServiceCatalogStore
from barberbook.main import ContextFormatter
from barberbook.wiring.dependencies import get_identity


@pytest.mark.parametrize(
    "text, expected",
    [
        ("haircut", ServiceType.HAIRCUT),
        ("HAIR", ServiceType.HAIRCUT),
        ("beard", ServiceType.BEARD),
        ("haircut_and_beard", ServiceType.HAIRCUT_AND_BEARD),
        ("Hair and Beard", ServiceType.HAIRCUT_AND_BEARD),
        ("haircut & beard", ServiceType.HAIRCUT_AND_BEARD),
        ("HAIR_AND_BEARD", ServiceType.HAIRCUT_AND_BEARD),
        ("shave", None),
        ("", None),
    ],
)
def test_service_from_text(text, expected):
    assert ServiceType.from_text(text) == expected


def test_catalog_lists_every_service():
    catalog = ServiceCatalogStore()
    services = [entry.service for entry in catalog.list_services()]
    assert services == [ServiceType.HAIRCUT, ServiceType.BEARD, ServiceType.HAIRCUT_AND_BEARD]


def test_catalog_entry_details():
    entry = ServiceCatalogStore().get_service(ServiceType.HAIRCUT_AND_BEARD)
    assert entry is not None
    assert entry.duration_minutes == 60
    assert entry.label == "Haircut and Beard - 60min. 30lv"


def test_identity_requires_user_and_token(monkeypatch):
    monkeypatch.setattr(settings, "BOOKING_USER_ID", None)
    monkeypatch.setattr(settings, "BOOKING_ACCESS_TOKEN", None)
    assert get_identity(7, "token-abc") == Identity(user_id=7, access_token="token-abc")
    assert get_identity(7, None) is None
    assert get_identity(None, "token-abc") is None


def test_identity_falls_back_to_settings(monkeypatch):
    monkeypatch.setattr(settings, "BOOKING_USER_ID", 3)
    monkeypatch.setattr(settings, "BOOKING_ACCESS_TOKEN", "env-token")
    assert get_identity() == Identity(user_id=3, access_token="env-token")


def test_context_formatter_appends_known_extras():
    formatter = ContextFormatter("%(levelname)s:%(name)s:%(message)s")
    record = logging.LogRecord("barberbook.test", logging.INFO, __file__, 1, "Available slots fetched", None, None)
    record.service = "HAIR"
    record.slots = 2
    assert formatter.format(record) == "INFO:barberbook.test:Available slots fetched | service=HAIR slots=2"


@pytest.mark.parametrize("closed", [[7], [-1], [0, 9]])
def test_closed_weekdays_must_be_weekday_numbers(closed):
    with pytest.raises(ValidationError):
        Settings(CLOSED_WEEKDAYS=closed)


def test_closed_weekdays_accepts_full_range():
    assert Settings(CLOSED_WEEKDAYS=[0, 6]).CLOSED_WEEKDAYS == [0, 6]
