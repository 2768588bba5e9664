from functools import lru_cache, partial
import logging
from zoneinfo import ZoneInfo

import httpx

from barberbook.core.config import settings
from barberbook.application.ports.barbershop_api import BarbershopApiPort
from barberbook.application.ports.confirmation import ConfirmationPort
from barberbook.application.ports.navigator import NavigatorPort
from barberbook.application.ports.notifier import NotifierPort
from barberbook.application.ports.service_catalog import ServiceCatalogPort
from barberbook.application.use_cases.booking_workflow import BookingWorkflow
from barberbook.application.use_cases.fetch_availability import FetchAvailabilityUseCase
from barberbook.application.use_cases.submit_booking import SubmitBookingUseCase
from barberbook.application.utils.date_rules import CalendarRules, business_today
from barberbook.domain.entities.identity import Identity
from barberbook.infrastructure.barbershop.api_client import BarbershopApiClient
from barberbook.infrastructure.barbershop.stub_app import create_stub_app
from barberbook.infrastructure.catalog.service_catalog_store import ServiceCatalogStore


def get_barbershop_api() -> BarbershopApiClient:
    logger = logging.getLogger(__name__)
    if settings.ENV.lower() in {"dev", "local"}:
        logger.info("Using in-process barbershop API stub (ENV=%s)", settings.ENV)
        return BarbershopApiClient(
            base_url="http://barbershop.stub",
            transport=httpx.ASGITransport(app=create_stub_app()),
        )
    logger.info("Using barbershop API at %s", settings.BARBERSHOP_API_BASE_URL)
    return BarbershopApiClient()


@lru_cache
def get_service_catalog() -> ServiceCatalogPort:
    return ServiceCatalogStore()


def get_calendar_rules() -> CalendarRules:
    return CalendarRules.from_settings(settings)


def get_identity(user_id: int | None = None, access_token: str | None = None) -> Identity | None:
    user_id = user_id if user_id is not None else settings.BOOKING_USER_ID
    access_token = access_token or settings.BOOKING_ACCESS_TOKEN
    if user_id is None or not access_token:
        return None
    return Identity(user_id=user_id, access_token=access_token)


def get_booking_workflow(
    api: BarbershopApiPort,
    confirmation: ConfirmationPort,
    notifier: NotifierPort,
    navigator: NavigatorPort,
    identity: Identity | None,
) -> BookingWorkflow:
    tz = ZoneInfo(settings.BUSINESS_TIMEZONE)
    return BookingWorkflow(
        fetch_availability=FetchAvailabilityUseCase(api=api),
        submit_booking=SubmitBookingUseCase(
            api=api,
            confirmation=confirmation,
            catalog=get_service_catalog(),
        ),
        notifier=notifier,
        navigator=navigator,
        identity=identity,
        rules=get_calendar_rules(),
        today=partial(business_today, tz),
    )
