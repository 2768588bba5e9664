"""
In-process stand-in for the barbershop backend's appointment endpoints.

Serves a fixed list of open times per day and remembers bookings made against it.
It is meant for local runs (ENV=dev) and adapter tests through httpx.ASGITransport;
it does not compute real availability.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Sequence

from fastapi import FastAPI, Header
from fastapi.responses import JSONResponse

from barberbook.application.utils.slot_time import format_slot_time
from barberbook.core.config import settings
from barberbook.infrastructure.barbershop.schemas import (
    AvailabilityRequestSchema,
    BookingCreatedSchema,
    BookingRequestSchema,
)

DEFAULT_OPEN_TIMES: tuple[str, ...] = (
    "09:00", "09:30", "10:00", "10:30", "11:00", "11:30", "12:00", "12:30",
    "13:00", "13:30", "14:00", "14:30", "15:00", "15:30", "16:00", "16:30",
    "17:00", "17:30", "18:00", "18:30",
)

SLOT_TAKEN_MESSAGE = "Slot already booked"

logger = logging.getLogger(__name__)


def create_stub_app(
    open_times: Sequence[str] = DEFAULT_OPEN_TIMES,
    availability_path: str | None = None,
    create_path: str | None = None,
) -> FastAPI:
    app = FastAPI(title="Barbershop API stub", version="1.0.0")
    booked: dict[tuple[datetime.date, str], BookingCreatedSchema] = {}

    def free_times(day: datetime.date) -> list[str]:
        return [t for t in open_times if (day, format_slot_time(t)) not in booked]

    @app.post(availability_path or settings.AVAILABILITY_PATH)
    async def available(body: AvailabilityRequestSchema) -> list[str]:
        return free_times(body.date)

    @app.post(create_path or settings.CREATE_APPOINTMENT_PATH, status_code=201)
    async def create(
        body: BookingRequestSchema,
        authorization: str | None = Header(None),
    ):
        token = (authorization or "").removeprefix("Bearer ").strip()
        if not authorization or not authorization.startswith("Bearer ") or not token:
            return JSONResponse(status_code=401, content={"message": "Unauthorized"})
        if body.time not in {format_slot_time(t) for t in free_times(body.date)}:
            return JSONResponse(status_code=409, content={"message": SLOT_TAKEN_MESSAGE})

        created = BookingCreatedSchema(
            id=len(booked) + 1,
            service=body.service,
            date=body.date,
            time=body.time,
            user_id=body.user_id,
        )
        booked[(body.date, body.time)] = created
        logger.info(
            "Stub appointment created",
            extra={"date": body.date.isoformat(), "time": body.time, "user_id": body.user_id},
        )
        return created.model_dump(mode="json", by_alias=True)

    return app
