import datetime

from pydantic import BaseModel, ConfigDict, Field

from barberbook.domain.entities.service_type import ServiceType


class AvailabilityRequestSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: datetime.date
    service: ServiceType = Field(alias="eBarberService")


class BookingRequestSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    service: ServiceType
    date: datetime.date
    time: str = Field(pattern=r"^\d{2}:\d{2}$")
    user_id: int = Field(alias="userId")


class BookingCreatedSchema(BaseModel):
    id: int
    service: ServiceType
    date: datetime.date
    time: str
    user_id: int = Field(serialization_alias="userId")


class ErrorResponseSchema(BaseModel):
    message: str
