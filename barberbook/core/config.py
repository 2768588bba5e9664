from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BUSINESS_NAME: str = "Barber Shop"
    BUSINESS_TIMEZONE: str = "Europe/Sofia"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    BARBERSHOP_API_BASE_URL: str = "http://localhost:8080"
    AVAILABILITY_PATH: str = "/api/users/appointments/available"
    CREATE_APPOINTMENT_PATH: str = "/api/users/appointments/create"
    AVAILABILITY_SERVICE_FIELD: str = "eBarberService"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    # Python weekday numbers, Monday=0 .. Sunday=6
    CLOSED_WEEKDAYS: list[int] = [6]
    REJECT_PAST_DATES: bool = True
    BOOKING_HORIZON_DAYS: int | None = None

    BOOKING_USER_ID: int | None = None
    BOOKING_ACCESS_TOKEN: str | None = None

    @field_validator("CLOSED_WEEKDAYS")
    @classmethod
    def _check_weekdays(cls, value: list[int]) -> list[int]:
        invalid = [day for day in value if not 0 <= day <= 6]
        if invalid:
            raise ValueError(f"weekday numbers must be between 0 and 6, got {invalid}")
        return value


settings = Settings()
