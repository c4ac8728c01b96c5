from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from events_api.services.reservation_service import ReservationMode


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    data_file: str = "data.json"

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    shutdown_timeout: int = 5

    reservation_mode: ReservationMode = ReservationMode.SEQUENTIAL

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """logging only accepts upper-case level names."""
        return value.upper()


settings = Settings()
