from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    LANGUAGE: str = "en"

    WORK_DAY_START_HOUR: int = 8
    WORK_DAY_END_HOUR: int = 18
    SLOT_MINUTES: int = 30
    MAX_BOOKING_DURATION_MINUTES: int = 240

    NOTIFICATION_DISMISS_SECONDS: float = 3.0
    SEED_DEMO_DATA: bool = True

    CONFIRMATION_WEBHOOK_URL: str | None = None
    CONFIRMATION_WEBHOOK_TIMEOUT: float = 10.0


settings = Settings()
