from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ADMIN_USERNAME: str | None = None
    ADMIN_PASSWORD: str | None = None

    SESSION_SECRET: str | None = None
    SESSION_COOKIE_NAME: str = "admin_token"
    SESSION_MAX_AGE_DAYS: int = 7
    SESSION_COOKIE_SECURE: bool | None = None

    RESEND_API_KEY: str | None = None
    RESEND_BASE_URL: str = "https://api.resend.com"
    FROM_EMAIL: str = "Personal Training <onboarding@resend.dev>"

    BUSINESS_NAME: str = "Personal Training"
    BUSINESS_TIMEZONE: str = "UTC"
    WORK_START_HOUR: int = 8
    WORK_END_HOUR: int = 17

    PUBLIC_WEEK_HORIZON: int = 1
    ADMIN_WEEK_HORIZON: int = 2

    STORE_PROVIDER: str = "sql"
    DATABASE_URL: str = "sqlite:///./data/bookings.db"

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    @property
    def working_hours(self) -> list[int]:
        return list(range(self.WORK_START_HOUR, self.WORK_END_HOUR))

    @property
    def cookie_secure(self) -> bool:
        if self.SESSION_COOKIE_SECURE is not None:
            return self.SESSION_COOKIE_SECURE
        return self.ENV.lower() not in {"dev", "local"}


settings = Settings()
