from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    OPENAI_API_KEY: str | None = None

    OPENAI_MODEL_CHAT: str = "gpt-4o-mini"
    OPENAI_TEMPERATURE_CHAT: float = 0.1
    OPENAI_MAX_TOKENS: int = 1800

    LOG_LEVEL: str = "INFO"
    BUSINESS_TIMEZONE: str = "UTC"
    CORS_ORIGINS: list[str] = ["*"]

    APPOINTMENT_STORE: str = "memory"  # "memory" | "csv"
    APPOINTMENTS_CSV_PATH: str = "appointments.csv"

    CHAT_HISTORY_LIMIT: int = 20
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024


settings = Settings()
