from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Error-formatting settings loaded from environment variables.

    Pydantic Settings reads env vars prefixed with PROJECT_ERRORS_ (case-insensitive).
    In development, it also reads from .env file if present.
    """

    # When set, formatted payloads carry {"jsonapi": {"version": ...}} next to "errors".
    jsonapi_version: str | None = None

    # Log unrecognized exceptions (with traceback) before answering with a generic 500.
    log_unhandled: bool = True

    model_config = SettingsConfigDict(
        env_prefix="PROJECT_ERRORS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
