from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "snaphouse"
    db_username: str = "snaphouse"
    db_password: str = "secret"

    pdf_engine: str = "pdfplumber"
    csv_encoding: str = "utf-8-sig"
    text_encoding: str = "utf-8-sig"
