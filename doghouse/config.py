from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Dogshouseservice"
    app_version: str = "1.0.1"
    database_url: str = "sqlite:///./local.db"
    log_level: str = "INFO"
    log_json: bool = False
    default_page_size: int = 100

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
