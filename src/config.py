from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # API
    api_base_url: str = "http://localhost:8000"
    api_timeout_seconds: float = 10.0
    cors_origins: list[str] = ["*"]

    # Dashboard
    dashboard_port: int = 8050

    # App
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
