from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_title: str = "Catalog"
    app_version: str = "1.0.0"
    cors_origins: List[str] = ["*"]

    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Ограничения валидации сущностей
    title_max_length: int = 100
    description_max_length: int = 1000

    popular_tags_limit: int = 5

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
