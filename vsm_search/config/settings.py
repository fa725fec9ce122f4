
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="VSM_", env_file=".env", extra="ignore"
    )

    docs_path: str = "./docs"
    index_path: str = "./data/vsm_model.json"

    search_top_k: int = 10
    search_score_ratio: float = 0.0

    # CLI output
    excerpt_length: int = 200
    top_terms: int = 30

    log_level: str = "INFO"


settings = Settings()
