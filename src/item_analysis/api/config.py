from pydantic_settings import BaseSettings

ITEM_ANALYSIS_ENV_PREFIX = "ITEM_ANALYSIS_"


class ApiSettings(BaseSettings):
    model_config = {"env_prefix": ITEM_ANALYSIS_ENV_PREFIX}

    max_students: int = 5000
    max_items: int = 500
    max_csv_bytes: int = 2_000_000
    host: str = "127.0.0.1"
    port: int = 8000
