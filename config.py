import os
from typing import List


class Settings:
    COCKTAILDB_BASE_URL = os.environ.get(
        "COCKTAILDB_BASE_URL", "https://www.thecocktaildb.com/api/json/v1/1/"
    )
    COCKTAILDB_TIMEOUT = float(os.environ.get("COCKTAILDB_TIMEOUT", "10"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Comma-separated list
    CORS_ORIGINS: List[str] = [
        o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()
    ]

    APP_HOST = os.environ.get("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.environ.get("APP_PORT", "8000"))

    # Open pages whose display state is kept; the least recently used is dropped
    MAX_VIEWERS = int(os.environ.get("MAX_VIEWERS", "256"))
