import os
from typing import List, Optional
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel


load_dotenv()


class Settings(BaseModel):
    # Monday.com price board
    monday_api_url: str = os.getenv("MONDAY_API_URL", "https://api.monday.com/v2")
    monday_api_token: Optional[str] = os.getenv("MONDAY_API_TOKEN")
    monday_api_version: str = os.getenv("MONDAY_API_VERSION", "2023-10")
    monday_board_id: str = os.getenv("MONDAY_BOARD_ID", "2090208832")
    monday_timeout_seconds: float = float(os.getenv("MONDAY_TIMEOUT_SECONDS", "10"))

    # Price sync scheduler
    price_sync_enabled: bool = os.getenv("PRICE_SYNC_ENABLED", "true").lower() == "true"
    price_sync_interval_seconds: int = int(os.getenv("PRICE_SYNC_INTERVAL_SECONDS", "86400"))

    # Workshop location (all distances are measured from here)
    origin_postal_code: str = os.getenv("ORIGIN_POSTAL_CODE", "67433")

    # Geocoding (Nominatim) and routing (OSRM)
    geocoding_url: str = os.getenv(
        "GEOCODING_URL",
        "https://nominatim.openstreetmap.org/search",
    )
    geocoding_country: str = os.getenv("GEOCODING_COUNTRY", "Germany")
    geocoding_user_agent: str = os.getenv("GEOCODING_USER_AGENT", "neon-sign-configurator/1.0")
    geocoding_timeout_seconds: float = float(os.getenv("GEOCODING_TIMEOUT_SECONDS", "5"))
    routing_url: str = os.getenv(
        "ROUTING_URL",
        "https://router.project-osrm.org/route/v1/driving",
    )
    routing_timeout_seconds: float = float(os.getenv("ROUTING_TIMEOUT_SECONDS", "8"))

    # Redis (persisted order state)
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    order_ttl_seconds: int = int(os.getenv("ORDER_TTL_SECONDS", str(30 * 24 * 3600)))

    # Storefront origins allowed to call the API (comma separated)
    cors_allow_origins: str = os.getenv("CORS_ALLOW_ORIGINS", "*")

    @property
    def has_monday_token(self) -> bool:
        """True when a non-empty board API token is configured."""
        return bool(self.monday_api_token)

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = Settings()
