"""Storefront Configuration"""

from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Storefront"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8002

    # Remote catalog
    catalog_backend: str = "memory"  # "memory" or "http"
    catalog_base_url: str = "http://localhost:8080/v1"
    catalog_collection: str = "products"
    catalog_timeout_seconds: float = 10.0
    catalog_api_key: Optional[str] = None

    # Seed the in-memory store with the fallback set on startup
    seed_memory_catalog: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "STOREFRONT_"
        case_sensitive = False

    @property
    def uses_http_catalog(self) -> bool:
        """Check if the remote catalog is reached over HTTP"""
        return self.catalog_backend.lower() == "http"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
