"""Configuration management using Pydantic settings."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "FRA Atlas"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Map — initial view over India, zoom used when a focus region has none
    map_center_lat: float = 22.9734
    map_center_lng: float = 78.6569
    map_default_zoom: int = 5
    focus_default_zoom: int = 7
    basemap: str = "OSM"

    # Layers
    color_seed: Optional[int] = None  # fixed seed = reproducible overlay colors
    max_upload_bytes: int = 20 * 1024 * 1024

    # Smart rules
    change_record_limit: int = 50

    # Landing page greeting served at /api/demo
    demo_message: str = "Hello from the FRA Atlas server"


settings = Settings()
