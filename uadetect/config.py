# uadetect/config.py

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # HTTP surface
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    # Module-level classification cache (entries, not bytes)
    cache_max_entries: int = 10000

    # Client hints requested when the extended source allows it
    high_entropy_hints: List[str] = [
        "architecture",
        "bitness",
        "brands",
        "fullVersionList",
        "mobile",
        "model",
        "platform",
        "platformVersion",
    ]

    # Reported when the capability probe cannot tell
    default_pixel_ratio: float = 1.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="UADETECT_",
        extra="ignore",
    )


settings = Settings()
