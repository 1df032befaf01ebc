"""Application configuration using pydantic-settings."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # City dataset (GeoNames cities1000 tab-separated dump)
    cities_dataset_path: str = "./data/cities1000.txt"
    
    # Participants
    min_cities: int = 3
    max_cities: int = 10
    
    # Geometry
    earth_radius_km: float = 6371.0
    
    # Travel and emissions
    travel_speed_kmh: float = 60.0
    car_consumption_l_per_100km: float = 5.0
    co2_kg_per_liter: float = 2.3
    
    # Logging
    log_level: str = "INFO"
    
    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000


settings = Settings()
