"""Meeting point Pydantic schemas."""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Tuple
from app.backend.core.config import settings


PairKey = Tuple[str, str]


class Coordinate(BaseModel):
    """Latitude/longitude pair in decimal degrees."""
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class DistanceEntry(BaseModel):
    """Great-circle distance between two cities."""
    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Both city names concatenated in input order")
    distance_km: float = Field(..., ge=0, description="Distance in km")


class OptimalLocationResult(BaseModel):
    """City minimizing the summed distance to all other cities."""
    model_config = ConfigDict(frozen=True)

    city: str = Field(..., description="Canonical lowercase city name")
    total_distance_km: float = Field(..., ge=0, description="Sum of distances to every other city")

    @property
    def display_name(self) -> str:
        return self.city[:1].upper() + self.city[1:]


class TravelMetrics(BaseModel):
    """Scalar metrics derived from the optimal total distance."""
    cumulative_time_hours: float = Field(..., ge=0)
    average_time_hours: float = Field(..., ge=0)
    co2_saved_kg: float = Field(..., ge=0)


class ParticipantTravel(BaseModel):
    """Travel from one participant's city to the meeting point."""
    city: str
    distance_km: float = Field(..., ge=0)
    time_hours: float = Field(..., ge=0)


class MeetingPointRequest(BaseModel):
    """Schema for requesting a meeting point."""
    cities: List[str] = Field(..., description="Participant city names")

    @field_validator("cities")
    @classmethod
    def normalise_cities(cls, value: List[str]) -> List[str]:
        cities = [city.strip().lower() for city in value]
        if not settings.min_cities <= len(cities) <= settings.max_cities:
            raise ValueError(
                f"Insert cities (min {settings.min_cities} to max {settings.max_cities})"
            )
        if any(not city for city in cities):
            raise ValueError("City names must not be empty")
        if len(set(cities)) != len(cities):
            raise ValueError("City names must be unique")
        return cities


class MeetingPointReport(BaseModel):
    """Complete meeting point result."""
    cities: List[str]
    optimal_location: str = Field(..., description="Display name of the chosen city")
    total_distance_km: float = Field(..., ge=0)
    metrics: TravelMetrics
    participants: List[ParticipantTravel] = Field(..., description="Per-participant travel to the meeting point")
    distances: List[DistanceEntry] = Field(..., description="All pairwise distances")
