"""Travel time and CO2 metrics derived from the optimal total distance."""
from typing import Optional
from app.backend.core.config import Settings, settings as default_settings
from app.backend.core.exceptions import DegenerateInputError
from app.backend.schemas.meeting import OptimalLocationResult, TravelMetrics


def cumulative_travel_time(total_distance_km: float, speed_kmh: float) -> float:
    """Hours needed to cover the total distance at the given speed."""
    return round(total_distance_km / speed_kmh, 3)


def average_travel_time(cumulative_time_hours: float, participant_count: int) -> float:
    """
    Average hours per travelling participant.

    The participant living in the meeting city does not travel, so the
    cumulative time is shared among the other participant_count - 1.
    """
    if participant_count < 2:
        raise DegenerateInputError("Average travel time needs at least two participants")
    return round(cumulative_time_hours / (participant_count - 1), 3)


def co2_saved(
    total_distance_km: float,
    consumption_l_per_100km: float,
    co2_kg_per_liter: float
) -> float:
    """CO2 in kg a car would emit over the total distance."""
    liters = consumption_l_per_100km / 100 * total_distance_km
    return round(liters * co2_kg_per_liter, 3)


def compute_metrics(
    result: OptimalLocationResult,
    participant_count: int,
    settings: Optional[Settings] = None
) -> TravelMetrics:
    """
    Compute all travel metrics for an optimal location.

    Args:
        result: Selected meeting point and its total distance
        participant_count: Number of participant cities
        settings: Settings providing speed and emission constants

    Returns:
        TravelMetrics
    """
    settings = settings or default_settings
    cumulative = cumulative_travel_time(result.total_distance_km, settings.travel_speed_kmh)
    return TravelMetrics(
        cumulative_time_hours=cumulative,
        average_time_hours=average_travel_time(cumulative, participant_count),
        co2_saved_kg=co2_saved(
            result.total_distance_km,
            settings.car_consumption_l_per_100km,
            settings.co2_kg_per_liter
        )
    )
