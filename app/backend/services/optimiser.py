"""Optimiser service for choosing the meeting point of a group."""
from functools import reduce
from typing import List, Mapping, Optional, Sequence
import logging
from app.backend.core.config import Settings, settings as default_settings
from app.backend.core.exceptions import DegenerateInputError
from app.backend.schemas.meeting import (
    DistanceEntry,
    MeetingPointReport,
    OptimalLocationResult,
    PairKey,
    ParticipantTravel,
)
from app.backend.services.cities import CityDirectory, GeoNamesCityDirectory
from app.backend.services.distances import build_distance_table, distance_between
from app.backend.services.metrics import compute_metrics, cumulative_travel_time

logger = logging.getLogger(__name__)


def total_distance(city: str, cities: Sequence[str], table: Mapping[PairKey, DistanceEntry]) -> float:
    """Sum of distances from one city to every other city."""
    return sum(distance_between(table, city, other) for other in cities if other != city)


def select_optimal_location(
    cities: Sequence[str],
    table: Mapping[PairKey, DistanceEntry]
) -> OptimalLocationResult:
    """
    Pick the city with the smallest summed distance to all others.

    Cities are scanned in input order and a candidate only replaces the
    current best when strictly better, so the first city reaching the
    minimum wins ties.

    Args:
        cities: Lowercase city names in participant order
        table: Pairwise distance table covering every pair

    Returns:
        OptimalLocationResult with the chosen city and its total distance

    Raises:
        DegenerateInputError: If no cities are given
    """
    if not cities:
        raise DegenerateInputError("At least one city is required")

    candidates = (
        OptimalLocationResult(city=city, total_distance_km=total_distance(city, cities, table))
        for city in cities
    )
    return reduce(
        lambda best, candidate: candidate if candidate.total_distance_km < best.total_distance_km else best,
        candidates
    )


class OptimiserService:
    """Service for finding the meeting point minimizing total travel."""

    def __init__(
        self,
        directory: Optional[CityDirectory] = None,
        settings: Optional[Settings] = None
    ):
        """
        Initialize optimiser service.

        Args:
            directory: City directory (defaults to the configured GeoNames dataset)
            settings: Settings instance (defaults to application settings)
        """
        self.settings = settings or default_settings
        self.directory = directory or GeoNamesCityDirectory(self.settings.cities_dataset_path)

    def optimise(self, cities: Sequence[str]) -> MeetingPointReport:
        """
        Compute the meeting point report for a list of participant cities.

        Args:
            cities: Distinct lowercase city names

        Returns:
            MeetingPointReport with the chosen city, metrics and distances

        Raises:
            MissingCoordinateError: If a city is not in the directory
            DegenerateInputError: If fewer than two cities are given
        """
        cities = list(cities)
        coordinates = self.directory.resolve(cities)
        table = build_distance_table(cities, coordinates)
        optimal = select_optimal_location(cities, table)
        metrics = compute_metrics(optimal, len(cities), self.settings)

        logger.info(
            f"Optimal meeting point for {len(cities)} cities: "
            f"{optimal.display_name} ({optimal.total_distance_km} km)"
        )

        return MeetingPointReport(
            cities=cities,
            optimal_location=optimal.display_name,
            total_distance_km=optimal.total_distance_km,
            metrics=metrics,
            participants=self._participant_travel(cities, optimal.city, table),
            distances=list(table.values())
        )

    def _participant_travel(
        self,
        cities: Sequence[str],
        meeting_city: str,
        table: Mapping[PairKey, DistanceEntry]
    ) -> List[ParticipantTravel]:
        """Distance and time from each participant city to the meeting city."""
        travel = []
        for city in cities:
            distance = distance_between(table, city, meeting_city)
            travel.append(
                ParticipantTravel(
                    city=city,
                    distance_km=distance,
                    time_hours=cumulative_travel_time(distance, self.settings.travel_speed_kmh)
                )
            )
        return travel
