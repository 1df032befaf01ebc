"""Pairwise distance table between participant cities."""
import logging
from typing import Dict, Mapping, Sequence
from app.backend.core.exceptions import MissingCoordinateError
from app.backend.schemas.meeting import Coordinate, DistanceEntry, PairKey
from app.backend.services.geo import earth_arc_distance

logger = logging.getLogger(__name__)


DistanceTable = Dict[PairKey, DistanceEntry]


def pair_key(city1: str, city2: str) -> PairKey:
    """Order-independent key for a pair of cities."""
    return (city1, city2) if city1 <= city2 else (city2, city1)


def build_distance_table(
    cities: Sequence[str],
    coordinates: Mapping[str, Coordinate]
) -> DistanceTable:
    """
    Compute the distance for every unordered pair of cities exactly once.

    Args:
        cities: Distinct lowercase city names, in participant order
        coordinates: Coordinate for each city name

    Returns:
        Mapping of pair key to DistanceEntry, N*(N-1)/2 entries

    Raises:
        MissingCoordinateError: If any city has no coordinate
    """
    missing = [city for city in cities if city not in coordinates]
    if missing:
        raise MissingCoordinateError(missing)

    table: DistanceTable = {}
    for i in range(len(cities) - 1):
        origin = coordinates[cities[i]]
        for j in range(i + 1, len(cities)):
            destination = coordinates[cities[j]]
            table[pair_key(cities[i], cities[j])] = DistanceEntry(
                path=cities[i] + cities[j],
                distance_km=earth_arc_distance(
                    origin.latitude,
                    origin.longitude,
                    destination.latitude,
                    destination.longitude
                )
            )

    logger.debug(f"Built distance table with {len(table)} pairs for {len(cities)} cities")
    return table


def distance_between(table: Mapping[PairKey, DistanceEntry], city1: str, city2: str) -> float:
    """Look up the distance between two cities; zero for the same city."""
    if city1 == city2:
        return 0.0
    return table[pair_key(city1, city2)].distance_km
