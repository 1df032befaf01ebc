"""City coordinate directory interface and implementations."""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union
import logging
from app.backend.core.config import settings
from app.backend.core.exceptions import MissingCoordinateError
from app.backend.schemas.meeting import Coordinate


class CityDirectory(ABC):
    """Abstract base class for city coordinate lookups."""

    @abstractmethod
    def find(self, cities: Iterable[str]) -> Dict[str, Coordinate]:
        """
        Look up coordinates for the given cities.

        Args:
            cities: Lowercase city names

        Returns:
            Mapping of city name to Coordinate for every city found
        """
        pass

    def resolve(self, cities: Iterable[str]) -> Dict[str, Coordinate]:
        """
        Look up coordinates for every city, failing if any is unknown.

        Args:
            cities: Lowercase city names

        Returns:
            Mapping of city name to Coordinate, complete for the input

        Raises:
            MissingCoordinateError: If a city is not in the directory
        """
        cities = list(cities)
        found = self.find(cities)
        missing = [city for city in cities if city not in found]
        if missing:
            raise MissingCoordinateError(missing)
        return found


class InMemoryCityDirectory(CityDirectory):
    """City directory backed by a fixed mapping."""

    def __init__(self, coordinates: Mapping[str, Union[Coordinate, Tuple[float, float]]]):
        self.coordinates: Dict[str, Coordinate] = {}
        for name, value in coordinates.items():
            if not isinstance(value, Coordinate):
                value = Coordinate(latitude=value[0], longitude=value[1])
            self.coordinates[name.lower()] = value

    def find(self, cities: Iterable[str]) -> Dict[str, Coordinate]:
        return {city: self.coordinates[city] for city in cities if city in self.coordinates}


class GeoNamesCityDirectory(CityDirectory):
    """
    City directory reading a GeoNames ``cities1000`` tab-separated dump.

    Only the name (column 1), latitude (column 4) and longitude (column 5)
    are used. When several rows share a name, the first one wins.
    """

    NAME_COLUMN = 1
    LATITUDE_COLUMN = 4
    LONGITUDE_COLUMN = 5

    def __init__(self, dataset_path: Optional[Union[str, Path]] = None):
        self.dataset_path = Path(dataset_path or settings.cities_dataset_path)
        self.logger = logging.getLogger(__name__)

    def find(self, cities: Iterable[str]) -> Dict[str, Coordinate]:
        wanted = set(cities)
        result: Dict[str, Coordinate] = {}

        self.logger.info(f"Looking up {len(wanted)} cities in {self.dataset_path}")
        with self.dataset_path.open(encoding="utf-8", errors="replace") as dataset:
            for line_number, line in enumerate(dataset, start=1):
                columns = line.rstrip("\n").split("\t")
                if len(columns) <= self.LONGITUDE_COLUMN:
                    continue

                name = columns[self.NAME_COLUMN].lower()
                if name in wanted and name not in result:
                    try:
                        coordinate = Coordinate(
                            latitude=float(columns[self.LATITUDE_COLUMN]),
                            longitude=float(columns[self.LONGITUDE_COLUMN])
                        )
                    except ValueError as e:
                        # pydantic ValidationError is a ValueError too
                        self.logger.warning(
                            f"Skipping row {line_number} of {self.dataset_path} for {name}: {e}"
                        )
                        continue
                    result[name] = coordinate
                    if len(result) == len(wanted):
                        break

        return result
