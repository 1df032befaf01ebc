"""Pytest configuration and fixtures."""
import pytest
from fastapi.testclient import TestClient
from app.backend.api.meeting import get_optimiser
from app.backend.main import app
from app.backend.services.cities import InMemoryCityDirectory
from app.backend.services.optimiser import OptimiserService


# Points on the equator, one degree of longitude is ~111.195 km
EQUATOR_CITIES = {
    "alpha": (0.0, 0.0),
    "beta": (0.0, 1.0),
    "gamma": (0.0, 3.0),
    "delta": (0.0, 6.0),
}


def geonames_row(geoname_id: int, name: str, latitude: float, longitude: float) -> str:
    """Build one line in the GeoNames cities1000 layout."""
    return "\t".join([
        str(geoname_id),
        name,
        name,
        "",
        str(latitude),
        str(longitude),
        "P",
        "PPL",
        "IT",
    ])


@pytest.fixture
def equator_directory():
    """In-memory directory with cities along the equator."""
    return InMemoryCityDirectory(EQUATOR_CITIES)


@pytest.fixture
def dataset_path(tmp_path):
    """GeoNames style dataset file."""
    rows = [
        geonames_row(1, "Alpha", 0.0, 0.0),
        geonames_row(2, "Beta", 0.0, 1.0),
        geonames_row(3, "Gamma", 0.0, 3.0),
        geonames_row(4, "Delta", 0.0, 6.0),
        geonames_row(5, "Milan", 45.46427, 9.18951),
        geonames_row(6, "Rome", 41.89193, 12.51133),
        # Duplicate name further down the file
        geonames_row(7, "Rome", 34.25704, -85.16467),
        "truncated\trow",
    ]
    path = tmp_path / "cities1000.txt"
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path


@pytest.fixture(scope="function")
def client(equator_directory):
    """Create a test client."""
    def override_get_optimiser():
        return OptimiserService(directory=equator_directory)
    
    app.dependency_overrides[get_optimiser] = override_get_optimiser
    yield TestClient(app)
    app.dependency_overrides.clear()
