"""Tests for city coordinate directories."""
import pytest
from app.backend.core.exceptions import MissingCoordinateError
from app.backend.schemas.meeting import Coordinate
from app.backend.services.cities import GeoNamesCityDirectory, InMemoryCityDirectory


def test_geonames_resolves_lowercase_names(dataset_path):
    """Test lookup against the dataset name column."""
    directory = GeoNamesCityDirectory(dataset_path)
    
    coordinates = directory.resolve(["milan", "alpha"])
    
    assert coordinates["milan"] == Coordinate(latitude=45.46427, longitude=9.18951)
    assert coordinates["alpha"] == Coordinate(latitude=0.0, longitude=0.0)


def test_geonames_first_row_wins(dataset_path):
    """Test that duplicate names resolve to the first dataset row."""
    directory = GeoNamesCityDirectory(dataset_path)
    
    coordinates = directory.resolve(["rome"])
    
    assert coordinates["rome"].latitude == 41.89193


def test_geonames_missing_city(dataset_path):
    """Test that unknown cities raise with every missing name."""
    directory = GeoNamesCityDirectory(dataset_path)
    
    with pytest.raises(MissingCoordinateError) as exc_info:
        directory.resolve(["milan", "atlantis", "eldorado"])
    
    assert exc_info.value.cities == ["atlantis", "eldorado"]


def test_geonames_find_returns_partial(dataset_path):
    """Test that find reports only the cities present."""
    directory = GeoNamesCityDirectory(dataset_path)
    
    assert set(directory.find(["beta", "atlantis"])) == {"beta"}


def test_geonames_missing_dataset(tmp_path):
    """Test that a missing dataset file propagates."""
    directory = GeoNamesCityDirectory(tmp_path / "nope.txt")
    
    with pytest.raises(FileNotFoundError):
        directory.resolve(["milan"])


def test_in_memory_directory_accepts_tuples():
    """Test building an in-memory directory from plain tuples."""
    directory = InMemoryCityDirectory({"Paris": (48.8566, 2.3522)})
    
    coordinates = directory.resolve(["paris"])
    
    assert coordinates["paris"].longitude == 2.3522


def test_geonames_skips_unparseable_rows(tmp_path):
    """Test that rows with bad coordinates are skipped for a later valid row."""
    path = tmp_path / "cities1000.txt"
    path.write_text(
        "1\tBeta\tBeta\t\tN/A\t1.0\n"
        "2\tGamma\tGamma\t\t95.0\t3.0\n"
        "3\tBeta\tBeta\t\t0.0\t1.0\n",
        encoding="utf-8"
    )
    directory = GeoNamesCityDirectory(path)
    
    assert directory.find(["beta", "gamma"]) == {"beta": Coordinate(latitude=0.0, longitude=1.0)}
    with pytest.raises(MissingCoordinateError) as exc_info:
        directory.resolve(["beta", "gamma"])
    assert exc_info.value.cities == ["gamma"]


def test_geonames_tolerates_invalid_utf8(tmp_path):
    """Test that undecodable bytes do not abort the lookup."""
    path = tmp_path / "cities1000.txt"
    path.write_bytes(
        b"1\tZ\xffrich\tZurich\t\t47.36667\t8.55\n"
        b"2\tBeta\tBeta\t\t0.0\t1.0\n"
    )
    directory = GeoNamesCityDirectory(path)
    
    assert directory.resolve(["beta"])["beta"] == Coordinate(latitude=0.0, longitude=1.0)
