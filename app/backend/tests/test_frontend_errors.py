"""Tests for frontend API error messages."""
from app.frontend.api_errors import error_detail


def test_validation_error_list_shows_first_message(client):
    """Test that a 422 body is reduced to its first message."""
    response = client.post("/api/meeting-point", json={"cities": ["alpha", "Alpha", "beta"]})
    assert response.status_code == 422
    
    assert error_detail(response.json(), "fallback") == "City names must be unique"


def test_string_detail_passes_through(client):
    """Test that plain string details are shown as is."""
    response = client.post("/api/meeting-point", json={"cities": ["alpha", "beta", "atlantis"]})
    
    assert error_detail(response.json(), "fallback") == "No coordinates found for: atlantis"


def test_unexpected_bodies_use_fallback():
    """Test bodies without a usable detail."""
    assert error_detail(["not", "a", "dict"], "fallback") == "fallback"
    assert error_detail({"detail": []}, "fallback") == "fallback"
    assert error_detail({}, "fallback") == "fallback"
