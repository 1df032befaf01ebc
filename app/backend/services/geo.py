"""Great-circle distance on a spherical earth."""
import math
from app.backend.core.config import settings


EARTH_RADIUS_KM = settings.earth_radius_km


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in decimal degrees to radians."""
    return degrees * math.pi / 180


def earth_arc_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    radius_km: float = EARTH_RADIUS_KM
) -> float:
    """
    Length of the arc between two points on the earth surface.

    Uses the spherical law of cosines:

        dsigma = acos(sin(lat1) * sin(lat2) + cos(lat1) * cos(lat2) * cos(dlon))

    Args:
        lat1: Latitude of the first point in degrees
        lon1: Longitude of the first point in degrees
        lat2: Latitude of the second point in degrees
        lon2: Longitude of the second point in degrees
        radius_km: Sphere radius in km

    Returns:
        Distance in km rounded to 3 decimals
    """
    phi1 = degrees_to_radians(lat1)
    phi2 = degrees_to_radians(lat2)
    delta_lambda = abs(degrees_to_radians(lon1) - degrees_to_radians(lon2))

    cos_sigma = (
        math.sin(phi1) * math.sin(phi2) +
        math.cos(phi1) * math.cos(phi2) * math.cos(delta_lambda)
    )
    # Rounding can push the cosine just outside [-1, 1]
    cos_sigma = max(-1.0, min(1.0, cos_sigma))

    return round(radius_km * math.acos(cos_sigma), 3)
