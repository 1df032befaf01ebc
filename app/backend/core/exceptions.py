"""Errors raised by the meeting point engine."""
from typing import Iterable


class MeetingPointError(Exception):
    """Base class for meeting point computation errors."""


class MissingCoordinateError(MeetingPointError, KeyError):
    """Raised when one or more cities have no known coordinate."""
    
    def __init__(self, cities: Iterable[str]):
        self.cities = list(cities)
        super().__init__(f"No coordinates found for: {', '.join(self.cities)}")
    
    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class DegenerateInputError(MeetingPointError, ValueError):
    """Raised when there are too few cities for the requested computation."""
