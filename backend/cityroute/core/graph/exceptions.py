"""Exceptions raised while editing the in-memory city network."""


class NetworkError(Exception):
    """Base exception for city network operations."""


class UnknownCityError(NetworkError):
    """Raised when a city id does not exist in the network."""

    def __init__(self, city_id: int):
        super().__init__(f"City {city_id} not found")
        self.city_id = city_id


class InvalidRoadError(NetworkError):
    """Raised when a road cannot be added (e.g. it connects a city to itself)."""
