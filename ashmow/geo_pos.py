"""Geographic position."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPos:
    """A latitude and longitude pair, both zero by default."""

    lat: float = 0.0
    lng: float = 0.0