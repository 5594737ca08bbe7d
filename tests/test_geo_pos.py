import dataclasses

import pytest

from ashmow.geo_pos import GeoPos


def test_default_is_origin():
    assert GeoPos() == GeoPos(0.0, 0.0)


def test_values_are_kept():
    pos = GeoPos(lat=15.0, lng=60.0)
    assert (pos.lat, pos.lng) == (15.0, 60.0)


def test_positions_are_immutable():
    pos = GeoPos(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        pos.lat = 3.0  # type: ignore[misc]
    assert (pos.lat, pos.lng) == (1.0, 2.0)