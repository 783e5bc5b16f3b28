"""Unit tests for the Gauss-Krüger to WGS 84 conversion."""

import math

import pytest

from alarmfax.geo import gauss_krueger_to_wgs84


class TestGaussKrueger:
    """Test cases for gauss_krueger_to_wgs84()."""

    def test_point_on_central_meridian(self):
        """Zone 4 has its central meridian at 12° east."""
        latitude, longitude = gauss_krueger_to_wgs84(4500000.0, 5540279.6)

        assert latitude == pytest.approx(49.99887, abs=1e-3)
        assert longitude == pytest.approx(11.99852, abs=1e-3)

    def test_easting_moves_east(self):
        _, west = gauss_krueger_to_wgs84(4468500.0, 5540279.6)
        _, east = gauss_krueger_to_wgs84(4531500.0, 5540279.6)

        assert west < 12.0 < east
        # 31.5 km at 50° north is a bit less than half a degree.
        assert east - west == pytest.approx(0.88, abs=0.02)

    def test_zone_selects_central_meridian(self):
        _, lon_zone_3 = gauss_krueger_to_wgs84(3500000.0, 5540279.6)
        _, lon_zone_4 = gauss_krueger_to_wgs84(4500000.0, 5540279.6)

        assert lon_zone_4 - lon_zone_3 == pytest.approx(3.0, abs=0.01)

    def test_easting_without_zone_is_rejected(self):
        with pytest.raises(ValueError):
            gauss_krueger_to_wgs84(500000.0, 5540279.6)

    def test_zone_outside_germany_is_rejected(self):
        with pytest.raises(ValueError, match="zone 9"):
            gauss_krueger_to_wgs84(9500000.0, 5540279.6)

    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_non_finite_values_are_rejected(self, value):
        with pytest.raises(ValueError):
            gauss_krueger_to_wgs84(value, 5540279.6)
        with pytest.raises(ValueError):
            gauss_krueger_to_wgs84(4500000.0, value)
