# Alarm Fax Parser
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Coordinate conversion.

Some dispatch centers print the incident location as Gauss-Krüger coordinates
(DHDN / Potsdam datum, 3 degree zones). Map services expect WGS 84
latitude/longitude. The conversion is done by pyproj using the EPSG
definitions of the German Gauss-Krüger zones 2 to 5.
"""

import math
from functools import lru_cache

from pyproj import Transformer


# EPSG:31466 is "DHDN / 3-degree Gauss-Kruger zone 2", up to EPSG:31469 for zone 5.
_EPSG_ZONE_OFFSET = 31464
_SUPPORTED_ZONES = range(2, 6)


@lru_cache(maxsize=None)
def _transformer(zone: int) -> Transformer:
    return Transformer.from_crs(f"EPSG:{_EPSG_ZONE_OFFSET + zone}", "EPSG:4326", always_xy=True)


def gauss_krueger_to_wgs84(easting: float, northing: float) -> tuple[float, float]:
    """
    Convert Gauss-Krüger coordinates to WGS 84.

    Args:
        easting:
            "Rechtswert" in metres, including the zone number as leading digit
            (e.g. `4468500.0` for zone 4).
        northing:
            "Hochwert" in metres.

    Returns:
        A tuple `(latitude, longitude)` in decimal degrees.

    Raises:
        ValueError:
            If a coordinate is not a finite number or the zone is missing or
            not one of the German zones 2 to 5.
    """

    if not (math.isfinite(easting) and math.isfinite(northing)):
        raise ValueError(f"Invalid Gauss-Krüger coordinates: {easting}, {northing}")

    zone = int(easting // 1_000_000)
    if zone <= 0:
        raise ValueError(f"Gauss-Krüger easting has no zone number: {easting}")
    if zone not in _SUPPORTED_ZONES:
        raise ValueError(f"Unsupported Gauss-Krüger zone {zone}: {easting}")

    longitude, latitude = _transformer(zone).transform(easting, northing, errcheck=True)
    return latitude, longitude
