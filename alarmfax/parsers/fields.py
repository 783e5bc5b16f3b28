# Alarm Fax Parser
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Field handlers for format dispatch tables.

Each function returns a handler `(state, value) -> None` that writes one value
into the operation or the pending resource. Targets are given as dotted
attribute paths relative to the operation, e.g. `einsatzort.street`.

Handlers compute their result before touching the state, so a failing
conversion leaves the operation as it was.
"""

from typing import Any

from alarmfax.geo import gauss_krueger_to_wgs84
from alarmfax.parser_utility import append_line, try_get_timestamp_from_message
from alarmfax.parsers.engine import FieldHandler, ParseState


_GEO_EASTING = "geo_easting"


def _resolve(root: Any, path: str) -> tuple[Any, str]:
    *parents, attr = path.split(".")
    target = root
    for name in parents:
        target = getattr(target, name)
    return target, attr


def set_field(path: str) -> FieldHandler:
    """Overwrite a scalar field."""

    def handler(state: ParseState, value: str) -> None:
        target, attr = _resolve(state.operation, path)
        setattr(target, attr, value)

    return handler


def append_field(path: str) -> FieldHandler:
    """Append the value as a new line to a multi-line text field."""

    def handler(state: ParseState, value: str) -> None:
        target, attr = _resolve(state.operation, path)
        setattr(target, attr, append_line(getattr(target, attr), value))

    return handler


def append_formatted(path: str, template: str) -> FieldHandler:
    """Like `append_field()`, but format the value with `template` first."""

    def handler(state: ParseState, value: str) -> None:
        target, attr = _resolve(state.operation, path)
        setattr(target, attr, append_line(getattr(target, attr), template.format(value)))

    return handler


def set_custom(key: str) -> FieldHandler:
    """Store the value in `custom_data[key]`."""

    def handler(state: ParseState, value: str) -> None:
        state.operation.custom_data[key] = value

    return handler


def set_resource_field(attr: str) -> FieldHandler:
    """Overwrite a field of the pending resource."""

    def handler(state: ParseState, value: str) -> None:
        setattr(state.resource, attr, value)

    return handler


def add_requested_equipment(state: ParseState, value: str) -> None:
    # An empty value means the whole vehicle is requested.
    if value.strip():
        state.resource.requested_equipment.append(value)


def finalize_resource_alerted(state: ParseState, value: str) -> None:
    """Set the alert time of the pending resource and finalize it."""

    state.resource.timestamp = try_get_timestamp_from_message(value, state.now)
    state.finalize_resource()


def geo_easting(state: ParseState, value: str) -> None:
    """Remember the easting until the matching northing arrives."""

    state.scratch[_GEO_EASTING] = float(value)


def geo_northing(location: str) -> FieldHandler:
    """Convert the stored easting and this northing into WGS 84 for `location`."""

    def handler(state: ParseState, value: str) -> None:
        northing = float(value)
        easting = float(state.scratch.get(_GEO_EASTING, 0.0))
        latitude, longitude = gauss_krueger_to_wgs84(easting, northing)

        target = getattr(state.operation, location)
        target.geo_latitude = latitude
        target.geo_longitude = longitude

    return handler
