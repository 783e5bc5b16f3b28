# Alarm Fax Parser
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Operation records.

An `Operation` is the structured result of parsing one alarm fax. Parsers own
the record while they fill it line by line and hand it to the caller once the
whole transcript has been read.
"""

import copy
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class PropertyLocation:
    """
    A location referenced by an operation (incident site or destination).

    Attributes:
        street:
            Street name, possibly including the house number if the fax does
            not separate them.
        street_number:
            House number.
        zip_code:
            Postal code.
        city:
            City name without postal code.
        property:
            Name of the affected property/object (e.g. a company or school).
        intersection:
            Crossing street, if given.
        geo_latitude:
            WGS 84 latitude, if the fax carries coordinates.
        geo_longitude:
            WGS 84 longitude, if the fax carries coordinates.
    """

    street: str = ""
    street_number: str = ""
    zip_code: str = ""
    city: str = ""
    property: str = ""
    intersection: str = ""
    geo_latitude: float | None = None
    geo_longitude: float | None = None


@dataclass
class OperationKeywords:
    """Alarm keywords ("Schlagwort" and "Stichwort")."""

    keyword: str = ""
    emergency_keyword: str = ""


@dataclass
class OperationResource:
    """
    A dispatched unit (vehicle or team).

    Attributes:
        full_name:
            Unit name as printed on the fax.
        timestamp:
            Time the unit was alerted, if known.
        requested_equipment:
            Equipment explicitly requested from this unit, in fax order.
    """

    full_name: str = ""
    timestamp: datetime | None = None
    requested_equipment: list[str] = field(default_factory=list)


@dataclass
class Operation:
    """
    Canonical dispatch record produced by a parse.

    Scalar fields default to empty strings. Multi-line text fields (`messenger`,
    `comment`, `picture`) are built by appending lines in fax order.
    """

    operation_number: str = ""
    operation_plan: str = ""
    priority: str = ""
    timestamp: datetime | None = None
    messenger: str = ""
    comment: str = ""
    picture: str = ""
    einsatzort: PropertyLocation = field(default_factory=PropertyLocation)
    zielort: PropertyLocation = field(default_factory=PropertyLocation)
    keywords: OperationKeywords = field(default_factory=OperationKeywords)
    custom_data: dict[str, str] = field(default_factory=dict)
    resources: list[OperationResource] = field(default_factory=list)

    def add_resource(self, resource: OperationResource) -> None:
        """Append a snapshot of a finished resource."""

        self.resources.append(copy.deepcopy(resource))

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the operation into plain data for YAML/JSON output.

        Returns:
            A nested mapping with ISO 8601 timestamps.
        """

        return {
            "operation_number": self.operation_number,
            "operation_plan": self.operation_plan,
            "priority": self.priority,
            "timestamp": _iso(self.timestamp),
            "messenger": self.messenger,
            "comment": self.comment,
            "picture": self.picture,
            "einsatzort": _location_dict(self.einsatzort),
            "zielort": _location_dict(self.zielort),
            "keywords": {
                "keyword": self.keywords.keyword,
                "emergency_keyword": self.keywords.emergency_keyword,
            },
            "custom_data": dict(self.custom_data),
            "resources": [
                {
                    "full_name": r.full_name,
                    "timestamp": _iso(r.timestamp),
                    "requested_equipment": list(r.requested_equipment),
                }
                for r in self.resources
            ],
        }


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _location_dict(location: PropertyLocation) -> dict[str, Any]:
    return {
        "street": location.street,
        "street_number": location.street_number,
        "zip_code": location.zip_code,
        "city": location.city,
        "property": location.property,
        "intersection": location.intersection,
        "geo_latitude": location.geo_latitude,
        "geo_longitude": location.geo_longitude,
    }
