"""Units of measure and angle conversions on a spherical Earth."""

from __future__ import annotations

import math

__all__ = [
    "EARTH_RADIUS",
    "Meters",
    "Radians",
    "Degrees",
    "Miles",
    "Yards",
    "Inches",
    "NauticalMiles",
    "radians_to_length",
    "degrees_to_radians",
    "length_to_radians",
    "radians_to_degrees",
    "bearing_to_azimuth",
    "azimuth_to_bearing",
    "format_meters",
]

# Mean Earth radius in meters, used wherever the Earth is modelled as a sphere.
EARTH_RADIUS = 6371008.8

Meters = float
Radians = float
Degrees = float
Miles = float
Yards = float
Inches = float
NauticalMiles = float


def radians_to_length(radians: Radians) -> Meters:
    """Convert an arc in radians to a distance in meters."""
    return float(radians) * EARTH_RADIUS


def degrees_to_radians(degrees: Degrees) -> Radians:
    """Convert an angle in degrees to radians, ignoring full revolutions."""
    normalised = math.fmod(float(degrees), 360.0)
    return (normalised * math.pi) / 180.0


def length_to_radians(distance: Meters) -> Radians:
    """Convert a distance in meters to an arc in radians."""
    return float(distance) / EARTH_RADIUS


def radians_to_degrees(radians: Radians) -> Degrees:
    """Convert an angle in radians to degrees, ignoring full revolutions."""
    normalised = math.fmod(float(radians), 2 * math.pi)
    return (normalised * 180.0) / math.pi


def bearing_to_azimuth(bearing: Degrees) -> Degrees:
    """Convert a bearing to an azimuth between 0 and 360 degrees."""
    angle = math.fmod(float(bearing), 360.0)
    if angle < 0:
        angle += 360.0
    return angle


def azimuth_to_bearing(angle: Degrees) -> Degrees:
    """Convert an azimuth to a bearing between -180 and +180 degrees."""
    angle = math.fmod(float(angle), 360.0)
    if angle > 180:
        return angle - 360.0
    if angle < -180:
        return angle + 360.0
    return angle


def format_meters(meters: Meters) -> str:
    """Format a distance in meters with three decimals."""
    return f"{float(meters):.3f} m"