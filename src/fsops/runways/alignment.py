"""Wind alignment helpers.

Pure functions relating runway headings to wind direction. A runway end is
"aligned" when the wind is not behind it, i.e. within 90 degrees either
side of the runway heading.

Typical usage:
    from fsops.runways.alignment import heading_from_identifier, is_aligned

    heading = heading_from_identifier("02L")  # 20
    is_aligned(heading, 350)  # True
"""

import re

# Maximum angle between runway heading and wind for the end to be usable
ALIGNMENT_LIMIT_DEGREES = 90

# Two leading digits, optional parallel designator (L/C/R) or anything else
IDENTIFIER_PATTERN = re.compile(r"^(\d{2})")


def heading_from_identifier(identifier: str) -> int | None:
    """Derive a runway heading from its designator.

    Args:
        identifier: Runway designator (e.g., "02L", "20C", "36").

    Returns:
        Heading in [0, 360), or None if the identifier has no leading
        two-digit heading (e.g., "H1", "N", "7").

    Examples:
        >>> heading_from_identifier("02L")
        20
        >>> heading_from_identifier("36")
        0
    """
    match = IDENTIFIER_PATTERN.match(identifier.strip()) if identifier else None
    if match is None:
        return None
    return (int(match.group(1)) * 10) % 360


def angular_difference(a: float, b: float) -> float:
    """Smallest angle between two headings on a 360 degree circle.

    Args:
        a: First heading in degrees.
        b: Second heading in degrees.

    Returns:
        Angle in [0, 180].
    """
    diff = abs(a - b) % 360
    return min(diff, 360 - diff)


def is_aligned(heading: float, wind_direction: float | None) -> bool:
    """Check whether a runway heading is usable with the given wind.

    Args:
        heading: Runway end heading in degrees.
        wind_direction: Direction the wind blows from, or None for
            variable/calm wind (aligned with everything).

    Returns:
        True if the wind is within 90 degrees of the runway heading.
    """
    if wind_direction is None:
        return True
    return angular_difference(heading, wind_direction) <= ALIGNMENT_LIMIT_DEGREES


def normalize_heading(value: float) -> int:
    """Round an explicit heading into [0, 360).

    Args:
        value: Heading in degrees, possibly fractional or 360.

    Returns:
        Integer heading in [0, 360).
    """
    return int(round(value)) % 360
