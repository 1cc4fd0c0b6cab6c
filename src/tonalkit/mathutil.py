"""
Small numeric helpers shared by the color modules.

Angles are in degrees unless a name says otherwise.
"""

import math

# Type alias
Vector3 = tuple[float, float, float]
Matrix3 = tuple[Vector3, Vector3, Vector3]


def signum(num: float) -> int:
    """Return -1, 0 or 1 depending on the sign of num."""
    if num < 0:
        return -1
    elif num == 0:
        return 0
    return 1


def lerp(start: float, stop: float, amount: float) -> float:
    """Linear interpolation: start at amount 0, stop at amount 1."""
    return (1.0 - amount) * start + amount * stop


def clamp_int(low: int, high: int, value: int) -> int:
    if value < low:
        return low
    if value > high:
        return high
    return value


def clamp_double(low: float, high: float, value: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(value + 0.5)


def sanitize_degrees_int(degrees: int) -> int:
    """Wrap an integer angle into [0, 360)."""
    return degrees % 360


def sanitize_degrees(degrees: float) -> float:
    """Wrap an angle into [0, 360)."""
    degrees = math.fmod(degrees, 360.0)
    if degrees < 0:
        degrees += 360.0
    return degrees


def rotation_direction(from_deg: float, to_deg: float) -> float:
    """
    Sign of the shortest rotation from one angle to another.

    Returns 1.0 to rotate counter-clockwise (increasing degrees), -1.0 otherwise.
    """
    increasing_difference = sanitize_degrees(to_deg - from_deg)
    return 1.0 if increasing_difference <= 180.0 else -1.0


def difference_degrees(a: float, b: float) -> float:
    """Distance between two angles on the circle, in [0, 180]."""
    return 180.0 - abs(abs(a - b) - 180.0)


def matrix_multiply(row: Vector3, matrix: Matrix3) -> Vector3:
    """Multiply a column vector by a 3x3 matrix."""
    a = row[0] * matrix[0][0] + row[1] * matrix[0][1] + row[2] * matrix[0][2]
    b = row[0] * matrix[1][0] + row[1] * matrix[1][1] + row[2] * matrix[1][2]
    c = row[0] * matrix[2][0] + row[1] * matrix[2][1] + row[2] * matrix[2][2]
    return (a, b, c)
