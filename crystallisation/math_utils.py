"""
Mathematical utility functions
"""
import math


def gate(value, min_val, max_val):
    """Clamp value between min and max"""
    return min_val if value < min_val else (value if value < max_val else max_val)


def cross(x1, y1, x2, y2):
    """2D cross product"""
    return x1 * y2 - y1 * x2


def sss_angle(a, b, c):
    """
    Angle opposite side c of a triangle with sides a, b, c (law of cosines).

    The cosine is clamped to [-1, 1] so that near-colinear triangles do not
    produce NaN. A zero-length adjacent side gives 0.
    """
    if a == 0 or b == 0:
        return 0.0
    cos_c = (a * a + b * b - c * c) / (2 * a * b)
    return math.acos(gate(cos_c, -1.0, 1.0))


def signed_area(points):
    """Shoelace signed area. Positive for clockwise order in screen coordinates."""
    length = len(points)
    if length < 3:
        return 0.0
    s = 0.0
    for i in range(length):
        v1 = points[i]
        v2 = points[(i + 1) % length]
        s += cross(v1.x, v1.y, v2.x, v2.y)
    return s * 0.5
