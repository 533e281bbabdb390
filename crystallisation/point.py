"""
Point class for 2D coordinates
"""
import math


class Point:
    """
    2D point with x, y coordinates. Operations return new points.

    Equality is tolerant, so points are not hashable.
    """

    __slots__ = ("x", "y")

    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False
        return abs(self.x - other.x) < 1e-10 and abs(self.y - other.y) < 1e-10

    def __repr__(self):
        return f"Point({self.x:.2f}, {self.y:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y

    def clone(self):
        return Point(self.x, self.y)

    def distance_sq(self, other):
        """Squared distance to another point"""
        dx = other.x - self.x
        dy = other.y - self.y
        return dx * dx + dy * dy

    def distance(self, other):
        """Distance to another point"""
        return math.sqrt(self.distance_sq(other))

    def angle(self, other):
        """Direction from this point to another, in radians"""
        return math.atan2(other.y - self.y, other.x - self.x)

    def lerp(self, other, amount):
        """Linear interpolation towards another point (amount is not clamped)"""
        return Point(
            self.x + (other.x - self.x) * amount,
            self.y + (other.y - self.y) * amount
        )

    def to_tuple(self):
        return (self.x, self.y)

    def to_dict(self):
        """Convert to dictionary for JSON export"""
        return {"x": self.x, "y": self.y}

    @staticmethod
    def from_dict(d):
        """Create from dictionary"""
        return Point(d["x"], d["y"])
