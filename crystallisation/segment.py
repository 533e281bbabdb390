"""
Segment class for fracture lines
"""
from .point import Point


class Segment:
    """A chord introduced when a polygon was split"""

    __slots__ = ("a", "b")

    def __init__(self, a, b):
        self.a = a
        self.b = b

    def __eq__(self, other):
        if not isinstance(other, Segment):
            return False
        return self.a == other.a and self.b == other.b

    def __repr__(self):
        return f"Segment({self.a!r}, {self.b!r})"

    def to_dict(self):
        """Convert to dictionary for JSON export"""
        return {"a": self.a.to_dict(), "b": self.b.to_dict()}

    @staticmethod
    def from_dict(d):
        """Create from dictionary"""
        return Segment(Point.from_dict(d["a"]), Point.from_dict(d["b"]))
