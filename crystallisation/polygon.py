"""
Polygon class for 2D polygons
"""
import math
from .point import Point
from .segment import Segment
from .math_utils import sss_angle, signed_area


class DegeneratePolygonError(ValueError):
    """Raised when a polygon would have fewer than 3 vertices"""


class Polygon:
    """
    Simple polygon in clockwise (screen coordinate) winding.

    Carries the generation counter of the subdivision tree and the chords
    that were created together with it.
    """

    def __init__(self, vertices, generation=0, new_segments=None):
        points = [v if isinstance(v, Point) else Point(v[0], v[1]) for v in vertices]
        if len(points) < 3:
            raise DegeneratePolygonError(
                f"Polygon needs at least 3 vertices, got {len(points)}"
            )
        self.vertices = points
        self.generation = generation
        self.new_segments = list(new_segments) if new_segments else []

    def __len__(self):
        return len(self.vertices)

    def __getitem__(self, index):
        return self.vertices[index]

    def __iter__(self):
        return iter(self.vertices)

    def __repr__(self):
        return f"Polygon({len(self.vertices)} vertices, generation={self.generation})"

    def copy(self):
        """Create a copy of the polygon"""
        return Polygon(
            [v.clone() for v in self.vertices],
            self.generation,
            self.new_segments,
        )

    @property
    def signed_area(self):
        return signed_area(self.vertices)

    @property
    def area(self):
        """Calculate polygon area"""
        return abs(self.signed_area)

    def is_clockwise(self):
        """Clockwise on screen (y axis pointing down)"""
        return self.signed_area > 0

    @property
    def perimeter(self):
        """Calculate perimeter"""
        length = 0.0
        for v0, v1 in self.edges():
            length += v0.distance(v1)
        return length

    def centroid(self):
        """Average of vertices (not area weighted)"""
        cx = 0.0
        cy = 0.0
        for v in self.vertices:
            cx += v.x
            cy += v.y
        return Point(cx / len(self.vertices), cy / len(self.vertices))

    def edges(self):
        """List of edges as (start, end) pairs, closing edge included"""
        length = len(self.vertices)
        return [
            (self.vertices[i], self.vertices[(i + 1) % length])
            for i in range(length)
        ]

    def bounds(self):
        """Bounding box as (min_x, min_y, max_x, max_y)"""
        xs = [v.x for v in self.vertices]
        ys = [v.y for v in self.vertices]
        return min(xs), min(ys), max(xs), max(ys)

    def min_angle(self):
        """Smallest interior angle, in radians"""
        length = len(self.vertices)
        result = math.inf
        for i, vertex in enumerate(self.vertices):
            prev_v = self.vertices[(i - 1) % length]
            next_v = self.vertices[(i + 1) % length]
            a = vertex.distance(prev_v)
            b = vertex.distance(next_v)
            c = prev_v.distance(next_v)
            result = min(result, sss_angle(a, b, c))
        return result

    def min_side(self):
        """Length of the shortest edge"""
        side = math.inf
        prev_v = self.vertices[-1]
        for v in self.vertices:
            side = min(side, v.distance_sq(prev_v))
            prev_v = v
        return math.sqrt(side)

    def draw(self, context):
        """Trace this polygon as a closed path on a canvas-like context"""
        context.begin_path()
        for i, v in enumerate(self.vertices):
            if i == 0:
                context.move_to(v.x, v.y)
            else:
                context.line_to(v.x, v.y)
        context.close_path()

    def to_dict(self):
        """Convert to dictionary for JSON export"""
        return {
            "vertices": [v.to_dict() for v in self.vertices],
            "generation": self.generation,
            "new_segments": [s.to_dict() for s in self.new_segments],
        }

    @staticmethod
    def from_dict(d):
        """Create from dictionary"""
        return Polygon(
            [Point.from_dict(v) for v in d["vertices"]],
            d.get("generation", 0),
            [Segment.from_dict(s) for s in d.get("new_segments", [])],
        )

    @staticmethod
    def rect(w=1.0, h=1.0):
        """Rectangle spanning (0, 0) to (w, h): top-left, top-right, bottom-right, bottom-left"""
        return Polygon([
            Point(0, 0),
            Point(w, 0),
            Point(w, h),
            Point(0, h)
        ])

    @staticmethod
    def regular(n=8, r=1.0, center=None):
        """Create regular polygon, clockwise on screen"""
        c = center or Point(0, 0)
        return Polygon([
            Point(c.x + r * math.cos(i / n * math.pi * 2), c.y + r * math.sin(i / n * math.pi * 2))
            for i in range(n)
        ])
