"""
Cutter class for splitting polygons along chords
"""
from .polygon import Polygon, DegeneratePolygonError
from .segment import Segment


class Cutter:
    """Splits a polygon into two by a chord between two of its edges"""

    @staticmethod
    def split(poly, randomness, opposite_bias, rng):
        """
        Split polygon along a random chord.

        The first edge is chosen uniformly. With probability opposite_bias the
        second edge is the one roughly across the polygon, otherwise it is
        drawn uniformly, redrawing until it differs from the first. Split
        points sit at 0.5 +/- randomness / 2 along their edges.

        Returns a pair of polygons; poly is left untouched.
        """
        n = len(poly.vertices)
        if n < 3:
            raise DegeneratePolygonError(f"Cannot split polygon with {n} vertices")

        i1 = int(rng.uniform(n))
        if rng.float() < opposite_bias:
            i2 = (i1 + n // 2) % n
        else:
            i2 = int(rng.uniform(n))
        while i2 == i1:
            i2 = int(rng.uniform(n))

        half = randomness * 0.5
        l1 = 0.5 + rng.uniform(-half, half)
        l2 = 0.5 + rng.uniform(-half, half)

        return Cutter.split_at(poly, i1, i2, l1, l2)

    @staticmethod
    def split_at(poly, i1, i2, l1=0.5, l2=0.5):
        """Split polygon by a chord from edge i1 (at ratio l1) to edge i2 (at ratio l2)"""
        vertices = poly.vertices
        n = len(vertices)
        if n < 3:
            raise DegeneratePolygonError(f"Cannot split polygon with {n} vertices")
        if not (0 <= i1 < n and 0 <= i2 < n):
            raise ValueError(f"Edge indices ({i1}, {i2}) out of range for {n} edges")
        if i1 == i2:
            raise ValueError(f"Cannot split edge {i1} against itself")

        v1 = vertices[i1].lerp(vertices[(i1 + 1) % n], l1)
        v2 = vertices[i2].lerp(vertices[(i2 + 1) % n], l2)

        # Both halves keep the parent's clockwise order
        first = [v1] + Cutter._walk(vertices, i1, i2) + [v2]
        second = [v2] + Cutter._walk(vertices, i2, i1) + [v1]

        generation = poly.generation + 1
        half1 = Polygon(first, generation, [Segment(v1, v2)])
        half2 = Polygon(second, generation)
        return half1, half2

    @staticmethod
    def _walk(vertices, start, stop):
        """Vertices after start up to and including stop, wrapping around"""
        n = len(vertices)
        result = []
        j = start
        while j != stop:
            j = (j + 1) % n
            result.append(vertices[j])
        return result
