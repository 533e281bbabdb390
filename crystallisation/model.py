"""
Crystal class - growth by repeated polygon subdivision
"""

from enum import Enum

import structlog

from .polygon import Polygon
from .random import Random
from .cutter import Cutter
from .config import Settings

logger = structlog.get_logger(__name__)


class StepResult(Enum):
    """Outcome of a single growth step"""

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    EXHAUSTED = "exhausted"


class Crystal:
    """
    Working set of polygons that grows by splitting one polygon per step.

    polygons are the leaves of the subdivision tree; lines collects the
    chords of every polygon that has been replaced by its children.
    """

    def __init__(self, width, height, config=None, rng=None, canvas=None):
        self.width = width
        self.height = height
        self.config = config if config is not None else Settings()
        self.rng = rng if rng is not None else Random()
        self.canvas = canvas

        self.polygons = []
        self.lines = []

        self.reset()

    def __repr__(self):
        return f"Crystal({len(self.polygons)} polygons, {len(self.lines)} lines)"

    def reset(self, width=None, height=None):
        """Start over from a single rectangle covering the bounds"""
        if width is not None:
            self.width = width
        if height is not None:
            self.height = height

        self.polygons = [Polygon.rect(self.width, self.height)]
        self.lines = []

        if self.canvas is not None:
            self.canvas.clear_rect(0, 0, self.canvas.width, self.canvas.height)

        logger.debug("Crystal reset", width=self.width, height=self.height)

    def update(self, **options):
        """Change settings between steps"""
        self.config.update(**options)

    @property
    def exhausted(self):
        return not self.polygons

    @property
    def generation(self):
        """Deepest generation currently in the working set"""
        return max((p.generation for p in self.polygons), default=0)

    @property
    def total_area(self):
        return sum(p.area for p in self.polygons)

    def step(self):
        """Try to split one randomly chosen polygon"""
        if not self.polygons:
            logger.debug("Nothing left to subdivide")
            return StepResult.EXHAUSTED

        index = int(self.rng.uniform(len(self.polygons)))
        parent = self.polygons[index]

        slices = Cutter.split(
            parent, self.config.randomness, self.config.opposite_bias, self.rng
        )

        if not self._usable(slices):
            logger.debug("Split rejected", index=index, generation=parent.generation)
            return StepResult.REJECTED

        self.lines.extend(parent.new_segments)
        self.polygons.extend(slices)
        del self.polygons[index]

        if self.canvas is not None:
            for s in slices:
                s.draw(self.canvas)
                self.canvas.fill()
                self.canvas.stroke()

        return StepResult.ACCEPTED

    def run(self, iterations=None):
        """Perform a number of steps (config.iterations by default), return how many were accepted"""
        if iterations is None:
            iterations = self.config.iterations
        accepted = 0
        for _ in range(iterations):
            result = self.step()
            if result is StepResult.ACCEPTED:
                accepted += 1
            elif result is StepResult.EXHAUSTED:
                break
        return accepted

    def _usable(self, slices):
        """Check slices against the angle and side thresholds"""
        if min(s.min_angle() for s in slices) < self.config.min_angle:
            return False
        if min(s.min_side() for s in slices) < self.config.min_side:
            return False
        return True

    def to_dict(self):
        """Convert to dictionary for JSON export"""
        return {
            "width": self.width,
            "height": self.height,
            "settings": self.config.to_dict(),
            "polygons": [p.to_dict() for p in self.polygons],
            "lines": [line.to_dict() for line in self.lines],
        }
