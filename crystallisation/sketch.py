"""
Sketch - frame loop driving a crystal and its canvas.

The sketch owns the running/paused state. Each tick runs the configured
number of growth steps, and the crystal paints accepted slices straight onto
the canvas.
"""

from typing import Optional

import structlog

from .canvas import SvgCanvas
from .config import Settings
from .export import export_image, export_to_json
from .model import Crystal, StepResult
from .random import Random

logger = structlog.get_logger(__name__)


class Sketch:
    """
    Headless animation loop.

    Usage:
        sketch = Sketch(800, 600, Settings(), seed=42)
        sketch.start()
        sketch.run(frames=100)
        sketch.export("crystal.png")
    """

    def __init__(self, width: int, height: int, settings: Optional[Settings] = None, seed: int = -1):
        self.settings = settings if settings is not None else Settings()
        self.rng = Random(seed)
        self.canvas = SvgCanvas(width, height)
        self.crystal = Crystal(width, height, self.settings, self.rng, self.canvas)

        self.running = False
        self.frames = 0
        self.attempts = 0
        self.accepted = 0
        self.rejected = 0

    @property
    def width(self) -> int:
        return self.canvas.width

    @property
    def height(self) -> int:
        return self.canvas.height

    def start(self):
        if not self.running:
            logger.info("Sketch started", seed=self.rng.get_seed())
        self.running = True

    def stop(self):
        if self.running:
            logger.info("Sketch stopped", frames=self.frames, polygons=len(self.crystal.polygons))
        self.running = False

    def toggle(self):
        """Start when stopped, stop when running"""
        if self.running:
            self.stop()
        else:
            self.start()

    def tick(self) -> int:
        """
        Advance one frame.

        Returns:
            Number of splits accepted during the frame (0 while paused)
        """
        if not self.running:
            return 0

        self.frames += 1
        accepted = 0
        for _ in range(self.settings.iterations):
            result = self.crystal.step()
            if result is StepResult.EXHAUSTED:
                logger.info("Crystal exhausted, stopping", frames=self.frames)
                self.stop()
                break
            self.attempts += 1
            if result is StepResult.ACCEPTED:
                accepted += 1
            else:
                self.rejected += 1
        self.accepted += accepted
        return accepted

    def run(self, frames: int) -> int:
        """Run a number of frames, starting the loop if needed"""
        self.start()
        accepted = 0
        for _ in range(frames):
            if not self.running:
                break
            accepted += self.tick()
        return accepted

    def reset(self):
        """Back to a single rectangle and a blank canvas"""
        self.crystal.reset(self.canvas.width, self.canvas.height)
        self.frames = 0
        self.attempts = 0
        self.accepted = 0
        self.rejected = 0

    def resize(self, width: int, height: int):
        """Resize the canvas and restart growth at the new bounds"""
        self.canvas.resize(width, height)
        self.reset()

    def clear(self):
        """Blank the canvas; the crystal's polygons are kept"""
        self.canvas.clear_rect(0, 0, self.canvas.width, self.canvas.height)

    def draw_lines(self):
        """Stroke every fracture line, pending ones included, and the outline of the bounds"""
        canvas = self.canvas
        pending = [s for p in self.crystal.polygons for s in p.new_segments]
        for line in self.crystal.lines + pending:
            canvas.begin_path()
            canvas.move_to(line.a.x, line.a.y)
            canvas.line_to(line.b.x, line.b.y)
            canvas.stroke()

        canvas.begin_path()
        canvas.move_to(0, 0)
        canvas.line_to(self.crystal.width, 0)
        canvas.line_to(self.crystal.width, self.crystal.height)
        canvas.line_to(0, self.crystal.height)
        canvas.close_path()
        canvas.stroke()

    def export(self, filename: str):
        """Save the canvas as an image, or the crystal as JSON for a .json filename"""
        if str(filename).lower().endswith(".json"):
            export_to_json(self.crystal, filename)
        else:
            export_image(self.canvas, filename)
        logger.info("Exported", filename=str(filename))

    def stats(self) -> dict:
        return {
            "frames": self.frames,
            "attempts": self.attempts,
            "accepted": self.accepted,
            "rejected": self.rejected,
            "polygons": len(self.crystal.polygons),
            "lines": len(self.crystal.lines),
            "generation": self.crystal.generation,
        }
