"""
Configuration for crystal growth.

Defines the per-tick iteration count, the split randomness and the quality
thresholds a split has to pass to be accepted.
"""

from dataclasses import dataclass, fields
import json
from pathlib import Path


@dataclass
class Settings:
    """
    Growth settings, mutable at runtime.

    Attributes:
        iterations: Number of growth steps per tick
        randomness: Width of the perturbation of split points around edge midpoints (0-1)
        opposite_bias: Probability of cutting towards the opposite side (0-1)
        min_angle: Smallest interior angle a slice may have, in radians
        min_side: Shortest edge a slice may have, in canvas units
    """
    iterations: int = 50
    randomness: float = 0.25
    opposite_bias: float = 0.1
    min_angle: float = 0.4  # radians
    min_side: float = 2.0

    # Ranges exposed by the control panel
    RANGES = {
        "iterations": (1, 100),
        "randomness": (0.0, 1.0),
        "opposite_bias": (0.0, 1.0),
        "min_angle": (0.0, 1.2),
        "min_side": (0.0, 100.0),
    }

    def validate(self) -> list[str]:
        """
        Validate configuration values.

        The growth driver accepts anything; out of range values only give
        odd looking results.

        Returns:
            List of warning messages (empty if valid)
        """
        errors = []

        for name, (low, high) in self.RANGES.items():
            value = getattr(self, name)
            if value < low or value > high:
                errors.append(f"{name} should be within [{low}, {high}], got {value}")

        if self.randomness > 1.0:
            errors.append("randomness above 1 can place split points outside their edges")

        return errors

    def update(self, **options) -> None:
        """Set one or more fields by name, converting values to the field type."""
        known = {f.name for f in fields(self)}
        for name, value in options.items():
            if name not in known:
                raise AttributeError(f"Unknown setting: {name}")
            if name == "iterations":
                value = int(value)
            else:
                value = float(value)
            setattr(self, name, value)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "iterations": self.iterations,
            "randomness": self.randomness,
            "opposite_bias": self.opposite_bias,
            "min_angle": self.min_angle,
            "min_side": self.min_side,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """Create from dictionary."""
        # Older settings files use camelCase names and call the bias "opposite"
        opposite_bias = data.get("opposite_bias", data.get("opposite", 0.1))

        return cls(
            iterations=int(data.get("iterations", 50)),
            randomness=float(data.get("randomness", 0.25)),
            opposite_bias=float(opposite_bias),
            min_angle=float(data.get("min_angle", data.get("minAngle", 0.4))),
            min_side=float(data.get("min_side", data.get("minSide", 2.0))),
        )

    def save(self, filepath: Path | str) -> None:
        """Save configuration to JSON file."""
        filepath = Path(filepath)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: Path | str) -> "Settings":
        """Load configuration from JSON file."""
        filepath = Path(filepath)
        if not filepath.exists():
            return cls()  # Return defaults if file doesn't exist

        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)


# Named looks
PRESETS = {
    "default": Settings(),
    "shards": Settings(randomness=0.6, opposite_bias=0.0, min_angle=0.2, min_side=4.0),
    "mosaic": Settings(randomness=0.1, opposite_bias=0.8, min_angle=0.7, min_side=6.0),
    "fine": Settings(iterations=100, randomness=0.25, opposite_bias=0.1, min_angle=0.4, min_side=0.5),
}
