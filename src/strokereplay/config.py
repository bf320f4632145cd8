"""Codec configuration: segmentation bounds, canvas size and stroke styling."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path

MIN_POINTS_PER_SEGMENT = 3
MAX_POINTS_PER_SEGMENT = 10
TARGET_SEGMENTS_PER_STROKE = 20

CANVAS_WIDTH = 600
CANVAS_HEIGHT = 300
STROKE_COLOR = "blue"
STROKE_WIDTH = 1.5


@dataclass(frozen=True)
class CodecConfig:
    """Settings shared by the encoder and serializer.

    Args:
        min_points_per_segment: Smallest segment window, and the minimum
            number of points a stroke needs to be animated at all.
        max_points_per_segment: Largest segment window.
        target_segments_per_stroke: Desired number of segments per stroke;
            the window size is derived from it and then clamped.
        canvas_width: Width of the SVG canvas and its viewBox.
        canvas_height: Height of the SVG canvas and its viewBox.
        stroke_color: Stroke colour of the segment group.
        stroke_width: Stroke width of the segment group.
    """

    min_points_per_segment: int = MIN_POINTS_PER_SEGMENT
    max_points_per_segment: int = MAX_POINTS_PER_SEGMENT
    target_segments_per_stroke: int = TARGET_SEGMENTS_PER_STROKE
    canvas_width: int = CANVAS_WIDTH
    canvas_height: int = CANVAS_HEIGHT
    stroke_color: str = STROKE_COLOR
    stroke_width: float = STROKE_WIDTH

    def validate(self) -> CodecConfig:
        """Raise ``ValueError`` if the settings cannot produce valid segments."""
        if self.min_points_per_segment < 2:
            raise ValueError(
                f"min_points_per_segment must be >= 2, got {self.min_points_per_segment}"
            )
        if self.max_points_per_segment < self.min_points_per_segment:
            raise ValueError(
                "max_points_per_segment must be >= min_points_per_segment "
                f"({self.max_points_per_segment} < {self.min_points_per_segment})"
            )
        if self.target_segments_per_stroke < 1:
            raise ValueError(
                f"target_segments_per_stroke must be >= 1, got {self.target_segments_per_stroke}"
            )
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError(
                f"Canvas must have a positive size, got {self.canvas_width}x{self.canvas_height}"
            )
        if self.stroke_width <= 0:
            raise ValueError(f"stroke_width must be positive, got {self.stroke_width}")
        return self

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> CodecConfig:
        """Build a config from a plain dict; missing keys keep their defaults."""
        defaults = cls()
        kwargs = {}
        for f in fields(cls):
            default = getattr(defaults, f.name)
            value = data.get(f.name, default)
            if isinstance(default, int):
                if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
                    raise ValueError(f"{f.name} must be an integer, got {value!r}")
            kwargs[f.name] = type(default)(value)
        return cls(**kwargs).validate()


DEFAULT_CONFIG = CodecConfig()


def load_config(path: str | Path) -> CodecConfig:
    """Read a JSON config file into a validated ``CodecConfig``."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config file must hold a JSON object: {path}")
    return CodecConfig.from_dict(data)
