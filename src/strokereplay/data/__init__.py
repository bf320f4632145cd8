from .loading import load_strokes, strokes_from_json
from .processing import cumulative_arc_length, points_to_array, polyline_length
from .stroke import CaptureSession, Point, Stroke

__all__ = [
    "CaptureSession",
    "Point",
    "Stroke",
    "cumulative_arc_length",
    "load_strokes",
    "points_to_array",
    "polyline_length",
    "strokes_from_json",
]
