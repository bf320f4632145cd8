"""Read captured strokes from JSON or QuickDraw raw-format files.

Accepted shapes:

- ``[[{"x": .., "y": .., "time": ..}, ...], ...]``: one list of point objects per stroke
- ``[[[x, y, time], ...], ...]``: one list of triples per stroke
- ``{"strokes": <either of the above>}``
- ``{"drawing": [[xs], [ys], [ts]], ...}``: a QuickDraw raw record, one entry
  in ``drawing`` per stroke
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .stroke import Point, Stroke

logger = logging.getLogger(__name__)


def _point_from(obj) -> Point:
    if isinstance(obj, dict):
        try:
            return Point(float(obj["x"]), float(obj["y"]), float(obj["time"]))
        except KeyError as exc:
            raise ValueError(f"Point object is missing key {exc}") from exc
    if isinstance(obj, (list, tuple)) and len(obj) == 3:
        return Point(float(obj[0]), float(obj[1]), float(obj[2]))
    raise ValueError(f"Unrecognized point: {obj!r}")


def _quickdraw_strokes(drawing: list) -> list[Stroke]:
    strokes = []
    for i, stroke in enumerate(drawing):
        if len(stroke) != 3:
            raise ValueError(
                f"QuickDraw stroke {i} needs [xs, ys, ts] for timing, got {len(stroke)} arrays"
            )
        xs, ys, ts = stroke
        if not (len(xs) == len(ys) == len(ts)):
            raise ValueError(f"QuickDraw stroke {i} has mismatched coordinate lengths")
        if xs:
            strokes.append(Stroke.from_tuples(zip(xs, ys, ts)))
    return strokes


def strokes_from_json(data) -> list[Stroke]:
    """Convert decoded JSON into strokes. Empty strokes are dropped."""
    if isinstance(data, dict):
        if "drawing" in data:
            return _quickdraw_strokes(data["drawing"])
        if "strokes" in data:
            data = data["strokes"]
        else:
            raise ValueError("JSON object needs a 'strokes' or 'drawing' key")
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of strokes, got {type(data).__name__}")

    strokes = []
    for raw in data:
        if not isinstance(raw, list):
            raise ValueError(f"Expected a list of points per stroke, got {type(raw).__name__}")
        points = tuple(_point_from(p) for p in raw)
        if points:
            strokes.append(Stroke(points))
    return strokes


def load_strokes(path: str | Path) -> list[Stroke]:
    """Load strokes from a ``.json`` file or the first record of an ``.ndjson`` file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Stroke file not found: {path}")

    with open(path, encoding="utf-8") as f:
        if path.suffix == ".ndjson":
            for line in f:
                line = line.strip()
                if line:
                    data = json.loads(line)
                    break
            else:
                raise ValueError(f"No records in {path}")
        else:
            data = json.load(f)

    strokes = strokes_from_json(data)
    logger.debug("Loaded %d strokes from %s", len(strokes), path)
    return strokes
