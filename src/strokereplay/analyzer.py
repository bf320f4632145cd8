"""Recover per-segment timing and kinematics from an animated SVG document.

Works on documents produced by ``serializer.serialize`` and on any SVG shaped
the same way: ``<path>`` elements each holding a visibility ``<animate>``
with ``keyTimes="0;t1;t2;1"`` and a shared ``dur``.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import asdict, dataclass
from pathlib import Path
from xml.dom import minidom
from xml.parsers.expat import ExpatError

from svg.path import parse_path

from .errors import MalformedDocumentError

logger = logging.getLogger(__name__)

_DUR_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*(ms|s)?\s*$")


@dataclass(frozen=True)
class AnalysisRecord:
    """Kinematic summary of one animated segment. Times in seconds."""

    index: int
    start_time: float
    end_time: float
    distance: float
    velocity: float
    cumulative_distance: float


@dataclass(frozen=True)
class Analysis:
    """Records from one analysis pass plus the document duration (seconds)."""

    records: tuple[AnalysisRecord, ...]
    total_duration: float

    def __len__(self) -> int:
        return len(self.records)

    @property
    def total_distance(self) -> float:
        return self.records[-1].cumulative_distance if self.records else 0.0

    def to_dicts(self) -> list[dict]:
        return [asdict(r) for r in self.records]


@dataclass(frozen=True)
class _SegmentTiming:
    start_time: float
    end_time: float
    duration: float
    distance: float


def parse_duration(text: str) -> float:
    """Parse an SVG ``dur`` value (``"1.25s"``, ``"1250ms"`` or ``"1.25"``) into seconds."""
    match = _DUR_RE.match(text or "")
    if match is None:
        raise MalformedDocumentError(f"Unsupported dur value: {text!r}")
    value = float(match.group(1))
    if match.group(2) == "ms":
        value /= 1000.0
    if not math.isfinite(value):
        raise MalformedDocumentError(f"Duration out of range: {text!r}")
    return value


def parse_key_times(text: str) -> list[float]:
    try:
        key_times = [float(part) for part in (text or "").split(";")]
    except ValueError as exc:
        raise MalformedDocumentError(f"Unreadable keyTimes: {text!r}") from exc
    if len(key_times) < 3:
        raise MalformedDocumentError(f"keyTimes needs at least 3 entries: {text!r}")
    if not all(math.isfinite(k) for k in key_times):
        raise MalformedDocumentError(f"Non-finite keyTimes: {text!r}")
    return key_times


def path_length(d: str) -> float:
    """Arc length of SVG path data."""
    if not d or not d.strip():
        raise MalformedDocumentError("Path has no geometry")
    try:
        path = parse_path(d)
    except (ValueError, IndexError, TypeError) as exc:
        raise MalformedDocumentError(f"Unreadable path data: {d[:40]!r}") from exc
    length = float(path.length())
    if not math.isfinite(length):
        raise MalformedDocumentError(f"Path length is not finite: {d[:40]!r}")
    return length


def _visibility_animation(element):
    for node in element.childNodes:
        if (
            node.nodeType == node.ELEMENT_NODE
            and node.localName == "animate"
            and node.getAttribute("attributeName") == "visibility"
        ):
            return node
    return None


def _read_segment(path_element, animate) -> _SegmentTiming:
    key_times = parse_key_times(animate.getAttribute("keyTimes"))
    duration = parse_duration(animate.getAttribute("dur"))
    if duration < 0:
        raise MalformedDocumentError(f"Negative dur: {duration}")
    distance = path_length(path_element.getAttribute("d"))
    return _SegmentTiming(
        start_time=key_times[1] * duration,
        end_time=key_times[2] * duration,
        duration=duration,
        distance=distance,
    )


def analyze(text: str | bytes) -> Analysis | None:
    """Parse an animated SVG document into kinematic records.

    Segments missing timing or geometry are skipped. Returns ``None`` when the
    document is not XML or holds no usable animated segment.
    """
    try:
        dom = minidom.parseString(text)
    except ExpatError as exc:
        logger.warning("Document is not well-formed XML: %s", exc)
        return None

    timings = []
    try:
        for position, element in enumerate(dom.getElementsByTagNameNS("*", "path")):
            animate = _visibility_animation(element)
            if animate is None:
                logger.debug("Path %d has no visibility animation, ignoring", position)
                continue
            try:
                timings.append(_read_segment(element, animate))
            except MalformedDocumentError as exc:
                logger.warning("Skipping segment at path %d: %s", position, exc)
    finally:
        dom.unlink()

    if not timings:
        logger.info("No animated segments found")
        return None

    records = []
    cumulative = 0.0
    for index, timing in enumerate(timings):
        interval = timing.end_time - timing.start_time
        if interval > 0:
            velocity = timing.distance / interval
        else:
            logger.debug("Segment %d has interval %.4fs, velocity set to 0", index, interval)
            velocity = 0.0
        cumulative += timing.distance
        records.append(AnalysisRecord(
            index=index,
            start_time=timing.start_time,
            end_time=timing.end_time,
            distance=timing.distance,
            velocity=velocity,
            cumulative_distance=cumulative,
        ))

    total_duration = max(t.duration for t in timings)
    return Analysis(records=tuple(records), total_duration=total_duration)


def analyze_file(path: str | Path) -> Analysis | None:
    """Read an SVG file and analyze it."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Document not found: {path}")
    return analyze(path.read_bytes())
