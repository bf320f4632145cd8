"""Temporal stroke codec: replayable SVG animations of hand-drawn gestures."""

from .analyzer import Analysis, AnalysisRecord, analyze, analyze_file
from .config import DEFAULT_CONFIG, CodecConfig, load_config
from .data import CaptureSession, Point, Stroke, load_strokes
from .encoder import AnimatedDocument, Segment, encode, require_encodable
from .errors import (
    ExternalSeekFailure,
    InsufficientInputError,
    MalformedDocumentError,
    StrokeReplayError,
)
from .kinematics import ChartDomain, KinematicSeries, LinearScale, build_series
from .scrubber import Scrubber, ScrubPosition, find_floor_index
from .serializer import SignatureMetadata, serialize, write_document

__version__ = "0.1.0"

__all__ = [
    "Analysis",
    "AnalysisRecord",
    "AnimatedDocument",
    "CaptureSession",
    "ChartDomain",
    "CodecConfig",
    "DEFAULT_CONFIG",
    "ExternalSeekFailure",
    "InsufficientInputError",
    "KinematicSeries",
    "LinearScale",
    "MalformedDocumentError",
    "Point",
    "ScrubPosition",
    "Scrubber",
    "Segment",
    "SignatureMetadata",
    "Stroke",
    "StrokeReplayError",
    "analyze",
    "analyze_file",
    "build_series",
    "encode",
    "find_floor_index",
    "load_config",
    "load_strokes",
    "require_encodable",
    "serialize",
    "write_document",
]
