"""Render an ``AnimatedDocument`` as an SVG visibility animation.

Output is deterministic: identical documents produce byte-identical text.
Coordinates use 2 decimals, key times 4 decimals and durations 2 decimals.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from xml.sax.saxutils import escape, quoteattr

from .data.stroke import Point
from .encoder import AnimatedDocument, Segment

SVG_NS = "http://www.w3.org/2000/svg"
VISIBILITY_VALUES = "hidden;visible;visible;visible"
METADATA_ID = "signature-metadata"
PERFORMANCE_ID = "signature-performance"
SIGNATURE_PLACEHOLDER = (
    "signature-placeholder: a detached digital signature covering "
    f"#{METADATA_ID} and #{PERFORMANCE_ID} is inserted here"
)

_INDENT = "  "


@dataclass(frozen=True)
class SignatureMetadata:
    """Signer details reserved in the signed layout. Nothing is signed here."""

    signer: str
    signed_at: str
    intent: str


def fixed(value: float, digits: int) -> str:
    """Fixed-point text without a negative sign on zero."""
    text = f"{value:.{digits}f}"
    if text.startswith("-") and float(text) == 0:
        text = text[1:]
    return text


def path_data(points: Sequence[Point]) -> str:
    """``M x0 y0 L x1 y1 ...`` through ``points``."""
    head, *rest = points
    parts = [f"M {fixed(head.x, 2)} {fixed(head.y, 2)}"]
    parts.extend(f"L {fixed(p.x, 2)} {fixed(p.y, 2)}" for p in rest)
    return " ".join(parts)


def _segment_lines(segment: Segment, total_duration: float, depth: int) -> list[str]:
    pad = _INDENT * depth
    key_times = f"0;{fixed(segment.t1, 4)};{fixed(segment.t2, 4)};1"
    return [
        f'{pad}<path d="{path_data(segment.points)}" visibility="hidden">',
        f'{pad}{_INDENT}<animate attributeName="visibility" values="{VISIBILITY_VALUES}" '
        f'keyTimes="{key_times}" dur="{fixed(total_duration, 2)}s" fill="freeze"/>',
        f"{pad}</path>",
    ]


def _metadata_lines(metadata: SignatureMetadata, depth: int) -> list[str]:
    pad = _INDENT * depth
    inner = pad + _INDENT
    return [
        f'{pad}<metadata id="{METADATA_ID}">',
        f"{inner}<signer>{escape(metadata.signer)}</signer>",
        f"{inner}<signedAt>{escape(metadata.signed_at)}</signedAt>",
        f"{inner}<intent>{escape(metadata.intent)}</intent>",
        f"{pad}</metadata>",
    ]


def serialize(doc: AnimatedDocument, metadata: SignatureMetadata | None = None) -> str:
    """Render ``doc`` as SVG text.

    Args:
        doc: The document to render.
        metadata: When given, use the signed layout: a metadata block before
            the segment group, both carrying ids, followed by a placeholder
            comment marking where an external signature over them belongs.

    Returns:
        The SVG document, one element per line, two-space indented.
    """
    lines = [
        f'<svg width="{doc.width}" height="{doc.height}" '
        f'viewBox="0 0 {doc.width} {doc.height}" xmlns="{SVG_NS}">'
    ]
    if metadata is not None:
        lines.extend(_metadata_lines(metadata, 1))

    group_id = f' id="{PERFORMANCE_ID}"' if metadata is not None else ""
    lines.append(
        f"{_INDENT}<g{group_id} stroke={quoteattr(doc.stroke_color)} "
        f'stroke-width="{doc.stroke_width:g}" fill="none">'
    )
    for segment in doc.segments:
        lines.extend(_segment_lines(segment, doc.total_duration, 2))
    lines.append(f"{_INDENT}</g>")

    if metadata is not None:
        lines.append(f"{_INDENT}<!-- {SIGNATURE_PLACEHOLDER} -->")
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def write_document(text: str, path: str | Path) -> Path:
    """Write serialized SVG text to ``path`` as UTF-8, creating parent directories."""
    path = Path(path)
    os.makedirs(path.parent, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
