"""Tests for SVG rendering of animated documents."""

from __future__ import annotations

from xml.dom import minidom

import pytest

from strokereplay.analyzer import analyze
from strokereplay.data.stroke import Point, Stroke
from strokereplay.encoder import encode
from strokereplay.serializer import (
    METADATA_ID,
    PERFORMANCE_ID,
    SignatureMetadata,
    fixed,
    path_data,
    serialize,
    write_document,
)

EXPECTED_SINGLE_SEGMENT = """\
<svg width="600" height="300" viewBox="0 0 600 300" xmlns="http://www.w3.org/2000/svg">
  <g stroke="blue" stroke-width="1.5" fill="none">
    <path d="M 0.00 0.00 L 10.00 0.00 L 20.00 5.00" visibility="hidden">
      <animate attributeName="visibility" values="hidden;visible;visible;visible" \
keyTimes="0;0.0000;1.0000;1" dur="0.10s" fill="freeze"/>
    </path>
  </g>
</svg>
"""


@pytest.fixture
def three_point_doc():
    stroke = Stroke((Point(0, 0, 0), Point(10, 0, 50), Point(20, 5, 100)))
    return encode([stroke])


def test_single_segment_is_bit_exact(three_point_doc) -> None:
    assert serialize(three_point_doc) == EXPECTED_SINGLE_SEGMENT


def test_serialize_is_deterministic(signature_strokes) -> None:
    doc = encode(signature_strokes)
    assert serialize(doc) == serialize(encode(signature_strokes))


def test_one_path_per_segment_in_order(straight_stroke) -> None:
    doc = encode([straight_stroke])
    dom = minidom.parseString(serialize(doc))
    paths = dom.getElementsByTagName("path")
    assert len(paths) == len(doc)
    assert paths[0].getAttribute("d") == "M 0.00 0.00 L 10.00 0.00 L 20.00 0.00"
    assert paths[1].getAttribute("d").startswith("M 20.00 0.00 L 30.00 0.00")
    key_times = [
        p.getElementsByTagName("animate")[0].getAttribute("keyTimes") for p in paths
    ]
    assert key_times == [
        "0;0.0000;0.1818;1",
        "0;0.1818;0.4545;1",
        "0;0.4545;0.7273;1",
        "0;0.7273;1.0000;1",
    ]


def test_fixed_drops_negative_zero() -> None:
    assert fixed(-0.001, 2) == "0.00"
    assert fixed(-0.0, 4) == "0.0000"
    assert fixed(-1.005, 1) == "-1.0"
    assert fixed(12.3456, 2) == "12.35"


def test_path_data_formats_points() -> None:
    points = [Point(1.234, 5.678, 0), Point(-2, 3.1, 1)]
    assert path_data(points) == "M 1.23 5.68 L -2.00 3.10"


def test_empty_document_still_renders() -> None:
    text = serialize(encode([]))
    dom = minidom.parseString(text)
    assert dom.getElementsByTagName("g")
    assert not dom.getElementsByTagName("path")


def test_signed_layout_reserves_metadata_and_placeholder(three_point_doc) -> None:
    metadata = SignatureMetadata(
        signer="Ada <A&B>", signed_at="2026-10-19T12:00:00+00:00", intent="approve"
    )
    text = serialize(three_point_doc, metadata)

    assert "Ada &lt;A&amp;B&gt;" in text
    assert "<!-- signature-placeholder:" in text
    assert text.index("<metadata") < text.index("<g ") < text.index("signature-placeholder")

    dom = minidom.parseString(text)
    meta = dom.getElementsByTagName("metadata")[0]
    assert meta.getAttribute("id") == METADATA_ID
    assert meta.getElementsByTagName("signer")[0].firstChild.data == "Ada <A&B>"
    assert dom.getElementsByTagName("g")[0].getAttribute("id") == PERFORMANCE_ID


def test_signed_layout_analyzes_like_plain(straight_stroke) -> None:
    doc = encode([straight_stroke])
    plain = analyze(serialize(doc))
    signed = analyze(serialize(doc, SignatureMetadata("Ada", "now", "sign")))
    assert plain == signed


def test_write_document_creates_parents(tmp_path, three_point_doc) -> None:
    out = write_document(serialize(three_point_doc), tmp_path / "nested" / "sig.svg")
    assert out.read_text(encoding="utf-8") == EXPECTED_SINGLE_SEGMENT
