"""Tests for the stroke model and capture session lifecycle."""

from __future__ import annotations

import pytest

from strokereplay.data.stroke import CaptureSession, Point, Stroke
from strokereplay.encoder import AnimatedDocument
from strokereplay.errors import InsufficientInputError


def test_stroke_rejects_empty_points() -> None:
    with pytest.raises(ValueError):
        Stroke(())


def test_stroke_rejects_decreasing_time() -> None:
    with pytest.raises(ValueError):
        Stroke((Point(0, 0, 10), Point(1, 1, 5)))


def test_stroke_from_tuples_and_length() -> None:
    stroke = Stroke.from_tuples([(0, 0, 0), (3, 4, 10), (3, 10, 20)])
    assert len(stroke) == 3
    assert stroke.start_time == 0.0
    assert stroke.end_time == 20.0
    assert stroke.length() == pytest.approx(11.0)
    assert stroke[1] == Point(3.0, 4.0, 10.0)


def test_session_collects_strokes() -> None:
    session = CaptureSession()
    session.pointer_down(0, 0, 0)
    session.pointer_move(5, 0, 10)
    session.pointer_move(10, 0, 20)
    session.pointer_up()
    session.pointer_down(0, 10, 100)
    session.pointer_move(0, 20, 110)
    session.pointer_up()

    strokes = session.strokes
    assert [len(s) for s in strokes] == [3, 2]
    assert session.point_count() == 5
    assert session.first_time() == 0.0
    assert session.last_time() == 110.0
    assert not session.is_drawing


def test_move_without_down_is_ignored() -> None:
    session = CaptureSession()
    session.pointer_move(1, 1, 1)
    session.pointer_up()
    assert session.strokes == ()
    assert session.first_time() is None


def test_open_stroke_is_visible_and_sealed_on_next_down() -> None:
    session = CaptureSession()
    session.pointer_down(0, 0, 0)
    session.pointer_move(1, 0, 5)
    assert session.is_drawing
    assert len(session.strokes) == 1

    session.pointer_down(9, 9, 50)
    assert [len(s) for s in session.strokes] == [2, 1]


def test_out_of_order_sample_is_clamped() -> None:
    session = CaptureSession()
    session.pointer_down(0, 0, 10)
    session.pointer_move(1, 0, 5)
    session.pointer_up()
    assert [p.time for p in session.strokes[0]] == [10.0, 10.0]


def test_reset_discards_everything() -> None:
    session = CaptureSession()
    session.pointer_down(0, 0, 0)
    session.pointer_move(1, 0, 5)
    session.reset()
    assert session.strokes == ()
    assert not session.is_drawing


def test_generate_encodes_capture() -> None:
    session = CaptureSession()
    session.pointer_down(0, 0, 0)
    for i in range(1, 12):
        session.pointer_move(10 * i, 0, 50 * i)
    session.pointer_up()
    doc = session.generate()
    assert isinstance(doc, AnimatedDocument)
    assert len(doc) == 4
    assert doc.total_duration == pytest.approx(0.55)


def test_generate_rejects_insufficient_capture() -> None:
    session = CaptureSession()
    session.pointer_down(0, 0, 0)
    session.pointer_move(1, 1, 5)
    session.pointer_up()
    with pytest.raises(InsufficientInputError):
        session.generate()


def test_capture_after_generate_starts_fresh() -> None:
    session = CaptureSession()
    session.pointer_down(0, 0, 0)
    for i in range(1, 12):
        session.pointer_move(10 * i, 0, 50 * i)
    session.pointer_up()
    session.generate()
    assert len(session.strokes) == 1

    session.pointer_down(0, 50, 5000)
    for i in range(1, 5):
        session.pointer_move(10 * i, 50, 5000 + 25 * i)
    session.pointer_up()
    doc = session.generate()
    assert len(session.strokes) == 1
    assert session.first_time() == 5000.0
    assert doc.total_duration == pytest.approx(0.1)
