"""End-to-end tests for the command line and chart rendering."""

from __future__ import annotations

import json

import pytest

from strokereplay.analyzer import analyze
from strokereplay.cli import main
from strokereplay.encoder import encode
from strokereplay.kinematics import build_series
from strokereplay.plotting import plot_kinematics, plot_strokes
from strokereplay.scrubber import Scrubber
from strokereplay.serializer import serialize


def _write_capture(path, strokes) -> None:
    data = [[{"x": p.x, "y": p.y, "time": p.time} for p in s] for s in strokes]
    path.write_text(json.dumps(data), encoding="utf-8")


def test_encode_analyze_scrub_round_trip(tmp_path, capsys, straight_stroke) -> None:
    capture = tmp_path / "capture.json"
    svg = tmp_path / "out" / "signature.svg"
    records = tmp_path / "records.json"
    charts = tmp_path / "charts.png"
    _write_capture(capture, [straight_stroke])

    assert main(["encode", str(capture), "-o", str(svg)]) == 0
    assert "into 4 segments" in capsys.readouterr().out
    assert svg.exists()

    assert main(["analyze", str(svg), "--json", str(records), "--plot", str(charts)]) == 0
    saved = json.loads(records.read_text(encoding="utf-8"))
    assert saved["total_duration"] == pytest.approx(0.6)
    assert len(saved["records"]) == 4
    assert saved["records"][-1]["cumulative_distance"] == pytest.approx(110.0, abs=0.1)
    assert charts.stat().st_size > 0
    capsys.readouterr()

    assert main(["scrub", str(svg), "--pixel", "300", "--domain", "time"]) == 0
    assert "time 0.300s" in capsys.readouterr().out


def test_encode_signed_layout_with_config(tmp_path, straight_stroke) -> None:
    capture = tmp_path / "capture.json"
    config = tmp_path / "codec.json"
    svg = tmp_path / "signed.svg"
    preview = tmp_path / "preview.png"
    _write_capture(capture, [straight_stroke])
    config.write_text(json.dumps({"stroke_color": "black"}), encoding="utf-8")

    code = main([
        "encode", str(capture), "-o", str(svg), "--config", str(config),
        "--signer", "Ada", "--intent", "approve", "--signed-at", "2026-10-19T00:00:00Z",
        "--preview", str(preview),
    ])
    assert code == 0
    text = svg.read_text(encoding="utf-8")
    assert "<signer>Ada</signer>" in text
    assert "<signedAt>2026-10-19T00:00:00Z</signedAt>" in text
    assert 'stroke="black"' in text
    assert preview.exists()


def test_encode_rejects_insufficient_input(tmp_path, capsys) -> None:
    capture = tmp_path / "tiny.json"
    capture.write_text(json.dumps([[[0, 0, 0], [1, 1, 5]]]), encoding="utf-8")
    assert main(["encode", str(capture), "-o", str(tmp_path / "x.svg")]) == 1
    assert "Cannot encode" in capsys.readouterr().err
    assert not (tmp_path / "x.svg").exists()


def test_analyze_and_scrub_reject_empty_document(tmp_path, capsys) -> None:
    svg = tmp_path / "blank.svg"
    svg.write_text("<svg/>", encoding="utf-8")
    assert main(["analyze", str(svg)]) == 1
    assert main(["scrub", str(svg), "--pixel", "10"]) == 1
    assert "No animated segments" in capsys.readouterr().err


def test_scrub_outside_chart(tmp_path, capsys, straight_stroke) -> None:
    svg = tmp_path / "sig.svg"
    svg.write_text(serialize(encode([straight_stroke])), encoding="utf-8")
    assert main(["scrub", str(svg), "--pixel", "700", "--domain", "distance"]) == 1
    assert "outside" in capsys.readouterr().err


def test_plot_kinematics_with_cursor(tmp_path, signature_strokes) -> None:
    analysis = analyze(serialize(encode(signature_strokes)))
    scrubber = Scrubber.from_analysis(analysis)
    cursor = scrubber.scrub(250.0, "time")
    for domain in ("time", "distance"):
        series = build_series(analysis.records, analysis.total_duration, velocity_domain=domain)
        out = tmp_path / f"charts_{domain}.png"
        plot_kinematics(series, str(out), cursor=cursor, title="signature")
        assert out.exists()


def test_plot_kinematics_rejects_empty_series(tmp_path) -> None:
    with pytest.raises(ValueError):
        plot_kinematics(build_series([], 0.0), str(tmp_path / "empty.png"))


def test_plot_strokes(tmp_path, signature_strokes) -> None:
    out = tmp_path / "strokes.png"
    plot_strokes(signature_strokes, str(out))
    assert out.exists()
