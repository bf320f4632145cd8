#!/usr/bin/env python3
"""Synthesize a signature-like capture, encode it, analyze it and save charts."""

import argparse
import sys
from pathlib import Path

import numpy as np

# Allow running from repo root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from strokereplay.analyzer import analyze
from strokereplay.data.stroke import CaptureSession
from strokereplay.kinematics import build_series
from strokereplay.plotting import plot_kinematics, plot_strokes
from strokereplay.scrubber import Scrubber
from strokereplay.serializer import SignatureMetadata, serialize, write_document


def synthesize_capture(seed: int = 0) -> CaptureSession:
    """Drive a capture session with a looping stroke and an underline, at uneven pen speed."""
    rng = np.random.default_rng(seed)
    session = CaptureSession()
    t = 0.0

    theta = np.linspace(0, 6 * np.pi, 180)
    xs = 80 + theta * 20
    ys = 140 + 40 * np.sin(theta) * np.cos(theta / 3)
    session.pointer_down(xs[0], ys[0], t)
    for x, y, th in zip(xs[1:], ys[1:], theta[1:]):
        t += 8 + 10 * (1 + np.sin(th)) + rng.uniform(0, 3)  # pen slows on upstrokes
        session.pointer_move(x, y, t)
    session.pointer_up()

    t += 250
    ux = np.linspace(90, 480, 60)
    session.pointer_down(ux[0], 230, t)
    for x in ux[1:]:
        t += rng.uniform(4, 7)
        session.pointer_move(x, 230 + rng.normal(0, 0.8), t)
    session.pointer_up()
    return session


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a demo animated signature.")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path(__file__).resolve().parent.parent / "outputs",
        help="Output directory (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args()

    session = synthesize_capture(args.seed)
    doc = session.generate()
    text = serialize(doc, SignatureMetadata("Demo Signer", "2026-01-01T00:00:00Z", "demo"))
    svg_path = write_document(text, args.output_dir / "demo_signature.svg")
    print(f"Encoded {len(session.strokes)} strokes into {len(doc)} segments -> {svg_path}")

    analysis = analyze(text)
    print(f"Analyzed {len(analysis)} segments: {analysis.total_distance:.1f}px "
          f"over {analysis.total_duration:.2f}s")

    series = build_series(analysis.records, analysis.total_duration)
    cursor = Scrubber(series).scrub(300.0, "time")
    plot_kinematics(series, str(args.output_dir / "demo_kinematics.png"), cursor=cursor,
                    title="Demo signature kinematics")
    plot_strokes(session.strokes, str(args.output_dir / "demo_strokes.png"))
    print(f"Charts saved to {args.output_dir}")


if __name__ == "__main__":
    main()
