"""Command-line entry point: encode strokes, analyze documents, scrub charts."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from datetime import datetime, timezone

from strokereplay.analyzer import analyze_file
from strokereplay.config import DEFAULT_CONFIG, load_config
from strokereplay.data.loading import load_strokes
from strokereplay.encoder import encode, require_encodable
from strokereplay.errors import InsufficientInputError
from strokereplay.kinematics import ChartDomain, build_series
from strokereplay.scrubber import Scrubber
from strokereplay.serializer import SignatureMetadata, serialize, write_document


def _cmd_encode(args: argparse.Namespace) -> int:
    config = load_config(args.config) if args.config else DEFAULT_CONFIG
    strokes = load_strokes(args.input)
    try:
        require_encodable(strokes, config)
    except InsufficientInputError as exc:
        print(f"Cannot encode {args.input}: {exc}", file=sys.stderr)
        return 1

    doc = encode(strokes, config)
    metadata = None
    if args.signer:
        signed_at = args.signed_at or datetime.now(timezone.utc).isoformat(timespec="seconds")
        metadata = SignatureMetadata(signer=args.signer, signed_at=signed_at, intent=args.intent)

    out = write_document(serialize(doc, metadata), args.output)
    print(
        f"Encoded {len(strokes)} strokes into {len(doc)} segments "
        f"({doc.total_duration:.2f}s) -> {out}"
    )

    if args.preview:
        from strokereplay.plotting import plot_strokes

        plot_strokes(strokes, args.preview, config.canvas_width, config.canvas_height)
        print(f"Saved stroke preview to {args.preview}")
    return 0


def _cmd_analyze(args: argparse.Namespace) -> int:
    analysis = analyze_file(args.input)
    if analysis is None:
        print(f"No animated segments found in {args.input}", file=sys.stderr)
        return 1

    print(f"{'idx':>4} {'start':>8} {'end':>8} {'dist':>9} {'vel':>10} {'cum':>10}")
    for r in analysis.records:
        print(
            f"{r.index:>4} {r.start_time:>8.3f} {r.end_time:>8.3f} {r.distance:>9.2f} "
            f"{r.velocity:>10.2f} {r.cumulative_distance:>10.2f}"
        )
    print(
        f"\n{len(analysis)} segments, {analysis.total_distance:.2f}px "
        f"over {analysis.total_duration:.2f}s"
    )

    if args.json:
        os.makedirs(os.path.dirname(args.json) or ".", exist_ok=True)
        with open(args.json, "w", encoding="utf-8") as f:
            json.dump(
                {"total_duration": analysis.total_duration, "records": analysis.to_dicts()},
                f,
                indent=2,
            )
        print(f"Saved records to {args.json}")

    if args.plot:
        from strokereplay.plotting import plot_kinematics

        series = build_series(
            analysis.records, analysis.total_duration, velocity_domain=args.velocity_domain
        )
        plot_kinematics(series, args.plot, title=os.path.basename(args.input))
        print(f"Saved charts to {args.plot}")
    return 0


def _cmd_scrub(args: argparse.Namespace) -> int:
    analysis = analyze_file(args.input)
    if analysis is None:
        print(f"No animated segments found in {args.input}", file=sys.stderr)
        return 1

    pixel_range = (0.0, float(args.width))
    scrubber = Scrubber.from_analysis(analysis, pixel_range, pixel_range)
    position = scrubber.scrub(args.pixel, args.domain)
    if position is None:
        print(f"Pixel {args.pixel} is outside the {args.domain} chart", file=sys.stderr)
        return 1

    print(
        f"record {position.record_index}: time {position.time:.3f}s "
        f"(x={position.time_px:.1f}), distance {position.distance:.2f}px "
        f"(x={position.distance_px:.1f})"
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strokereplay",
        description="Encode timed strokes as animated SVG and analyze their kinematics",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_enc = sub.add_parser("encode", help="Encode a stroke file into an animated SVG")
    p_enc.add_argument("input", help="Stroke file (.json or QuickDraw raw .ndjson)")
    p_enc.add_argument("-o", "--output", default="outputs/animation.svg", help="Output SVG path")
    p_enc.add_argument("--config", default=None, help="JSON codec config")
    p_enc.add_argument("--signer", default=None, help="Reserve a signed layout for this signer")
    p_enc.add_argument("--signed-at", default=None, help="Signing timestamp (default: now, UTC)")
    p_enc.add_argument("--intent", default="", help="Signing intent text")
    p_enc.add_argument("--preview", default=None, help="Also save a PNG preview of the strokes")
    p_enc.set_defaults(func=_cmd_encode)

    p_an = sub.add_parser("analyze", help="Print per-segment kinematics of an animated SVG")
    p_an.add_argument("input", help="Animated SVG document")
    p_an.add_argument("--json", default=None, help="Save records as JSON")
    p_an.add_argument("--plot", default=None, help="Save displacement/velocity charts as PNG")
    p_an.add_argument(
        "--velocity-domain",
        choices=[d.value for d in ChartDomain],
        default=ChartDomain.TIME.value,
        help="x axis of the velocity chart (default: %(default)s)",
    )
    p_an.set_defaults(func=_cmd_analyze)

    p_scrub = sub.add_parser("scrub", help="Resolve a chart pixel to playback time and distance")
    p_scrub.add_argument("input", help="Animated SVG document")
    p_scrub.add_argument("--pixel", type=float, required=True, help="Pointer x position")
    p_scrub.add_argument(
        "--domain",
        choices=[d.value for d in ChartDomain],
        default=ChartDomain.TIME.value,
        help="Chart the pointer is on (default: %(default)s)",
    )
    p_scrub.add_argument("--width", type=float, default=600.0, help="Chart width in pixels")
    p_scrub.set_defaults(func=_cmd_scrub)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry-point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
