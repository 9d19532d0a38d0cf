#!/usr/bin/env python3
"""
Evaluate monitor-stand geometry and tip-over stability.

Usage:
    # Default dimensions
    python scripts/analyze_stand.py

    # From a saved dimension file, with overrides
    python scripts/analyze_stand.py --dims stand.json --set baseWidth=180 --set swivel_angle=60

    # Write the snapshot summary and a drawing
    python scripts/analyze_stand.py --json out/snapshot.json --svg out/stand.svg
"""
import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dimensions import (
    DEFAULT_DIMENSIONS,
    DimensionsError,
    coerce_number,
    load_dimensions,
    resolve_field_name,
)
from screen_geometry import compute_geometry
from svg_exporter import snapshot_to_svg

logger = logging.getLogger("analyze_stand")


def parse_override(text: str):
    """Parse ``key=value`` into (field_name, float)."""
    if "=" not in text:
        raise DimensionsError(f"Override must look like key=value, got {text!r}")
    key, raw = text.split("=", 1)
    name = resolve_field_name(key.strip())
    if name == "label_offsets":
        raise DimensionsError("labelOffsets cannot be set from the command line")
    return name, coerce_number(key.strip(), raw.strip())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute stand geometry and check tip-over stability"
    )
    parser.add_argument("--dims", type=str, default=None, help="Dimension JSON file")
    parser.add_argument(
        "--set", dest="overrides", action="append", default=[], metavar="KEY=VALUE",
        help="Override one dimension (camelCase or snake_case key); repeatable",
    )
    parser.add_argument("--json", type=str, default=None, help="Write snapshot summary JSON")
    parser.add_argument("--svg", type=str, default=None, help="Write three-view SVG drawing")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logs"
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        dims = load_dimensions(args.dims) if args.dims else DEFAULT_DIMENSIONS
        changes = dict(parse_override(text) for text in args.overrides)
        if changes:
            dims = dims.replace(**changes)
    except (DimensionsError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    for issue in dims.validate():
        logger.warning("%s", issue)

    snapshot = compute_geometry(dims)
    report = snapshot.stability

    print(f"Status: {'Stable' if snapshot.is_stable else 'Unstable'}")
    print(f"  Sway radius: {report.sway.radius:.2f} mm")
    for check in report.checks:
        print(
            f"  Swivel {check.angle_deg:+7.2f} deg: "
            f"{'inside' if check.contained else 'OUTSIDE'} "
            f"(margin {check.margin:+.2f} mm)"
        )
    cg_x, cg_y = snapshot.center_of_gravity
    print(f"  Centre of gravity (side): ({cg_x:.2f}, {cg_y:.2f})")
    print(f"  Applied lift: {snapshot.side.applied_lift:.2f} mm "
          f"(max {snapshot.side.max_lifting_offset:.2f} mm)")

    if args.json:
        out = Path(args.json)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(json.dumps(snapshot.to_dict(), indent=2), encoding="utf-8")
        logger.info("Wrote snapshot: %s", out)
    if args.svg:
        snapshot_to_svg(snapshot, args.svg)

    return 0


if __name__ == "__main__":
    sys.exit(main())
