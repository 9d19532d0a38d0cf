"""
SVG exporter for stand geometry snapshots.

Draws the side, front and top views of a ``GeometrySnapshot`` on one canvas
framed by the snapshot's view box: part outlines, floor line, tilt rays, the
centre of gravity, and the sway circles at each sampled swivel angle.
"""

import logging
import os
from typing import Union

import svgwrite
from shapely.geometry import Point
from shapely.ops import unary_union

from geometry_primitives import Quad, Rect
from screen_geometry import GeometrySnapshot

logger = logging.getLogger(__name__)

PART_FILL = {
    "base": "#4A5568",
    "stand": "#718096",
    "neck": "#A0AEC0",
    "backpack": "#CBD5E0",
    "panel": "#2D3748",
}
UNSTABLE_BASE_FILL = "#7f1d1d"

STYLESHEET = """
    .part { stroke: #1A202C; stroke-width: 0.2; fill-opacity: 0.8; }
    .floor { stroke: #1A202C; stroke-width: 1; }
    .tilt { stroke: #3b82f6; stroke-width: 1; stroke-dasharray: 4 4; fill: none; }
    .sway { stroke: #E53E3E; stroke-width: 1.5; stroke-dasharray: 4 4; fill: none; }
    .sway-fail { stroke: #7f1d1d; stroke-width: 1.5; fill: none; }
    .envelope { stroke: #FCA5A5; stroke-width: 0.5; fill: #FCA5A5; fill-opacity: 0.2; }
    .overhang { stroke: none; fill: #C53030; fill-opacity: 0.35; }
    .cg { fill: #D69E2E; stroke: #1A202C; stroke-width: 0.5; }
    .pivot { fill: #E53E3E; }
    .label { font-size: 16px; font-family: Arial, sans-serif; fill: #333333; }
    .status { font-size: 28px; font-family: Arial, sans-serif; font-weight: bold; }
"""


def _polygon_points(polygon) -> list:
    """Exterior ring without the closing duplicate vertex."""
    return list(polygon.exterior.coords)[:-1]


def _polygon_pieces(geometry) -> list:
    """Non-empty polygons of a Shapely result.

    Disjoint circles at large swivel angles union to a MultiPolygon.
    """
    if geometry.is_empty:
        return []
    if geometry.geom_type == "Polygon":
        return [geometry]
    return [
        g for g in getattr(geometry, "geoms", [])
        if g.geom_type == "Polygon" and not g.is_empty
    ]


def _shape_element(dwg: svgwrite.Drawing, shape: Union[Rect, Quad], fill: str):
    """Rect -> <rect>, Quad -> <polygon>."""
    if shape.kind == "rect":
        min_x, min_y, max_x, max_y = shape.bounds()
        return dwg.rect(
            insert=(min_x, min_y), size=(max_x - min_x, max_y - min_y),
            class_="part", fill=fill,
        )
    return dwg.polygon(_polygon_points(shape.to_polygon()), class_="part", fill=fill)


def _add_marker(dwg, group, center, radius: float, class_: str):
    group.add(dwg.circle(center=center, r=radius, class_=class_))


def snapshot_to_svg(
    snapshot: GeometrySnapshot,
    filepath: str,
    add_labels: bool = True,
    circle_resolution: int = 32,
) -> str:
    """
    Export a geometry snapshot to an SVG drawing.

    Args:
        snapshot: Result of ``compute_geometry``
        filepath: Output SVG file path
        add_labels: Add view titles and the stability status
        circle_resolution: Segments per quarter circle for the swept envelope

    Returns:
        Path to created SVG file
    """
    min_x, min_y, width, height = snapshot.view_box
    dwg = svgwrite.Drawing(
        filepath,
        size=(f"{width}mm", f"{height}mm"),
        viewBox=snapshot.view_box_str,
    )
    dwg.defs.add(dwg.style(STYLESHEET))

    base_fill = PART_FILL["base"] if snapshot.is_stable else UNSTABLE_BASE_FILL
    side, front, top = snapshot.side, snapshot.front, snapshot.top

    # Side view
    side_group = dwg.g(id="side-view")
    side_group.add(dwg.line(
        start=(min_x, side.floor_y), end=(side.stand_rear_bottom_x + 150, side.floor_y),
        class_="floor",
    ))
    side_group.add(_shape_element(dwg, side.base, base_fill))
    side_group.add(_shape_element(dwg, side.stand, PART_FILL["stand"]))
    side_group.add(_shape_element(dwg, side.neck, PART_FILL["neck"]))
    side_group.add(_shape_element(dwg, side.backpack, PART_FILL["backpack"]))
    side_group.add(_shape_element(dwg, side.panel, PART_FILL["panel"]))
    for tip in (side.point_a, side.point_b):
        side_group.add(dwg.line(start=side.pivot, end=tip, class_="tilt"))
    _add_marker(dwg, side_group, side.pivot, 3, "pivot")
    _add_marker(dwg, side_group, snapshot.center_of_gravity, 5, "cg")
    dwg.add(side_group)

    # Front view
    front_group = dwg.g(id="front-view")
    front_group.add(dwg.line(
        start=(front.panel.x, front.floor_y), end=(front.panel.right, front.floor_y),
        class_="floor",
    ))
    front_group.add(_shape_element(dwg, front.base, base_fill))
    front_group.add(_shape_element(dwg, front.stand, PART_FILL["stand"]))
    front_group.add(_shape_element(dwg, front.backpack, PART_FILL["backpack"]))
    front_group.add(_shape_element(dwg, front.neck, PART_FILL["neck"]))
    front_group.add(_shape_element(dwg, front.panel, PART_FILL["panel"]))
    _add_marker(dwg, front_group, snapshot.front_center_of_gravity, 5, "cg")
    dwg.add(front_group)

    # Top view
    top_group = dwg.g(id="top-view")
    top_group.add(_shape_element(dwg, top.base, base_fill))
    top_group.add(_shape_element(dwg, top.stand_body, PART_FILL["stand"]))
    top_group.add(_shape_element(dwg, top.neck, PART_FILL["neck"]))
    top_group.add(_shape_element(dwg, top.backpack, PART_FILL["backpack"]))
    top_group.add(_shape_element(dwg, top.panel, PART_FILL["panel"]))

    checks = snapshot.stability.checks
    envelope = unary_union([
        Point(check.circle.center).buffer(check.circle.radius, circle_resolution)
        for check in checks
        if check.circle.radius > 0
    ])
    for piece in _polygon_pieces(envelope):
        top_group.add(dwg.polygon(_polygon_points(piece), class_="envelope"))
    if not snapshot.is_stable and not envelope.is_empty:
        overhang = envelope.difference(top.base.to_polygon())
        for piece in _polygon_pieces(overhang):
            top_group.add(dwg.polygon(_polygon_points(piece), class_="overhang"))
    for check in checks:
        top_group.add(dwg.circle(
            center=check.circle.center,
            r=check.circle.radius,
            class_="sway" if check.contained else "sway-fail",
        ))
    _add_marker(dwg, top_group, top.pivot, 3, "pivot")
    _add_marker(dwg, top_group, snapshot.top_center_of_gravity, 5, "cg")
    dwg.add(top_group)

    if add_labels:
        dwg.add(dwg.text(
            "Side", insert=(side.base.x, side.floor_y + 40), class_="label",
        ))
        dwg.add(dwg.text(
            "Front", insert=(front.panel.x, front.floor_y + 40), class_="label",
        ))
        dwg.add(dwg.text(
            "Top", insert=(top.panel.x, top.origin[1]), class_="label",
        ))
        status = "Stable" if snapshot.is_stable else "Unstable"
        dwg.add(dwg.text(
            f"Status: {status}",
            insert=(min_x + 20, min_y + 40),
            class_="status",
            fill="#2F855A" if snapshot.is_stable else "#C53030",
        ))

    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    dwg.save()
    logger.info("Exported SVG: %s", filepath)
    return filepath
