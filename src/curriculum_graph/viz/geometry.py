"""Curve geometry for drawn connections.

Connections are cubic Bezier curves. Two shaping rules apply:

- Same-tier (lateral) edges bow upward with an exaggerated offset
  proportional to their horizontal distance, capped at SAME_TIER_MAX_OFFSET.
- Cross-tier edges get a gentle asymmetric bend from the horizontal and
  vertical deltas.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from curriculum_graph.coordinates import Point

if TYPE_CHECKING:
    from curriculum_graph.graph.connections import Edge

SAME_TIER_MAX_OFFSET = 100.0
CROSS_TIER_X_FRACTIONS = (0.25, 0.75)
CROSS_TIER_Y_FRACTION = 0.1


def format_number(value: float) -> str:
    """Compact number formatting for SVG path data."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


@dataclass(frozen=True)
class CurveGeometry:
    """Cubic Bezier curve from start to end."""

    start: Point
    control1: Point
    control2: Point
    end: Point

    @property
    def path_data(self) -> str:
        """SVG path ``d`` attribute: ``M x1 y1 C c1x c1y, c2x c2y, x2 y2``."""
        return (
            f"M {format_number(self.start.x)} {format_number(self.start.y)} "
            f"C {format_number(self.control1.x)} {format_number(self.control1.y)}, "
            f"{format_number(self.control2.x)} {format_number(self.control2.y)}, "
            f"{format_number(self.end.x)} {format_number(self.end.y)}"
        )


def same_tier_curve(start: Point, end: Point) -> CurveGeometry:
    """Pronounced arc for an edge between two nodes of the same tier.

    Example:
        >>> c = same_tier_curve(Point(0, 100), Point(300, 100))
        >>> c.control1, c.control2
        (Point(x=50.0, y=0.0), Point(x=250.0, y=0.0))
    """
    dx = end.x - start.x
    dy = end.y - start.y
    mid = start.midpoint(end)
    offset = min(abs(dx), SAME_TIER_MAX_OFFSET) * (-1 if dy < 0 else 1)
    return CurveGeometry(
        start=start,
        control1=Point(mid.x - offset, mid.y - offset),
        control2=Point(mid.x + offset, mid.y - offset),
        end=end,
    )


def cross_tier_curve(start: Point, end: Point) -> CurveGeometry:
    """Gentle S-bend for an edge between two tiers.

    Example:
        >>> c = cross_tier_curve(Point(0, 0), Point(100, 200))
        >>> c.control1, c.control2
        (Point(x=25.0, y=20.0), Point(x=75.0, y=180.0))
    """
    dx = end.x - start.x
    dy = end.y - start.y
    fx1, fx2 = CROSS_TIER_X_FRACTIONS
    return CurveGeometry(
        start=start,
        control1=Point(start.x + dx * fx1, start.y + dy * CROSS_TIER_Y_FRACTION),
        control2=Point(start.x + dx * fx2, end.y - dy * CROSS_TIER_Y_FRACTION),
        end=end,
    )


def curve_for(edge: Edge) -> CurveGeometry:
    """Pick the shaping rule for *edge* by whether it stays within a tier."""
    if edge.same_tier:
        return same_tier_curve(edge.source_position, edge.target_position)
    return cross_tier_curve(edge.source_position, edge.target_position)


# =============================================================================
# Connection validation
# =============================================================================


@dataclass
class EdgeConnectionValidator:
    """Validates drawn curves against node centers.

    Checks that:
    1. Both endpoints exist as node markers
    2. The curve starts at the source node center
    3. The curve ends at the target node center
    """

    centers: dict[str, Point]  # node id -> center
    curves: dict[tuple[str, str], CurveGeometry]  # (source, target) -> curve
    tolerance: float = 0.0

    def validate_curve(self, source: str, target: str, curve: CurveGeometry) -> list[str]:
        """Returns list of issues (empty = valid)."""
        issues = []

        src = self.centers.get(source)
        tgt = self.centers.get(target)
        if src is None:
            issues.append(f"Source node '{source}' not found")
            return issues
        if tgt is None:
            issues.append(f"Target node '{target}' not found")
            return issues

        d_start = max(abs(curve.start.x - src.x), abs(curve.start.y - src.y))
        if d_start > self.tolerance:
            issues.append(f"Curve start {d_start:.1f}px from center of '{source}'")

        d_end = max(abs(curve.end.x - tgt.x), abs(curve.end.y - tgt.y))
        if d_end > self.tolerance:
            issues.append(f"Curve end {d_end:.1f}px from center of '{target}'")

        return issues

    def validate_all(self) -> dict[str, list[str]]:
        """Returns {edge_id: [issues]} for all curves with issues."""
        return {
            f"{source}->{target}": issues
            for (source, target), curve in self.curves.items()
            if (issues := self.validate_curve(source, target, curve))
        }


def format_issues(issues: dict[str, list[str]]) -> str:
    """Format validation issues for display in test failures."""
    lines = []
    for edge_id, edge_issues in issues.items():
        lines.append(f"  {edge_id}:")
        for issue in edge_issues:
            lines.append(f"    - {issue}")
    return "\n".join(lines)
