"""Curved edge between two points, bent through a control point."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

Vec2 = Tuple[float, float]
Vec4 = Tuple[float, float, float, float]
Vertex = Tuple[Vec2, Vec4, Vec2]
Quad = Tuple[Vertex, Vertex, Vertex, Vertex]


def _normalise(v: Vec2) -> Vec2:
    length = math.hypot(v[0], v[1])
    if length > 0.0:
        return (v[0] / length, v[1] / length)
    return (0.0, 0.0)


def _mix(a: Sequence[float], b: Sequence[float], t: float) -> tuple:
    tt = 1.0 - t
    return tuple(x * t + y * tt for x, y in zip(a, b))


class SplineEdge:
    """Quadratic curve from pos2 to pos1 with colours blended along it."""

    def __init__(self) -> None:
        self.points: List[Vec2] = []
        self.colours: List[Vec4] = []
        self.label_pos: Vec2 = (0.0, 0.0)

    def update(
        self,
        pos1: Vec2,
        col1: Vec4,
        pos2: Vec2,
        col2: Vec4,
        spos: Vec2,
        name_position: float = 0.5,
    ) -> None:
        """Recompute the curve points, their colours and the label position."""
        mid = ((pos1[0] - pos2[0]) * 0.5, (pos1[1] - pos2[1]) * 0.5)
        to = (pos1[0] - spos[0], pos1[1] - spos[1])
        n_to, n_mid = _normalise(to), _normalise(mid)
        dp = min(1.0, n_to[0] * n_mid[0] + n_to[1] * n_mid[1])
        ang = math.acos(max(-1.0, dp)) / math.pi

        edge_detail = max(1, min(10, int(ang * 100.0)))

        points: List[Vec2] = []
        colours: List[Vec4] = []
        for i in range(edge_detail + 1):
            t = i / edge_detail
            p0 = _mix(pos1, spos, t)
            p1 = _mix(spos, pos2, t)
            points.append(_mix(p0, p1, t))
            colours.append(_mix(col1, col2, t))
        self.points = points
        self.colours = colours

        s_quota = 0.5 - abs(name_position - 0.5)
        p_quota = 1.0 - s_quota
        w1 = p_quota * (1.0 - name_position)
        w2 = p_quota * name_position
        self.label_pos = tuple(
            a * w1 + b * w2 + s * s_quota for a, b, s in zip(pos1, pos2, spos)
        )

    def quads(self, radius: float = 2.5) -> List[Quad]:
        """Quads of the given half-width covering each curve segment."""
        result: List[Quad] = []
        segments = zip(self.points, self.points[1:], self.colours, self.colours[1:])
        for a, b, ca, cb in segments:
            d = (a[0] - b[0], a[1] - b[1])
            n = _normalise((-d[1], d[0]))
            perp = (n[0] * radius, n[1] * radius)
            result.append(
                (
                    ((a[0] + perp[0], a[1] + perp[1]), ca, (1.0, 0.0)),
                    ((a[0] - perp[0], a[1] - perp[1]), ca, (0.0, 0.0)),
                    ((b[0] - perp[0], b[1] - perp[1]), cb, (0.0, 0.0)),
                    ((b[0] + perp[0], b[1] + perp[1]), cb, (1.0, 0.0)),
                )
            )
        return result