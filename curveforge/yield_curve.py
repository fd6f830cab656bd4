"""Discount curve built from nodes, interpolated log-linearly."""

from __future__ import annotations

import bisect
import math
from dataclasses import dataclass

__all__ = ["CurveNode", "YieldCurve"]

_TIME_TOLERANCE = 1e-12


@dataclass(frozen=True)
class CurveNode:
    """A discount factor ``df`` at time ``t`` in years."""

    t: float
    df: float


class YieldCurve:
    """Discount factors at node times, starting from ``(0, 1)``."""

    def __init__(self) -> None:
        self._nodes: list[CurveNode] = [CurveNode(0.0, 1.0)]

    @property
    def nodes(self) -> tuple[CurveNode, ...]:
        """The nodes in ascending order of time."""
        return tuple(self._nodes)

    def _node_at(self, t: float) -> CurveNode | None:
        return next((node for node in self._nodes if abs(node.t - t) < _TIME_TOLERANCE), None)

    def add(self, t: float, df: float) -> None:
        """Insert a node; times must be positive and distinct, factors positive."""
        if t <= 0.0:
            raise ValueError("Node time must be >0")
        if self._node_at(t) is not None:
            raise ValueError("Duplicate node")
        if not df > 0.0:
            raise ValueError("Discount must be positive")
        bisect.insort(self._nodes, CurveNode(t, df), key=lambda node: node.t)

    def discount(self, t: float) -> float:
        """Discount factor at ``t``; no extrapolation beyond the last node."""
        if t == 0.0:
            return 1.0
        node = self._node_at(t)
        if node is not None:
            return node.df
        if t < 0.0 or t > self._nodes[-1].t:
            raise ValueError("Extrapolation not allowed")
        index = bisect.bisect_right([n.t for n in self._nodes], t)
        if index >= len(self._nodes):
            return self._nodes[-1].df
        a = self._nodes[index - 1]
        b = self._nodes[index]
        w = (t - a.t) / (b.t - a.t)
        return math.exp((1 - w) * math.log(a.df) + w * math.log(b.df))