"""
Per-user movement statistics.

The repository computes the raw aggregates in SQL (counts and average
angles); ``build_summary`` turns them into the figures shown to users.
Percentages and averages are rounded to two decimals, and an empty subset
reports 0 rather than ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MovementSummary:
    total_calculations: int
    backward_movements: int
    forward_movements: int
    percentage_backward: float
    percentage_forward: float
    average_backward_angle: float
    average_forward_angle: float


def _percentage(part: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(part / total * 100, 2)


def build_summary(
    total: int,
    backward: int,
    avg_backward_angle: Optional[float] = None,
    avg_forward_angle: Optional[float] = None,
) -> MovementSummary:
    forward = total - backward
    return MovementSummary(
        total_calculations=total,
        backward_movements=backward,
        forward_movements=forward,
        percentage_backward=_percentage(backward, total),
        percentage_forward=_percentage(forward, total),
        average_backward_angle=round(float(avg_backward_angle or 0.0), 2),
        average_forward_angle=round(float(avg_forward_angle or 0.0), 2),
    )
