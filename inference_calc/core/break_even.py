# inference_calc/core/break_even.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandas as pd

from inference_calc.core.inference_metrics import MetricsResult


@dataclass(frozen=True)
class BreakEvenPoint:
    """
    Cumulative total cost of ownership for both picks at a given month.

    Month 0 is the purchase: hardware cost only, no power spent yet.
    """

    month: int
    cpu_cumulative_cost: float
    gpu_cumulative_cost: float
    cpu_monthly_power_cost: float
    gpu_monthly_power_cost: float
    difference: float  # |cpu - gpu|
    utilization_hours: float


def _cumulative_cost(metrics: MetricsResult, month: int) -> float:
    return metrics.hardware_cost_usd + metrics.monthly_power_cost * month


def project_break_even(
    cpu: Optional[MetricsResult],
    gpu: Optional[MetricsResult],
    horizon_months: int,
    utilization_hours: float,
) -> List[BreakEvenPoint]:
    """
    Project cumulative cost (hardware + power) month by month for
    months 0..horizon_months inclusive.

    Returns an empty list until both CPU and GPU metrics exist.
    """
    if cpu is None or gpu is None:
        return []
    if horizon_months < 0:
        raise ValueError("horizon_months must be >= 0")

    points: List[BreakEvenPoint] = []
    for month in range(int(horizon_months) + 1):
        cpu_cost = _cumulative_cost(cpu, month)
        gpu_cost = _cumulative_cost(gpu, month)
        points.append(
            BreakEvenPoint(
                month=month,
                cpu_cumulative_cost=cpu_cost,
                gpu_cumulative_cost=gpu_cost,
                cpu_monthly_power_cost=cpu.monthly_power_cost,
                gpu_monthly_power_cost=gpu.monthly_power_cost,
                difference=abs(cpu_cost - gpu_cost),
                utilization_hours=utilization_hours,
            )
        )

    return points


def find_break_even_month(points: Sequence[BreakEvenPoint]) -> Optional[int]:
    """
    First month at which the GPU has cost no more than the CPU in total.

    None means the crossover is not reached within the projected horizon.
    """
    for point in points:
        if point.gpu_cumulative_cost <= point.cpu_cumulative_cost:
            return point.month
    return None


def break_even_to_frame(points: Sequence[BreakEvenPoint]) -> pd.DataFrame:
    columns = ["Month", "CPU", "GPU", "Difference"]
    if not points:
        return pd.DataFrame(columns=columns)

    return pd.DataFrame(
        {
            "Month": [p.month for p in points],
            "CPU": [p.cpu_cumulative_cost for p in points],
            "GPU": [p.gpu_cumulative_cost for p in points],
            "Difference": [p.difference for p in points],
        },
        columns=columns,
    )
