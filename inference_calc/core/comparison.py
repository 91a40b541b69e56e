# inference_calc/core/comparison.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import pandas as pd

from inference_calc.core.inference_metrics import MetricsResult


@dataclass(frozen=True)
class MetricDefinition:
    label: str
    field: str  # attribute on MetricsResult
    unit: str
    description: str


@dataclass(frozen=True)
class ComparisonRow:
    metric: str
    cpu_value: float
    gpu_value: float
    unit: str
    description: str


# Row order is relied on for stable chart axes.
PERFORMANCE_METRICS: Sequence[MetricDefinition] = (
    MetricDefinition(
        label="Daily Tokens",
        field="daily_tokens",
        unit="tokens",
        description="Total tokens processed per day",
    ),
    MetricDefinition(
        label="Power Efficiency",
        field="tokens_per_watt",
        unit="tokens/watt",
        description="Tokens processed per watt of power",
    ),
    MetricDefinition(
        label="Cost per 1M Tokens",
        field="cost_per_million_tokens",
        unit="USD",
        description="Cost to process 1 million tokens",
    ),
    MetricDefinition(
        label="Tokens per $1",
        field="tokens_per_dollar",
        unit="tokens",
        description="Number of tokens processed per dollar",
    ),
)

ROI_METRICS: Sequence[MetricDefinition] = (
    MetricDefinition(
        label="FLOPS per $",
        field="flops_per_dollar",
        unit="FLOPS/$",
        description="Computational power per dollar invested",
    ),
    MetricDefinition(
        label="Profit Margin",
        field="profit_margin_pct",
        unit="%",
        description="Monthly profit as percentage of revenue",
    ),
    MetricDefinition(
        label="Monthly Profit",
        field="monthly_profit",
        unit="USD",
        description="Net profit per month after costs",
    ),
)


def _build_rows(
    definitions: Iterable[MetricDefinition],
    cpu: Optional[MetricsResult],
    gpu: Optional[MetricsResult],
) -> List[ComparisonRow]:
    if cpu is None or gpu is None:
        return []

    return [
        ComparisonRow(
            metric=definition.label,
            cpu_value=getattr(cpu, definition.field),
            gpu_value=getattr(gpu, definition.field),
            unit=definition.unit,
            description=definition.description,
        )
        for definition in definitions
    ]


def build_comparison(
    cpu: Optional[MetricsResult], gpu: Optional[MetricsResult]
) -> List[ComparisonRow]:
    """Performance/cost rows for the CPU vs GPU bar chart."""
    return _build_rows(PERFORMANCE_METRICS, cpu, gpu)


def build_roi_comparison(
    cpu: Optional[MetricsResult], gpu: Optional[MetricsResult]
) -> List[ComparisonRow]:
    """Business rows (FLOPS per $, margin, profit) for the ROI chart."""
    return _build_rows(ROI_METRICS, cpu, gpu)


def comparison_to_frame(rows: Sequence[ComparisonRow]) -> pd.DataFrame:
    """
    Convert comparison rows into a DataFrame for charting, keeping row order.
    Numbers are left raw.
    """
    columns = ["Metric", "CPU", "GPU", "Unit", "Description"]
    if not rows:
        return pd.DataFrame(columns=columns)

    return pd.DataFrame(
        [
            {
                "Metric": row.metric,
                "CPU": row.cpu_value,
                "GPU": row.gpu_value,
                "Unit": row.unit,
                "Description": row.description,
            }
            for row in rows
        ],
        columns=columns,
    )
