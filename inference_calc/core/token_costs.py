# inference_calc/core/token_costs.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

from inference_calc.config import settings
from inference_calc.core.catalog import HardwareCatalog
from inference_calc.core.cost_config import CostAssumptions, get_default_cost_assumptions
from inference_calc.core.hardware_models import HardwareClass
from inference_calc.core.inference_metrics import MetricsResult


@dataclass(frozen=True)
class TokenCosts:
    tokens_per_hour: float
    power_cost_per_hour: float
    cost_per_token: float  # power only, no hardware amortization
    daily_power_cost: float


@dataclass(frozen=True)
class GaugeReading:
    key: str
    label: str
    description: str
    unit: str
    cpu_value: float
    gpu_value: float


def compute_token_costs(
    catalog: HardwareCatalog,
    hardware_class: HardwareClass | str,
    model: str | None,
    utilization_hours: float | None,
    assumptions: CostAssumptions | None = None,
) -> Optional[TokenCosts]:
    """
    Power-only cost of generating tokens on one model.

    Returns None until both a model and utilization hours are given; 0 hours
    is a valid input (daily cost of 0).
    """
    if not model or utilization_hours is None:
        return None
    hours = float(utilization_hours)
    if not math.isfinite(hours) or hours < 0:
        raise ValueError(
            f"utilization_hours must be a finite number >= 0, got {hours!r}"
        )
    if assumptions is None:
        assumptions = get_default_cost_assumptions()

    spec = catalog.lookup(hardware_class, model)
    power_cost_per_hour = (spec.tdp_w / 1000.0) * assumptions.power_cost_usd_per_kwh
    tokens_per_hour = float(spec.tokens_per_second) * settings.SECONDS_PER_HOUR
    cost_per_token = power_cost_per_hour / tokens_per_hour if tokens_per_hour > 0 else 0.0

    return TokenCosts(
        tokens_per_hour=tokens_per_hour,
        power_cost_per_hour=power_cost_per_hour,
        cost_per_token=cost_per_token,
        daily_power_cost=power_cost_per_hour * hours,
    )


def _energy_per_million_tokens_kwh(metrics: MetricsResult) -> float:
    if metrics.tokens_per_hour <= 0:
        return 0.0
    return (metrics.specs.tdp_w / 1000.0) / (metrics.tokens_per_hour / 1e6)


def build_gauge_readings(
    cpu: Optional[MetricsResult], gpu: Optional[MetricsResult]
) -> List[GaugeReading]:
    """Headline throughput and energy figures for the side-by-side gauge."""
    if cpu is None or gpu is None:
        return []

    return [
        GaugeReading(
            key="speed",
            label="Processing Throughput",
            description="Tokens processed per hour",
            unit="tokens/hr",
            cpu_value=cpu.tokens_per_hour,
            gpu_value=gpu.tokens_per_hour,
        ),
        GaugeReading(
            key="efficiency",
            label="Processing Efficiency",
            description="Energy consumed per million tokens",
            unit="kWh/M tokens",
            cpu_value=_energy_per_million_tokens_kwh(cpu),
            gpu_value=_energy_per_million_tokens_kwh(gpu),
        ),
    ]
