# inference_calc/core/inference_metrics.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from inference_calc.config import settings
from inference_calc.core.catalog import HardwareCatalog
from inference_calc.core.cost_config import CostAssumptions, get_default_cost_assumptions
from inference_calc.core.hardware_models import HardwareClass


@dataclass(frozen=True)
class SpecReference:
    tdp_w: float
    price_usd: float
    memory: str | None


@dataclass(frozen=True)
class MetricsResult:
    """
    Derived performance, cost and business metrics for one hardware pick.

    Values are unrounded; formatting belongs to the UI.
    """

    hardware_class: HardwareClass
    model: str
    utilization_hours: float

    # Performance
    tokens_per_second: float
    tokens_per_hour: float
    daily_tokens: float
    monthly_tokens: float
    tokens_per_watt: float

    # Cost (USD)
    daily_power_kwh: float
    daily_power_cost: float
    monthly_power_cost: float
    hardware_cost_usd: float
    cost_per_million_tokens: float
    hourly_operating_cost: float
    tokens_per_dollar: float

    # Business (illustrative, driven by CostAssumptions)
    monthly_revenue: float
    monthly_profit: float
    profit_margin_pct: float
    flops_per_second: float
    flops_per_dollar: float
    tokens_to_break_even: Optional[float]  # None if never reached
    days_to_break_even: Optional[float]  # None if never reached

    specs: SpecReference


def compute_metrics(
    catalog: HardwareCatalog,
    hardware_class: HardwareClass | str,
    model: str | None,
    utilization_hours: float | None,
    assumptions: CostAssumptions | None = None,
) -> Optional[MetricsResult]:
    """
    Canonical calculation of every derived metric for a single CPU or GPU.

    - catalog: hardware specs to resolve model against
    - model: selected model name; empty/None means nothing picked yet
    - utilization_hours: hours of inference per day (any positive number)
    - assumptions: cost assumptions; defaults from settings

    Returns None while the selection is incomplete. An unknown model raises
    HardwareNotFoundError from the catalog.

    Assumes:
    - fixed 30-day month (assumptions.days_per_month)
    - hardware cost amortized straight-line over assumptions.amortization_months
    - power draw equals TDP for every utilized hour
    """
    if not model or not utilization_hours:
        return None
    hours = float(utilization_hours)
    if not math.isfinite(hours) or hours < 0:
        raise ValueError(
            f"utilization_hours must be a finite number >= 0, got {hours!r}"
        )

    if assumptions is None:
        assumptions = get_default_cost_assumptions()

    spec = catalog.lookup(hardware_class, model)
    days = assumptions.days_per_month

    # Throughput
    tokens_per_second = float(spec.tokens_per_second)
    tokens_per_hour = tokens_per_second * settings.SECONDS_PER_HOUR
    daily_tokens = tokens_per_hour * hours
    monthly_tokens = daily_tokens * days

    # Power
    tdp_kw = float(spec.tdp_w) / 1000.0
    daily_power_kwh = tdp_kw * hours
    daily_power_cost = daily_power_kwh * assumptions.power_cost_usd_per_kwh
    monthly_power_cost = daily_power_cost * days
    hardware_cost = float(spec.price_usd)
    amortized_hardware = hardware_cost / assumptions.amortization_months

    tokens_per_watt = tokens_per_second / tdp_kw if tdp_kw > 0 else 0.0

    # Unit economics
    if monthly_tokens > 0:
        cost_per_million_tokens = (
            (monthly_power_cost + amortized_hardware) / monthly_tokens
        ) * 1e6
    else:
        cost_per_million_tokens = 0.0

    hourly_operating_cost = daily_power_cost / hours
    tokens_per_dollar = (
        tokens_per_hour / hourly_operating_cost if hourly_operating_cost > 0 else 0.0
    )

    # Business
    monthly_revenue = monthly_tokens * assumptions.token_price_usd
    monthly_profit = monthly_revenue - monthly_power_cost - amortized_hardware
    profit_margin_pct = (
        monthly_profit / monthly_revenue * 100 if monthly_revenue > 0 else 0.0
    )

    flops_per_second = tokens_per_second * assumptions.flops_per_token
    # Free hardware: report raw FLOPS rather than dividing by zero
    flops_per_dollar = flops_per_second / (hardware_cost if hardware_cost > 0 else 1.0)

    tokens_to_break_even, days_to_break_even = _break_even_volume(
        hardware_cost=hardware_cost,
        margin_per_token=assumptions.token_price_usd - cost_per_million_tokens / 1e6,
        daily_tokens=daily_tokens,
    )

    return MetricsResult(
        hardware_class=spec.hardware_class,
        model=spec.model,
        utilization_hours=hours,
        tokens_per_second=tokens_per_second,
        tokens_per_hour=tokens_per_hour,
        daily_tokens=daily_tokens,
        monthly_tokens=monthly_tokens,
        tokens_per_watt=tokens_per_watt,
        daily_power_kwh=daily_power_kwh,
        daily_power_cost=daily_power_cost,
        monthly_power_cost=monthly_power_cost,
        hardware_cost_usd=hardware_cost,
        cost_per_million_tokens=cost_per_million_tokens,
        hourly_operating_cost=hourly_operating_cost,
        tokens_per_dollar=tokens_per_dollar,
        monthly_revenue=monthly_revenue,
        monthly_profit=monthly_profit,
        profit_margin_pct=profit_margin_pct,
        flops_per_second=flops_per_second,
        flops_per_dollar=flops_per_dollar,
        tokens_to_break_even=tokens_to_break_even,
        days_to_break_even=days_to_break_even,
        specs=SpecReference(
            tdp_w=spec.tdp_w,
            price_usd=spec.price_usd,
            memory=spec.memory,
        ),
    )


def _break_even_volume(
    hardware_cost: float,
    margin_per_token: float,
    daily_tokens: float,
) -> Tuple[Optional[float], Optional[float]]:
    """Tokens (and days) of sales needed to recover the hardware price."""
    if hardware_cost <= 0:
        return 0.0, 0.0
    if margin_per_token <= 0:
        return None, None

    tokens = hardware_cost / margin_per_token
    days = tokens / daily_tokens if daily_tokens > 0 else None
    return tokens, days


def compute_metrics_pair(
    catalog: HardwareCatalog,
    cpu_model: str | None,
    gpu_model: str | None,
    utilization_hours: float | None,
    assumptions: CostAssumptions | None = None,
) -> Tuple[Optional[MetricsResult], Optional[MetricsResult]]:
    """Metrics for the selected CPU and GPU under the same utilization."""
    cpu = compute_metrics(
        catalog, HardwareClass.CPU, cpu_model, utilization_hours, assumptions
    )
    gpu = compute_metrics(
        catalog, HardwareClass.GPU, gpu_model, utilization_hours, assumptions
    )
    return cpu, gpu
