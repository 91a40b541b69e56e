# inference_calc/core/cost_config.py
from __future__ import annotations

from dataclasses import dataclass

from inference_calc.config import settings


@dataclass(frozen=True)
class CostAssumptions:
    """
    Economic assumptions applied on top of the hardware specs.

    None of these come from the hardware itself: power price, amortization
    period, token price and FLOPs per token are illustrative inputs that
    move every derived cost and business figure.
    """

    power_cost_usd_per_kwh: float
    amortization_months: int
    days_per_month: int
    token_price_usd: float
    flops_per_token: float

    def __post_init__(self) -> None:
        if self.power_cost_usd_per_kwh < 0:
            raise ValueError("power_cost_usd_per_kwh must be >= 0")
        if self.amortization_months <= 0:
            raise ValueError("amortization_months must be > 0")
        if self.days_per_month <= 0:
            raise ValueError("days_per_month must be > 0")
        if self.token_price_usd < 0:
            raise ValueError("token_price_usd must be >= 0")
        if self.flops_per_token < 0:
            raise ValueError("flops_per_token must be >= 0")


def get_default_cost_assumptions() -> CostAssumptions:
    """
    Single place to pull the cost assumptions for calculations.
    """

    return CostAssumptions(
        power_cost_usd_per_kwh=settings.DEFAULT_POWER_COST_USD_PER_KWH,
        amortization_months=settings.DEFAULT_AMORTIZATION_MONTHS,
        days_per_month=settings.DAYS_PER_MONTH,
        token_price_usd=settings.DEFAULT_TOKEN_PRICE_USD,
        flops_per_token=settings.DEFAULT_FLOPS_PER_TOKEN,
    )
