# scripts/compare_hardware.py
import sys
from pathlib import Path

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from inference_calc.core.break_even import (  # noqa: E402
    find_break_even_month,
    project_break_even,
)
from inference_calc.core.cost_config import get_default_cost_assumptions  # noqa: E402
from inference_calc.core.hardware_data import get_local_hardware_data  # noqa: E402
from inference_calc.core.hardware_models import HardwareClass  # noqa: E402
from inference_calc.core.inference_metrics import compute_metrics  # noqa: E402


def print_catalog_metrics(utilization_hours: float, horizon_months: int) -> None:
    """
    Print headline metrics for every catalogue model, then the break-even
    month for each CPU/GPU pair. Handy for eyeballing the formulas against
    a spreadsheet.
    """
    catalog = get_local_hardware_data()
    assumptions = get_default_cost_assumptions()

    print(f"\n=== Utilization {utilization_hours:g} h/day ===")
    print(
        f"Power: ${assumptions.power_cost_usd_per_kwh}/kWh  |  "
        f"Amortization: {assumptions.amortization_months} months"
    )
    print("-" * 100)
    print(
        f"{'Model':28}  {'tok/s':>6}  {'Daily tokens':>14}  "
        f"{'Tok/W':>8}  {'$/1M tok':>10}  {'$/day power':>12}"
    )
    print("-" * 100)

    for hw_class in HardwareClass:
        for model in catalog.models(hw_class):
            m = compute_metrics(catalog, hw_class, model, utilization_hours, assumptions)
            print(
                f"{model:28}  {m.tokens_per_second:6.0f}  {m.daily_tokens:14,.0f}  "
                f"{m.tokens_per_watt:8.2f}  {m.cost_per_million_tokens:10.4f}  "
                f"{m.daily_power_cost:12.3f}"
            )

    print(f"\n--- Break-even month within {horizon_months} months ---")
    for cpu_model in catalog.models(HardwareClass.CPU):
        cpu = compute_metrics(
            catalog, HardwareClass.CPU, cpu_model, utilization_hours, assumptions
        )
        for gpu_model in catalog.models(HardwareClass.GPU):
            gpu = compute_metrics(
                catalog, HardwareClass.GPU, gpu_model, utilization_hours, assumptions
            )
            points = project_break_even(cpu, gpu, horizon_months, utilization_hours)
            month = find_break_even_month(points)
            result = "not reached" if month is None else f"month {month}"
            print(f"{cpu_model:28} vs {gpu_model:20} -> {result}")


if __name__ == "__main__":
    print_catalog_metrics(utilization_hours=24, horizon_months=24)
