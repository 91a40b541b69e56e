# tests/test_break_even.py
import pytest

from inference_calc.core.break_even import (
    break_even_to_frame,
    find_break_even_month,
    project_break_even,
)
from inference_calc.core.catalog import HardwareCatalog
from inference_calc.core.cost_config import CostAssumptions
from inference_calc.core.hardware_models import HardwareClass, HardwareSpec
from inference_calc.core.inference_metrics import compute_metrics


def _assumptions() -> CostAssumptions:
    return CostAssumptions(
        power_cost_usd_per_kwh=0.12,
        amortization_months=24,
        days_per_month=30,
        token_price_usd=0.0001,
        flops_per_token=14e9,
    )


def _catalog() -> HardwareCatalog:
    return HardwareCatalog.from_specs(
        [
            HardwareSpec(HardwareClass.CPU, "Hardware A", 350, 8999, 30),
            HardwareSpec(HardwareClass.GPU, "Hardware B", 400, 10000, 100),
            # Power-hungry CPU vs frugal GPU: GPU catches up after a year
            HardwareSpec(HardwareClass.CPU, "Hot CPU", 1000, 1000, 20),
            HardwareSpec(HardwareClass.GPU, "Cool GPU", 100, 2000, 80),
        ]
    )


def _pair(cpu_model: str, gpu_model: str, hours: float = 24):
    catalog = _catalog()
    cpu = compute_metrics(catalog, "cpu", cpu_model, hours, _assumptions())
    gpu = compute_metrics(catalog, "gpu", gpu_model, hours, _assumptions())
    return cpu, gpu


def test_month_zero_is_hardware_cost_only():
    cpu, gpu = _pair("Hardware A", "Hardware B")
    points = project_break_even(cpu, gpu, horizon_months=24, utilization_hours=24)

    first = points[0]
    assert first.month == 0
    assert first.cpu_cumulative_cost == pytest.approx(8999)
    assert first.gpu_cumulative_cost == pytest.approx(10000)
    assert first.difference == pytest.approx(1001)


def test_projection_length_and_accumulation():
    cpu, gpu = _pair("Hardware A", "Hardware B")
    points = project_break_even(cpu, gpu, horizon_months=12, utilization_hours=24)

    assert len(points) == 13
    assert [p.month for p in points] == list(range(13))

    last = points[-1]
    assert last.cpu_cumulative_cost == pytest.approx(8999 + 30.24 * 12)
    assert last.gpu_cumulative_cost == pytest.approx(10000 + 34.56 * 12)
    assert last.cpu_monthly_power_cost == pytest.approx(30.24)
    assert last.gpu_monthly_power_cost == pytest.approx(34.56)
    assert last.utilization_hours == 24
    assert last.difference == pytest.approx(
        abs(last.cpu_cumulative_cost - last.gpu_cumulative_cost)
    )


def test_cumulative_cost_never_decreases():
    cpu, gpu = _pair("Hot CPU", "Cool GPU")
    points = project_break_even(cpu, gpu, horizon_months=36, utilization_hours=24)

    for prev, cur in zip(points, points[1:]):
        assert cur.cpu_cumulative_cost >= prev.cpu_cumulative_cost
        assert cur.gpu_cumulative_cost >= prev.gpu_cumulative_cost


def test_zero_horizon_yields_single_point():
    cpu, gpu = _pair("Hardware A", "Hardware B")
    points = project_break_even(cpu, gpu, horizon_months=0, utilization_hours=24)
    assert len(points) == 1


def test_missing_metrics_yield_empty_projection():
    cpu, gpu = _pair("Hardware A", "Hardware B")
    assert project_break_even(None, gpu, 24, 24) == []
    assert project_break_even(cpu, None, 24, 24) == []


def test_negative_horizon_rejected():
    cpu, gpu = _pair("Hardware A", "Hardware B")
    with pytest.raises(ValueError):
        project_break_even(cpu, gpu, horizon_months=-1, utilization_hours=24)


def test_break_even_month_found():
    # CPU: 1000 + 86.4m, GPU: 2000 + 8.64m -> GPU cheaper from month 13
    cpu, gpu = _pair("Hot CPU", "Cool GPU")
    points = project_break_even(cpu, gpu, horizon_months=24, utilization_hours=24)
    assert find_break_even_month(points) == 13


def test_break_even_not_reached_within_horizon():
    cpu, gpu = _pair("Hot CPU", "Cool GPU")
    points = project_break_even(cpu, gpu, horizon_months=12, utilization_hours=24)
    assert find_break_even_month(points) is None


def test_break_even_never_reached_when_gpu_burns_more_power():
    cpu, gpu = _pair("Hardware A", "Hardware B")
    points = project_break_even(cpu, gpu, horizon_months=120, utilization_hours=24)
    assert find_break_even_month(points) is None


def test_break_even_frame_columns():
    cpu, gpu = _pair("Hardware A", "Hardware B")
    df = break_even_to_frame(project_break_even(cpu, gpu, 6, 24))

    assert list(df.columns) == ["Month", "CPU", "GPU", "Difference"]
    assert len(df) == 7
    assert df.loc[0, "CPU"] == pytest.approx(8999)
    assert break_even_to_frame([]).empty
