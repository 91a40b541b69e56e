# tests/test_comparison.py
import pytest

from inference_calc.core.comparison import (
    build_comparison,
    build_roi_comparison,
    comparison_to_frame,
)
from inference_calc.core.inference_metrics import compute_metrics
from inference_calc.data.hardware_specs import build_default_catalog


@pytest.fixture()
def pair():
    catalog = build_default_catalog()
    cpu = compute_metrics(catalog, "cpu", "Intel Xeon Platinum 8480+", 24)
    gpu = compute_metrics(catalog, "gpu", "NVIDIA A100 80GB", 24)
    return cpu, gpu


def test_comparison_rows_in_declared_order(pair):
    cpu, gpu = pair
    rows = build_comparison(cpu, gpu)

    assert [r.metric for r in rows] == [
        "Daily Tokens",
        "Power Efficiency",
        "Cost per 1M Tokens",
        "Tokens per $1",
    ]
    assert [r.unit for r in rows] == ["tokens", "tokens/watt", "USD", "tokens"]


def test_comparison_values_are_raw_metrics(pair):
    cpu, gpu = pair
    rows = build_comparison(cpu, gpu)

    daily, efficiency, cost, per_dollar = rows
    assert daily.cpu_value == cpu.daily_tokens
    assert daily.gpu_value == gpu.daily_tokens
    assert efficiency.gpu_value == gpu.tokens_per_watt
    assert cost.cpu_value == cpu.cost_per_million_tokens
    assert per_dollar.gpu_value == gpu.tokens_per_dollar
    assert daily.description == "Total tokens processed per day"


def test_comparison_empty_when_either_side_missing(pair):
    cpu, gpu = pair
    assert build_comparison(None, gpu) == []
    assert build_comparison(cpu, None) == []
    assert build_roi_comparison(None, None) == []


def test_roi_rows(pair):
    cpu, gpu = pair
    rows = build_roi_comparison(cpu, gpu)

    assert [r.metric for r in rows] == ["FLOPS per $", "Profit Margin", "Monthly Profit"]
    assert rows[1].unit == "%"
    assert rows[2].cpu_value == cpu.monthly_profit


def test_comparison_frame_keeps_order(pair):
    cpu, gpu = pair
    df = comparison_to_frame(build_comparison(cpu, gpu))

    assert list(df.columns) == ["Metric", "CPU", "GPU", "Unit", "Description"]
    assert df["Metric"].tolist()[0] == "Daily Tokens"
    assert df.loc[1, "GPU"] == pytest.approx(gpu.tokens_per_watt)


def test_comparison_frame_empty():
    df = comparison_to_frame([])
    assert df.empty
    assert "Metric" in df.columns
