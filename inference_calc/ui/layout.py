# inference_calc/ui/layout.py
from __future__ import annotations

import streamlit as st

from inference_calc.core.break_even import (
    break_even_to_frame,
    find_break_even_month,
    project_break_even,
)
from inference_calc.core.catalog import HardwareCatalog
from inference_calc.core.comparison import (
    build_comparison,
    build_roi_comparison,
    comparison_to_frame,
)
from inference_calc.core.cost_config import CostAssumptions, get_default_cost_assumptions
from inference_calc.core.hardware_data import fetch_latest_hardware_data
from inference_calc.core.inference_metrics import MetricsResult, compute_metrics_pair
from inference_calc.core.token_costs import build_gauge_readings
from inference_calc.ui.charts import (
    render_break_even_chart,
    render_performance_chart,
    render_roi_chart,
)
from inference_calc.ui.formatting import (
    format_currency,
    format_large_number,
    format_number,
    format_optional_days,
)
from inference_calc.ui.hardware_selection import render_hardware_config
from inference_calc.ui.token_costs import render_gauge, render_token_costs


# ---------------------------------------------------------
# Load hardware catalogue (static, cached for the session)
# ---------------------------------------------------------
@st.cache_resource(show_spinner="Loading hardware catalogue...")
def load_catalog() -> HardwareCatalog:
    return fetch_latest_hardware_data()


def _render_assumptions(assumptions: CostAssumptions) -> None:
    with st.expander("Assumptions", expanded=False):
        st.markdown(
            f"- Electricity: **${assumptions.power_cost_usd_per_kwh:.2f}/kWh**, "
            "drawn at full TDP for every utilized hour\n"
            f"- Hardware amortized straight-line over "
            f"**{assumptions.amortization_months} months**\n"
            f"- Months are **{assumptions.days_per_month} days**\n"
            f"- Market price: **${assumptions.token_price_usd:g} per token**\n"
            f"- FLOPs per token: **{format_large_number(assumptions.flops_per_token)}** "
            "(7B-parameter reference model)\n\n"
            "Business figures are illustrative estimates, not measurements."
        )


def _render_summary(metrics: MetricsResult) -> None:
    label = metrics.hardware_class.value.upper()
    st.markdown(f"**{label}: {metrics.model}**")
    c1, c2, c3 = st.columns(3)
    c1.metric("Daily tokens", format_large_number(metrics.daily_tokens))
    c2.metric("Daily power cost", format_currency(metrics.daily_power_cost))
    c3.metric("Cost / 1M tokens", format_currency(metrics.cost_per_million_tokens))

    c4, c5, c6 = st.columns(3)
    c4.metric("Tokens / watt", format_number(metrics.tokens_per_watt))
    c5.metric("Monthly profit", format_currency(metrics.monthly_profit))
    c6.metric("Days to break even", format_optional_days(metrics.days_to_break_even))


def render_dashboard() -> None:
    st.title("CPU vs GPU Inference Calculator")

    catalog = load_catalog()
    assumptions = get_default_cost_assumptions()

    inputs = render_hardware_config(catalog)
    _render_assumptions(assumptions)

    cpu_metrics, gpu_metrics = compute_metrics_pair(
        catalog,
        inputs.cpu_model,
        inputs.gpu_model,
        inputs.utilization_hours,
        assumptions,
    )

    if cpu_metrics is None or gpu_metrics is None:
        st.info("Select both a CPU and a GPU model to see the comparison.")
        return

    st.divider()
    col_cpu, col_gpu = st.columns(2)
    with col_cpu:
        _render_summary(cpu_metrics)
    with col_gpu:
        _render_summary(gpu_metrics)

    tab_perf, tab_break_even, tab_costs, tab_roi = st.tabs(
        ["Performance", "Break-even", "Token costs", "ROI"]
    )

    with tab_perf:
        comparison_df = comparison_to_frame(build_comparison(cpu_metrics, gpu_metrics))
        render_performance_chart(comparison_df)
        render_gauge(build_gauge_readings(cpu_metrics, gpu_metrics))

    with tab_break_even:
        points = project_break_even(
            cpu_metrics,
            gpu_metrics,
            inputs.horizon_months,
            inputs.utilization_hours,
        )
        render_break_even_chart(
            break_even_to_frame(points), find_break_even_month(points)
        )

    with tab_costs:
        render_token_costs(
            catalog,
            inputs.cpu_model,
            inputs.gpu_model,
            inputs.utilization_hours,
            assumptions,
        )

    with tab_roi:
        roi_df = comparison_to_frame(build_roi_comparison(cpu_metrics, gpu_metrics))
        render_roi_chart(roi_df)
        st.dataframe(roi_df, hide_index=True, width="stretch")
