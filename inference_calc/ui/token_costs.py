# inference_calc/ui/token_costs.py
from __future__ import annotations

from typing import List, Optional

import streamlit as st

from inference_calc.core.catalog import HardwareCatalog
from inference_calc.core.cost_config import CostAssumptions
from inference_calc.core.hardware_models import HardwareClass
from inference_calc.core.token_costs import GaugeReading, compute_token_costs
from inference_calc.ui.formatting import format_number


def render_token_costs(
    catalog: HardwareCatalog,
    cpu_model: str,
    gpu_model: str,
    utilization_hours: float,
    assumptions: CostAssumptions,
) -> None:
    st.markdown("#### Token generation costs")
    st.caption("Power-only cost of generating tokens; hardware cost excluded.")

    columns = st.columns(2)
    for col, hardware_class, model in (
        (columns[0], HardwareClass.CPU, cpu_model),
        (columns[1], HardwareClass.GPU, gpu_model),
    ):
        label = hardware_class.value.upper()
        with col:
            st.markdown(f"**{label} metrics**")
            costs = compute_token_costs(
                catalog, hardware_class, model, utilization_hours, assumptions
            )
            if costs is None:
                st.info(f"Select a {label} model to view metrics")
                continue

            st.caption(f"Model: {model}")
            c1, c2 = st.columns(2)
            c1.metric("Tokens / hour", format_number(costs.tokens_per_hour))
            c2.metric("Cost / token", f"${costs.cost_per_token:.8f}")
            c3, c4 = st.columns(2)
            c3.metric("Power cost / hour", f"${costs.power_cost_per_hour:.4f}")
            c4.metric("Daily power cost", f"${costs.daily_power_cost:.2f}")


def render_gauge(readings: List[GaugeReading]) -> Optional[GaugeReading]:
    """Metric selector with CPU and GPU values side by side."""
    if not readings:
        return None

    st.markdown("#### Performance gauge")
    labels = [r.label for r in readings]
    selected_label = st.radio(
        "Gauge metric", labels, horizontal=True, label_visibility="collapsed"
    )
    reading = readings[labels.index(selected_label)]

    st.caption(reading.description)
    col_cpu, col_gpu = st.columns(2)
    col_cpu.metric("CPU", f"{format_number(reading.cpu_value)} {reading.unit}")
    col_gpu.metric("GPU", f"{format_number(reading.gpu_value)} {reading.unit}")
    return reading
