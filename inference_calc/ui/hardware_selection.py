# inference_calc/ui/hardware_selection.py

from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from inference_calc.config import settings
from inference_calc.core.catalog import HardwareCatalog
from inference_calc.core.catalog_table import build_catalog_table
from inference_calc.core.hardware_models import HardwareClass
from inference_calc.ui.formatting import format_currency

_NO_SELECTION = ""


@dataclass
class CalculatorInputs:
    """Everything the user picks on the configuration panel."""

    cpu_model: str
    gpu_model: str
    utilization_hours: int
    horizon_months: int


def _default_index(options: list[str], preferred: str) -> int:
    if settings.APP_ENV == settings.ENV_DEV and preferred in options:
        return options.index(preferred)
    return 0


def _render_model_cards(catalog: HardwareCatalog, hardware_class: HardwareClass) -> None:
    """Relative performance / cost / power bars for every model in a class."""
    df = build_catalog_table(catalog, hardware_class)
    st.dataframe(
        df[
            [
                "Model",
                "Tokens/s",
                "performance_share",
                "Price (USD)",
                "cost_share",
                "TDP (W)",
                "power_share",
                "Memory",
            ]
        ],
        hide_index=True,
        width="stretch",
        column_config={
            "performance_share": st.column_config.ProgressColumn(
                "Performance", min_value=0.0, max_value=1.0, format="%.2f"
            ),
            "cost_share": st.column_config.ProgressColumn(
                "Cost", min_value=0.0, max_value=1.0, format="%.2f"
            ),
            "power_share": st.column_config.ProgressColumn(
                "Power usage", min_value=0.0, max_value=1.0, format="%.2f"
            ),
        },
    )


def _render_model_picker(
    catalog: HardwareCatalog,
    hardware_class: HardwareClass,
    preferred: str,
) -> str:
    label = hardware_class.value.upper()
    options = [_NO_SELECTION, *catalog.models(hardware_class)]
    model = st.selectbox(
        f"{label} model",
        options=options,
        index=_default_index(options, preferred),
        format_func=lambda m: m or f"Select a {label}...",
        key=f"{hardware_class.value}_model",
    )

    spec = catalog.get(hardware_class, model) if model else None
    if spec is not None:
        st.caption(
            f"{spec.tokens_per_second:g} tokens/s · {spec.tdp_w:g} W TDP · "
            f"{format_currency(spec.price_usd)} · {spec.memory or 'n/a'}"
        )

    with st.expander(f"Compare all {label} models", expanded=False):
        _render_model_cards(catalog, hardware_class)

    return model


def render_hardware_config(catalog: HardwareCatalog) -> CalculatorInputs:
    """Render hardware pickers and utilization inputs.

    Returns
    -------
    CalculatorInputs
        Selected models (empty string when nothing picked) and usage inputs.
    """

    st.markdown("### Hardware configuration")
    st.markdown(
        "Pick a CPU and a GPU to compare. Throughput, power and price figures "
        "are indicative list values."
    )

    col_cpu, col_gpu = st.columns(2)
    with col_cpu:
        cpu_model = _render_model_picker(
            catalog, HardwareClass.CPU, settings.DEV_DEFAULT_CPU_MODEL
        )
    with col_gpu:
        gpu_model = _render_model_picker(
            catalog, HardwareClass.GPU, settings.DEV_DEFAULT_GPU_MODEL
        )

    utilization_hours = st.slider(
        "Daily utilization (hours)",
        min_value=settings.MIN_UTILIZATION_HOURS,
        max_value=settings.MAX_UTILIZATION_HOURS,
        value=settings.DEFAULT_UTILIZATION_HOURS,
        help="Hours per day the hardware spends serving inference at full TDP.",
    )

    horizon_months = st.slider(
        "Break-even horizon (months)",
        min_value=1,
        max_value=settings.MAX_HORIZON_MONTHS,
        value=settings.DEFAULT_HORIZON_MONTHS,
        help="How far ahead to project cumulative hardware + power cost.",
    )

    return CalculatorInputs(
        cpu_model=cpu_model,
        gpu_model=gpu_model,
        utilization_hours=int(utilization_hours),
        horizon_months=int(horizon_months),
    )
