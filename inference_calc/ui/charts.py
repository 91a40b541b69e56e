# inference_calc/ui/charts.py
from __future__ import annotations

from typing import Optional

import altair as alt
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from inference_calc.config import settings
from inference_calc.ui.formatting import format_currency


def render_performance_chart(
    df: pd.DataFrame,
    title: str = "Performance comparison",
) -> None:
    """
    Grouped CPU vs GPU bars, one group per metric.

    Expected df columns: Metric, CPU, GPU, Unit, Description.
    Metrics live on very different scales, so the y-axis is logarithmic.
    """
    required = {"Metric", "CPU", "GPU", "Unit"}
    missing = required - set(df.columns)
    if missing:
        raise ValueError(f"DataFrame missing required columns: {missing}")

    fig = go.Figure()
    for column, color in (
        ("CPU", settings.CPU_COLOR_HEX),
        ("GPU", settings.GPU_COLOR_HEX),
    ):
        fig.add_trace(
            go.Bar(
                x=df["Metric"],
                y=df[column],
                name=column,
                marker_color=color,
                customdata=df["Unit"],
                hovertemplate=(
                    f"<b>%{{x}}</b><br>{column}: %{{y:,.4g}} %{{customdata}}"
                    "<extra></extra>"
                ),
            )
        )

    fig.update_layout(
        title=title,
        barmode="group",
        yaxis=dict(type="log", title=None),
        xaxis=dict(title=None),
        height=settings.CHART_HEIGHT_PX,
        legend=dict(
            orientation="h",
            yanchor="bottom",
            y=-0.3,
            xanchor="center",
            x=0.5,
        ),
        margin=dict(l=40, r=20, t=60, b=60),
    )

    st.plotly_chart(fig, width="stretch")


def render_break_even_chart(
    df: pd.DataFrame,
    break_even_month: Optional[int],
    title: str = "Break-even analysis",
) -> None:
    """
    Cumulative total cost (hardware + power) for both picks by month.
    Expects: Month, CPU, GPU.
    """
    if not {"Month", "CPU", "GPU"}.issubset(df.columns):
        raise ValueError("DataFrame must contain 'Month', 'CPU' and 'GPU' columns")

    fig = go.Figure()
    for column, color in (
        ("CPU", settings.CPU_COLOR_HEX),
        ("GPU", settings.GPU_COLOR_HEX),
    ):
        fig.add_trace(
            go.Scatter(
                x=df["Month"],
                y=df[column],
                name=column,
                mode="lines",
                fill="tozeroy",
                line=dict(color=color),
                opacity=settings.AREA_FILL_OPACITY,
                hovertemplate=f"Month %{{x}}<br>{column}: $%{{y:,.0f}}<extra></extra>",
            )
        )

    if break_even_month is not None:
        fig.add_vline(
            x=break_even_month,
            line_width=1,
            line_dash="dot",
            line_color="rgba(0,0,0,0.4)",
        )

    fig.update_layout(
        title=title,
        xaxis=dict(title="Months"),
        yaxis=dict(title="Total cost ($)"),
        hovermode="x unified",
        height=settings.CHART_HEIGHT_PX,
        margin=dict(l=40, r=20, t=60, b=60),
    )

    st.plotly_chart(fig, width="stretch")

    if break_even_month is None:
        st.warning(
            "The GPU's cumulative cost stays above the CPU's for the whole "
            "horizon: break-even is not reached."
        )
    elif break_even_month == 0:
        st.caption("The GPU costs no more than the CPU from day one.")
    else:
        row = df[df["Month"] == break_even_month].iloc[0]
        st.caption(
            f"GPU total cost drops to or below the CPU's in month "
            f"{break_even_month} (CPU {format_currency(row['CPU'])} vs "
            f"GPU {format_currency(row['GPU'])})."
        )


def render_roi_chart(df: pd.DataFrame) -> None:
    """One small bar chart per ROI metric, since units differ."""
    if df.empty:
        return

    long_df = df.melt(
        id_vars=["Metric", "Unit"],
        value_vars=["CPU", "GPU"],
        var_name="Hardware",
        value_name="Value",
    )

    chart = (
        alt.Chart(long_df)
        .mark_bar()
        .encode(
            x=alt.X("Hardware:N", title=None),
            y=alt.Y("Value:Q", title=None),
            color=alt.Color(
                "Hardware:N",
                scale=alt.Scale(
                    domain=["CPU", "GPU"],
                    range=[settings.CPU_COLOR_HEX, settings.GPU_COLOR_HEX],
                ),
                legend=None,
            ),
            column=alt.Column("Metric:N", title=None, sort=list(df["Metric"])),
            tooltip=["Metric", "Hardware", alt.Tooltip("Value:Q", format=",.4~g"), "Unit"],
        )
        .resolve_scale(y="independent")
        .properties(width=160, height=220)
    )

    st.altair_chart(chart)
