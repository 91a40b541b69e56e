# inference_calc/core/catalog_table.py
from __future__ import annotations

import numpy as np
import pandas as pd

from inference_calc.core.catalog import HardwareCatalog
from inference_calc.core.hardware_models import HardwareClass


def _share_of_max(values: pd.Series) -> np.ndarray:
    max_val = values.max() if not values.empty else 0.0
    if not max_val or max_val <= 0:
        return np.zeros(len(values))
    return (values / max_val).to_numpy(dtype=float)


def build_catalog_table(
    catalog: HardwareCatalog,
    hardware_class: HardwareClass | str,
) -> pd.DataFrame:
    """
    One row per model in a class, with headline specs and each model's
    throughput, price and TDP as a fraction of the class maximum (used
    for the relative bars on the model cards).
    """
    specs = catalog.specs(hardware_class)
    df = pd.DataFrame(
        {
            "Model": [s.model for s in specs],
            "Tokens/s": [float(s.tokens_per_second) for s in specs],
            "Price (USD)": [float(s.price_usd) for s in specs],
            "TDP (W)": [float(s.tdp_w) for s in specs],
            "Memory": [s.memory for s in specs],
        }
    )

    df["performance_share"] = _share_of_max(df["Tokens/s"])
    df["cost_share"] = _share_of_max(df["Price (USD)"])
    df["power_share"] = _share_of_max(df["TDP (W)"])

    df["tokens_per_watt"] = np.where(
        df["TDP (W)"] > 0,
        df["Tokens/s"] / (df["TDP (W)"].where(df["TDP (W)"] > 0, 1.0) / 1000.0),
        0.0,
    )

    return df
