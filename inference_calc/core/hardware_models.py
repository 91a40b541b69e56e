# inference_calc/core/hardware_models.py
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class HardwareClass(str, Enum):
    CPU = "cpu"
    GPU = "gpu"

    @classmethod
    def parse(cls, value: "HardwareClass | str") -> "HardwareClass":
        """Accept the enum or its string value ("cpu" / "gpu")."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as exc:
            raise ValueError(
                f"Unknown hardware class {value!r}; expected 'cpu' or 'gpu'"
            ) from exc


@dataclass(frozen=True)
class HardwareSpec:
    """
    Represents a single CPU or GPU model available for inference.

    Kept in core models so both UI (pickers, catalogue table) and core
    calculations (metrics, token costs) can depend on the same schema.
    Only tdp_w, price_usd and tokens_per_second feed the arithmetic; the
    remaining fields are descriptive.
    """

    hardware_class: HardwareClass
    model: str
    tdp_w: float  # thermal design power, watts
    price_usd: float
    tokens_per_second: float  # typical inference throughput (assumed)
    memory: str | None = None

    # CPU-only descriptive fields
    cores: int | None = None
    base_freq_ghz: float | None = None
    max_freq_ghz: float | None = None

    # GPU-only descriptive fields
    memory_bandwidth_gb_s: float | None = None
    tensor_cores: int | None = None

    def __post_init__(self) -> None:
        if not self.model:
            raise ValueError("model name must not be empty")
        for field_name in ("tdp_w", "price_usd", "tokens_per_second"):
            value = getattr(self, field_name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(
                    f"{self.model}: {field_name} must be a finite number >= 0, "
                    f"got {value!r}"
                )
