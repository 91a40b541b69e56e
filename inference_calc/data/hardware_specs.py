# inference_calc/data/hardware_specs.py
from __future__ import annotations

from typing import List

from inference_calc.core.catalog import HardwareCatalog
from inference_calc.core.hardware_models import HardwareClass, HardwareSpec

# Static catalogue: list prices and throughput figures are indicative only.
# tokens_per_second is a typical single-stream figure for a 7B model.
CPU_SPECS: List[HardwareSpec] = [
    HardwareSpec(
        hardware_class=HardwareClass.CPU,
        model="Intel Xeon Platinum 8480+",
        cores=56,
        base_freq_ghz=2.0,
        max_freq_ghz=3.8,
        tdp_w=350,
        price_usd=8999,
        memory="112MB L3 Cache",
        tokens_per_second=30,
    ),
    HardwareSpec(
        hardware_class=HardwareClass.CPU,
        model="AMD EPYC 9654",
        cores=96,
        base_freq_ghz=2.4,
        max_freq_ghz=3.7,
        tdp_w=360,
        price_usd=11849,
        memory="384MB L3 Cache",
        tokens_per_second=40,
    ),
    HardwareSpec(
        hardware_class=HardwareClass.CPU,
        model="Intel Xeon Platinum 8380",
        cores=40,
        base_freq_ghz=2.3,
        max_freq_ghz=3.4,
        tdp_w=270,
        price_usd=8099,
        memory="60MB L3 Cache",
        tokens_per_second=25,
    ),
    HardwareSpec(
        hardware_class=HardwareClass.CPU,
        model="AMD EPYC 7763",
        cores=64,
        base_freq_ghz=2.45,
        max_freq_ghz=3.5,
        tdp_w=280,
        price_usd=7890,
        memory="256MB L3 Cache",
        tokens_per_second=35,
    ),
]

GPU_SPECS: List[HardwareSpec] = [
    HardwareSpec(
        hardware_class=HardwareClass.GPU,
        model="NVIDIA A100 80GB",
        memory="80GB HBM2e",
        memory_bandwidth_gb_s=2039,
        tdp_w=400,
        price_usd=10000,
        tokens_per_second=100,
        tensor_cores=432,
    ),
    HardwareSpec(
        hardware_class=HardwareClass.GPU,
        model="NVIDIA H100 80GB",
        memory="80GB HBM3",
        memory_bandwidth_gb_s=3350,
        tdp_w=700,
        price_usd=30000,
        tokens_per_second=180,
        tensor_cores=528,
    ),
    HardwareSpec(
        hardware_class=HardwareClass.GPU,
        model="NVIDIA L4",
        memory="24GB GDDR6",
        memory_bandwidth_gb_s=300,
        tdp_w=72,
        price_usd=2000,
        tokens_per_second=45,
        tensor_cores=144,
    ),
    HardwareSpec(
        hardware_class=HardwareClass.GPU,
        model="NVIDIA T4",
        memory="16GB GDDR6",
        memory_bandwidth_gb_s=320,
        tdp_w=70,
        price_usd=1500,
        tokens_per_second=30,
        tensor_cores=320,
    ),
]


def build_default_catalog() -> HardwareCatalog:
    return HardwareCatalog.from_specs([*CPU_SPECS, *GPU_SPECS])
