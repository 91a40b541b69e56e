# tests/test_catalog.py
import pytest

from inference_calc.core.catalog import HardwareCatalog, HardwareNotFoundError
from inference_calc.core.catalog_table import build_catalog_table
from inference_calc.core.hardware_data import (
    fetch_latest_hardware_data,
    get_local_hardware_data,
)
from inference_calc.core.hardware_models import HardwareClass, HardwareSpec
from inference_calc.data.hardware_specs import build_default_catalog


def test_default_catalogue_models():
    catalog = build_default_catalog()

    assert catalog.models("cpu") == [
        "Intel Xeon Platinum 8480+",
        "AMD EPYC 9654",
        "Intel Xeon Platinum 8380",
        "AMD EPYC 7763",
    ]
    assert catalog.models(HardwareClass.GPU) == [
        "NVIDIA A100 80GB",
        "NVIDIA H100 80GB",
        "NVIDIA L4",
        "NVIDIA T4",
    ]
    assert len(catalog) == 8


def test_lookup_returns_spec():
    spec = build_default_catalog().lookup("gpu", "NVIDIA H100 80GB")
    assert spec.tdp_w == 700
    assert spec.price_usd == 30000
    assert spec.tokens_per_second == 180
    assert spec.memory == "80GB HBM3"


def test_lookup_is_class_scoped():
    catalog = build_default_catalog()
    with pytest.raises(HardwareNotFoundError) as excinfo:
        catalog.lookup("cpu", "NVIDIA T4")

    assert excinfo.value.hardware_class is HardwareClass.CPU
    assert excinfo.value.model == "NVIDIA T4"
    assert "NVIDIA T4" in str(excinfo.value)


def test_get_returns_none_for_unknown_model():
    catalog = build_default_catalog()
    assert catalog.get("gpu", "NVIDIA B200") is None
    assert ("gpu", "NVIDIA L4") in catalog
    assert ("cpu", "NVIDIA L4") not in catalog


def test_unknown_class_rejected():
    with pytest.raises(ValueError):
        build_default_catalog().models("tpu")


def test_duplicate_models_rejected():
    spec = HardwareSpec(HardwareClass.CPU, "Dup", 100, 100, 1)
    with pytest.raises(ValueError):
        HardwareCatalog.from_specs([spec, spec])


@pytest.mark.parametrize(
    "overrides",
    [
        {"tdp_w": -400},
        {"price_usd": -10},
        {"tokens_per_second": -1},
        {"tdp_w": float("nan")},
        {"price_usd": float("inf")},
        {"model": ""},
    ],
)
def test_invalid_spec_values_rejected(overrides):
    fields = dict(
        hardware_class=HardwareClass.GPU,
        model="Broken",
        tdp_w=400,
        price_usd=10000,
        tokens_per_second=100,
    )
    fields.update(overrides)
    with pytest.raises(ValueError):
        HardwareSpec(**fields)


def test_catalog_is_read_only():
    catalog = build_default_catalog()
    with pytest.raises(TypeError):
        catalog._specs[HardwareClass.CPU]["New"] = None  # type: ignore[index]


def test_fetch_matches_local_data():
    fetched = fetch_latest_hardware_data()
    local = get_local_hardware_data()

    for hw_class in HardwareClass:
        assert fetched.specs(hw_class) == local.specs(hw_class)


def test_catalog_table_shares():
    df = build_catalog_table(build_default_catalog(), "gpu")

    assert df["Model"].tolist()[0] == "NVIDIA A100 80GB"
    h100 = df[df["Model"] == "NVIDIA H100 80GB"].iloc[0]
    assert h100["performance_share"] == pytest.approx(1.0)
    assert h100["cost_share"] == pytest.approx(1.0)
    assert h100["power_share"] == pytest.approx(1.0)

    l4 = df[df["Model"] == "NVIDIA L4"].iloc[0]
    assert l4["performance_share"] == pytest.approx(45 / 180)
    assert l4["tokens_per_watt"] == pytest.approx(45 / 0.072)


def test_catalog_table_handles_zero_values():
    catalog = HardwareCatalog.from_specs(
        [HardwareSpec(HardwareClass.GPU, "Blank", tdp_w=0, price_usd=0, tokens_per_second=0)]
    )
    df = build_catalog_table(catalog, "gpu")

    assert df.loc[0, "performance_share"] == 0
    assert df.loc[0, "cost_share"] == 0
    assert df.loc[0, "tokens_per_watt"] == 0


def test_catalog_table_empty_class():
    df = build_catalog_table(HardwareCatalog.from_specs([]), "cpu")
    assert df.empty
