# inference_calc/core/catalog.py
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from inference_calc.core.hardware_models import HardwareClass, HardwareSpec


class HardwareNotFoundError(KeyError):
    """Raised when a model name is not present under the requested class."""

    def __init__(self, hardware_class: HardwareClass, model: str):
        self.hardware_class = hardware_class
        self.model = model
        super().__init__(f"No {hardware_class.value.upper()} model named {model!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class HardwareCatalog:
    """
    Read-only lookup of hardware specs keyed by class and model name.

    Built once (see data/hardware_specs.py) and passed into the calculators
    as a parameter, so tests can swap in synthetic hardware.
    """

    def __init__(self, specs: Mapping[HardwareClass, Mapping[str, HardwareSpec]]):
        self._specs: Mapping[HardwareClass, Mapping[str, HardwareSpec]] = (
            MappingProxyType(
                {
                    hw_class: MappingProxyType(dict(specs.get(hw_class, {})))
                    for hw_class in HardwareClass
                }
            )
        )

    @classmethod
    def from_specs(cls, specs: Iterable[HardwareSpec]) -> "HardwareCatalog":
        """Build a catalog from a flat list, rejecting duplicate model names."""
        grouped: Dict[HardwareClass, Dict[str, HardwareSpec]] = {
            hw_class: {} for hw_class in HardwareClass
        }
        for spec in specs:
            bucket = grouped[spec.hardware_class]
            if spec.model in bucket:
                raise ValueError(
                    f"Duplicate {spec.hardware_class.value} model {spec.model!r}"
                )
            bucket[spec.model] = spec
        return cls(grouped)

    def get(
        self, hardware_class: HardwareClass | str, model: str
    ) -> Optional[HardwareSpec]:
        """Return the spec, or None when the model is not in the catalog."""
        hw_class = HardwareClass.parse(hardware_class)
        return self._specs[hw_class].get(model)

    def lookup(self, hardware_class: HardwareClass | str, model: str) -> HardwareSpec:
        hw_class = HardwareClass.parse(hardware_class)
        spec = self._specs[hw_class].get(model)
        if spec is None:
            raise HardwareNotFoundError(hw_class, model)
        return spec

    def models(self, hardware_class: HardwareClass | str) -> List[str]:
        """Model names for a class, in declaration order."""
        return list(self._specs[HardwareClass.parse(hardware_class)].keys())

    def specs(self, hardware_class: HardwareClass | str) -> List[HardwareSpec]:
        return list(self._specs[HardwareClass.parse(hardware_class)].values())

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        hardware_class, model = item
        return self.get(hardware_class, model) is not None

    def __len__(self) -> int:
        return sum(len(models) for models in self._specs.values())
