# inference_calc/core/hardware_data.py
from __future__ import annotations

import logging

from inference_calc.core.catalog import HardwareCatalog
from inference_calc.data.hardware_specs import build_default_catalog

logger = logging.getLogger(__name__)


def get_local_hardware_data() -> HardwareCatalog:
    """Return the static hardware catalogue shipped with the app."""
    return build_default_catalog()


def fetch_latest_hardware_data() -> HardwareCatalog:
    """
    Public-facing loader for the rest of the app.

    There is no public source for CPU/GPU list prices and inference
    throughput, so this resolves to the static catalogue. Callers get the
    same data either way.

    UI (layout.py) is responsible for caching via st.cache_resource.
    """
    logger.debug("Using static hardware catalogue")
    return get_local_hardware_data()
