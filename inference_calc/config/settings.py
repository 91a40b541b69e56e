# inference_calc/config/settings.py

import os

# --- Environment ---

ENV_DEV = "dev"
ENV_PROD = "prod"

# "dev" preselects a CPU/GPU pair and turns on debug logging
APP_ENV = os.getenv("INFERENCE_CALC_ENV", os.getenv("APP_ENV", ENV_PROD)).lower()

# Settings for the CPU vs GPU inference calculator.
# Anything that changes every derived metric can be overridden from the
# environment; everything else is a plain module constant.

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if APP_ENV == ENV_DEV else "INFO").upper()

# --- Cost assumptions (illustrative, not measured) ---

# Electricity price applied to TDP draw
DEFAULT_POWER_COST_USD_PER_KWH = float(os.getenv("POWER_COST_USD_PER_KWH", "0.12"))

# Straight-line hardware amortization (2 years)
DEFAULT_AMORTIZATION_MONTHS = int(os.getenv("AMORTIZATION_MONTHS", "24"))

# Fixed 30-day month convention used for every monthly figure
DAYS_PER_MONTH = 30

# Market rate charged per generated token
DEFAULT_TOKEN_PRICE_USD = float(os.getenv("TOKEN_PRICE_USD", "0.0001"))

# Reference model for FLOPs estimates: 7B parameters, ~2 FLOPs/param/token
REFERENCE_MODEL_PARAMS = 7e9
DEFAULT_FLOPS_PER_TOKEN = 2 * REFERENCE_MODEL_PARAMS

SECONDS_PER_HOUR = 3600

# --- UI defaults ---

DEFAULT_UTILIZATION_HOURS = 12
MIN_UTILIZATION_HOURS = 1
MAX_UTILIZATION_HOURS = 24

DEFAULT_HORIZON_MONTHS = 24
MAX_HORIZON_MONTHS = 60

# Dev convenience: preselect a pair so charts render on first load
DEV_DEFAULT_CPU_MODEL = "Intel Xeon Platinum 8480+"
DEV_DEFAULT_GPU_MODEL = "NVIDIA A100 80GB"

# --- Chart styling ---

CPU_COLOR_HEX = "#8884d8"
GPU_COLOR_HEX = "#82ca9d"
AREA_FILL_OPACITY = 0.3
CHART_HEIGHT_PX = 320
