# kerosene_converter/config.py
import logging

# Updated by release.py
CURRENT_VERSION = "1.0.0"

APP_NAME = "Aviation Kerosene Unit Converter"

# Jet A-1 density (Global)
# 0.8 kg/L; 0.8 kg * 2.20462 lb/kg
KG_PER_LITER = 0.8
LBS_PER_LITER = 1.7637

# Initial form values
DEFAULT_FROM_UNIT = "Lbs"
DEFAULT_TO_UNIT = "Kg"
DEFAULT_VALUE = "100.00"

# Theme
COLOR_BG = "#000000"
COLOR_ACCENT = "#FACC15"
COLOR_ACCENT_HOVER = "#FDE047"
COLOR_TEXT = "white"
COLOR_ERROR = "#EF4444"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL = logging.INFO


def setup_logging(level: int = LOG_LEVEL) -> None:
    """Configures the root logger once (called by the launcher)."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
