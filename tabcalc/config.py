"""
TAB Calc configuration and constants.
"""

from enum import Enum


class TempUnit(str, Enum):
    F = "F"  # Fahrenheit
    C = "C"  # Celsius


# Standard atmosphere at sea level
STANDARD_PRESSURE_PA = 101325.0  # Pa

# Standard air density used by the Pitot / velocity pressure relations
STANDARD_AIR_DENSITY_LB_FT3 = 0.075  # lb/ft³

# Ratio of molecular weights of water vapor and dry air (18.015268 / 28.966)
HUMIDITY_RATIO_FACTOR = 0.621945

# Pascals per inch of water gauge (at 4°C)
PA_PER_IN_WG = 249.0889

# Grains per lb conversion
GRAINS_PER_LB = 7000.0

# °C → K offset
KELVIN_OFFSET = 273.15

# Duct defaults
DEFAULT_DUCT_ROUGHNESS_MM = 0.09   # galvanized steel, typical
DEFAULT_AIR_TEMPERATURE_C = 20.0   # °C
