"""Qualitative sky/precipitation condition derived from a weather-symbol code."""

from enum import StrEnum


class ConditionCategory(StrEnum):
    CLEAR_SKY = "clear_sky"
    NEARLY_CLEAR_SKY = "nearly_clear_sky"
    VARIABLE_CLOUDINESS = "variable_cloudiness"
    HALFCLEAR_SKY = "halfclear_sky"
    CLOUDY_SKY = "cloudy_sky"
    OVERCAST = "overcast"
    FOG = "fog"
    RAIN_SHOWERS = "rain_showers"
    THUNDERSTORM = "thunderstorm"
    SLEET_SHOWERS = "sleet_showers"
    SNOW_SHOWERS = "snow_showers"
    RAIN = "rain"
    THUNDER = "thunder"
    SLEET = "sleet"
    SNOWFALL = "snowfall"
