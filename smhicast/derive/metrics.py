"""Derived weather metrics: compass wind direction and apparent temperature."""

import math

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)
SECTOR_WIDTH = 360.0 / len(COMPASS_POINTS)  # 22.5

# Wind chill applies at or below this temperature (°C) and at or above this speed (m/s)
WIND_CHILL_MAX_TEMP = 10.0
WIND_CHILL_MIN_SPEED = 1.3
MS_TO_KMH = 3.6

# Heat index applies at or above this temperature (°C) and relative humidity (%)
HEAT_INDEX_MIN_TEMP = 27.0
HEAT_INDEX_MIN_HUMIDITY = 40.0

# Rothfusz-style regression coefficients, Celsius form
HEAT_INDEX_COEFFS = (
    -8.78469475556,
    1.61139411,
    2.33854883889,
    -0.14611605,
    -0.012308094,
    -0.0164248277778,
    0.002211732,
    0.00072546,
    -0.000003582,
)


def compass(bearing_degrees: float) -> str:
    """Return the 16-point compass label for a wind bearing in degrees.

    Sector 0 (N) is centred on 0°, so the bearing is shifted by half a
    sector before dividing. A bearing on a sector edge belongs to the
    clockwise sector, except that N is open on both edges: 348.75° is NNW.
    """
    bearing = bearing_degrees % 360.0
    if bearing == 360.0 - SECTOR_WIDTH / 2:
        return COMPASS_POINTS[-1]
    index = math.floor((bearing + SECTOR_WIDTH / 2) / SECTOR_WIDTH)
    return COMPASS_POINTS[index % len(COMPASS_POINTS)]


def wind_chill(temp: float, wind_speed: float) -> float:
    """Metric wind-chill index. ``wind_speed`` is in m/s."""
    v = (wind_speed * MS_TO_KMH) ** 0.16
    return 13.12 + 0.6215 * temp - 11.37 * v + 0.3965 * temp * v


def heat_index(temp: float, humidity: float) -> float:
    c1, c2, c3, c4, c5, c6, c7, c8, c9 = HEAT_INDEX_COEFFS
    t2 = temp * temp
    h2 = humidity * humidity
    return (
        c1 + c2 * temp + c3 * humidity + c4 * temp * humidity
        + c5 * t2 + c6 * h2 + c7 * t2 * humidity + c8 * temp * h2
        + c9 * t2 * h2
    )


def apparent_temperature(temp: float, wind_speed: float, humidity: float) -> float:
    """Feels-like temperature in °C.

    Wind chill when cold and windy, heat index when hot and humid,
    otherwise the air temperature unchanged. The regimes are not
    blended, so the value steps at their edges.
    """
    if temp <= WIND_CHILL_MAX_TEMP and wind_speed >= WIND_CHILL_MIN_SPEED:
        return wind_chill(temp, wind_speed)
    if temp >= HEAT_INDEX_MIN_TEMP and humidity >= HEAT_INDEX_MIN_HUMIDITY:
        return heat_index(temp, humidity)
    return temp
