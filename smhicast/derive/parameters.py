"""Named-parameter lookup over a forecast instant's parameter list."""

from collections.abc import Iterable

from smhicast.models.forecast import NamedParameter

TEMPERATURE = "t"
WIND_SPEED = "ws"
WIND_DIRECTION = "wd"
HUMIDITY = "r"
PRESSURE = "msl"
VISIBILITY = "vis"
PRECIPITATION_MEAN = "pmean"
WEATHER_SYMBOL = "Wsymb2"


def lookup(parameters: Iterable[NamedParameter], name: str) -> float | None:
    """Return the first value of the parameter called ``name``.

    Names match exactly (case-sensitive). Entries with an empty value
    sequence are skipped. Returns None when nothing matches.
    """
    for p in parameters:
        if p.name == name and len(p.values) > 0:
            return p.values[0]
    return None
