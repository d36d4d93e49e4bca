"""Per-instant derived readout: lookup, classify and compute in one pass."""

from smhicast.derive import parameters as p
from smhicast.derive.classifier import DEFAULT_CONDITION, classify
from smhicast.derive.metrics import apparent_temperature, compass
from smhicast.models.forecast import DerivedReadout, ForecastInstant


def derive_readout(instant: ForecastInstant) -> DerivedReadout:
    params = instant.parameters
    temp = p.lookup(params, p.TEMPERATURE)
    wind = p.lookup(params, p.WIND_SPEED)
    bearing = p.lookup(params, p.WIND_DIRECTION)
    humidity = p.lookup(params, p.HUMIDITY)
    symbol = p.lookup(params, p.WEATHER_SYMBOL)

    apparent = None
    if temp is not None and wind is not None and humidity is not None:
        apparent = apparent_temperature(temp, wind, humidity)

    return DerivedReadout(
        valid_time=instant.valid_time,
        temperature=temp,
        wind_speed=wind,
        wind_direction=compass(bearing) if bearing is not None else None,
        humidity=humidity,
        pressure=p.lookup(params, p.PRESSURE),
        visibility=p.lookup(params, p.VISIBILITY),
        rainfall=p.lookup(params, p.PRECIPITATION_MEAN),
        apparent_temperature=apparent,
        condition=classify(int(symbol)) if symbol is not None else DEFAULT_CONDITION,
    )
