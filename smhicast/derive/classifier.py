"""Weather-symbol code (Wsymb2) to condition category mapping."""

from types import MappingProxyType

from smhicast.models.condition import ConditionCategory

_C = ConditionCategory

# Wsymb2 code ranges, inclusive
SYMBOL_RANGES: tuple[tuple[int, int, ConditionCategory], ...] = (
    (1, 1, _C.CLEAR_SKY),
    (2, 2, _C.NEARLY_CLEAR_SKY),
    (3, 3, _C.VARIABLE_CLOUDINESS),
    (4, 4, _C.HALFCLEAR_SKY),
    (5, 5, _C.CLOUDY_SKY),
    (6, 6, _C.OVERCAST),
    (7, 7, _C.FOG),
    (8, 10, _C.RAIN_SHOWERS),
    (11, 11, _C.THUNDERSTORM),
    (12, 14, _C.SLEET_SHOWERS),
    (15, 17, _C.SNOW_SHOWERS),
    (18, 20, _C.RAIN),
    (21, 21, _C.THUNDER),
    (22, 24, _C.SLEET),
    (25, 27, _C.SNOWFALL),
)

_BY_CODE = MappingProxyType({
    code: category
    for low, high, category in SYMBOL_RANGES
    for code in range(low, high + 1)
})

DEFAULT_CONDITION = ConditionCategory.CLEAR_SKY


def classify(symbol_code: int) -> ConditionCategory:
    """Map a Wsymb2 code to its condition; unknown codes fall back to clear sky."""
    return _BY_CODE.get(symbol_code, DEFAULT_CONDITION)
