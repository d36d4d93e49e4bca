"""Static icon and label catalog for each condition category."""

from types import MappingProxyType

from smhicast.models.condition import ConditionCategory

_C = ConditionCategory

ICON_HEIGHT = 5
LABEL_WIDTH = 18  # terminal columns, glyph included

_SUN = (
    "    \\   /    ",
    "     .-.     ",
    "  ― (   ) ―  ",
    "     `-'     ",
    "    /   \\    ",
)
_PARTLY_CLOUDY = (
    "   \\  /      ",
    " _ /\"\".-.    ",
    "   \\_(   ).  ",
    "   /(___(__).",
    "             ",
)
_CLOUD = (
    "             ",
    "     .--.    ",
    "  .-(    ).  ",
    " (___.__)__) ",
    "             ",
)
_FOG = (
    "             ",
    " _ - _ - _ - ",
    "  _ - _ - _  ",
    " _ - _ - _ - ",
    "             ",
)
_RAIN_CLOUD = (
    "     .-.     ",
    "    (   ).   ",
    "   (___(__)  ",
)
_THUNDER_TAIL = (
    "    ⚡ ⚡ ⚡   ",
    "  ‚'‚'‚'‚'   ",
)

ICONS: MappingProxyType[ConditionCategory, tuple[str, ...]] = MappingProxyType({
    _C.CLEAR_SKY: _SUN,
    _C.NEARLY_CLEAR_SKY: _PARTLY_CLOUDY,
    _C.VARIABLE_CLOUDINESS: _PARTLY_CLOUDY,
    _C.HALFCLEAR_SKY: _PARTLY_CLOUDY,
    _C.CLOUDY_SKY: _CLOUD,
    _C.OVERCAST: _CLOUD,
    _C.FOG: _FOG,
    _C.RAIN_SHOWERS: _RAIN_CLOUD + (
        "    ' ' ' '  ",
        "   ' ' ' '   ",
    ),
    _C.THUNDERSTORM: _RAIN_CLOUD + _THUNDER_TAIL,
    _C.SLEET_SHOWERS: _RAIN_CLOUD + (
        "    * ' * '  ",
        "   * ' * '   ",
    ),
    _C.SNOW_SHOWERS: _RAIN_CLOUD + (
        "    *  *  *  ",
        "   *  *  *   ",
    ),
    _C.RAIN: _RAIN_CLOUD + (
        "  ‚'‚'‚'‚'   ",
        "  ‚'‚'‚'‚'   ",
    ),
    _C.THUNDER: _RAIN_CLOUD + _THUNDER_TAIL,
    _C.SLEET: _RAIN_CLOUD + (
        "  * ' * ' *  ",
        "  * ' * ' *  ",
    ),
    _C.SNOWFALL: _RAIN_CLOUD + (
        "   *  *  *   ",
        "  *  *  *  * ",
    ),
})

# Pre-padded to LABEL_WIDTH display columns. Emoji count as two columns,
# so these must not be re-padded with len()-based helpers.
LABELS: MappingProxyType[ConditionCategory, str] = MappingProxyType({
    _C.CLEAR_SKY: "\u2600\ufe0f  Clear sky     ",
    _C.NEARLY_CLEAR_SKY: "\U0001f324\ufe0f  Nearly clear  ",
    _C.VARIABLE_CLOUDINESS: "\u26c5 Variable clouds",
    _C.HALFCLEAR_SKY: "\u26c5 Half clear     ",
    _C.CLOUDY_SKY: "\u2601\ufe0f  Cloudy        ",
    _C.OVERCAST: "\u2601\ufe0f  Overcast      ",
    _C.FOG: "\U0001f32b\ufe0f  Fog           ",
    _C.RAIN_SHOWERS: "\U0001f326\ufe0f  Rain showers  ",
    _C.THUNDERSTORM: "\u26c8\ufe0f  Thunderstorm  ",
    _C.SLEET_SHOWERS: "\U0001f328\ufe0f  Sleet showers ",
    _C.SNOW_SHOWERS: "\U0001f328\ufe0f  Snow showers  ",
    _C.RAIN: "\U0001f327\ufe0f  Rain          ",
    _C.THUNDER: "\u26c8\ufe0f  Thunder       ",
    _C.SLEET: "\U0001f328\ufe0f  Sleet         ",
    _C.SNOWFALL: "\u2744\ufe0f  Snowfall      ",
})


def icon_for(category: ConditionCategory | str) -> tuple[str, ...]:
    """Five-line small-art icon; unknown categories get the clear-sky icon."""
    return ICONS.get(category, ICONS[_C.CLEAR_SKY])


def label_for(category: ConditionCategory | str) -> str:
    """Pre-padded table label; unknown categories get the clear-sky label."""
    return LABELS.get(category, LABELS[_C.CLEAR_SKY])
