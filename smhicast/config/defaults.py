"""Default forecast location."""

from smhicast.config.schema import LocationConfig

DEFAULT_LOCATION = LocationConfig(
    name="Mälarhöjden, Stockholm",
    latitude=59.3009642,
    longitude=17.9557798,
)
