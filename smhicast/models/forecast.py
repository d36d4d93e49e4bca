"""Point forecast data models."""

from dataclasses import dataclass, field
from datetime import datetime, tzinfo

from smhicast.models.common import to_local
from smhicast.models.condition import ConditionCategory
from smhicast.models.errors import EmptySeriesError


@dataclass(frozen=True)
class NamedParameter:
    name: str
    values: tuple[float, ...]


@dataclass(frozen=True)
class ForecastInstant:
    valid_time: datetime  # UTC
    parameters: tuple[NamedParameter, ...]

    def local_time(self, tz: tzinfo | None = None) -> datetime:
        return to_local(self.valid_time, tz)


@dataclass(frozen=True)
class ForecastSeries:
    instants: tuple[ForecastInstant, ...]
    approved_time: datetime | None = None

    def __len__(self) -> int:
        return len(self.instants)

    @property
    def current(self) -> ForecastInstant:
        """The soonest instant; raises EmptySeriesError when there is none."""
        if not self.instants:
            raise EmptySeriesError("No forecast data available")
        return self.instants[0]

    def head(self, n: int) -> tuple[ForecastInstant, ...]:
        return self.instants[:n]


@dataclass(frozen=True)
class DerivedReadout:
    valid_time: datetime
    temperature: float | None = None
    wind_speed: float | None = None
    wind_direction: str | None = None
    humidity: float | None = None
    pressure: float | None = None
    visibility: float | None = None
    rainfall: float | None = None
    apparent_temperature: float | None = None
    condition: ConditionCategory = field(default=ConditionCategory.CLEAR_SKY)
