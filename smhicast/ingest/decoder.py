"""Decode a raw SMHI pmp3g response into a ForecastSeries."""

import logging
from datetime import datetime

from smhicast.models.common import parse_utc
from smhicast.models.errors import FeedDecodeError
from smhicast.models.forecast import ForecastInstant, ForecastSeries, NamedParameter

logger = logging.getLogger(__name__)


def decode_series(raw: dict) -> ForecastSeries:
    """Build a ForecastSeries from the response body, soonest instant first.

    Raises FeedDecodeError when ``timeSeries`` is missing or a
    ``validTime`` cannot be parsed. Parameter entries with non-numeric
    values are skipped.
    """
    if not isinstance(raw, dict) or not isinstance(raw.get("timeSeries"), list):
        raise FeedDecodeError("Response has no timeSeries list")

    instants = [_decode_instant(entry) for entry in raw["timeSeries"]]
    instants.sort(key=lambda i: i.valid_time)

    approved = raw.get("approvedTime")
    return ForecastSeries(
        instants=tuple(instants),
        approved_time=_parse_time(approved) if approved else None,
    )


def _decode_instant(entry: dict) -> ForecastInstant:
    valid_time = entry.get("validTime") if isinstance(entry, dict) else None
    if not valid_time:
        raise FeedDecodeError(f"Forecast entry without validTime: {entry!r}")

    params: list[NamedParameter] = []
    for p in entry.get("parameters") or []:
        param = _decode_parameter(p)
        if param is not None:
            params.append(param)

    return ForecastInstant(valid_time=_parse_time(valid_time), parameters=tuple(params))


def _decode_parameter(p: dict) -> NamedParameter | None:
    if not isinstance(p, dict):
        logger.warning("Skipping malformed parameter entry: %r", p)
        return None
    name = p.get("name")
    try:
        values = tuple(float(v) for v in p.get("values", []))
    except (TypeError, ValueError):
        logger.warning("Skipping parameter %r with non-numeric values", name)
        return None
    if not isinstance(name, str):
        logger.warning("Skipping parameter without a name: %r", p)
        return None
    return NamedParameter(name=name, values=values)


def _parse_time(value: str) -> datetime:
    try:
        return parse_utc(value)
    except (TypeError, ValueError) as e:
        raise FeedDecodeError(f"Unparseable timestamp {value!r}") from e
