"""Fixed-width console rendering of the current-conditions panel and hourly table."""

from collections.abc import Iterable
from datetime import tzinfo

from smhicast.derive.readout import derive_readout
from smhicast.models.common import to_local
from smhicast.models.forecast import DerivedReadout, ForecastSeries
from smhicast.reporting.icons import icon_for, label_for
from smhicast.reporting.text_width import fit, pad_display

NA = "N/A"
HOURLY_ROWS = 12

# Current-conditions panel
PANEL_COLUMN = 29
PANEL_LABEL_WIDTH = 14
PANEL_VALUE_WIDTH = 14
ICON_INDENT = 8
PANEL_TIME_FORMAT = "%a %d %b %H:%M"

# Hourly table: (header, width, align); width excludes the one-space margins
HOURLY_COLUMNS: tuple[tuple[str, int, str], ...] = (
    ("Time", 5, "right"),
    ("Temp", 5, "right"),
    ("Feels like", 10, "right"),
    ("Wind", 10, "right"),
    ("Rain", 6, "right"),
    ("Humidity", 8, "right"),
    ("Pressure", 8, "right"),
    ("Visibility", 10, "right"),
    ("Condition", 18, "left"),
)
HOURLY_TIME_FORMAT = "%H:%M"
HOURLY_TITLE = " Hourly Forecast "


def _fmt(value: float | None, template: str) -> str:
    return NA if value is None else template.format(value)


# --- Current-conditions panel ---


def current_cells(r: DerivedReadout) -> list[tuple[str, str]]:
    """Label/value pairs shown to the right of the icon, top to bottom."""
    wind = NA
    if r.wind_speed is not None and r.wind_direction is not None:
        wind = f"{r.wind_speed:.1f} m/s {r.wind_direction}"
    return [
        ("Temperature:", _fmt(r.temperature, "{:.1f}°C")),
        ("Wind:", wind),
        ("Humidity:", _fmt(r.humidity, "{:.0f}%")),
        ("Pressure:", _fmt(r.pressure, "{:.0f} hPa")),
        ("Visibility:", _fmt(r.visibility, "{:.1f} km")),
    ]


def render_current_panel(r: DerivedReadout, tz: tzinfo | None = None) -> str:
    rule = "─" * PANEL_COLUMN
    when = to_local(r.valid_time, tz).strftime(PANEL_TIME_FORMAT)
    lines = [
        f"┌{rule}┬{rule}┐",
        f"│{fit(' ' + when, PANEL_COLUMN, 'left')}│{' ' * PANEL_COLUMN}│",
        f"├{rule}┼{rule}┤",
    ]
    for icon_line, (label, value) in zip(icon_for(r.condition), current_cells(r)):
        left = pad_display(" " * ICON_INDENT + icon_line, PANEL_COLUMN)
        right = (
            " "
            + fit(label, PANEL_LABEL_WIDTH, "left")
            + fit(value, PANEL_VALUE_WIDTH, "left")
        )
        lines.append(f"│{left}│{right}│")
    lines.append(f"└{rule}┴{rule}┘")
    return "\n".join(lines)


# --- Hourly table ---


def hourly_cells(r: DerivedReadout, tz: tzinfo | None = None) -> list[str]:
    """Unpadded cell text for one hourly row, in column order."""
    if r.wind_speed is None:
        wind = NA
    elif r.wind_direction is None:
        wind = f"{r.wind_speed:.1f}m/s"
    else:
        wind = f"{r.wind_speed:.1f}m/s {r.wind_direction}"
    return [
        to_local(r.valid_time, tz).strftime(HOURLY_TIME_FORMAT),
        _fmt(r.temperature, "{:.1f}°"),
        _fmt(r.apparent_temperature, "{:.1f}°"),
        wind,
        _fmt(r.rainfall, "{:.1f}mm"),
        _fmt(r.humidity, "{:.0f}%"),
        _fmt(r.pressure, "{:.0f}hPa"),
        _fmt(r.visibility, "{:.1f}km"),
        label_for(r.condition),
    ]


def _table_row(cells: list[str]) -> str:
    *plain, condition = cells
    padded = [
        fit(cell, width, align)
        for cell, (_, width, align) in zip(plain, HOURLY_COLUMNS)
    ]
    # Condition labels are pre-padded to display width; len() would undercount the emoji.
    padded.append(condition)
    return "│ " + " │ ".join(padded) + " │"


def _border(left: str, mid: str, right: str) -> str:
    return left + mid.join("─" * (w + 2) for _, w, _ in HOURLY_COLUMNS) + right


def render_hourly_table(
    readouts: Iterable[DerivedReadout], tz: tzinfo | None = None
) -> str:
    """Render at most HOURLY_ROWS readouts as a boxed table."""
    inner = sum(w + 3 for _, w, _ in HOURLY_COLUMNS) - 1
    header = [fit(h, w, a) for h, w, a in HOURLY_COLUMNS]
    lines = [
        f"┌{HOURLY_TITLE:─^{inner}}┐",
        "│ " + " │ ".join(header) + " │",
        _border("├", "┼", "┤"),
    ]
    for n, r in enumerate(readouts):
        if n >= HOURLY_ROWS:
            break
        lines.append(_table_row(hourly_cells(r, tz)))
    lines.append(_border("└", "┴", "┘"))
    return "\n".join(lines)


# --- Full report ---


def render_banner(location_name: str) -> str:
    inner = 2 * PANEL_COLUMN + 1
    title = pad_display(f"Weather for {location_name}", inner, "center")
    return "\n".join([
        f"╔{'═' * inner}╗",
        f"║{title}║",
        f"╚{'═' * inner}╝",
    ])


def render_report(
    series: ForecastSeries, location_name: str, tz: tzinfo | None = None
) -> str:
    """Banner, current-conditions panel and hourly table for a series.

    Raises EmptySeriesError before rendering anything if the series is empty.
    """
    current = derive_readout(series.current)
    readouts = [current] + [derive_readout(i) for i in series.head(HOURLY_ROWS)[1:]]
    return "\n\n".join([
        render_banner(location_name),
        render_current_panel(current, tz),
        render_hourly_table(readouts, tz),
    ])
