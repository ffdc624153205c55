"""
Display formatting for decoded weather.

Turns a DecodedReport into the strings a display shows: unit-converted values,
a fixed label/value list, and small helpers for category badges and alert
icons.
"""

from dataclasses import dataclass
from typing import Optional, List, Tuple, Union

from aviation_wx.weather import tokens
from aviation_wx.weather.models import (
    DecodedReport,
    FlightCategory,
    AlertLevel,
    UnitMode,
)
from aviation_wx.weather.parser import SM_TO_METERS

PLACEHOLDER = "—"

DisplayRow = Tuple[str, str]


@dataclass(frozen=True)
class FormattedUnits:
    """Display strings for the unit-dependent fields of a report."""

    wind: str
    visibility: str
    ceiling: str
    pressure: str


def _unit_mode(mode: Union[UnitMode, str]) -> UnitMode:
    if isinstance(mode, UnitMode):
        return mode
    return UnitMode(mode)


def format_visibility(visibility_meters: Optional[int], mode: Union[UnitMode, str]) -> str:
    """
    Visibility for display.

    Metric shows meters. US shows statute miles with one decimal below
    10 sm and none from 10 sm up (16093 m -> "10 sm", 4000 m -> "2.5 sm").
    """
    if visibility_meters is None:
        return PLACEHOLDER
    if _unit_mode(mode) == UnitMode.US:
        miles = visibility_meters / SM_TO_METERS
        if round(miles, 1) >= 10:
            return f"{miles:.0f} sm"
        return f"{miles:.1f} sm"
    return f"{visibility_meters} m"


def format_units(report: DecodedReport, mode: Union[UnitMode, str]) -> FormattedUnits:
    """
    Format wind, visibility, ceiling and pressure in the given unit system.

    Ceiling stays in feet in both modes.

    Args:
        report: Decoded report
        mode: UnitMode or its value ("metric", "us")

    Returns:
        FormattedUnits
    """
    mode = _unit_mode(mode)

    wind = PLACEHOLDER
    if report.wind.raw:
        wind = report.wind.raw.replace("KT", " kt") if mode == UnitMode.US else report.wind.raw

    ceiling = f"{report.ceiling_ft} ft" if report.ceiling_ft is not None else PLACEHOLDER

    pressure = PLACEHOLDER
    if mode == UnitMode.US:
        if report.pressure.inhg is not None:
            pressure = f"{report.pressure.inhg:.2f} inHg"
    elif report.pressure.hpa is not None:
        pressure = f"{report.pressure.hpa} hPa"

    return FormattedUnits(
        wind=wind,
        visibility=format_visibility(report.visibility_meters, mode),
        ceiling=ceiling,
        pressure=pressure,
    )


def format_observation_time(token: Optional[str]) -> str:
    """DDHHMMZ -> "Day DD HH:MMZ"."""
    if not token or not tokens.is_time(token):
        return PLACEHOLDER
    return f"Day {token[0:2]} {token[2:4]}:{token[4:6]}Z"


def _format_celsius(value: Optional[int]) -> str:
    return f"{value if value is not None else PLACEHOLDER}°C"


def display_list(report: DecodedReport, mode: Union[UnitMode, str]) -> List[DisplayRow]:
    """
    Project a decoded report onto the fixed nine-row display list.

    Args:
        report: Decoded report
        mode: UnitMode or its value ("metric", "us")

    Returns:
        List of (label, value) pairs
    """
    units = format_units(report, mode)
    clouds = " ".join(report.clouds) if report.clouds else "None"
    weather = ", ".join(report.weather) if report.weather else "None"
    temp = report.temperature

    return [
        ("Station", report.station),
        ("Observation Time", format_observation_time(report.observation_time)),
        ("Wind", units.wind),
        ("Visibility", units.visibility),
        ("Ceiling", units.ceiling),
        ("Cloud Layers", clouds),
        ("Weather", weather),
        ("Temp / Dew", f"{_format_celsius(temp.celsius)} / {_format_celsius(temp.dewpoint_celsius)}"),
        ("QNH", units.pressure),
    ]


def taf_summary(raw_taf: Optional[str]) -> List[DisplayRow]:
    """Quick overview rows for a raw TAF, empty for empty input."""
    text = (raw_taf or "").strip()
    if not text:
        return []

    def yes_no(found: bool) -> str:
        return "Yes" if found else "No"

    return [
        ("Contains FM", yes_no(" FM" in text)),
        ("Contains TEMPO", yes_no(" TEMPO " in text)),
        ("Contains BECMG", yes_no(" BECMG " in text)),
        ("Length", f"{len(text)} chars"),
    ]


# --- Display helpers ---

_BADGE_CLASSES = {
    FlightCategory.VFR: "badge--vfr",
    FlightCategory.MVFR: "badge--mvfr",
    FlightCategory.IFR: "badge--ifr",
    FlightCategory.LIFR: "badge--lifr",
}


def badge_class(category: Optional[Union[FlightCategory, str]]) -> str:
    """CSS badge class for a flight category."""
    if isinstance(category, str):
        try:
            category = FlightCategory(category)
        except ValueError:
            return "badge--neutral"
    return _BADGE_CLASSES.get(category, "badge--neutral")


def level_emoji(level: Optional[Union[AlertLevel, str]]) -> str:
    """Icon for an alert level."""
    value = level.value if isinstance(level, AlertLevel) else level
    if value == AlertLevel.BAD.value:
        return "⛔"
    if value == AlertLevel.WARN.value:
        return "⚠️"
    return "ℹ️"


def normalize_icao(text: Optional[str]) -> str:
    """Uppercase letters of the input, at most four."""
    return "".join(c for c in (text or "").strip().upper() if "A" <= c <= "Z")[:4]
