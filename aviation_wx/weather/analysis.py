"""Weather analysis: flight categories and hazard alerts."""

import math
from typing import Optional, List, Tuple

from aviation_wx.weather.models import (
    DecodedReport,
    FlightCategory,
    Alert,
    AlertLevel,
)

# Ceiling limits in feet, visibility limits in meters
LIFR_CEILING_FT = 500
LIFR_VISIBILITY_M = 1600
IFR_CEILING_FT = 1000
IFR_VISIBILITY_M = 4800
MVFR_CEILING_FT = 3000
MVFR_VISIBILITY_M = 8000

GUST_ALERT_KT = 25
WIND_ALERT_KT = 20

# Substrings of the raw report that raise an alert, checked in this order
_PHENOMENON_ALERTS: Tuple[Tuple[str, AlertLevel, str], ...] = (
    ("TS", AlertLevel.BAD, "Thunderstorm risk (TS)"),
    ("FG", AlertLevel.BAD, "Fog (FG)"),
    ("BR", AlertLevel.WARN, "Mist (BR)"),
    ("HZ", AlertLevel.WARN, "Haze (HZ)"),
    ("RA", AlertLevel.INFO, "Rain present"),
)


class WeatherAnalyzer:
    """
    Aviation weather analysis functions.

    All methods are static: pure functions with no state.
    """

    @staticmethod
    def flight_category(
        ceiling_ft: Optional[int],
        visibility_meters: Optional[int],
    ) -> FlightCategory:
        """
        Determine flight category from ceiling and visibility.

        Thresholds are checked from worst to best and the first match wins:
            LIFR:  ceiling < 500 ft   or  visibility < 1600 m
            IFR:   ceiling < 1000 ft  or  visibility < 4800 m
            MVFR:  ceiling <= 3000 ft or  visibility <= 8000 m
            VFR:   otherwise

        A missing value never makes the category worse than VFR on its own.

        Args:
            ceiling_ft: Ceiling in feet, or None if no ceiling
            visibility_meters: Visibility in meters, or None if not reported

        Returns:
            FlightCategory
        """
        ceiling = ceiling_ft if ceiling_ft is not None else math.inf
        visibility = visibility_meters if visibility_meters is not None else math.inf

        if ceiling < LIFR_CEILING_FT or visibility < LIFR_VISIBILITY_M:
            return FlightCategory.LIFR
        if ceiling < IFR_CEILING_FT or visibility < IFR_VISIBILITY_M:
            return FlightCategory.IFR
        if ceiling <= MVFR_CEILING_FT or visibility <= MVFR_VISIBILITY_M:
            return FlightCategory.MVFR
        return FlightCategory.VFR

    @staticmethod
    def report_category(report: DecodedReport) -> FlightCategory:
        """Flight category of a decoded report."""
        return WeatherAnalyzer.flight_category(report.ceiling_ft, report.visibility_meters)

    @staticmethod
    def alerts(report: Optional[DecodedReport]) -> List[Alert]:
        """
        Derive hazard alerts from a decoded report.

        Every rule is evaluated, in a fixed order; the result keeps that
        order rather than sorting by severity. Phenomenon rules look for
        substrings anywhere in the raw text, so "TSRA" raises both the
        thunderstorm and the rain alert.

        Args:
            report: Decoded report

        Returns:
            List of alerts in rule order
        """
        out: List[Alert] = []
        if report is None:
            return out

        gust = report.wind.gust_kt
        if gust is not None and gust >= GUST_ALERT_KT:
            out.append(Alert(AlertLevel.WARN, f"Gusts {gust} kt"))

        speed = report.wind.speed_kt
        if speed is not None and speed >= WIND_ALERT_KT:
            out.append(Alert(AlertLevel.INFO, f"Wind {speed} kt"))

        vis = report.visibility_meters
        if vis is not None:
            if vis < LIFR_VISIBILITY_M:
                out.append(Alert(AlertLevel.BAD, f"Very low visibility ({vis} m)"))
            elif vis < IFR_VISIBILITY_M:
                out.append(Alert(AlertLevel.WARN, f"Low visibility ({vis} m)"))

        ceiling = report.ceiling_ft
        if ceiling is not None:
            if ceiling < LIFR_CEILING_FT:
                out.append(Alert(AlertLevel.BAD, f"Ceiling very low ({ceiling} ft)"))
            elif ceiling < IFR_CEILING_FT:
                out.append(Alert(AlertLevel.WARN, f"Ceiling low ({ceiling} ft)"))

        for code, level, text in _PHENOMENON_ALERTS:
            if code in report.raw_text:
                out.append(Alert(level, text))

        return out


def classify(ceiling_ft: Optional[int], visibility_meters: Optional[int]) -> FlightCategory:
    """Flight category for a ceiling/visibility pair. See WeatherAnalyzer.flight_category."""
    return WeatherAnalyzer.flight_category(ceiling_ft, visibility_meters)


def derive_alerts(report: Optional[DecodedReport]) -> List[Alert]:
    """Hazard alerts for a decoded report. See WeatherAnalyzer.alerts."""
    return WeatherAnalyzer.alerts(report)
