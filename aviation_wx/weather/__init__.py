"""
Weather module for decoding and presenting METAR/TAF reports.

Provides:
- DecodedReport: Decoded METAR data (Wind, Pressure, Temperature groups)
- FlightCategory: VFR/MVFR/IFR/LIFR enum with ordering
- Alert, AlertLevel: Leveled hazard alerts
- UnitMode: metric/us display units
- TafSegment: Header or change group of a TAF
- WeatherParser: Decode raw METAR text
- WeatherAnalyzer: Flight categories and alerts
- TafSegmenter: Split raw TAF text into change groups

Example:
    from aviation_wx.weather import DecodedReport, FlightCategory

    report = DecodedReport.from_metar(
        "LFPG 211230Z 24015G25KT 9999 FEW040 18/09 Q1015"
    )
    print(report.flight_category)  # FlightCategory.VFR
    print(report.alerts())  # [Alert(level=AlertLevel.WARN, text='Gusts 25 kt')]
"""

from aviation_wx.weather.models import (
    DecodedReport,
    Wind,
    Pressure,
    Temperature,
    FlightCategory,
    Alert,
    AlertLevel,
    UnitMode,
    TafSegment,
    TafSegmentTag,
)
from aviation_wx.weather.parser import WeatherParser, decode
from aviation_wx.weather.analysis import WeatherAnalyzer, classify, derive_alerts
from aviation_wx.weather.formatting import (
    FormattedUnits,
    format_units,
    format_observation_time,
    display_list,
    taf_summary,
    badge_class,
    level_emoji,
    normalize_icao,
)
from aviation_wx.weather.taf import TafSegmenter, segment_taf

__all__ = [
    'DecodedReport',
    'Wind',
    'Pressure',
    'Temperature',
    'FlightCategory',
    'Alert',
    'AlertLevel',
    'UnitMode',
    'TafSegment',
    'TafSegmentTag',
    'WeatherParser',
    'decode',
    'WeatherAnalyzer',
    'classify',
    'derive_alerts',
    'FormattedUnits',
    'format_units',
    'format_observation_time',
    'display_list',
    'taf_summary',
    'badge_class',
    'level_emoji',
    'normalize_icao',
    'TafSegmenter',
    'segment_taf',
]
