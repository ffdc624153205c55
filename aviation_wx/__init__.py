"""
Aviation weather decoding library.

This package decodes METAR observations and TAF forecasts into structured
data and derives what a pilot-facing display needs from them.

The main public API includes:
- DecodedReport: Decoded METAR observation
- WeatherParser: METAR decoder
- WeatherAnalyzer: Flight category and hazard alerts
- TafSegmenter: TAF change group splitter
"""

__version__ = '0.1.0'
__all__ = [
    'DecodedReport',
    'WeatherParser',
    'WeatherAnalyzer',
    'TafSegmenter',
]

from aviation_wx.weather import DecodedReport, WeatherParser, WeatherAnalyzer, TafSegmenter
