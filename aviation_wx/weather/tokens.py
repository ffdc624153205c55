"""
Token classification for METAR reports.

Each predicate looks at a single whitespace-delimited token and says whether
it plays a given role in the report. Predicates never raise.
"""

import re
from typing import Callable, Iterable, List, Optional

TIME_PATTERN = re.compile(r'^\d{6}Z$')
WIND_PATTERN = re.compile(r'^(VRB|\d{3})(\d{2,3})(?:G(\d{2,3}))?KT$')
PRESSURE_PATTERN = re.compile(r'^(Q\d{4}|A\d{4})$')
TEMPERATURE_PATTERN = re.compile(r'^(M?)(\d{2})/(M?)(\d{2})$')
VISIBILITY_METERS_PATTERN = re.compile(r'^\d{4}$')
CLOUD_PATTERN = re.compile(r'^(FEW|SCT|BKN|OVC)(\d{3})')
WEATHER_PATTERN = re.compile(r'^[+-]?(TS|RA|FG|BR|HZ|SHRA)$')

CEILING_COVERS = ('BKN', 'OVC')

# Weather code to description
WEATHER_DESCRIPTIONS = {
    '-RA': 'Light rain',
    'RA': 'Rain',
    '+RA': 'Heavy rain',
    'TS': 'Thunderstorm',
    'TSRA': 'Thunderstorm with rain',
    'BR': 'Mist',
    'FG': 'Fog',
    'HZ': 'Haze',
    '-SHRA': 'Light rain showers',
    'SHRA': 'Rain showers',
    '+SHRA': 'Heavy rain showers',
}

TokenPredicate = Callable[[str], bool]


def is_time(token: str) -> bool:
    return bool(TIME_PATTERN.match(token))


def is_wind(token: str) -> bool:
    return bool(WIND_PATTERN.match(token))


def is_pressure(token: str) -> bool:
    return bool(PRESSURE_PATTERN.match(token))


def is_temperature(token: str) -> bool:
    return bool(TEMPERATURE_PATTERN.match(token))


def is_visibility(token: str) -> bool:
    """Four digit meters (e.g. "0400") or statute miles (e.g. "10SM", "1/2SM")."""
    return bool(VISIBILITY_METERS_PATTERN.match(token)) or token.endswith('SM')


def is_cloud_layer(token: str) -> bool:
    """Cloud cover and height, e.g. "BKN008" or "FEW020CB"."""
    return bool(CLOUD_PATTERN.match(token))


def is_weather(token: str) -> bool:
    return token in WEATHER_DESCRIPTIONS or bool(WEATHER_PATTERN.match(token))


def describe_weather(code: str) -> str:
    """
    Human-readable description of a weather code.

    Unknown codes are returned unchanged.
    """
    return WEATHER_DESCRIPTIONS.get(code, code)


def first_match(tokens: Iterable[str], predicate: TokenPredicate) -> Optional[str]:
    """Return the first token satisfying the predicate, or None."""
    for token in tokens:
        if predicate(token):
            return token
    return None


def all_matches(tokens: Iterable[str], predicate: TokenPredicate) -> List[str]:
    """Return every token satisfying the predicate, in order."""
    return [token for token in tokens if predicate(token)]
