"""METAR decoder built on the token classifier."""

import re
import math
import logging
from datetime import datetime
from typing import Optional, List

from dateutil import tz
from dateutil.relativedelta import relativedelta

from aviation_wx.weather import tokens
from aviation_wx.weather.models import (
    DecodedReport,
    Wind,
    Pressure,
    Temperature,
    STATION_PLACEHOLDER,
)

logger = logging.getLogger(__name__)

# Statute miles to meters conversion
SM_TO_METERS = 1609.34
# Hectopascals to inches of mercury conversion
HPA_TO_INHG = 0.0295299830714

# Numeric part of a statute mile visibility, P = more than, M = less than
_STATUTE_MILES_PATTERN = re.compile(r"^[PM]?(\d+)(?:/(\d+))?$")
# Whole part of a mixed number split across two tokens, as in "1 1/2SM"
_WHOLE_MILES_PATTERN = re.compile(r"^\d{1,2}$")


class WeatherParser:
    """
    Decode METAR reports into DecodedReport objects.

    Decoding never fails: tokens that are not recognised, or that look right
    but do not decode, are left out of the report.

    Example:
        report = WeatherParser.parse_metar(
            "KJFK 121851Z 18015G25KT 10SM FEW250 22/18 A3000"
        )
        report.wind.gust_kt  # 25
    """

    @classmethod
    def parse_metar(cls, raw_text: Optional[str]) -> DecodedReport:
        """
        Decode a METAR string.

        Args:
            raw_text: Raw METAR text, None is treated as empty

        Returns:
            DecodedReport
        """
        text = (raw_text or "").strip()
        parts = text.split()

        station = parts[0][:4] if parts else STATION_PLACEHOLDER
        clouds = tokens.all_matches(parts, tokens.is_cloud_layer)

        return DecodedReport(
            station=station,
            observation_time=tokens.first_match(parts, tokens.is_time),
            wind=cls._decode_wind(tokens.first_match(parts, tokens.is_wind)),
            visibility_meters=cls._visibility(parts),
            clouds=tuple(clouds),
            ceiling_ft=cls._ceiling(clouds),
            pressure=cls._decode_pressure(tokens.first_match(parts, tokens.is_pressure)),
            temperature=cls._decode_temperature(tokens.first_match(parts, tokens.is_temperature)),
            weather=tuple(
                tokens.describe_weather(code)
                for code in tokens.all_matches(parts, tokens.is_weather)
            ),
            raw_text=text,
        )

    # --- Field decoders ---

    @classmethod
    def _decode_wind(cls, token: Optional[str]) -> Wind:
        if token is None:
            return Wind.empty()

        match = tokens.WIND_PATTERN.match(token)
        if not match:
            return Wind.empty()

        direction, speed, gust = match.groups()
        return Wind(
            direction=direction,
            speed_kt=int(speed),
            gust_kt=int(gust) if gust else None,
            raw=token,
        )

    @classmethod
    def _visibility(cls, parts: List[str]) -> Optional[int]:
        """Visibility from the first visibility token and the token before it."""
        for i, token in enumerate(parts):
            if tokens.is_visibility(token):
                previous = parts[i - 1] if i > 0 else None
                return cls._decode_visibility(token, previous)
        return None

    @classmethod
    def _decode_visibility(cls, token: Optional[str], previous: Optional[str] = None) -> Optional[int]:
        """
        Visibility in meters.

        "0400" is meters, "10SM", "1/2SM" and "P6SM" are statute miles.
        A fraction preceded by a bare whole number ("1 1/2SM") is a mixed
        number.
        """
        if token is None:
            return None

        if tokens.VISIBILITY_METERS_PATTERN.match(token):
            return int(token)

        miles = cls._parse_statute_miles(token[:-2])
        if miles is None:
            logger.debug("Ignoring visibility token: %s", token)
            return None

        if "/" in token and previous is not None and _WHOLE_MILES_PATTERN.match(previous):
            miles += int(previous)

        return _round_half_up(miles * SM_TO_METERS)

    @staticmethod
    def _parse_statute_miles(text: str) -> Optional[float]:
        """
        Parse the numeric part of a statute mile visibility.

        Handles: "10", "1/2", "P6" (more than) and "M1/4" (less than).
        """
        match = _STATUTE_MILES_PATTERN.match(text)
        if not match:
            return None

        num, den = match.groups()
        if den is None:
            return float(num)
        if int(den) == 0:
            return None
        return int(num) / int(den)

    @classmethod
    def _ceiling(cls, clouds: List[str]) -> Optional[int]:
        """
        Ceiling from cloud layers.

        Ceiling is the lowest BKN (broken) or OVC (overcast) layer.

        Returns:
            Ceiling in feet, or None if no ceiling
        """
        ceiling = None
        for layer in clouds:
            match = tokens.CLOUD_PATTERN.match(layer)
            if not match or match.group(1) not in tokens.CEILING_COVERS:
                continue
            height = int(match.group(2)) * 100
            if ceiling is None or height < ceiling:
                ceiling = height
        return ceiling

    @classmethod
    def _decode_pressure(cls, token: Optional[str]) -> Pressure:
        if token is None or not tokens.PRESSURE_PATTERN.match(token):
            return Pressure.empty()

        value = int(token[1:])
        if token.startswith("Q"):
            return Pressure(
                hpa=value,
                inhg=round(value * HPA_TO_INHG, 2),
                raw=token,
            )

        inhg = value / 100
        return Pressure(
            hpa=_round_half_up(inhg / HPA_TO_INHG),
            inhg=round(inhg, 2),
            raw=token,
        )

    @classmethod
    def _decode_temperature(cls, token: Optional[str]) -> Temperature:
        if token is None:
            return Temperature.empty()

        match = tokens.TEMPERATURE_PATTERN.match(token)
        if not match:
            return Temperature.empty()

        temp_sign, temp, dew_sign, dew = match.groups()
        return Temperature(
            celsius=-int(temp) if temp_sign else int(temp),
            dewpoint_celsius=-int(dew) if dew_sign else int(dew),
            raw=token,
        )

    # --- Time helpers ---

    @staticmethod
    def resolve_day_time(
        token: Optional[str],
        reference: Optional[datetime] = None,
    ) -> Optional[datetime]:
        """
        Resolve a DDHHMMZ token to a UTC datetime.

        The token only carries day of month, so the month and year are taken
        from the reference. A day after the reference day is assumed to be
        in the previous month.

        Args:
            token: DDHHMMZ token
            reference: Datetime the report is recent to (defaults to now).
                       Naive datetimes are taken as UTC.

        Returns:
            Timezone-aware datetime or None if the token can't be resolved
        """
        if not token or not tokens.is_time(token):
            return None

        if reference is None:
            reference = datetime.now(tz=tz.UTC)
        elif reference.tzinfo is None:
            reference = reference.replace(tzinfo=tz.UTC)
        else:
            reference = reference.astimezone(tz.UTC)

        day, hour, minute = int(token[0:2]), int(token[2:4]), int(token[4:6])

        month_start = reference.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        if day > reference.day:
            month_start = month_start - relativedelta(months=1)

        try:
            return month_start.replace(day=day, hour=hour, minute=minute)
        except ValueError:
            logger.debug("Observation time %s invalid for %s", token, month_start.strftime("%Y-%m"))
            return None


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def decode(raw_text: Optional[str]) -> DecodedReport:
    """Decode a raw METAR string. See WeatherParser.parse_metar."""
    return WeatherParser.parse_metar(raw_text)
