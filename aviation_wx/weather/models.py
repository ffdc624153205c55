"""Weather report data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, List, Tuple, Dict, Any


STATION_PLACEHOLDER = "----"


class FlightCategory(Enum):
    """
    Flight category based on ceiling and visibility.

    Ordered from worst to best: LIFR < IFR < MVFR < VFR.

    Thresholds (ceiling OR visibility, first match wins):
        LIFR:  ceiling < 500 ft   or  visibility < 1600 m
        IFR:   ceiling < 1000 ft  or  visibility < 4800 m
        MVFR:  ceiling <= 3000 ft or  visibility <= 8000 m
        VFR:   otherwise
    """

    LIFR = "LIFR"
    IFR = "IFR"
    MVFR = "MVFR"
    VFR = "VFR"

    @property
    def order(self) -> int:
        """Numeric ordering from worst (0) to best (3)."""
        return _CATEGORY_ORDER[self]

    def __lt__(self, other: 'FlightCategory') -> bool:
        if not isinstance(other, FlightCategory):
            return NotImplemented
        return self.order < other.order

    def __le__(self, other: 'FlightCategory') -> bool:
        if not isinstance(other, FlightCategory):
            return NotImplemented
        return self.order <= other.order

    def __gt__(self, other: 'FlightCategory') -> bool:
        if not isinstance(other, FlightCategory):
            return NotImplemented
        return self.order > other.order

    def __ge__(self, other: 'FlightCategory') -> bool:
        if not isinstance(other, FlightCategory):
            return NotImplemented
        return self.order >= other.order


_CATEGORY_ORDER = {
    FlightCategory.LIFR: 0,
    FlightCategory.IFR: 1,
    FlightCategory.MVFR: 2,
    FlightCategory.VFR: 3,
}


class AlertLevel(Enum):
    """Severity of a hazard alert."""

    INFO = "info"
    WARN = "warn"
    BAD = "bad"


class UnitMode(Enum):
    """Unit system used for display values."""

    METRIC = "metric"
    US = "us"


@dataclass(frozen=True)
class Alert:
    """A leveled hazard alert derived from a report."""

    level: AlertLevel
    text: str

    def to_dict(self) -> dict:
        return {'level': self.level.value, 'text': self.text}


@dataclass(frozen=True)
class Wind:
    """
    Decoded wind group.

    Direction stays a string so that variable wind ("VRB") is kept as reported.
    """

    direction: Optional[str] = None
    speed_kt: Optional[int] = None
    gust_kt: Optional[int] = None
    raw: Optional[str] = None

    @classmethod
    def empty(cls) -> 'Wind':
        return cls()

    @property
    def is_variable(self) -> bool:
        return self.direction == "VRB"


@dataclass(frozen=True)
class Pressure:
    """Decoded altimeter setting, in both hectopascals and inches of mercury."""

    hpa: Optional[int] = None
    inhg: Optional[float] = None
    raw: Optional[str] = None

    @classmethod
    def empty(cls) -> 'Pressure':
        return cls()


@dataclass(frozen=True)
class Temperature:
    """Decoded temperature/dewpoint group in degrees Celsius."""

    celsius: Optional[int] = None
    dewpoint_celsius: Optional[int] = None
    raw: Optional[str] = None

    @classmethod
    def empty(cls) -> 'Temperature':
        return cls()


@dataclass(frozen=True)
class DecodedReport:
    """
    Decoded METAR observation.

    Attributes:
        station: Station identifier (first token, at most 4 characters)
        observation_time: Raw DDHHMMZ token
        wind: Decoded wind group
        visibility_meters: Prevailing visibility in meters
        clouds: Raw cloud layer tokens in order of appearance
        ceiling_ft: Lowest BKN/OVC layer in feet
        pressure: Decoded altimeter setting
        temperature: Decoded temperature and dewpoint
        weather: Human-readable weather phenomena in order of appearance
        raw_text: Trimmed original report text
    """

    station: str = STATION_PLACEHOLDER
    observation_time: Optional[str] = None
    wind: Wind = field(default_factory=Wind)
    visibility_meters: Optional[int] = None
    clouds: Tuple[str, ...] = ()
    ceiling_ft: Optional[int] = None
    pressure: Pressure = field(default_factory=Pressure)
    temperature: Temperature = field(default_factory=Temperature)
    weather: Tuple[str, ...] = ()
    raw_text: str = ""

    @classmethod
    def from_metar(cls, raw_text: Optional[str]) -> 'DecodedReport':
        """
        Decode a raw METAR string.

        Args:
            raw_text: Raw METAR text

        Returns:
            DecodedReport (never fails, unknown tokens are ignored)
        """
        from aviation_wx.weather.parser import WeatherParser
        return WeatherParser.parse_metar(raw_text)

    @property
    def flight_category(self) -> FlightCategory:
        from aviation_wx.weather.analysis import WeatherAnalyzer
        return WeatherAnalyzer.report_category(self)

    def alerts(self) -> List[Alert]:
        from aviation_wx.weather.analysis import WeatherAnalyzer
        return WeatherAnalyzer.alerts(self)

    def observation_datetime(self, reference: Optional[datetime] = None) -> Optional[datetime]:
        """
        Resolve the observation time token to a UTC datetime.

        Args:
            reference: Datetime the report is assumed to be recent to
                       (defaults to now)

        Returns:
            Timezone-aware datetime or None if the token is missing or invalid
        """
        from aviation_wx.weather.parser import WeatherParser
        return WeatherParser.resolve_day_time(self.observation_time, reference)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON export."""
        return {
            'station': self.station,
            'observation_time': self.observation_time,
            'wind_direction': self.wind.direction,
            'wind_speed_kt': self.wind.speed_kt,
            'wind_gust_kt': self.wind.gust_kt,
            'wind_raw': self.wind.raw,
            'visibility_meters': self.visibility_meters,
            'clouds': list(self.clouds),
            'ceiling_ft': self.ceiling_ft,
            'pressure_hpa': self.pressure.hpa,
            'pressure_inhg': self.pressure.inhg,
            'pressure_raw': self.pressure.raw,
            'temperature': self.temperature.celsius,
            'dewpoint': self.temperature.dewpoint_celsius,
            'temperature_raw': self.temperature.raw,
            'weather': list(self.weather),
            'raw_text': self.raw_text,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DecodedReport':
        """Create DecodedReport from dictionary."""
        wind = Wind.empty()
        if data.get('wind_raw'):
            wind = Wind(
                direction=data.get('wind_direction'),
                speed_kt=data.get('wind_speed_kt'),
                gust_kt=data.get('wind_gust_kt'),
                raw=data['wind_raw'],
            )

        pressure = Pressure.empty()
        if data.get('pressure_raw'):
            pressure = Pressure(
                hpa=data.get('pressure_hpa'),
                inhg=data.get('pressure_inhg'),
                raw=data['pressure_raw'],
            )

        temperature = Temperature.empty()
        if data.get('temperature_raw'):
            temperature = Temperature(
                celsius=data.get('temperature'),
                dewpoint_celsius=data.get('dewpoint'),
                raw=data['temperature_raw'],
            )

        return cls(
            station=data.get('station', STATION_PLACEHOLDER),
            observation_time=data.get('observation_time'),
            wind=wind,
            visibility_meters=data.get('visibility_meters'),
            clouds=tuple(data.get('clouds', [])),
            ceiling_ft=data.get('ceiling_ft'),
            pressure=pressure,
            temperature=temperature,
            weather=tuple(data.get('weather', [])),
            raw_text=data.get('raw_text', ''),
        )

    def __repr__(self) -> str:
        return f"DecodedReport({self.station} {self.raw_text[:40]!r})"


class TafSegmentTag(Enum):
    """Kind of TAF segment."""

    HEADER = "HEADER"
    BASE = "BASE"
    FM = "FM"
    TEMPO = "TEMPO"
    BECMG = "BECMG"
    PROB30 = "PROB30"
    PROB40 = "PROB40"


@dataclass(frozen=True)
class TafSegment:
    """
    One section of a TAF: the header or a change group.

    The tag is kept as reported text (e.g. "TEMPO", "PROB30"); use
    ``tag_kind`` for the enum value when the tag is a known one.
    """

    tag: str
    time: str = ""
    body: str = ""
    header: str = ""

    @property
    def tag_kind(self) -> Optional[TafSegmentTag]:
        try:
            return TafSegmentTag(self.tag)
        except ValueError:
            return None

    def to_dict(self) -> dict:
        return {
            'tag': self.tag,
            'time': self.time,
            'body': self.body,
            'header': self.header,
        }
