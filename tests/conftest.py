import pytest

from aviation_wx.weather.parser import WeatherParser


@pytest.fixture
def kjfk_metar() -> str:
    """US METAR with gusts, statute mile visibility and no ceiling."""
    return "KJFK 121851Z 18015G25KT 10SM FEW250 22/18 A3000"


@pytest.fixture
def lfpg_metar() -> str:
    """European METAR in fog with vertical visibility."""
    return "LFPG 010000Z 00000KT 0400 FG VV002 01/M01 Q1015"


@pytest.fixture
def kjfk_taf() -> str:
    return "TAF KJFK 121720Z 1218/1318 18010KT P6SM FM1300 22015KT TEMPO 1315/1318 4SM SHRA"


@pytest.fixture
def kjfk_report(kjfk_metar):
    return WeatherParser.parse_metar(kjfk_metar)


@pytest.fixture
def lfpg_report(lfpg_metar):
    return WeatherParser.parse_metar(lfpg_metar)
