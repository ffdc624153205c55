"""Tests for METAR token classification."""

import pytest

from aviation_wx.weather import tokens


class TestPredicates:
    """Test single-token predicates."""

    @pytest.mark.parametrize("token,expected", [
        ("121851Z", True),
        ("010000Z", True),
        ("1218Z", False),
        ("121851", False),
        ("121851ZZ", False),
    ])
    def test_time(self, token, expected):
        assert tokens.is_time(token) is expected

    @pytest.mark.parametrize("token,expected", [
        ("18015KT", True),
        ("18015G25KT", True),
        ("VRB03KT", True),
        ("270100G120KT", True),
        ("18015MPS", False),
        ("1805KT", False),
        ("VRBKT", False),
    ])
    def test_wind(self, token, expected):
        assert tokens.is_wind(token) is expected

    @pytest.mark.parametrize("token,expected", [
        ("Q1013", True),
        ("A2992", True),
        ("Q101", False),
        ("A29920", False),
        ("QNH1013", False),
    ])
    def test_pressure(self, token, expected):
        assert tokens.is_pressure(token) is expected

    @pytest.mark.parametrize("token,expected", [
        ("22/18", True),
        ("01/M01", True),
        ("M05/M10", True),
        ("1218/1318", False),
        ("1/2SM", False),
    ])
    def test_temperature(self, token, expected):
        assert tokens.is_temperature(token) is expected

    @pytest.mark.parametrize("token,expected", [
        ("0400", True),
        ("9999", True),
        ("10SM", True),
        ("1/2SM", True),
        ("P6SM", True),
        ("400", False),
        ("A2992", False),
    ])
    def test_visibility(self, token, expected):
        assert tokens.is_visibility(token) is expected

    @pytest.mark.parametrize("token,expected", [
        ("FEW250", True),
        ("BKN008", True),
        ("OVC020CB", True),
        ("SCT030TCU", True),
        ("VV002", False),
        ("SKC", False),
        ("BKN", False),
    ])
    def test_cloud_layer(self, token, expected):
        assert tokens.is_cloud_layer(token) is expected

    @pytest.mark.parametrize("token,expected", [
        ("RA", True),
        ("-RA", True),
        ("TSRA", True),
        ("+SHRA", True),
        ("+TS", True),
        ("-FG", True),
        ("-TSRA", False),
        ("SN", False),
        ("RAIN", False),
    ])
    def test_weather(self, token, expected):
        assert tokens.is_weather(token) is expected


class TestDescribeWeather:
    """Test weather code descriptions."""

    def test_known_codes(self):
        assert tokens.describe_weather("-RA") == "Light rain"
        assert tokens.describe_weather("TSRA") == "Thunderstorm with rain"
        assert tokens.describe_weather("FG") == "Fog"

    def test_unknown_code_returned_verbatim(self):
        assert tokens.describe_weather("+TS") == "+TS"


class TestMatching:
    """Test first/all match helpers."""

    def test_first_match(self):
        parts = ["KJFK", "0400", "10SM", "3000"]
        assert tokens.first_match(parts, tokens.is_visibility) == "0400"

    def test_first_match_none(self):
        assert tokens.first_match(["KJFK", "CAVOK"], tokens.is_wind) is None

    def test_all_matches_keeps_order(self):
        parts = ["OVC015", "KJFK", "BKN008", "FEW003"]
        assert tokens.all_matches(parts, tokens.is_cloud_layer) == ["OVC015", "BKN008", "FEW003"]
