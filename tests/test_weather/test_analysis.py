"""Tests for weather analysis: flight categories and alerts."""

import pytest

from aviation_wx.weather.models import (
    DecodedReport,
    Wind,
    FlightCategory,
    Alert,
    AlertLevel,
)
from aviation_wx.weather.parser import WeatherParser
from aviation_wx.weather.analysis import WeatherAnalyzer, classify, derive_alerts


class TestFlightCategory:
    """Test flight category determination."""

    def test_vfr_no_data(self):
        assert WeatherAnalyzer.flight_category(None, None) == FlightCategory.VFR

    def test_vfr_good_conditions(self):
        assert WeatherAnalyzer.flight_category(5000, 9999) == FlightCategory.VFR

    def test_mvfr_visibility(self):
        assert WeatherAnalyzer.flight_category(None, 6000) == FlightCategory.MVFR

    def test_mvfr_ceiling(self):
        assert WeatherAnalyzer.flight_category(2000, 9999) == FlightCategory.MVFR

    def test_ifr_visibility(self):
        assert WeatherAnalyzer.flight_category(5000, 3000) == FlightCategory.IFR

    def test_ifr_ceiling(self):
        assert WeatherAnalyzer.flight_category(800, None) == FlightCategory.IFR

    def test_lifr_visibility(self):
        assert WeatherAnalyzer.flight_category(5000, 800) == FlightCategory.LIFR

    def test_lifr_ceiling_not_upgraded_by_visibility(self):
        assert WeatherAnalyzer.flight_category(200, 9999) == FlightCategory.LIFR

    @pytest.mark.parametrize("ceiling,expected", [
        (499, FlightCategory.LIFR),
        (500, FlightCategory.IFR),
        (999, FlightCategory.IFR),
        (1000, FlightCategory.MVFR),
        (3000, FlightCategory.MVFR),
        (3001, FlightCategory.VFR),
    ])
    def test_ceiling_boundaries(self, ceiling, expected):
        assert WeatherAnalyzer.flight_category(ceiling, None) == expected

    @pytest.mark.parametrize("visibility,expected", [
        (1599, FlightCategory.LIFR),
        (1600, FlightCategory.IFR),
        (4799, FlightCategory.IFR),
        (4800, FlightCategory.MVFR),
        (8000, FlightCategory.MVFR),
        (8001, FlightCategory.VFR),
    ])
    def test_visibility_boundaries(self, visibility, expected):
        assert WeatherAnalyzer.flight_category(None, visibility) == expected

    def test_monotonic_in_ceiling_and_visibility(self):
        ceilings = [None, 5000, 3001, 3000, 2000, 1000, 999, 500, 499, 100, 0]
        visibilities = [None, 9999, 8001, 8000, 4800, 4799, 1600, 1599, 0]
        for vis in visibilities:
            categories = [WeatherAnalyzer.flight_category(c, vis) for c in ceilings]
            assert all(a >= b for a, b in zip(categories, categories[1:]))
        for ceiling in ceilings:
            categories = [WeatherAnalyzer.flight_category(ceiling, v) for v in visibilities]
            assert all(a >= b for a, b in zip(categories, categories[1:]))

    def test_report_category(self, kjfk_report, lfpg_report):
        assert WeatherAnalyzer.report_category(kjfk_report) == FlightCategory.VFR
        assert WeatherAnalyzer.report_category(lfpg_report) == FlightCategory.LIFR
        assert lfpg_report.flight_category == FlightCategory.LIFR

    def test_classify_alias(self):
        assert classify(800, 9999) == FlightCategory.IFR


class TestAlerts:
    """Test hazard alert rules."""

    def test_gusty_us_metar(self, kjfk_report):
        # Sustained 15 kt is below the wind alert threshold
        assert WeatherAnalyzer.alerts(kjfk_report) == [
            Alert(AlertLevel.WARN, "Gusts 25 kt"),
        ]

    def test_fog_metar(self, lfpg_report):
        assert WeatherAnalyzer.alerts(lfpg_report) == [
            Alert(AlertLevel.BAD, "Very low visibility (400 m)"),
            Alert(AlertLevel.BAD, "Fog (FG)"),
        ]

    def test_strong_wind(self):
        report = DecodedReport(wind=Wind(direction="270", speed_kt=20, gust_kt=None, raw="27020KT"))
        assert derive_alerts(report) == [Alert(AlertLevel.INFO, "Wind 20 kt")]

    def test_gust_below_threshold(self):
        report = DecodedReport(wind=Wind(direction="270", speed_kt=12, gust_kt=24, raw="27012G24KT"))
        assert derive_alerts(report) == []

    def test_gust_and_wind_order(self):
        report = WeatherParser.parse_metar("EDDF 211220Z 27030G45KT 9999 Q1005")
        assert [a.text for a in report.alerts()] == ["Gusts 45 kt", "Wind 30 kt"]

    def test_low_visibility_and_ceiling(self):
        report = WeatherParser.parse_metar("EGLL 211300Z 09012KT 3000 RA BKN008 OVC015 10/09 Q1008")
        assert WeatherAnalyzer.alerts(report) == [
            Alert(AlertLevel.WARN, "Low visibility (3000 m)"),
            Alert(AlertLevel.WARN, "Ceiling low (800 ft)"),
            Alert(AlertLevel.INFO, "Rain present"),
        ]

    def test_very_low_ceiling(self):
        report = WeatherParser.parse_metar("EGLL 211300Z 09012KT 9999 OVC004 10/09 Q1008")
        assert WeatherAnalyzer.alerts(report) == [
            Alert(AlertLevel.BAD, "Ceiling very low (400 ft)"),
        ]

    def test_thunderstorm_with_rain_raises_both(self):
        report = WeatherParser.parse_metar("LFMN 211300Z 18010KT 9999 TSRA SCT030 20/15 Q1010")
        assert WeatherAnalyzer.alerts(report) == [
            Alert(AlertLevel.BAD, "Thunderstorm risk (TS)"),
            Alert(AlertLevel.INFO, "Rain present"),
        ]

    def test_substring_rules_fire_in_fixed_order(self):
        report = WeatherParser.parse_metar("LFMN 211300Z 18010KT 9999 RA HZ BR FG TS 20/15 Q1010")
        assert [a.text for a in WeatherAnalyzer.alerts(report)] == [
            "Thunderstorm risk (TS)",
            "Fog (FG)",
            "Mist (BR)",
            "Haze (HZ)",
            "Rain present",
        ]

    def test_substring_rules_use_raw_text(self):
        # Unclassified tokens still count
        report = WeatherParser.parse_metar("LFMN 211300Z 18010KT 9999 VCTS 20/15 Q1010")
        assert report.weather == ()
        assert WeatherAnalyzer.alerts(report) == [
            Alert(AlertLevel.BAD, "Thunderstorm risk (TS)"),
        ]

    def test_no_report(self):
        assert WeatherAnalyzer.alerts(None) == []

    def test_empty_report(self):
        assert WeatherAnalyzer.alerts(WeatherParser.parse_metar("")) == []
