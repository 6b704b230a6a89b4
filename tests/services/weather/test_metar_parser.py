"""Tests for METAR wind parsing."""

import pytest

from fsops.services.weather.metar_parser import METARParser


class TestMETARParser:
    """Tests for METARParser class."""

    @pytest.fixture
    def parser(self) -> METARParser:
        """Create parser fixture."""
        return METARParser()

    def test_parse_standard_wind(self, parser: METARParser) -> None:
        """Test parsing a standard wind group."""
        wind = parser.parse_wind("KPAO 251756Z 32008KT 10SM CLR 18/08 A3002")

        assert wind is not None
        assert wind.direction == 320
        assert wind.speed == 8
        assert wind.gust is None

    def test_parse_wind_with_gusts(self, parser: METARParser) -> None:
        """Test parsing wind with gusts."""
        wind = parser.parse_wind("KSFO 251756Z 27015G25KT 10SM FEW020 SCT200 15/08 A2992")

        assert wind is not None
        assert wind.direction == 270
        assert wind.speed == 15
        assert wind.gust == 25

    def test_parse_variable_wind(self, parser: METARParser) -> None:
        """Test parsing variable wind."""
        wind = parser.parse_wind("KJFK 251756Z VRB05KT 10SM CLR 20/15 A3010")

        assert wind is not None
        assert wind.direction is None
        assert wind.speed == 5
        assert wind.is_variable is True

    def test_parse_calm_wind(self, parser: METARParser) -> None:
        """Test parsing calm wind."""
        wind = parser.parse_wind("KLAX 251756Z 00000KT 10SM CLR 22/12 A2998")

        assert wind is not None
        assert wind.is_calm is True
        assert wind.direction is None

    def test_parse_wind_from_north(self, parser: METARParser) -> None:
        """Test 360 is reported as 0."""
        wind = parser.parse_wind("WSSS 190830Z 36010KT 9999 FEW018 31/24 Q1009")

        assert wind is not None
        assert wind.direction == 0

    def test_parse_wind_in_mps(self, parser: METARParser) -> None:
        """Test metres per second are converted to knots."""
        wind = parser.parse_wind("UUEE 190830Z 18005MPS 9999 BKN020 05/02 Q1012")

        assert wind is not None
        assert wind.direction == 180
        assert wind.speed == 10

    def test_ignores_variation_group(self, parser: METARParser) -> None:
        """Test the dddVddd variation group does not affect direction."""
        wind = parser.parse_wind("EGLL 190820Z 24012KT 210V270 9999 SCT030 15/09 Q1018")

        assert wind is not None
        assert wind.direction == 240

    @pytest.mark.parametrize("raw", ["", "WSSS 190830Z 9999 FEW018 31/24 Q1009"])
    def test_no_wind_group(self, parser: METARParser, raw: str) -> None:
        """Test reports without a wind group."""
        assert parser.parse_wind(raw) is None
