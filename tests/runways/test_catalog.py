"""Tests for the curated runway catalog."""

from pathlib import Path

import pytest

from fsops.runways.catalog import RunwayCatalog


class TestRunwayCatalog:
    """Tests for RunwayCatalog."""

    @pytest.fixture
    def catalog(self) -> RunwayCatalog:
        """Create test catalog."""
        return RunwayCatalog.from_dict(
            {
                "wsss": [
                    {"runway": "02L", "arrival": True},
                    {"runway": "02C", "departure": True},
                    {"runway": "02R", "enabled": False},
                ],
                "VHHH": [{"runway": "07L", "heading": 73}],
            }
        )

    def test_lookup_is_case_insensitive(self, catalog: RunwayCatalog) -> None:
        """Test codes are stored and looked up in upper case."""
        assert catalog.lookup("wsss") is catalog.lookup("WSSS")
        assert "wsss" in catalog
        assert "WSSS" in catalog

    def test_lookup_missing(self, catalog: RunwayCatalog) -> None:
        """Test unknown airports return None."""
        assert catalog.lookup("KSFO") is None
        assert "KSFO" not in catalog

    def test_entry_flags(self, catalog: RunwayCatalog) -> None:
        """Test runway entry flags are parsed."""
        runway_set = catalog.lookup("WSSS")
        assert runway_set is not None
        ends = {end.identifier: end for end in runway_set}
        assert ends["02L"].preferred_arrival is True
        assert ends["02L"].preferred_departure is False
        assert ends["02C"].preferred_departure is True
        assert ends["02R"].enabled is False

    def test_explicit_heading(self, catalog: RunwayCatalog) -> None:
        """Test explicit headings override the designator."""
        runway_set = catalog.lookup("VHHH")
        assert runway_set is not None
        assert runway_set.ends[0].heading_degrees == 73

    def test_length_and_iteration(self, catalog: RunwayCatalog) -> None:
        """Test catalog behaves as a collection of codes."""
        assert len(catalog) == 2
        assert sorted(catalog) == ["VHHH", "WSSS"]

    def test_malformed_entry_skipped(self) -> None:
        """Test ends without a usable heading are dropped."""
        catalog = RunwayCatalog.from_dict({"ABCD": [{"runway": "H1"}, {"runway": "09"}]})
        runway_set = catalog.lookup("ABCD")
        assert runway_set is not None
        assert [end.identifier for end in runway_set] == ["09"]

    @pytest.mark.parametrize(
        "data",
        [
            ["WSSS"],
            {"WSSS": {"runway": "02L"}},
            {"WSSS": [{"heading": 20}]},
            {"WSSS": ["02L"]},
        ],
    )
    def test_invalid_structure(self, data: object) -> None:
        """Test structural errors raise ValueError."""
        with pytest.raises(ValueError):
            RunwayCatalog.from_dict(data)  # type: ignore[arg-type]

    def test_duplicate_runway_rejected(self) -> None:
        """Test duplicate designators within an airport are rejected."""
        with pytest.raises(ValueError):
            RunwayCatalog.from_dict({"WSSS": [{"runway": "02L"}, {"runway": "02l"}]})

    def test_from_yaml(self, tmp_path: Path) -> None:
        """Test loading from a YAML file."""
        path = tmp_path / "catalog.yaml"
        path.write_text(
            "airports:\n  WSSL:\n    - {runway: '03', departure: true}\n",
            encoding="utf-8",
        )

        catalog = RunwayCatalog.from_yaml(path)

        runway_set = catalog.lookup("WSSL")
        assert runway_set is not None
        assert runway_set.ends[0].preferred_departure is True

    def test_from_yaml_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file gives an empty catalog."""
        path = tmp_path / "catalog.yaml"
        path.write_text("", encoding="utf-8")
        assert len(RunwayCatalog.from_yaml(path)) == 0

    def test_from_yaml_not_mapping(self, tmp_path: Path) -> None:
        """Test a non-mapping document is rejected."""
        path = tmp_path / "catalog.yaml"
        path.write_text("- WSSS\n", encoding="utf-8")
        with pytest.raises(ValueError):
            RunwayCatalog.from_yaml(path)


class TestDefaultCatalog:
    """Tests for the packaged catalog."""

    def test_loads(self) -> None:
        """Test the packaged catalog loads and covers the home airports."""
        catalog = RunwayCatalog.load_default()
        for icao in ("WSSS", "WSSL", "WMKK", "WMKP", "VHHH", "VVTS"):
            assert icao in catalog

    def test_changi_closed_runways(self) -> None:
        """Test Changi 02R/20L are closed."""
        runway_set = RunwayCatalog.load_default().lookup("WSSS")
        assert runway_set is not None
        closed = [end.identifier for end in runway_set if not end.enabled]
        assert closed == ["02R", "20L"]
