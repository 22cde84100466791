"""Tests for the country data repositories."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

from land_router.adapters.graph import HttpCountryRepository, JsonFileCountryRepository
from land_router.adapters.graph.countries_json import CachingCountryRepository, parse_countries
from land_router.config import CountryDataConfig
from land_router.domain.errors import ConfigurationError, CountryDataError
from land_router.domain.models import CountryRecord


def _response(status_code=200, payload=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class TestParseCountries:
    def test_maps_cca3_and_borders(self):
        records = parse_countries(
            [
                {"cca3": "PRT", "cca2": "PT", "borders": ["ESP"]},
                {"cca3": "JPN", "borders": []},
            ]
        )
        assert records == [CountryRecord("PRT", ["ESP"]), CountryRecord("JPN", [])]

    def test_missing_or_invalid_borders_become_empty(self):
        records = parse_countries(
            [
                {"cca3": "GRL"},
                {"cca3": "ISL", "borders": None},
                {"cca3": "ATA", "borders": "none"},
            ]
        )
        assert [r.neighbours for r in records] == [(), (), ()]

    def test_non_string_code_is_blanked(self):
        records = parse_countries([{"cca3": 42, "borders": ["FRA"]}])
        assert records[0].code is None

    def test_non_object_entries_are_skipped(self):
        records = parse_countries([{"cca3": "FRA"}, "junk", None, 3])
        assert [r.code for r in records] == ["FRA"]

    def test_rejects_non_array(self):
        with pytest.raises(CountryDataError, match="JSON array"):
            parse_countries({"cca3": "FRA"}, source="mem")


class TestHttpCountryRepository:
    @pytest.fixture
    def config(self):
        return CountryDataConfig(data_url="https://example.test/countries.json", timeout_seconds=3)

    @pytest.fixture
    def session(self):
        return MagicMock(spec=requests.Session)

    def test_fetch_maps_payload(self, config, session):
        session.get.return_value = _response(
            payload=[
                {"cca3": "CZE", "borders": ["AUT"]},
                {"cca3": "AUT", "borders": ["CZE"]},
            ]
        )
        repo = HttpCountryRepository(config, session=session)

        records = repo.fetch()

        session.get.assert_called_once_with("https://example.test/countries.json", timeout=3)
        assert records == [CountryRecord("CZE", ["AUT"]), CountryRecord("AUT", ["CZE"])]

    def test_non_200_status_raises(self, config, session):
        session.get.return_value = _response(status_code=503)
        repo = HttpCountryRepository(config, session=session)

        with pytest.raises(CountryDataError, match="Unexpected HTTP status: 503") as exc_info:
            repo.fetch()
        assert exc_info.value.source == "https://example.test/countries.json"

    def test_transport_error_is_wrapped(self, config, session):
        session.get.side_effect = requests.ConnectionError("unreachable")
        repo = HttpCountryRepository(config, session=session)

        with pytest.raises(CountryDataError) as exc_info:
            repo.fetch()
        assert isinstance(exc_info.value.cause, requests.ConnectionError)

    def test_invalid_json_is_wrapped(self, config, session):
        session.get.return_value = _response(json_error=ValueError("Expecting value"))
        repo = HttpCountryRepository(config, session=session)

        with pytest.raises(CountryDataError, match="not valid JSON"):
            repo.fetch()

    def test_load_builds_graph_once(self, config, session):
        session.get.return_value = _response(
            payload=[
                {"cca3": "FRA", "borders": ["ESP"]},
                {"cca3": "FRA", "borders": ["DEU"]},
                {"cca3": "", "borders": ["FRA"]},
                {"cca3": "ESP", "borders": ["FRA"]},
            ]
        )
        repo = HttpCountryRepository(config, session=session)

        graph = repo.load()
        again = repo.load()

        assert graph is again
        assert session.get.call_count == 1
        assert dict(graph) == {"FRA": ("ESP",), "ESP": ("FRA",)}

    def test_clear_cache_forces_refetch(self, config, session):
        session.get.return_value = _response(payload=[{"cca3": "FRA", "borders": []}])
        repo = HttpCountryRepository(config, session=session)

        repo.load()
        repo.clear_cache()
        repo.load()

        assert session.get.call_count == 2


class TestCachingCountryRepository:
    def test_base_requires_fetch(self):
        with pytest.raises(TypeError):
            CachingCountryRepository()  # type: ignore[abstract]

    def test_subclass_builds_graph_from_fetch(self):
        class InlineRepository(CachingCountryRepository):
            def fetch(self):
                return [CountryRecord("PRT", ["ESP"]), CountryRecord("ESP", ["PRT"])]

        graph = InlineRepository().load()

        assert dict(graph) == {"PRT": ("ESP",), "ESP": ("PRT",)}


class TestJsonFileCountryRepository:
    def test_reads_bundled_extract(self, file_data_config):
        repo = JsonFileCountryRepository(file_data_config)

        graph = repo.load()

        assert "CZE" in graph
        assert graph["GRL"] == ()
        assert graph["PRT"] == ("ESP",)

    def test_missing_file_raises(self, tmp_path: Path):
        repo = JsonFileCountryRepository(
            CountryDataConfig(source="file", data_file=tmp_path / "missing.json")
        )

        with pytest.raises(CountryDataError):
            repo.fetch()

    def test_malformed_file_raises(self, tmp_path: Path):
        path = tmp_path / "countries.json"
        path.write_text("[{not json", encoding="utf-8")
        repo = JsonFileCountryRepository(CountryDataConfig(source="file", data_file=path))

        with pytest.raises(CountryDataError):
            repo.fetch()

    def test_non_array_file_raises(self, tmp_path: Path):
        path = tmp_path / "countries.json"
        path.write_text(json.dumps({"cca3": "FRA"}), encoding="utf-8")
        repo = JsonFileCountryRepository(CountryDataConfig(source="file", data_file=path))

        with pytest.raises(CountryDataError, match="JSON array"):
            repo.fetch()

    def test_unset_file_is_a_configuration_error(self):
        repo = JsonFileCountryRepository(CountryDataConfig(source="file"))

        with pytest.raises(ConfigurationError):
            repo.fetch()
