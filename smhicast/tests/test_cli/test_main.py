"""Tests for CLI commands."""

from pathlib import Path

import httpx
import respx

from smhicast.cli import main
from smhicast.ingest.smhi_client import SMHI_BASE_URL


class TestCLI:
    @respx.mock
    def test_report(self, tmp_path: Path, smhi_payload: dict, capsys):
        respx.get(url__startswith=SMHI_BASE_URL).mock(
            return_value=httpx.Response(200, json=smhi_payload)
        )
        result = main(["--config", str(tmp_path / "none.yaml")])
        assert result == 0
        out = capsys.readouterr().out
        assert "Weather for Mälarhöjden, Stockholm" in out
        assert "Hourly Forecast" in out
        assert "5.0°C" in out

    @respx.mock
    def test_location_override(self, smhi_payload: dict, capsys):
        route = respx.get(url__startswith=SMHI_BASE_URL).mock(
            return_value=httpx.Response(200, json=smhi_payload)
        )
        result = main(["--lat", "57.7", "--lon", "11.97", "--name", "Göteborg", "report"])
        assert result == 0
        assert "/lon/11.9700/lat/57.7000/" in str(route.calls[0].request.url)
        assert "Weather for Göteborg" in capsys.readouterr().out

    @respx.mock
    def test_empty_series_returns_1(self, capsys):
        respx.get(url__startswith=SMHI_BASE_URL).mock(
            return_value=httpx.Response(200, json={"timeSeries": []})
        )
        result = main([])
        assert result == 1
        assert capsys.readouterr().out == ""

    @respx.mock
    def test_http_error_returns_1(self, capsys):
        respx.get(url__startswith=SMHI_BASE_URL).mock(return_value=httpx.Response(500))
        assert main([]) == 1
        assert capsys.readouterr().out == ""

    @respx.mock
    def test_malformed_feed_returns_1(self):
        respx.get(url__startswith=SMHI_BASE_URL).mock(
            return_value=httpx.Response(200, json={"unexpected": True})
        )
        assert main([]) == 1

    def test_config_show(self, fixtures_dir: Path, capsys):
        result = main(["--config", str(fixtures_dir / "config_stockholm.yaml"), "config", "show"])
        assert result == 0
        out = capsys.readouterr().out
        assert "timeout_seconds: 5.0" in out
        assert "latitude" in out

    def test_config_get(self, fixtures_dir: Path, capsys):
        result = main([
            "--config", str(fixtures_dir / "config_stockholm.yaml"),
            "config", "get", "api.timeout_seconds",
        ])
        assert result == 0
        assert capsys.readouterr().out.strip() == "5.0"

    def test_config_get_with_override(self, capsys):
        result = main(["--name", "Göteborg", "config", "get", "location.name"])
        assert result == 0
        assert capsys.readouterr().out.strip() == "Göteborg"

    def test_config_get_unknown_key(self, capsys):
        result = main(["config", "get", "location.altitude"])
        assert result == 1
        assert capsys.readouterr().out == ""

    @respx.mock
    def test_null_parameters_still_renders(self, capsys):
        payload = {"timeSeries": [{"validTime": "2026-02-11T11:00:00Z", "parameters": None}]}
        respx.get(url__startswith=SMHI_BASE_URL).mock(
            return_value=httpx.Response(200, json=payload)
        )
        assert main([]) == 0
        assert "N/A" in capsys.readouterr().out
