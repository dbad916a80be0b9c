"""
Tests for the command-line checkout and settings.
"""

import json
from pathlib import Path

import pytest

from toolrental.cli import EXIT_BAD_CATALOG, EXIT_INVALID_INPUT, EXIT_OK, main
from toolrental.settings import Settings, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("TOOLRENTAL_CATALOG", "TOOLRENTAL_LOG_LEVEL", "TOOLRENTAL_DATE_FORMAT"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self):
        assert load_settings({}) == Settings()

    def test_from_environment(self):
        settings = load_settings(
            {
                "TOOLRENTAL_CATALOG": "/tmp/catalog.json",
                "TOOLRENTAL_LOG_LEVEL": "debug",
                "TOOLRENTAL_DATE_FORMAT": "%Y-%m-%d",
            }
        )
        assert settings.catalog_path == Path("/tmp/catalog.json")
        assert settings.log_level == "DEBUG"
        assert settings.date_format == "%Y-%m-%d"


class TestMain:
    def test_prints_receipt(self, capsys):
        assert main(["LADW", "3", "10", "07/02/20"]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.startswith("Tool code: LADW\n")
        assert "Charge days: 2\n" in out
        assert out.endswith("Final charge: $3.58\n")

    def test_invalid_discount(self, capsys):
        assert main(["JAKR", "5", "101", "9/3/15"]) == EXIT_INVALID_INPUT
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "between 0 and 100" in captured.err
        assert "CHNS,LADW,JAKD,JAKR" in captured.err

    def test_unknown_tool(self, capsys):
        assert main(["DRIL", "3", "10", "07/02/20"]) == EXIT_INVALID_INPUT
        assert "DRIL" in capsys.readouterr().err

    def test_bad_date(self, capsys):
        assert main(["LADW", "3", "10", "July 2"]) == EXIT_INVALID_INPUT
        assert "MM/DD/YY" in capsys.readouterr().err

    def test_wrong_argument_count(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["LADW", "3"])
        assert exc_info.value.code == 2

    def test_catalog_option(self, tmp_path, capsys):
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps(
                {
                    "tools": [{"code": "MOWR", "type": "Mower", "brand": "Toro"}],
                    "charges": [
                        {"type": "Mower", "daily_charge_cents": 450, "weekday": True, "weekend": False, "holiday": True}
                    ],
                    "holidays": [],
                }
            ),
            encoding="utf-8",
        )
        assert main(["MOWR", "7", "0", "12/01/24", "--catalog", str(path)]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Tool brand: Toro\n" in out
        assert "Charge days: 5\n" in out
        assert "Final charge: $22.50\n" in out

    def test_catalog_from_environment(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("TOOLRENTAL_CATALOG", str(tmp_path / "missing.json"))
        assert main(["LADW", "3", "10", "07/02/20"]) == EXIT_BAD_CATALOG
        assert "missing.json" in capsys.readouterr().err

    def test_unknown_log_level(self, capsys):
        assert main(["LADW", "3", "10", "07/02/20", "--log-level", "verbose"]) == EXIT_INVALID_INPUT
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "VERBOSE" in captured.err

    def test_unknown_log_level_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("TOOLRENTAL_LOG_LEVEL", "chatty")
        assert main(["LADW", "3", "10", "07/02/20"]) == EXIT_INVALID_INPUT
        assert "CHATTY" in capsys.readouterr().err

    def test_log_level_option(self, capsys):
        assert main(["LADW", "3", "10", "07/02/20", "--log-level", "debug"]) == EXIT_OK
        assert "Final charge: $3.58\n" in capsys.readouterr().out

    def test_date_format_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("TOOLRENTAL_DATE_FORMAT", "%Y-%m-%d")
        assert main(["LADW", "3", "10", "07/02/20"]) == EXIT_OK
        assert "Due date: 2020-07-05\n" in capsys.readouterr().out
