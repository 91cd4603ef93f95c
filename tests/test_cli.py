"""
Tests for the command-line interface.
"""

import pytest
import yaml
from click.testing import CliRunner

from venue_status.cli import main


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "params.yaml"
    path.write_text(yaml.safe_dump({
        "venues": [
            {"name": "restaurant", "hours": "12:00 - 00:15"},
            {"name": "cafe", "hours": "09:00 - 18:00"},
        ],
    }), encoding="utf-8")
    return str(path)


def test_venues(config_path):
    result = CliRunner().invoke(main, ["--config", config_path, "venues"])

    assert result.exit_code == 0
    assert "restaurant: 12:00 - 00:15" in result.stdout
    assert "cafe: 09:00 - 18:00" in result.stdout


def test_status_for_venue_at_time(config_path):
    result = CliRunner().invoke(main, ["--config", config_path, "status", "restaurant", "--at", "00:10"])

    assert result.exit_code == 0
    assert "🟢 Ferme bientôt (00:15) (5 min)" in result.stdout


def test_status_adhoc_hours_closed(config_path):
    result = CliRunner().invoke(
        main, ["--config", config_path, "status", "--hours", "09:00 - 18:00", "--at", "19:00"]
    )

    assert result.exit_code == 0
    assert "🔴 Fermé - Ouvre demain à 09:00" in result.stdout


def test_status_without_config_file(tmp_path):
    result = CliRunner().invoke(
        main, ["--config", str(tmp_path / "missing.yaml"), "status", "--hours", "09:00 - 18:00", "--at", "09:00"]
    )

    assert result.exit_code == 0
    assert "Ouvert jusqu'à 18:00 (9h)" in result.stdout


def test_status_unknown_venue(config_path):
    result = CliRunner().invoke(main, ["--config", config_path, "status", "nowhere"])

    assert result.exit_code != 0


def test_status_bad_hours(config_path):
    result = CliRunner().invoke(main, ["--config", config_path, "status", "--hours", "noon - late"])

    assert result.exit_code != 0


def test_status_bad_at(config_path):
    result = CliRunner().invoke(main, ["--config", config_path, "status", "cafe", "--at", "7pm"])

    assert result.exit_code == 2


def test_watch_stops_after_count(config_path):
    result = CliRunner().invoke(main, ["--config", config_path, "watch", "cafe", "--count", "1"])

    assert result.exit_code == 0
    assert result.stdout.count("🟢") + result.stdout.count("🔴") == 1


@pytest.mark.parametrize("interval", ["0", "-5"])
def test_watch_rejects_non_positive_interval(config_path, interval):
    result = CliRunner().invoke(main, ["--config", config_path, "watch", "cafe", "--interval", interval, "--count", "1"])

    assert result.exit_code == 2
    assert "--interval" in result.output
