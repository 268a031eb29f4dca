"""Tests for the command-line interface."""

import json

from typer.testing import CliRunner

from cloud_estimator import cli
from cloud_estimator.cli import app

runner = CliRunner()


def test_simulate_defaults():
    result = runner.invoke(app, ["simulate", "--seed", "1"])

    assert result.exit_code == 0, result.output
    assert "Simulation Results Summary" in result.stdout


def test_simulate_json_output():
    result = runner.invoke(app, [
        "simulate", "--json", "--seed", "3",
        "--host-count", "3", "--vm-count", "6", "--cloudlet-count", "4",
    ])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert len(payload["hostLayout"]) == 3
    assert len(payload["cloudletResults"]) == 4


def test_simulate_show_layout():
    result = runner.invoke(app, ["simulate", "--seed", "2", "--show-layout"])

    assert result.exit_code == 0, result.output
    assert "Host Layout" in result.stdout


def test_simulate_invalid_config_exits_with_error():
    result = runner.invoke(app, ["simulate", "--vm-count", "0"])

    assert result.exit_code == 1
    assert "vmCount" in result.stdout


def test_simulate_from_scenario(tmp_path):
    scenario = tmp_path / "scenario.json"
    scenario.write_text(json.dumps({
        "hostCount": 4, "pesPerHost": 2, "ramPerHost": 4096, "mipsPerPe": 500,
        "vmCount": 8, "pesPerVm": 1, "ramPerVm": 512,
        "cloudletCount": 12, "cloudletLength": 2000,
    }))

    result = runner.invoke(app, ["simulate", "--scenario", str(scenario), "--json", "--seed", "0"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert len(payload["hostLayout"]) == 4
    assert len(payload["cloudletResults"]) == 12


def test_simulate_missing_scenario(tmp_path):
    result = runner.invoke(app, ["simulate", "--scenario", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 1
    assert "Error loading scenario" in result.stdout


def test_simulate_exports_results(tmp_path):
    result = runner.invoke(app, ["simulate", "--seed", "4", "--output", str(tmp_path)])

    assert result.exit_code == 0, result.output
    run_dirs = list(tmp_path.glob("run_*"))
    assert len(run_dirs) == 1
    assert (run_dirs[0] / "result.json").exists()
    assert (run_dirs[0] / "cloudlets.csv").exists()
    assert (run_dirs[0] / "host_layout.csv").exists()


def test_serve_applies_overrides(monkeypatch):
    captured = {}
    monkeypatch.setattr(cli, "run_server", lambda settings: captured.update(settings))

    result = runner.invoke(app, ["serve", "--host", "127.0.0.1", "--port", "8081"])

    assert result.exit_code == 0, result.output
    assert captured["server"]["host"] == "127.0.0.1"
    assert captured["server"]["port"] == 8081


def test_serve_rejects_bad_config(tmp_path):
    config_path = tmp_path / "settings.yaml"
    config_path.write_text("server: {}\n")

    result = runner.invoke(app, ["serve", "--config", str(config_path)])

    assert result.exit_code == 1
    assert "Error loading config" in result.stdout
