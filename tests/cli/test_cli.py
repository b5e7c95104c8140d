import json

import pytest

from flood_simulator.cli import main


def test_simulate_json(capsys):
    code = main(["simulate", "--region", "Assam", "--intensity", "120",
                 "--window", "7", "--date", "2025-07-01", "--json"])
    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out["inputs"]["region"] == "Assam"
    assert out["inputs"]["start_date"] == "2025-07-01"
    assert out["likelihood"] == pytest.approx(93.46, abs=0.01)
    assert len(out["trajectory"]) == 14


def test_simulate_text_report(capsys):
    code = main(["simulate", "--region", "Rajasthan", "--terrain", "Hilly/Steep",
                 "--soil", "Sandy", "--date", "2025-07-01"])
    assert code == 0
    out = capsys.readouterr().out
    assert "Selected: Rajasthan - 1 Jul 2025" in out
    assert "Predisposition score: 0.25" in out


def test_simulate_invalid_region_exit_code(capsys):
    code = main(["simulate", "--region", "Atlantis"])
    assert code == 2
    assert "Unknown region 'Atlantis'" in capsys.readouterr().err


def test_simulate_invalid_window_exit_code(capsys):
    assert main(["simulate", "--window", "20"]) == 2


def test_options_lists_regions(capsys):
    assert main(["options"]) == 0
    out = capsys.readouterr().out
    assert " - West Bengal" in out
    assert " - Hilly/Steep" in out


def test_trajectory_command(capsys):
    assert main(["trajectory", "--likelihood", "50"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "day  0:  50.00%"
    assert len(lines) == 15
