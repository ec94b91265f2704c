"""
CLI Tests (scripts/aoa_sweep.py)
"""

import importlib.util
from pathlib import Path

import pytest

from aerosweep.ledger import load_results

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "aoa_sweep.py"


@pytest.fixture(scope="module")
def cli():
    spec = importlib.util.spec_from_file_location("aoa_sweep_cli", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_journal_command(cli, tmp_path, capsys):
    output = tmp_path / "sweep.jou"
    code = cli.main(['journal', '0', '4', '2', '--iterations', '100', '-o', str(output)])

    assert code == 0
    assert output.read_text().count("/solve/iterate 100") == 3
    assert "Journal saved" in capsys.readouterr().out


def test_reduce_command_appends(cli, tmp_path, capsys):
    ledger = tmp_path / "results.txt"
    code = cli.main(['reduce', '0', '--force', '2', '0', '0', '--append', str(ledger)])

    assert code == 0
    df = load_results(ledger)
    assert df['Cd'].iloc[0] == pytest.approx(0.03189, abs=1e-5)
    assert "Row appended" in capsys.readouterr().out


def test_summary_command(cli, tmp_path, capsys):
    ledger = tmp_path / "results.txt"
    for aoa, fy in (("0", "10"), ("4", "30")):
        cli.main(['reduce', aoa, '--force', '0.5', fy, '0', '--append', str(ledger)])
    capsys.readouterr()

    csv_file = tmp_path / "polar.csv"
    code = cli.main(['summary', str(ledger), '--csv', str(csv_file)])

    out = capsys.readouterr().out
    assert code == 0
    assert "Total points computed: 2" in out
    assert csv_file.exists()


def test_missing_ledger_fails(cli, tmp_path):
    assert cli.main(['summary', str(tmp_path / "none.txt")]) == 1


def test_demo_command(cli, tmp_path, capsys):
    code = cli.main(['demo', '-2', '4', '2', '--iterations', '5', '--workdir', str(tmp_path)])

    assert code == 0
    assert len(load_results(tmp_path / "aoa_results.txt")) == 4
    assert "RESULTS SUMMARY" in capsys.readouterr().out


def test_config_option(cli, tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text("reference:\n  area: -1\n")
    assert cli.main(['--config', str(config), 'reduce', '0', '--force', '1', '0', '0']) == 1
