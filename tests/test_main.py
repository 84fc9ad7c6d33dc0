import json
from pathlib import Path

import pytest

from rakelint import main

UNDESCRIBED = ["send", None, "task", ["sym", "build"]]
DESCRIBED = ["begin", ["send", None, "desc", ["str", "Build"]], ["send", None, "task", ["sym", "build"]]]


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RAKELINT_LOG_STREAM", raising=False)
    return tmp_path


def test_main_reports_offenses(workdir: Path, capsys: pytest.CaptureFixture):
    (workdir / "Rakefile.json").write_text(json.dumps(UNDESCRIBED))
    assert main.main([str(workdir)]) == 1
    out = capsys.readouterr().out
    assert "Rakefile.json: Describe the task with the description-annotation method." in out
    assert "1 file inspected, 1 offenses detected" in out


def test_main_clean_run_exits_zero(workdir: Path, capsys: pytest.CaptureFixture):
    (workdir / "Rakefile.json").write_text(json.dumps(DESCRIBED))
    assert main.main([str(workdir / "Rakefile.json")]) == 0
    assert "0 offenses detected" in capsys.readouterr().out


def test_main_load_errors_exit_two(workdir: Path, capsys: pytest.CaptureFixture):
    (workdir / "broken.json").write_text("[]")
    assert main.main([str(workdir)]) == 2
    assert "broken.json" in capsys.readouterr().err


def test_main_json_format_and_log_dir(workdir: Path, capsys: pytest.CaptureFixture):
    (workdir / "Rakefile.json").write_text(json.dumps(UNDESCRIBED))
    log_dir = workdir / "runs"
    assert main.main([str(workdir / "Rakefile.json"), "--format", "json", "--log-dir", str(log_dir)]) == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload["summary"]["offenses"] == 1
    (run_dir,) = list(log_dir.iterdir())
    assert (run_dir / "events.ndjson").exists()
    assert (run_dir / "diagnostics.json").exists()
    assert json.loads((run_dir / "report.txt").read_text())["summary"]["offenses"] == 1


def test_main_uses_config_file(workdir: Path, capsys: pytest.CaptureFixture):
    (workdir / "Rakefile.json").write_text(json.dumps(UNDESCRIBED))
    config_path = workdir / "custom.yaml"
    config_path.write_text("rule:\n  enabled: false\noutput:\n  format: json\n")
    assert main.main([str(workdir / "Rakefile.json"), "--config", str(config_path)]) == 0
    assert json.loads(capsys.readouterr().out)["summary"]["offenses"] == 0
