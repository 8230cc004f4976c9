import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from statuspage.cli import cli_app

runner = CliRunner()

DEFAULT_OUTPUT = Path("site/status-page/__sapper__/export/index.html")


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for var in ("STATUSPAGE_INPUT_PATH", "STATUSPAGE_OUTPUT_PATH", "STATUSPAGE_LAYOUT", "STATUSPAGE_SEED"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


def _write_default_summary(workdir: Path, data) -> None:
    summary = workdir / "history" / "summary.json"
    summary.parent.mkdir(parents=True)
    summary.write_text(json.dumps(data), encoding="utf-8")


class TestCli:
    def test_zero_arguments_builds_default_page(self, workdir, api_service):
        _write_default_summary(workdir, [api_service])

        result = runner.invoke(cli_app, [])

        assert result.exit_code == 0, result.output
        assert f"Wrote {DEFAULT_OUTPUT}" in result.stdout
        html = (workdir / DEFAULT_OUTPUT).read_text(encoding="utf-8")
        assert '<div class="title">API</div>' in html

    def test_missing_summary_exits_nonzero(self, workdir):
        result = runner.invoke(cli_app, [])

        assert result.exit_code == 1
        assert "Cannot read uptime summary" in result.output
        assert not (workdir / DEFAULT_OUTPUT).exists()

    def test_invalid_json_exits_nonzero(self, workdir):
        summary = workdir / "history" / "summary.json"
        summary.parent.mkdir(parents=True)
        summary.write_text("{oops", encoding="utf-8")

        result = runner.invoke(cli_app, [])

        assert result.exit_code == 1
        assert "not valid JSON" in result.output

    def test_unwritable_output_exits_nonzero(self, workdir, api_service):
        _write_default_summary(workdir, [api_service])
        (workdir / "site").write_text("blocker", encoding="utf-8")

        result = runner.invoke(cli_app, [])

        assert result.exit_code == 1
        assert "Cannot write status page" in result.output

    def test_explicit_paths_and_layout(self, workdir, api_service):
        custom_in = workdir / "data.json"
        custom_in.write_text(json.dumps([api_service]), encoding="utf-8")
        custom_out = workdir / "public" / "status.html"

        result = runner.invoke(
            cli_app,
            ["--input", str(custom_in), "--output", str(custom_out), "--layout", "barcode", "--seed", "5"],
        )

        assert result.exit_code == 0, result.output
        html = custom_out.read_text(encoding="utf-8")
        assert "Operational" in html
        assert html.count('class="tick ') == 120

    def test_layout_from_environment(self, workdir, api_service, monkeypatch):
        _write_default_summary(workdir, [api_service])
        monkeypatch.setenv("STATUSPAGE_LAYOUT", "barcode")

        result = runner.invoke(cli_app, [])

        assert result.exit_code == 0, result.output
        assert "% uptime" in (workdir / DEFAULT_OUTPUT).read_text(encoding="utf-8")

    def test_failure_is_logged_with_error_code(self, workdir):
        result = runner.invoke(cli_app, [])

        assert result.exit_code == 1
        assert "status_page_build_failed" in result.output
        assert "input_unavailable" in result.output

    def test_non_utf8_summary_exits_nonzero(self, workdir):
        summary = workdir / "history" / "summary.json"
        summary.parent.mkdir(parents=True)
        summary.write_bytes(b'[{"name": "\xff"}]')

        result = runner.invoke(cli_app, [])

        assert result.exit_code == 1
        assert "is not UTF-8 text" in result.output
