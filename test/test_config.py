"""Config loading, application wiring and the CLI."""

import json

import pytest
from typer.testing import CliRunner

from pyagentgate.app_context import AppContext
from pyagentgate.config.loader import load_gateway_config
from pyagentgate.main import app
from pyagentgate.tools.permissions import TrustPolicy


@pytest.fixture(autouse=True)
def isolated_user_dirs(tmp_path, monkeypatch):
    # keep platformdirs lookups away from the real home directory
    monkeypatch.setattr("pyagentgate.config.loader._global_candidate_paths", lambda: [])
    monkeypatch.setattr("pyagentgate.events.trace._events_dir", lambda: tmp_path / "events")


class TestLoader:

    def test_defaults(self, tmp_path):
        cfg = load_gateway_config(cwd=tmp_path)
        assert cfg.mode is TrustPolicy.INTERACTIVE
        assert cfg.restrict_to_cwd is False
        assert cfg.env_allowlist == []
        assert cfg.loaded_from is None

    def test_project_json(self, tmp_path):
        p = tmp_path / ".pyagentgate.json"
        p.write_text(json.dumps({"mode": "auto-edit", "restrict_to_cwd": True, "env_allowlist": ["LANG", 3]}))
        cfg = load_gateway_config(cwd=tmp_path)
        assert cfg.mode is TrustPolicy.AUTO_EDIT
        assert cfg.restrict_to_cwd is True
        assert cfg.env_allowlist == ["LANG"]
        assert cfg.loaded_from == p

    def test_project_yaml(self, tmp_path):
        (tmp_path / "pyagentgate.yaml").write_text("mode: full-auto\nrecord_events: true\n")
        cfg = load_gateway_config(cwd=tmp_path)
        assert cfg.mode is TrustPolicy.FULL_AUTO
        assert cfg.record_events is True

    def test_global_then_project_then_explicit(self, tmp_path):
        g = tmp_path / "global.json"
        g.write_text(json.dumps({"mode": "full-auto", "restrict_to_cwd": True}))
        (tmp_path / "pyagentgate.json").write_text(json.dumps({"mode": "auto-edit"}))
        explicit = tmp_path / "explicit.yml"
        explicit.write_text("env_allowlist: [SHELL]\n")
        cfg = load_gateway_config(cwd=tmp_path, explicit_path=explicit, global_paths=[g])
        assert cfg.mode is TrustPolicy.AUTO_EDIT
        assert cfg.restrict_to_cwd is True
        assert cfg.env_allowlist == ["SHELL"]
        assert cfg.loaded_from == explicit.resolve()

    def test_bad_values_and_files_ignored(self, tmp_path):
        (tmp_path / ".pyagentgate.json").write_text("{not json")
        (tmp_path / "pyagentgate.json").write_text(json.dumps({"mode": "yolo", "restrict_to_cwd": "yes"}))
        cfg = load_gateway_config(cwd=tmp_path)
        assert cfg.mode is TrustPolicy.INTERACTIVE
        assert cfg.restrict_to_cwd is False

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_gateway_config(cwd=tmp_path, explicit_path=tmp_path / "nope.json")


class TestAppContext:

    def test_cli_overrides_file(self, tmp_path):
        (tmp_path / "pyagentgate.json").write_text(json.dumps({"mode": "full-auto"}))
        ctx = AppContext.from_env(cwd=tmp_path, mode="interactive", restrict_to_cwd=True)
        assert ctx.mode is TrustPolicy.INTERACTIVE
        assert ctx.gateway.ctx.restrict_to_cwd is True
        assert ctx.events is None

    def test_records_events_when_enabled(self, tmp_path):
        ctx = AppContext.from_env(cwd=tmp_path, mode="full-auto", record_events=True, session_id="abc")
        ctx.gateway.execute("get_environment_info", {})
        assert [e.type for e in ctx.events.read()] == ["tool.call", "tool.result"]


class TestCli:

    def test_tools_lists_catalog(self):
        result = CliRunner().invoke(app, ["tools"])
        assert result.exit_code == 0
        assert "delete_file" in result.output

    def test_schema_json(self):
        result = CliRunner().invoke(app, ["schema"])
        assert result.exit_code == 0
        names = [t["name"] for t in json.loads(result.output)]
        assert "http_request" in names

    def test_schema_openai(self):
        result = CliRunner().invoke(app, ["schema", "--openai"])
        assert json.loads(result.output)[0]["type"] == "function"

    def test_exec_full_auto(self, tmp_path):
        result = CliRunner().invoke(
            app,
            ["exec", "write_file", "--args", '{"path": "a.txt", "content": "hi"}', "--mode", "full-auto", "--cwd", str(tmp_path)],
        )
        assert result.exit_code == 0, result.output
        assert (tmp_path / "a.txt").read_text() == "hi"

    def test_exec_error_exit_code(self, tmp_path):
        result = CliRunner().invoke(app, ["exec", "read_file", "--args", '{"path": "x"}', "-m", "full-auto", "--cwd", str(tmp_path)])
        assert result.exit_code == 1

    def test_exec_bad_mode(self, tmp_path):
        result = CliRunner().invoke(app, ["exec", "read_file", "--mode", "yolo", "--cwd", str(tmp_path)])
        assert result.exit_code != 0

    def test_exec_interactive_denied(self, tmp_path):
        (tmp_path / "keep.txt").write_text("x")
        result = CliRunner().invoke(
            app,
            ["exec", "delete_file", "--args", '{"path": "keep.txt"}', "--cwd", str(tmp_path)],
            input="n\n",
        )
        assert result.exit_code == 0
        assert "cancelled" in result.output
        assert (tmp_path / "keep.txt").exists()
