"""Unit tests for the CLI (main.py): serve lifecycle, list-tools, and call."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from kotlin_senior.main import main


class TestListTools:
    def test_prints_catalog(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["list-tools"]) == 0
        payload = json.loads(capsys.readouterr().out)
        names = [t["name"] for t in payload["tools"]]
        assert len(names) == 5
        assert "suggest_cloud_solution" in names
        assert all("inputSchema" in t for t in payload["tools"])


class TestCall:
    def test_success_prints_envelope(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["call", "check_best_practices", "--arguments", '{"codeSnippet": "GlobalScope.launch {}"}'])
        assert code == 0
        envelope = json.loads(capsys.readouterr().out)
        assert envelope["content"][0]["type"] == "text"
        assert "GlobalScope" in envelope["content"][0]["text"]

    def test_unknown_tool_prints_error_envelope(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["call", "deploy_to_prod", "--arguments", "{}"]) == 1
        envelope = json.loads(capsys.readouterr().out)
        assert envelope["isError"] is True
        assert envelope["content"][0]["text"] == "Unknown tool: deploy_to_prod"

    def test_missing_arguments(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["call", "check_best_practices"]) == 1
        envelope = json.loads(capsys.readouterr().out)
        assert "No arguments provided" in envelope["content"][0]["text"]

    def test_validation_error_names_field(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["call", "generate_design_pattern", "--arguments", '{"patternName": "singleton"}'])
        assert code == 1
        text = json.loads(capsys.readouterr().out)["content"][0]["text"]
        assert "context" in text

    def test_malformed_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["call", "check_best_practices", "--arguments", "{not json"]) == 2
        assert "not valid JSON" in capsys.readouterr().err


class TestServe:
    def test_serve_is_default_command(self) -> None:
        with patch("kotlin_senior.main.run_stdio", new_callable=AsyncMock) as mock_run:
            assert main([]) == 0
        mock_run.assert_awaited_once()

    def test_transport_failure_exits_non_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("kotlin_senior.main.run_stdio", new_callable=AsyncMock, side_effect=OSError("stdin closed")):
            assert main(["serve"]) == 1
        err = capsys.readouterr().err
        assert "Error: stdin closed" in err

    def test_server_uses_configured_name(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("server:\n  name: custom-kotlin\n", encoding="utf-8")
        try:
            with patch("kotlin_senior.main.run_stdio", new_callable=AsyncMock) as mock_run:
                assert main(["--config", str(path), "serve"]) == 0
            server = mock_run.await_args.args[0]
            assert server.name == "custom-kotlin"
        finally:
            from kotlin_senior.config.settings import reload_settings

            reload_settings()

    def test_missing_config_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--config", str(tmp_path / "nope.yaml"), "list-tools"]) == 1
        assert "invalid configuration" in capsys.readouterr().err
