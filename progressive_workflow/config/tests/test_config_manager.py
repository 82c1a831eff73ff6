"""Tests for configuration loading"""

import json
import logging
from pathlib import Path

import pytest

from progressive_workflow.config.manager import (
    CONFIG_FILENAME,
    get_workflows_dir,
    load_config,
    resolve_base_dir,
)


def write_config(directory: Path, content: str) -> Path:
    config_path = directory / CONFIG_FILENAME
    config_path.write_text(content)
    return config_path


class TestLoadConfig:
    """Tests for load_config"""

    def test_defaults_without_config_file(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            config = load_config(tmp_path)
        assert config.workflows_dir == "workflows"
        assert caplog.text == ""

    def test_custom_workflows_dir(self, tmp_path):
        write_config(tmp_path, json.dumps({"workflowsDir": ".claude/workflows"}))
        assert load_config(tmp_path).workflows_dir == ".claude/workflows"

    def test_empty_object_uses_defaults(self, tmp_path):
        write_config(tmp_path, "{}")
        assert load_config(tmp_path).workflows_dir == "workflows"

    def test_unknown_keys_ignored(self, tmp_path):
        write_config(tmp_path, json.dumps({"workflowsDir": "flows", "theme": "dark"}))
        assert load_config(tmp_path).workflows_dir == "flows"

    @pytest.mark.parametrize(
        "content",
        ["{not json", "[]", json.dumps({"workflowsDir": 42})],
    )
    def test_invalid_config_warns_and_uses_defaults(self, tmp_path, caplog, content):
        write_config(tmp_path, content)
        with caplog.at_level(logging.WARNING, logger="progressive_workflow"):
            config = load_config(tmp_path)
        assert config.workflows_dir == "workflows"
        assert f"Failed to parse {CONFIG_FILENAME}" in caplog.text

    def test_defaults_to_current_directory(self, tmp_path, monkeypatch):
        write_config(tmp_path, json.dumps({"workflowsDir": "from-cwd"}))
        monkeypatch.chdir(tmp_path)
        assert load_config().workflows_dir == "from-cwd"


class TestGetWorkflowsDir:
    """Tests for get_workflows_dir"""

    def test_absolute_default(self, tmp_path):
        workflows_dir = get_workflows_dir(tmp_path)
        assert workflows_dir.is_absolute()
        assert workflows_dir == (tmp_path / "workflows").resolve()

    def test_relative_config_value(self, tmp_path):
        write_config(tmp_path, json.dumps({"workflowsDir": ".claude/workflows"}))
        assert get_workflows_dir(tmp_path) == (tmp_path / ".claude" / "workflows").resolve()

    def test_absolute_config_value(self, tmp_path):
        target = tmp_path / "elsewhere"
        write_config(tmp_path, json.dumps({"workflowsDir": str(target)}))
        assert get_workflows_dir(tmp_path) == target.resolve()


class TestResolveBaseDir:
    """Tests for the base directory resolution order"""

    def test_explicit_wins(self, tmp_path):
        write_config(tmp_path, json.dumps({"workflowsDir": "configured"}))
        assert resolve_base_dir("explicit", cwd=tmp_path) == Path("explicit")

    def test_config_used_without_explicit(self, tmp_path):
        write_config(tmp_path, json.dumps({"workflowsDir": "configured"}))
        assert resolve_base_dir(None, cwd=tmp_path) == (tmp_path / "configured").resolve()

    def test_working_directory_default(self, tmp_path):
        assert resolve_base_dir(cwd=tmp_path) == (tmp_path / "workflows").resolve()
