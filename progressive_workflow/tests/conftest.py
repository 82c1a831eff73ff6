"""Shared fixtures for progressive workflow tests"""

import logging
from pathlib import Path
from typing import Dict, Optional

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the sample-workflow fixture"""
    return FIXTURES_DIR


@pytest.fixture
def make_workflow(tmp_path):
    """Factory that writes a workflow directory under tmp_path/workflows"""
    base_dir = tmp_path / "workflows"
    base_dir.mkdir()

    def _make(workflow_id: str, yaml_content: str, prompts: Optional[Dict[str, str]] = None) -> Path:
        workflow_dir = base_dir / workflow_id
        workflow_dir.mkdir(parents=True)
        (workflow_dir / "workflow.yaml").write_text(yaml_content, encoding="utf-8")
        for relative_path, text in (prompts or {}).items():
            prompt_file = workflow_dir / relative_path
            prompt_file.parent.mkdir(parents=True, exist_ok=True)
            prompt_file.write_text(text, encoding="utf-8")
        return base_dir

    return _make


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI installs so later tests don't write to a closed stream"""
    yield
    package_logger = logging.getLogger("progressive_workflow")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
