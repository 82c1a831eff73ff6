"""
Configuration loading for progressive workflows.

The workflows base directory is resolved in one place, in this order:

1. an explicit directory given by the caller (e.g. a command-line argument)
2. ``workflowsDir`` from ``.progressive-workflow.json`` in the working directory
3. ``workflows`` under the working directory
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from progressive_workflow.config.types import DEFAULT_WORKFLOWS_DIR, WorkflowConfig
from progressive_workflow.exceptions import ConfigParseError

CONFIG_FILENAME = ".progressive-workflow.json"

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _read_config_file(config_path: Path) -> WorkflowConfig:
    """Read and validate a config file.

    Raises:
        ConfigParseError: If the file is not valid JSON or does not match WorkflowConfig
    """
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
        return WorkflowConfig.model_validate(data)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        raise ConfigParseError(str(e), path=str(config_path)) from e


def load_config(cwd: Optional[PathLike] = None) -> WorkflowConfig:
    """
    Load configuration from .progressive-workflow.json in ``cwd``.

    A missing file gives the defaults. A file that cannot be parsed is logged as a
    warning and also gives the defaults.

    Args:
        cwd: Directory to look in, defaults to the current working directory

    Returns:
        WorkflowConfig
    """
    config_path = Path(cwd if cwd is not None else Path.cwd()) / CONFIG_FILENAME

    if not config_path.is_file():
        return WorkflowConfig()

    try:
        return _read_config_file(config_path)
    except ConfigParseError as e:
        logger.warning(f"Failed to parse {CONFIG_FILENAME}: {e}")
        return WorkflowConfig()


def get_workflows_dir(cwd: Optional[PathLike] = None) -> Path:
    """Get the absolute path to the configured workflows directory."""
    base = Path(cwd if cwd is not None else Path.cwd())
    config = load_config(base)
    return (base / config.workflows_dir).resolve()


def resolve_base_dir(explicit: Optional[PathLike] = None, cwd: Optional[PathLike] = None) -> Path:
    """Resolve the workflows base directory for an entry point.

    Args:
        explicit: Directory supplied by the caller; wins when given
        cwd: Working directory used for the config file and relative paths

    Returns:
        Path of the workflows base directory
    """
    if explicit:
        return Path(explicit)
    return get_workflows_dir(cwd)
