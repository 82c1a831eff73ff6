"""
Progressive workflow configuration package.

Resolves the workflows base directory from .progressive-workflow.json.
"""

from progressive_workflow.config.manager import (
    CONFIG_FILENAME,
    load_config,
    get_workflows_dir,
    resolve_base_dir,
)
from progressive_workflow.config.types import DEFAULT_WORKFLOWS_DIR, WorkflowConfig

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_WORKFLOWS_DIR",
    "WorkflowConfig",
    "load_config",
    "get_workflows_dir",
    "resolve_base_dir",
]
