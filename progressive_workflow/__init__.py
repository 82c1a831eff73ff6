"""Progressive disclosure prompting workflows.

A workflow is a directory holding a workflow.yaml and one prompt file per step.
Prompts are handed out one step at a time.
"""

from progressive_workflow.exceptions import (
    WorkflowError,
    UsageError,
    ConfigParseError,
    WorkflowNotFoundError,
    NoStepsError,
    StepIndexOutOfRangeError,
    PromptFileNotFoundError,
    WorkflowFileParseError,
    CatalogDirectoryMissingError,
)
from progressive_workflow.types import (
    ArgSpec,
    CatalogEntry,
    PromptResult,
    StepSpec,
    WorkflowDefinition,
)
from progressive_workflow.yaml_reader import (
    parse_workflow_yaml,
    parse_top_level_scalars,
    parse_args_section,
)
from progressive_workflow.substitution import substitute_variables, find_placeholders
from progressive_workflow.prompts import load_workflow, get_steps, get_prompt
from progressive_workflow.args import get_workflow_args
from progressive_workflow.catalog import get_workflow_catalog
from progressive_workflow.config import load_config, get_workflows_dir, resolve_base_dir

__all__ = [
    "WorkflowError",
    "UsageError",
    "ConfigParseError",
    "WorkflowNotFoundError",
    "NoStepsError",
    "StepIndexOutOfRangeError",
    "PromptFileNotFoundError",
    "WorkflowFileParseError",
    "CatalogDirectoryMissingError",
    "ArgSpec",
    "CatalogEntry",
    "PromptResult",
    "StepSpec",
    "WorkflowDefinition",
    "parse_workflow_yaml",
    "parse_top_level_scalars",
    "parse_args_section",
    "substitute_variables",
    "find_placeholders",
    "load_workflow",
    "get_steps",
    "get_prompt",
    "get_workflow_args",
    "get_workflow_catalog",
    "load_config",
    "get_workflows_dir",
    "resolve_base_dir",
]
