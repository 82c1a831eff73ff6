"""
Step-by-step prompt retrieval.

Only the prompt of the requested step is ever read, so a caller walking a workflow
never sees the content of later steps.
"""

import logging
from pathlib import Path
from typing import List, Mapping, Optional, Union

from progressive_workflow.exceptions import (
    NoStepsError,
    PromptFileNotFoundError,
    StepIndexOutOfRangeError,
    WorkflowFileParseError,
    WorkflowNotFoundError,
)
from progressive_workflow.substitution import find_placeholders, substitute_variables
from progressive_workflow.types import (
    WORKFLOW_FILENAME,
    PromptResult,
    StepSpec,
    WorkflowDefinition,
)
from progressive_workflow.yaml_reader import parse_workflow_yaml

logger = logging.getLogger(__name__)


def read_workflow_file(workflow_id: str, base_dir: Union[str, Path]) -> str:
    """Read the raw workflow.yaml content for a workflow.

    Raises:
        WorkflowNotFoundError: If the workflow has no workflow.yaml
        WorkflowFileParseError: If the file cannot be read
    """
    workflow_file = Path(base_dir) / workflow_id / WORKFLOW_FILENAME
    if not workflow_file.is_file():
        raise WorkflowNotFoundError(workflow_id, details={"path": str(workflow_file)})

    try:
        return workflow_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise WorkflowFileParseError(
            f"Failed to read {workflow_file}: {e}", path=str(workflow_file)
        ) from e


def load_workflow(workflow_id: str, base_dir: Union[str, Path]) -> WorkflowDefinition:
    """Load and parse a workflow definition."""
    return parse_workflow_yaml(read_workflow_file(workflow_id, base_dir))


def get_steps(workflow: WorkflowDefinition) -> List[StepSpec]:
    """Return the workflow's steps; a missing or scalar ``steps`` key means no steps."""
    steps = workflow.get("steps")
    if not isinstance(steps, list):
        return []
    return [StepSpec.from_dict(item) for item in steps]


def get_prompt(
    workflow_id: str,
    step_index: int,
    variables: Optional[Mapping[str, Optional[str]]] = None,
    *,
    base_dir: Union[str, Path],
) -> PromptResult:
    """
    Get the prompt for a single workflow step.

    Args:
        workflow_id: Name of the workflow directory under ``base_dir``
        step_index: Zero-based step index
        variables: Values for ``{{NAME}}`` placeholders in the prompt file
        base_dir: Workflows base directory

    Returns:
        PromptResult for the requested step

    Raises:
        WorkflowNotFoundError: If the workflow does not exist
        NoStepsError: If the workflow declares no steps
        StepIndexOutOfRangeError: If step_index is not in 0..total_steps-1
        PromptFileNotFoundError: If the step's prompt file does not exist
        WorkflowFileParseError: If a file cannot be read or the step has no prompt path
    """
    workflow_dir = Path(base_dir) / workflow_id
    steps = get_steps(load_workflow(workflow_id, base_dir))

    if not steps:
        raise NoStepsError(workflow_id)

    total_steps = len(steps)
    if step_index < 0 or step_index >= total_steps:
        raise StepIndexOutOfRangeError(step_index, total_steps)

    step = steps[step_index]
    if not step.prompt:
        raise WorkflowFileParseError(
            f"Step {step_index} of workflow '{workflow_id}' has no prompt",
            path=str(workflow_dir / WORKFLOW_FILENAME),
        )

    # An absolute prompt path still lives under the workflow directory
    prompt_path = workflow_dir / step.prompt.lstrip("/\\")
    if not prompt_path.is_file():
        raise PromptFileNotFoundError(str(prompt_path))

    try:
        content = prompt_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise WorkflowFileParseError(
            f"Failed to read {prompt_path}: {e}", path=str(prompt_path)
        ) from e

    prompt = substitute_variables(content, variables)

    unresolved = find_placeholders(prompt)
    if unresolved:
        logger.debug(
            f"Step {step_index} of '{workflow_id}' has unresolved placeholders: {', '.join(unresolved)}"
        )

    return PromptResult(
        step_index=step_index,
        step_name=step.name or f"step_{step_index}",
        prompt=prompt,
        total_steps=total_steps,
        is_last=step_index == total_steps - 1,
    )
