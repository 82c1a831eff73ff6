"""Argument declarations of a workflow."""

from pathlib import Path
from typing import List, Union

from progressive_workflow.prompts import read_workflow_file
from progressive_workflow.types import ArgSpec
from progressive_workflow.yaml_reader import parse_args_section


def get_workflow_args(workflow_id: str, base_dir: Union[str, Path]) -> List[ArgSpec]:
    """
    Get the arguments a workflow declares, in declaration order.

    Args:
        workflow_id: Name of the workflow directory under ``base_dir``
        base_dir: Workflows base directory

    Returns:
        List of ArgSpec, empty if the workflow has no args section

    Raises:
        WorkflowNotFoundError: If the workflow does not exist
    """
    return parse_args_section(read_workflow_file(workflow_id, base_dir))
