"""Type definitions and data structures for progressive workflows."""

from typing import Dict, List, Any, Union
from dataclasses import dataclass, asdict


# A parsed workflow.yaml: top-level scalars plus lists of flat item objects
FieldValue = Union[str, bool]
ItemObject = Dict[str, FieldValue]
WorkflowDefinition = Dict[str, Union[str, List[ItemObject]]]

WORKFLOW_FILENAME = "workflow.yaml"


@dataclass
class StepSpec:
    """A single workflow step backed by a prompt file."""
    name: str
    prompt: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StepSpec":
        """Create from a parsed item object. Missing fields become empty strings."""
        name = data.get("name", "")
        prompt = data.get("prompt", "")
        return cls(
            name=name if isinstance(name, str) else str(name).lower(),
            prompt=prompt if isinstance(prompt, str) else str(prompt).lower(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ArgSpec:
    """An argument declared in a workflow's args section."""
    name: str
    description: str = ""
    required: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArgSpec":
        """Create from a parsed item object.

        Only a boolean True or the literal string "true" marks an argument as required.
        """
        required = data.get("required", False)
        if isinstance(required, str):
            required = required == "true"
        return cls(
            name=str(data.get("name", "")),
            description=str(data.get("description", "")),
            required=required is True,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PromptResult:
    """The prompt for one step, with enough metadata to request the next one."""
    step_index: int
    step_name: str
    prompt: str
    total_steps: int
    is_last: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CatalogEntry:
    """Summary of a workflow as listed in the catalog."""
    id: str
    name: str
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
