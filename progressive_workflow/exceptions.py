"""Custom exceptions for progressive workflow access."""

from typing import Optional, Any, Dict


class WorkflowError(Exception):
    """Base exception for all progressive workflow errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON error payload emitted by the command-line tools."""
        return {"error": self.message}


class UsageError(WorkflowError):
    """Raised when a command-line tool is invoked with invalid arguments."""


class ConfigParseError(WorkflowError):
    """Raised when the configuration file cannot be parsed."""

    def __init__(self, message: str, path: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.path = path


class WorkflowNotFoundError(WorkflowError):
    """Raised when a workflow directory has no workflow.yaml."""

    def __init__(self, workflow_id: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Workflow not found: {workflow_id}", details)
        self.workflow_id = workflow_id


class NoStepsError(WorkflowError):
    """Raised when a workflow declares no steps."""

    def __init__(self, workflow_id: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Workflow '{workflow_id}' has no steps", details)
        self.workflow_id = workflow_id


class StepIndexOutOfRangeError(WorkflowError):
    """Raised when a requested step index is outside 0..total_steps-1."""

    def __init__(self, step_index: int, total_steps: int, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            f"Step index {step_index} out of range (0-{total_steps - 1})", details
        )
        self.step_index = step_index
        self.total_steps = total_steps


class PromptFileNotFoundError(WorkflowError):
    """Raised when a step references a prompt file that does not exist."""

    def __init__(self, path: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Prompt file not found: {path}", details)
        self.path = path


class WorkflowFileParseError(WorkflowError):
    """Raised when a workflow file exists but cannot be read or used."""

    def __init__(self, message: str, path: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.path = path


class CatalogDirectoryMissingError(WorkflowError):
    """Raised when the workflows directory to list does not exist."""

    def __init__(self, base_dir: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Workflows directory not found: {base_dir}", details)
        self.base_dir = base_dir
        self.hint = f"Please create the directory '{base_dir}' and add workflow definitions."

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "hint": self.hint}
