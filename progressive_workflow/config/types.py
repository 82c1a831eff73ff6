from pydantic import BaseModel, ConfigDict, Field

DEFAULT_WORKFLOWS_DIR = "workflows"


class WorkflowConfig(BaseModel):
    """Model representing the .progressive-workflow.json configuration"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Relative paths are resolved against the working directory
    workflows_dir: str = Field(default=DEFAULT_WORKFLOWS_DIR, alias="workflowsDir")
