"""Workflow catalog: id, name and description of every workflow in a directory."""

import logging
from pathlib import Path
from typing import List, Union

from progressive_workflow.exceptions import CatalogDirectoryMissingError
from progressive_workflow.types import WORKFLOW_FILENAME, CatalogEntry
from progressive_workflow.yaml_reader import parse_top_level_scalars

logger = logging.getLogger(__name__)


def require_workflows_dir(base_dir: Union[str, Path]) -> Path:
    """Return ``base_dir`` as a Path, raising if it does not exist."""
    path = Path(base_dir)
    if not path.exists():
        raise CatalogDirectoryMissingError(str(base_dir))
    return path


def get_workflow_catalog(base_dir: Union[str, Path]) -> List[CatalogEntry]:
    """
    List the workflows found under ``base_dir``.

    Every subdirectory holding a workflow.yaml becomes an entry, in directory listing
    order. Only top-level scalars are read. A workflow whose file cannot be read is
    logged and skipped.

    Args:
        base_dir: Workflows base directory

    Returns:
        List of CatalogEntry, empty if ``base_dir`` does not exist
    """
    catalog: List[CatalogEntry] = []
    base_path = Path(base_dir)

    if not base_path.is_dir():
        logger.debug(f"Workflows directory does not exist: {base_path}")
        return catalog

    for entry in base_path.iterdir():
        if not entry.is_dir():
            continue

        workflow_file = entry / WORKFLOW_FILENAME
        if not workflow_file.is_file():
            continue

        try:
            data = parse_top_level_scalars(workflow_file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to parse {workflow_file}: {e}")
            continue

        catalog.append(
            CatalogEntry(
                id=entry.name,
                name=data.get("name") or entry.name,
                description=data.get("description", ""),
            )
        )

    return catalog
