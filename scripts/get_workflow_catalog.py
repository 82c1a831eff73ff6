#!/usr/bin/env python3
"""
Get the catalog of workflows in the workflows directory.
Thin wrapper around progressive_workflow.cli.
"""

import sys
from pathlib import Path

# Add project root to sys.path to allow running without installing
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.append(str(project_root))

from progressive_workflow.cli import get_workflow_catalog_main


if __name__ == "__main__":
    sys.exit(get_workflow_catalog_main())
