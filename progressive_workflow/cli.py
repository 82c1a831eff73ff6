"""
Command-line entry points for progressive workflows.

Each tool prints its result as indented JSON on stdout. Any failure, including bad
arguments, is reported as a single-line JSON object with an ``error`` field on stderr
and exit status 1.
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, Callable, Dict, List, Optional

from progressive_workflow.args import get_workflow_args
from progressive_workflow.catalog import get_workflow_catalog, require_workflows_dir
from progressive_workflow.config import resolve_base_dir
from progressive_workflow.exceptions import UsageError, WorkflowError
from progressive_workflow.prompts import get_prompt

LOG_LEVEL_ENV = "PROGRESSIVE_WORKFLOW_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


class JsonErrorArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of printing and exiting with 2."""

    def error(self, message: str):
        raise UsageError(f"{message}. {self.format_usage().strip()}")


def setup_logging() -> None:
    """Send package log records to stderr.

    The level comes from PROGRESSIVE_WORKFLOW_LOG_LEVEL and defaults to WARNING.
    """
    package_logger = logging.getLogger("progressive_workflow")

    # Replace handlers so repeated calls don't stack them or keep a stale stderr
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(console_handler)
    package_logger.setLevel(level)


def create_next_prompt_parser() -> argparse.ArgumentParser:
    """Create the argument parser for get_next_prompt."""
    parser = JsonErrorArgumentParser(
        prog="get_next_prompt",
        description="Print the prompt of one workflow step as JSON.",
        epilog='Example: get_next_prompt review 0 \'{"PR_NUMBER": "123"}\'',
    )
    parser.add_argument("workflow_id", help="Workflow directory name")
    parser.add_argument("step_index", type=int, help="Zero-based step index")
    parser.add_argument(
        "variables_json",
        nargs="?",
        default=None,
        help="JSON object with values for {{NAME}} placeholders",
    )
    parser.add_argument(
        "base_dir",
        nargs="?",
        default=None,
        help="Workflows directory (default: from .progressive-workflow.json or ./workflows)",
    )
    return parser


def create_workflow_args_parser() -> argparse.ArgumentParser:
    """Create the argument parser for get_workflow_args."""
    parser = JsonErrorArgumentParser(
        prog="get_workflow_args",
        description="Print the arguments a workflow declares as JSON.",
    )
    parser.add_argument("workflow_id", help="Workflow directory name")
    parser.add_argument(
        "base_dir",
        nargs="?",
        default=None,
        help="Workflows directory (default: from .progressive-workflow.json or ./workflows)",
    )
    return parser


def create_workflow_catalog_parser() -> argparse.ArgumentParser:
    """Create the argument parser for get_workflow_catalog."""
    parser = JsonErrorArgumentParser(
        prog="get_workflow_catalog",
        description="Print id, name and description of every workflow as JSON.",
    )
    parser.add_argument(
        "base_dir",
        nargs="?",
        default=None,
        help="Workflows directory (default: from .progressive-workflow.json or ./workflows)",
    )
    return parser


def parse_variables(variables_json: Optional[str]) -> Dict[str, Optional[str]]:
    """
    Decode the variables argument.

    Strings are used as-is, null leaves the placeholder untouched and any other
    value is substituted with its JSON text.

    Raises:
        UsageError: If the argument is not a JSON object
    """
    if not variables_json:
        return {}

    try:
        data = json.loads(variables_json)
    except json.JSONDecodeError as e:
        raise UsageError(f"Invalid variables JSON: {e}") from e

    if not isinstance(data, dict):
        raise UsageError("Variables JSON must be an object")

    return {
        name: value if value is None or isinstance(value, str) else json.dumps(value)
        for name, value in data.items()
    }


def print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def report_error(error: Exception) -> int:
    """Write the JSON error payload to stderr and return the exit status."""
    if isinstance(error, WorkflowError):
        payload = error.to_dict()
    else:
        logger.debug("Unexpected error", exc_info=error)
        payload = {"error": str(error)}
    print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
    return 1


def _run(parser: argparse.ArgumentParser, argv: Optional[List[str]], action: Callable[[argparse.Namespace], Any]) -> int:
    setup_logging()
    try:
        args = parser.parse_args(argv)
        result = action(args)
    except Exception as e:
        return report_error(e)
    print_json(result)
    return 0


def _next_prompt(args: argparse.Namespace) -> Dict[str, Any]:
    variables = parse_variables(args.variables_json)
    base_dir = resolve_base_dir(args.base_dir)
    return get_prompt(args.workflow_id, args.step_index, variables, base_dir=base_dir).to_dict()


def _workflow_args(args: argparse.Namespace) -> List[Dict[str, Any]]:
    base_dir = resolve_base_dir(args.base_dir)
    return [arg.to_dict() for arg in get_workflow_args(args.workflow_id, base_dir)]


def _workflow_catalog(args: argparse.Namespace) -> List[Dict[str, Any]]:
    base_dir = require_workflows_dir(resolve_base_dir(args.base_dir))
    return [entry.to_dict() for entry in get_workflow_catalog(base_dir)]


def get_next_prompt_main(argv: Optional[List[str]] = None) -> int:
    """Entry point for get_next_prompt <workflow_id> <step_index> [variables_json] [base_dir]."""
    return _run(create_next_prompt_parser(), argv, _next_prompt)


def get_workflow_args_main(argv: Optional[List[str]] = None) -> int:
    """Entry point for get_workflow_args <workflow_id> [base_dir]."""
    return _run(create_workflow_args_parser(), argv, _workflow_args)


def get_workflow_catalog_main(argv: Optional[List[str]] = None) -> int:
    """Entry point for get_workflow_catalog [base_dir]."""
    return _run(create_workflow_catalog_parser(), argv, _workflow_catalog)
