"""Restricted YAML reader for workflow.yaml files.

Only a narrow subset of YAML is understood:

- top-level ``key: value`` scalars (one optional pair of surrounding quotes is removed)
- a top-level ``key:`` with an empty value followed by an indented list of flat objects::

      steps:
        - name: review
          prompt: prompts/review.md

- ``true`` / ``false`` field values inside list items (other than the first field of an
  item) are converted to booleans

Anything else (maps of maps, multiline strings, flow collections, anchors) simply does
not match any line pattern and is ignored.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from progressive_workflow.types import ArgSpec, ItemObject, WorkflowDefinition

logger = logging.getLogger(__name__)

TOP_LEVEL_PATTERN = re.compile(r"^(\w+):\s*(.*)$", re.ASCII)
ARRAY_ITEM_PATTERN = re.compile(r"^(\s+)-\s+(\w+):\s*(.*)$", re.ASCII)
NESTED_FIELD_PATTERN = re.compile(r"^(\s+)(\w+):\s*(.*)$", re.ASCII)

ARGS_SECTION_START = re.compile(r"^args:\s*$")
ARGS_SECTION_END = re.compile(r"^[a-z]+:")

QUOTE_CHARS = ('"', "'")


class LineKind(str, Enum):
    """Classification of a single workflow.yaml line"""
    BLANK = "blank"
    COMMENT = "comment"
    TOP_LEVEL_SCALAR = "top_level_scalar"
    TOP_LEVEL_EMPTY_KEY = "top_level_empty_key"
    ARRAY_ITEM_START = "array_item_start"
    NESTED_FIELD = "nested_field"
    UNRECOGNIZED = "unrecognized"


class ParserState(str, Enum):
    """States of the reader while walking the lines"""
    IDLE = "idle"
    IN_ARRAY = "in_array"


@dataclass
class ParsedLine:
    """A classified line with its key and raw value (if any)."""
    kind: LineKind
    key: Optional[str] = None
    value: Optional[str] = None


def strip_quotes(value: str) -> str:
    """Trim a value and remove one symmetric pair of surrounding quotes."""
    value = value.strip()
    if len(value) >= 2 and value[0] in QUOTE_CHARS and value[-1] == value[0]:
        value = value[1:-1].strip()
    return value


def classify_line(line: str) -> ParsedLine:
    """Classify a line; patterns are tried in order of precedence."""
    stripped = line.strip()
    if not stripped:
        return ParsedLine(LineKind.BLANK)
    if stripped.startswith("#"):
        return ParsedLine(LineKind.COMMENT)

    match = TOP_LEVEL_PATTERN.match(line)
    if match:
        key, rest = match.group(1), match.group(2)
        if rest.strip():
            return ParsedLine(LineKind.TOP_LEVEL_SCALAR, key, rest)
        return ParsedLine(LineKind.TOP_LEVEL_EMPTY_KEY, key)

    match = ARRAY_ITEM_PATTERN.match(line)
    if match:
        return ParsedLine(LineKind.ARRAY_ITEM_START, match.group(2), match.group(3))

    match = NESTED_FIELD_PATTERN.match(line)
    if match:
        return ParsedLine(LineKind.NESTED_FIELD, match.group(2), match.group(3))

    return ParsedLine(LineKind.UNRECOGNIZED)


def _coerce_field(value: str):
    value = strip_quotes(value)
    if value == "true":
        return True
    if value == "false":
        return False
    return value


class _SequenceBuilder:
    """Accumulates the list of item objects for one top-level key."""

    def __init__(self, key: str):
        self.key = key
        self.items: List[ItemObject] = []
        self.current: ItemObject = {}

    def start_item(self, field: str, value: str):
        self.flush_item()
        self.current = {field: strip_quotes(value)}

    def set_field(self, field: str, value: str):
        self.current[field] = _coerce_field(value)

    def flush_item(self):
        if self.current:
            self.items.append(self.current)
        self.current = {}

    def finish(self) -> List[ItemObject]:
        self.flush_item()
        return self.items


def parse_workflow_yaml(content: str) -> WorkflowDefinition:
    """
    Parse the restricted YAML subset used by workflow.yaml files.

    Args:
        content: File content

    Returns:
        Mapping of top-level keys to scalar strings or lists of item objects.
        A key declared with an empty value but never followed by list items is
        left out of the result.
    """
    result: WorkflowDefinition = {}
    state = ParserState.IDLE
    current_key = ""
    builder: Optional[_SequenceBuilder] = None

    def commit():
        # Items seen before any empty top-level key have nowhere to go
        if builder.key:
            result[builder.key] = builder.finish()

    for line in content.splitlines():
        parsed = classify_line(line)

        if parsed.kind in (LineKind.BLANK, LineKind.COMMENT):
            continue

        if parsed.kind in (LineKind.TOP_LEVEL_SCALAR, LineKind.TOP_LEVEL_EMPTY_KEY):
            if state == ParserState.IN_ARRAY:
                commit()
                builder = None
                state = ParserState.IDLE
            if parsed.kind == LineKind.TOP_LEVEL_SCALAR:
                result[parsed.key] = strip_quotes(parsed.value)
            else:
                current_key = parsed.key
            continue

        if parsed.kind == LineKind.ARRAY_ITEM_START:
            if builder is None:
                builder = _SequenceBuilder(current_key)
            builder.start_item(parsed.key, parsed.value)
            state = ParserState.IN_ARRAY
            continue

        if parsed.kind == LineKind.NESTED_FIELD and state == ParserState.IN_ARRAY:
            builder.set_field(parsed.key, parsed.value)
            continue

        logger.debug(f"Ignoring unrecognized workflow line: {line!r}")

    if state == ParserState.IN_ARRAY:
        commit()

    return result


def parse_top_level_scalars(content: str) -> Dict[str, str]:
    """Parse only top-level ``key: value`` lines with a non-empty value.

    Lists and nested fields are never looked at, which keeps catalog scans cheap and
    tolerant of anything unusual further down the file.
    """
    result: Dict[str, str] = {}
    for line in content.splitlines():
        parsed = classify_line(line)
        if parsed.kind == LineKind.TOP_LEVEL_SCALAR:
            value = strip_quotes(parsed.value)
            if value:
                result[parsed.key] = value
    return result


def parse_args_section(content: str) -> List[ArgSpec]:
    """
    Parse only the ``args:`` section of a workflow file.

    The section starts at a line that is exactly ``args:`` and ends at the next
    top-level lowercase key other than a repeated ``args:``, which continues the
    section. Items without a name are dropped, and nothing after the section's
    end is read.

    Args:
        content: File content

    Returns:
        Argument declarations in file order
    """
    args: List[ArgSpec] = []
    in_args = False
    current: Optional[ItemObject] = None

    def flush():
        if current and current.get("name"):
            args.append(ArgSpec.from_dict(current))

    for line in content.splitlines():
        parsed = classify_line(line)
        if parsed.kind in (LineKind.BLANK, LineKind.COMMENT):
            continue

        if ARGS_SECTION_START.match(line):
            in_args = True
            continue

        if not in_args:
            continue

        if ARGS_SECTION_END.match(line):
            flush()
            return args

        if parsed.kind == LineKind.ARRAY_ITEM_START:
            flush()
            current = {parsed.key: strip_quotes(parsed.value)}
        elif parsed.kind == LineKind.NESTED_FIELD and current is not None:
            current[parsed.key] = _coerce_field(parsed.value)
        else:
            logger.debug(f"Ignoring unrecognized args line: {line!r}")

    flush()
    return args
