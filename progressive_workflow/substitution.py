"""Placeholder substitution for prompt files."""

import re
from typing import List, Mapping, Optional

PLACEHOLDER_PATTERN = re.compile(r"\{\{([A-Za-z0-9_]+)\}\}")


def substitute_variables(content: str, variables: Optional[Mapping[str, Optional[str]]] = None) -> str:
    """
    Replace ``{{NAME}}`` placeholders with values from ``variables``.

    Placeholders with no value (missing or None) are kept verbatim. Replacement text
    is not scanned again.

    Args:
        content: Prompt text
        variables: Placeholder name to value mapping

    Returns:
        Text with known placeholders replaced
    """
    if not variables:
        return content

    def replace(match: "re.Match[str]") -> str:
        value = variables.get(match.group(1))
        return match.group(0) if value is None else value

    return PLACEHOLDER_PATTERN.sub(replace, content)


def find_placeholders(content: str) -> List[str]:
    """Return placeholder names in order of first appearance."""
    names: List[str] = []
    for name in PLACEHOLDER_PATTERN.findall(content):
        if name not in names:
            names.append(name)
    return names
