"""{{variable}} substitution for translation strings."""

import re
from typing import Any, Mapping

from localization.navigation import navigate_object

VARIABLE_PATTERN = re.compile(r"\{\{\s*([\w.\-]+)\s*\}\}")


def replace_vars(text: str, variables: Mapping[str, Any]) -> str:
    """Replace {{name}} placeholders with values from variables.

    Dotted names look up nested mappings (``{{user.name}}``). Placeholders
    without a matching variable are left as they are.

    Args:
        text: String with placeholders.
        variables: Mapping of variable name to value.

    Returns:
        The string with every known placeholder replaced.
    """

    def _substitute(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name in variables:
            return str(variables[name])

        result = navigate_object(variables, name)
        if result.found:
            return str(result.value)
        return match.group(0)

    return VARIABLE_PATTERN.sub(_substitute, text)
