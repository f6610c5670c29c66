# src/appsettings/application/expansion.py
"""
Setting Expansion - ``${name}`` Substitution

Replaces ``${name}`` tokens in a setting value with values produced by a
resolver. Expansion is a single left-to-right pass: text that was spliced in
is never scanned again, so a resolved value containing ``${...}`` stays literal.

Files that USE this module:
- appsettings.application.store (SettingsStore.get_setting)

Files that this module USES:
- appsettings.domain.errors (ExpansionError)
"""
from typing import Callable, Optional

from appsettings.domain.errors import ExpansionError

TOKEN_START = "${"
TOKEN_END = "}"


def expand_value(name: str, value: str, resolve: Callable[[str], Optional[str]]) -> str:
    """
    Expand all ``${...}`` tokens of a setting value.

    Args:
        name: Setting being expanded (used in error messages)
        value: Raw setting value
        resolve: Returns the replacement for a token name, or None if unknown

    Returns:
        Expanded value

    Raises:
        ExpansionError: If a token is unterminated or cannot be resolved
    """
    try:
        begin = value.find(TOKEN_START)
        while begin >= 0:
            end = value.find(TOKEN_END, begin + len(TOKEN_START))
            if end < 0:
                raise ExpansionError("Missing '}' in ${<name>}.", setting=name)

            token = value[begin + len(TOKEN_START):end]
            replacement = resolve(token)
            if replacement is None:
                raise ExpansionError(
                    f"Can't find '{token}' in appSettings or environment.", setting=name
                )

            value = value[:begin] + replacement + value[end + 1:]
            begin = value.find(TOKEN_START, begin + len(replacement))
    except Exception as e:
        raise ExpansionError(f"Failed to expand appSetting '{name}'.", setting=name) from e

    return value
