"""
User-facing strings for syntax style validation.

All text shown in the validation panel goes through `localize`, so a
translation table can be swapped in without touching the callers.
"""

from typing import Dict


NO_ERROR_FOUND = "No error was found."
ONE_ERROR_FOUND = "An error was found!"
ERRORS_FOUND = "%i errors were found!"

MULTIPLE_REGISTERED = "multiple registered."
REGEX_ERROR = "Regex Error: %s"
BLOCK_COMMENT_NEEDS_BOTH = "Block comment needs both begin delimiter and end delimiter."

SUCCESS_GLYPH = "✅"
WARNING_GLYPH = "⚠️"

# Display labels for syntax type keys
TYPE_LABELS: Dict[str, str] = {
    "keywords": "Keywords",
    "commands": "Commands",
    "types": "Types",
    "attributes": "Attributes",
    "variables": "Variables",
    "values": "Values",
    "numbers": "Numbers",
    "strings": "Strings",
    "characters": "Characters",
    "comments": "Comments",
    "outline": "Outline",
    "block comment": "Block comment",
}

_translations: Dict[str, str] = {}


def localize(text: str) -> str:
    """Return the translated form of `text`, or `text` itself."""
    return _translations.get(text, text)


def install_translations(table: Dict[str, str]) -> None:
    """Replace the active translation table."""
    global _translations
    _translations = dict(table)


def type_label(type_key: str) -> str:
    """Human-readable label for a syntax type key."""
    return localize(TYPE_LABELS.get(type_key, type_key))
