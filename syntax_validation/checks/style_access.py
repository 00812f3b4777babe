"""
Style Access Helpers

Safe lookups into user-authored style mappings, which may be missing keys
or hold values of the wrong shape.
"""

import logging
from typing import Dict, Any, List, Optional

logger = logging.getLogger(__name__)

# Highlight definition lists, in the order they are validated
SYNTAX_TYPE_KEYS = (
    'keywords',
    'commands',
    'types',
    'attributes',
    'variables',
    'values',
    'numbers',
    'strings',
    'characters',
    'comments',
)


def get_nested_value(data: Dict[str, Any], path: str) -> Optional[Any]:
    """
    Safely retrieve a value from nested dictionary using dot notation.

    Args:
        data: The dictionary to search
        path: Dot-separated path (e.g., "commentDelimiters.beginDelimiter")

    Returns:
        The value if found, None otherwise

    Examples:
        >>> get_nested_value({"commentDelimiters": {"beginDelimiter": "/*"}}, "commentDelimiters.beginDelimiter")
        '/*'
        >>> get_nested_value({"commentDelimiters": {}}, "commentDelimiters.endDelimiter")
        None
    """
    current = data

    for key in path.split('.'):
        if not isinstance(current, dict):
            return None
        current = current.get(key)
        if current is None:
            return None

    return current


def get_definitions(style: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    """
    Return the definition list stored under `key`.

    Non-list values and non-mapping entries are dropped.
    """
    definitions = style.get(key)

    if definitions is None:
        return []
    if not isinstance(definitions, list):
        logger.warning(f"Ignoring '{key}': expected a list, got {type(definitions).__name__}")
        return []

    return [d for d in definitions if isinstance(d, dict)]
