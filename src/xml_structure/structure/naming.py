"""Element and attribute name sanitization.

Names such as ``xsi:type`` or ``data-id`` are not usable as identifier keys, so
disallowed characters are replaced by readable substrings before a name is
stored in a structure.
"""

import re
from functools import lru_cache
from typing import Tuple

from xml_structure.shared.config import DEFAULT_NAME_SUBSTITUTIONS


@lru_cache(maxsize=32)
def _compile_substitutions(substitutions: Tuple[Tuple[str, str], ...]) -> "re.Pattern[str]":
    # Longest source first so overlapping sources match greedily
    sources = sorted((source for source, _ in substitutions), key=len, reverse=True)
    return re.compile("|".join(re.escape(source) for source in sources))


def sanitize_name(
    name: str,
    substitutions: Tuple[Tuple[str, str], ...] = DEFAULT_NAME_SUBSTITUTIONS
) -> str:
    """Replace disallowed characters in a name with safe substrings.

    The scan runs once, left to right, without overlaps, so replacement text
    is never substituted again.

    Args:
        name: Raw element or attribute name
        substitutions: Pairs of (source, replacement)

    Returns:
        Sanitized name

    Examples:
        >>> sanitize_name("a-b:c.d")
        'a_dash_b_colon_c_dot_d'
    """
    if not substitutions or not name:
        return name

    table = dict(substitutions)
    pattern = _compile_substitutions(substitutions)
    return pattern.sub(lambda match: table[match.group(0)], name)
