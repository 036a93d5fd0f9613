"""Text helpers shared by the exporter and the web layer."""
import re
from typing import Optional

_WHITESPACE_RUN = re.compile(r"\s+")


def slugify(name: str) -> str:
    """
    Lowercase ``name`` and collapse every run of whitespace to one hyphen.

    Example:
        >>> slugify("North  Shore United")
        'north-shore-united'
    """
    return _WHITESPACE_RUN.sub("-", name.lower())


def clean_optional(value) -> Optional[str]:
    """Strip a free-text field, mapping blank input to ``None``."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None
