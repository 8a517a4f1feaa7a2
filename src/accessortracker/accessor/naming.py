"""
Accessor name parsing.
"""

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class AccessorName:
    """A method name split into its accessor prefix and property."""
    prefix: str
    property: str


def decapitalize(text: str) -> str:
    """Lower-case the first character only: ``Foo`` -> ``foo``, ``URL`` -> ``uRL``."""
    if not text:
        return text
    return text[0].lower() + text[1:]


def split_accessor_name(name: str, prefixes: Iterable[str]) -> Optional[AccessorName]:
    """
    Split ``name`` into prefix and property.

    The part after the prefix must be non-empty and start with an upper-case
    letter, so ``getA`` gives property ``a`` while ``get``, ``geta`` and
    ``issue`` match nothing. Longer prefixes are tried first.

    Examples:
        split_accessor_name("isValid", ("get", "is")) -> AccessorName("is", "valid")
        split_accessor_name("foo", ("get", "is")) -> None
    """
    for prefix in sorted(prefixes, key=len, reverse=True):
        if not name.startswith(prefix):
            continue
        suffix = name[len(prefix):]
        if suffix and suffix[0].isupper():
            return AccessorName(prefix=prefix, property=decapitalize(suffix))
    return None
