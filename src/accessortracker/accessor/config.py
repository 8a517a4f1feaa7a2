"""
Configuration for accessor classification.
"""

from dataclasses import dataclass
from typing import Set, Tuple


@dataclass
class AccessorFilterConfig:
    """Configuration for accessor classification."""

    enable_getter_rule: bool = True
    enable_setter_rule: bool = True

    # Name prefixes; the remainder of the name must start with an upper-case letter
    getter_prefixes: Tuple[str, ...] = ("get", "is")
    setter_prefixes: Tuple[str, ...] = ("set",)

    # Getter prefixes that require a boolean return type
    boolean_prefixes: Tuple[str, ...] = ("is",)

    # Type names accepted as boolean
    boolean_types: Set[str] = None

    def __post_init__(self):
        if self.boolean_types is None:
            self.boolean_types = {"boolean"}
        self.getter_prefixes = tuple(self.getter_prefixes)
        self.setter_prefixes = tuple(self.setter_prefixes)
        self.boolean_prefixes = tuple(self.boolean_prefixes)
        self.boolean_types = set(self.boolean_types)
