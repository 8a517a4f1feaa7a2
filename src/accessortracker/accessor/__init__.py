"""
Accessor classification for accessortracker.

This package decides whether a method is a plain getter or setter of a
private field, so that metrics can leave such methods out.
"""

from .config import AccessorFilterConfig
from .fields import FieldIndex
from .naming import AccessorName, decapitalize, split_accessor_name
from .classifier import AccessorClassifier, AccessorKind, is_accessor
from .checkers import (
    is_getter,
    is_setter,
    referenced_name,
)

__all__ = [
    'AccessorFilterConfig',
    'AccessorClassifier',
    'AccessorKind',
    'AccessorName',
    'FieldIndex',
    'decapitalize',
    'is_accessor',
    'is_getter',
    'is_setter',
    'referenced_name',
    'split_accessor_name',
]
