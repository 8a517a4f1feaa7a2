"""accessortracker - Getter and setter detection for Java code metrics."""

__version__ = "0.1.0"

from .models import ClassModel, FieldMember, MethodMember
from .accessor import AccessorClassifier, AccessorFilterConfig, AccessorKind, is_accessor
from .exceptions import AccessorTrackerError

__all__ = [
    "AccessorClassifier",
    "AccessorFilterConfig",
    "AccessorKind",
    "AccessorTrackerError",
    "ClassModel",
    "FieldMember",
    "MethodMember",
    "is_accessor",
]
