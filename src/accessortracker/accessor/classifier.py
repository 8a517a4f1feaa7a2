"""
Accessor classifier: decides whether a method is a plain getter or setter.
"""

import logging
from enum import Enum
from typing import Dict, Iterable, List, Optional

from ..models import ClassModel, Member, MemberKind, MethodMember
from . import checkers
from .config import AccessorFilterConfig
from .fields import FieldIndex

logger = logging.getLogger(__name__)


class AccessorKind(Enum):
    GETTER = "getter"
    SETTER = "setter"


class AccessorClassifier:
    """
    Classifies methods of a class model as getters, setters or neither.

    A getter returns one private field and a setter assigns one private field,
    each in a single-statement body and following the ``get``/``is``/``set``
    naming convention. Anything else, including constructors and methods
    without a body, is not an accessor.

    The classifier holds only its configuration and can be shared across
    threads.
    """

    def __init__(self, config: Optional[AccessorFilterConfig] = None):
        self.config = config or AccessorFilterConfig()

    def is_accessor(self, class_model: ClassModel, member: Member,
                    fields: Optional[FieldIndex] = None) -> bool:
        """
        Determine if ``member`` is an accessor of ``class_model``.

        Args:
            class_model: Class declaring the member
            member: Method, constructor or field to check
            fields: Optional prebuilt field index for ``class_model``

        Returns:
            True if the member is a getter or a setter, False otherwise
        """
        return self.classify(class_model, member, fields) is not None

    def classify(self, class_model: ClassModel, member: Member,
                 fields: Optional[FieldIndex] = None) -> Optional[AccessorKind]:
        """Return the accessor kind of ``member``, or None."""
        if member.kind is not MemberKind.METHOD:
            logger.debug(f"{class_model.name}.{member.name}: {member.kind.value}, not an accessor")
            return None
        if not member.has_body:
            logger.debug(f"{class_model.name}.{member.name}: no body, not an accessor")
            return None

        if fields is None:
            fields = FieldIndex.for_class(class_model)

        if self.config.enable_getter_rule and checkers.is_getter(member, fields, self.config):
            kind = AccessorKind.GETTER
        elif self.config.enable_setter_rule and checkers.is_setter(member, fields, self.config):
            kind = AccessorKind.SETTER
        else:
            kind = None

        logger.debug(f"{class_model.name}.{member.name}: {kind.value if kind else 'not an accessor'}")
        return kind

    def find_accessors(self, class_model: ClassModel) -> List[MethodMember]:
        """Return the accessor methods of a class, in declaration order."""
        fields = FieldIndex.for_class(class_model)
        return [m for m in class_model.methods if self.is_accessor(class_model, m, fields)]

    def filter_members(self, class_model: ClassModel) -> List[MethodMember]:
        """
        Return the methods and constructors that are not accessors.

        This is the set a metrics pass (complexity, duplication) should keep.
        """
        fields = FieldIndex.for_class(class_model)
        return [m for m in class_model.methods if not self.is_accessor(class_model, m, fields)]

    def get_accessor_stats(self, class_models: Iterable[ClassModel]) -> Dict:
        """
        Get statistics about accessors across class models.

        Args:
            class_models: Class models to analyze

        Returns:
            Dictionary with accessor statistics
        """
        stats = {
            'total_methods': 0,
            'accessors': 0,
            'by_type': {
                'getter': 0,
                'setter': 0,
                'constructor': 0,
                'no_body': 0,
            }
        }

        for class_model in class_models:
            fields = FieldIndex.for_class(class_model)
            for member in class_model.methods:
                stats['total_methods'] += 1

                if member.is_constructor:
                    stats['by_type']['constructor'] += 1
                    continue
                if not member.has_body:
                    stats['by_type']['no_body'] += 1
                    continue

                kind = self.classify(class_model, member, fields)
                if kind is not None:
                    stats['by_type'][kind.value] += 1
                    stats['accessors'] += 1

        total = stats['total_methods']
        stats['accessor_rate'] = stats['accessors'] / total if total > 0 else 0.0

        return stats


_default_classifier = AccessorClassifier()


def is_accessor(class_model: ClassModel, member: Member) -> bool:
    """Classify ``member`` with the default configuration."""
    return _default_classifier.is_accessor(class_model, member)
