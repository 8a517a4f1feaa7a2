"""
Field lookup for a class model.
"""

from typing import Dict, Optional

from ..models import ClassModel, FieldMember


class FieldIndex:
    """
    Name-to-field mapping for one class.

    Build it once per class with ``FieldIndex.for_class`` and pass it to the
    classifier when classifying many methods of the same class. The first
    declaration of a name wins.
    """

    def __init__(self, fields: Dict[str, FieldMember]):
        self._fields = fields

    @classmethod
    def for_class(cls, class_model: ClassModel) -> "FieldIndex":
        fields: Dict[str, FieldMember] = {}
        for field in class_model.fields:
            fields.setdefault(field.name, field)
        return cls(fields)

    def get(self, name: str) -> Optional[FieldMember]:
        return self._fields.get(name)

    def private_field(self, name: str) -> Optional[FieldMember]:
        """Return the field called ``name`` if it exists and is private."""
        field = self.get(name)
        if field is None or not field.is_private:
            return None
        return field

    def __contains__(self, name: str) -> bool:
        return name in self._fields

    def __len__(self) -> int:
        return len(self._fields)
