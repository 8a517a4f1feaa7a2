"""
Report entities produced by scanning Java files for accessors.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class AccessorRecord:
    """One accessor method found in a class."""

    class_name: str
    method_name: str
    kind: str
    line: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'class': self.class_name,
            'method': self.method_name,
            'kind': self.kind,
            'line': self.line,
        }


@dataclass
class FileReport:
    """Accessors found in one source file."""

    path: str
    records: List[AccessorRecord] = field(default_factory=list)
    class_count: int = 0
    method_count: int = 0
    error: Optional[str] = None

    @property
    def accessor_count(self) -> int:
        return len(self.records)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path': self.path,
            'classes': self.class_count,
            'methods': self.method_count,
            'accessors': [r.to_dict() for r in self.records],
            'error': self.error,
        }
