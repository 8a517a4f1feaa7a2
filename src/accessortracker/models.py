"""
Structural model of a class and its members.

The model is produced by a tree builder (see ``java_adapter``) and consumed,
read-only, by the accessor classifier. Statements and expressions are closed
tagged variants: every variant carries a ``kind`` tag and consumers dispatch
on that tag.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, FrozenSet, Iterable, List, Optional, Tuple, Union


class Modifier(Enum):
    """Declaration modifiers relevant to members."""
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    STATIC = "static"
    FINAL = "final"
    ABSTRACT = "abstract"
    DEFAULT = "default"
    SYNCHRONIZED = "synchronized"
    NATIVE = "native"
    TRANSIENT = "transient"
    VOLATILE = "volatile"
    STRICTFP = "strictfp"

    @classmethod
    def from_keywords(cls, keywords: Iterable[str]) -> FrozenSet["Modifier"]:
        """Build a modifier set from source keywords, ignoring unknown ones."""
        known = {m.value: m for m in cls}
        return frozenset(known[k] for k in keywords if k in known)


class MemberKind(Enum):
    FIELD = "field"
    METHOD = "method"
    CONSTRUCTOR = "constructor"


class StatementKind(Enum):
    RETURN = "return"
    ASSIGNMENT = "assignment"
    OTHER = "other"


class ExpressionKind(Enum):
    IDENTIFIER = "identifier"
    LITERAL = "literal"
    OTHER = "other"


@dataclass(frozen=True)
class TypeRef:
    """A declared type, e.g. ``int``, ``String`` or ``boolean[]``."""
    name: str
    dimensions: int = 0

    @property
    def is_void(self) -> bool:
        return self.name == "void" and self.dimensions == 0

    def __str__(self) -> str:
        return self.name + "[]" * self.dimensions


VOID = TypeRef("void")


# Expressions

@dataclass(frozen=True)
class IdentifierReference:
    """A bare identifier (``a``) or a self-qualified one (``this.a``)."""
    name: str
    self_qualified: bool = False
    kind: ClassVar[ExpressionKind] = ExpressionKind.IDENTIFIER


@dataclass(frozen=True)
class Literal:
    value: str
    kind: ClassVar[ExpressionKind] = ExpressionKind.LITERAL


@dataclass(frozen=True)
class OtherExpression:
    """Any expression the classifier does not interpret."""
    text: str = ""
    kind: ClassVar[ExpressionKind] = ExpressionKind.OTHER


Expression = Union[IdentifierReference, Literal, OtherExpression]


# Statements

@dataclass(frozen=True)
class ReturnStatement:
    expression: Optional[Expression] = None
    kind: ClassVar[StatementKind] = StatementKind.RETURN


@dataclass(frozen=True)
class AssignmentStatement:
    """``target <operator> value``; ``operator`` is ``=`` for plain assignment."""
    target: Expression
    value: Expression
    operator: str = "="
    kind: ClassVar[StatementKind] = StatementKind.ASSIGNMENT


@dataclass(frozen=True)
class OtherStatement:
    """Any statement that is neither a return nor an assignment."""
    text: str = ""
    kind: ClassVar[StatementKind] = StatementKind.OTHER


Statement = Union[ReturnStatement, AssignmentStatement, OtherStatement]


# Members

@dataclass(frozen=True)
class Parameter:
    name: str
    type: TypeRef


@dataclass(frozen=True)
class FieldMember:
    """A field declared by a class."""
    name: str
    type: TypeRef
    modifiers: FrozenSet[Modifier] = frozenset()
    line: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "modifiers", frozenset(self.modifiers))

    @property
    def kind(self) -> MemberKind:
        return MemberKind.FIELD

    @property
    def is_private(self) -> bool:
        return Modifier.PRIVATE in self.modifiers

    @property
    def is_static(self) -> bool:
        return Modifier.STATIC in self.modifiers


@dataclass(frozen=True)
class MethodMember:
    """
    A method or constructor.

    ``body`` is ``None`` for declarations without a body (abstract or
    interface methods) and a possibly-empty tuple of statements otherwise.
    """
    name: str
    return_type: TypeRef = VOID
    parameters: Tuple[Parameter, ...] = ()
    body: Optional[Tuple[Statement, ...]] = None
    modifiers: FrozenSet[Modifier] = frozenset()
    is_constructor: bool = False
    line: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "parameters", tuple(self.parameters))
        object.__setattr__(self, "modifiers", frozenset(self.modifiers))
        if self.body is not None:
            object.__setattr__(self, "body", tuple(self.body))

    @property
    def kind(self) -> MemberKind:
        return MemberKind.CONSTRUCTOR if self.is_constructor else MemberKind.METHOD

    @property
    def has_body(self) -> bool:
        return self.body is not None


Member = Union[FieldMember, MethodMember]


@dataclass(frozen=True)
class ClassModel:
    """A declared type and its members in declaration order."""
    name: str
    members: Tuple[Member, ...] = ()
    declaration_kind: str = "class"
    line: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "members", tuple(self.members))

    @property
    def fields(self) -> List[FieldMember]:
        return [m for m in self.members if m.kind is MemberKind.FIELD]

    @property
    def methods(self) -> List[MethodMember]:
        """Methods and constructors, in declaration order."""
        return [m for m in self.members if m.kind is not MemberKind.FIELD]
