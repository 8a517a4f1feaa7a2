"""
Checker functions for the getter and setter rules.

Each checker answers one question about a method and returns ``False`` for
any shape it does not recognise.
"""

from typing import Optional

from ..models import (
    Expression,
    ExpressionKind,
    MethodMember,
    Statement,
    StatementKind,
    TypeRef,
)
from .config import AccessorFilterConfig
from .fields import FieldIndex
from .naming import split_accessor_name


def referenced_name(expression: Optional[Expression]) -> Optional[str]:
    """
    Name referenced by a bare or ``this``-qualified identifier.

    Examples:
        a       -> "a"
        this.a  -> "a"
        1, a++  -> None
    """
    if expression is None or expression.kind is not ExpressionKind.IDENTIFIER:
        return None
    return expression.name


def single_statement(method: MethodMember) -> Optional[Statement]:
    """The only statement of the body, or None for absent, empty or longer bodies."""
    if not method.body or len(method.body) != 1:
        return None
    return method.body[0]


def is_boolean_type(type_ref: TypeRef, config: AccessorFilterConfig) -> bool:
    return type_ref.dimensions == 0 and type_ref.name in config.boolean_types


def returns_private_property(method: MethodMember, property_name: str, fields: FieldIndex) -> bool:
    """Body is ``return <property>;`` and ``<property>`` is a private field."""
    statement = single_statement(method)
    if statement is None or statement.kind is not StatementKind.RETURN:
        return False
    if referenced_name(statement.expression) != property_name:
        return False
    return fields.private_field(property_name) is not None


def assigns_private_property(method: MethodMember, property_name: str, fields: FieldIndex) -> bool:
    """Body is ``<property> = ...;`` and ``<property>`` is a private field."""
    statement = single_statement(method)
    if statement is None or statement.kind is not StatementKind.ASSIGNMENT:
        return False
    if statement.operator != "=":
        return False
    if referenced_name(statement.target) != property_name:
        return False
    return fields.private_field(property_name) is not None


def is_getter(method: MethodMember, fields: FieldIndex, config: AccessorFilterConfig) -> bool:
    """
    Check the getter rule.

    Examples:
        int getA() { return a; }          (private int a)
        boolean isA() { return this.a; }  (private boolean a)
    """
    name = split_accessor_name(method.name, config.getter_prefixes)
    if name is None:
        return False

    if name.prefix in config.boolean_prefixes and not is_boolean_type(method.return_type, config):
        return False

    if method.parameters:
        return False

    return returns_private_property(method, name.property, fields)


def is_setter(method: MethodMember, fields: FieldIndex, config: AccessorFilterConfig) -> bool:
    """
    Check the setter rule.

    Example:
        void setA(int a) { this.a = a; }  (private int a)
    """
    name = split_accessor_name(method.name, config.setter_prefixes)
    if name is None:
        return False

    if not method.return_type.is_void:
        return False

    if len(method.parameters) != 1:
        return False

    return assigns_private_property(method, name.property, fields)
