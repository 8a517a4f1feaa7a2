"""
Java source -> class model builder.

Parses a Java compilation unit with javalang and produces one ``ClassModel``
per class, interface or enum declaration, nested declarations included.
Statements and expressions are reduced to the closed variants of
``accessortracker.models``: anything the classifier does not interpret
becomes an ``OtherStatement`` or ``OtherExpression``.
"""

import logging
from typing import Iterator, List, Optional

import javalang  # type: ignore

from .exceptions import CodeAnalysisError
from .models import (
    VOID,
    AssignmentStatement,
    ClassModel,
    Expression,
    FieldMember,
    IdentifierReference,
    Literal,
    Member,
    MethodMember,
    Modifier,
    OtherExpression,
    OtherStatement,
    Parameter,
    ReturnStatement,
    Statement,
    TypeRef,
)

logger = logging.getLogger(__name__)

_TYPE_DECLARATIONS = {
    javalang.tree.ClassDeclaration: "class",
    javalang.tree.InterfaceDeclaration: "interface",
    javalang.tree.EnumDeclaration: "enum",
}


def _line(node) -> Optional[int]:
    position = getattr(node, "position", None)
    return position.line if position else None


def _is_plain(node) -> bool:
    """No prefix/postfix operators and no selectors (``a``, not ``!a``, ``a++`` or ``a[0]``)."""
    return not (
        getattr(node, "prefix_operators", None)
        or getattr(node, "postfix_operators", None)
        or getattr(node, "selectors", None)
    )


class JavaModelBuilder:
    """
    Java -> ClassModel builder.

    Only the parts of a declaration the accessor classifier looks at are
    kept: member names, modifiers, parameter and return types, and the
    statement shapes of method bodies.
    """

    language = "java"

    # ---------------- Parsing entry points ----------------

    def parse_to_ast(self, code: str):
        try:
            return javalang.parse.parse(code)
        except javalang.parser.JavaSyntaxError as e:
            raise CodeAnalysisError(f"Java syntax error: {e.description}") from e
        except javalang.tokenizer.LexerError as e:
            raise CodeAnalysisError(f"Java lexer error: {e}") from e
        except RecursionError as e:
            # javalang descends once per nesting level
            raise CodeAnalysisError("Java source too deeply nested to parse") from e

    def parse(self, code: str, filename: Optional[str] = None) -> List[ClassModel]:
        """
        Build class models for every type declared in ``code``.

        Raises:
            CodeAnalysisError: if the source is not valid Java
        """
        tree = self.parse_to_ast(code)
        models = [self._class_model(decl) for decl in self._type_declarations(tree.types)]
        logger.debug(f"Built {len(models)} class models from {filename or '<source>'}")
        return models

    def parse_file(self, path: str, encoding: str = "utf-8") -> List[ClassModel]:
        try:
            with open(path, "r", encoding=encoding) as f:
                code = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise CodeAnalysisError(f"Failed to read {path}: {e}") from e
        return self.parse(code, filename=path)

    # ---------------- Declarations ----------------

    def _type_declarations(self, declarations) -> Iterator:
        """Yield type declarations depth-first, outer types before nested ones."""
        for decl in declarations or []:
            if type(decl) in _TYPE_DECLARATIONS:
                yield decl
                yield from self._type_declarations(self._body_of(decl))

    def _body_of(self, decl) -> list:
        body = decl.body
        # enum bodies hold constants plus the ordinary declarations
        if isinstance(decl, javalang.tree.EnumDeclaration):
            return list(getattr(body, "declarations", None) or [])
        return list(body or [])

    def _class_model(self, decl) -> ClassModel:
        members: List[Member] = []
        for node in self._body_of(decl):
            if isinstance(node, javalang.tree.FieldDeclaration):
                members.extend(self._fields(node))
            elif isinstance(node, javalang.tree.ConstructorDeclaration):
                members.append(self._method(node, is_constructor=True))
            elif isinstance(node, javalang.tree.MethodDeclaration):
                members.append(self._method(node))

        return ClassModel(
            name=decl.name,
            members=tuple(members),
            declaration_kind=_TYPE_DECLARATIONS[type(decl)],
            line=_line(decl),
        )

    def _fields(self, node) -> List[FieldMember]:
        modifiers = Modifier.from_keywords(node.modifiers or ())
        field_type = self._type_ref(node.type)
        return [
            FieldMember(
                name=declarator.name,
                type=TypeRef(field_type.name, field_type.dimensions + len(declarator.dimensions or [])),
                modifiers=modifiers,
                line=_line(node),
            )
            for declarator in node.declarators
        ]

    def _method(self, node, is_constructor: bool = False) -> MethodMember:
        parameters = tuple(self._parameter(p) for p in node.parameters or [])
        body = None
        if node.body is not None:
            body = tuple(self._statement(s) for s in node.body)

        return MethodMember(
            name=node.name,
            return_type=VOID if is_constructor else self._type_ref(node.return_type),
            parameters=parameters,
            body=body,
            modifiers=Modifier.from_keywords(node.modifiers or ()),
            is_constructor=is_constructor,
            line=_line(node),
        )

    def _parameter(self, node) -> Parameter:
        param_type = self._type_ref(node.type)
        if node.varargs:
            param_type = TypeRef(param_type.name, param_type.dimensions + 1)
        return Parameter(name=node.name, type=param_type)

    def _type_ref(self, node) -> TypeRef:
        if node is None:
            return VOID
        parts = [node.name]
        sub_type = getattr(node, "sub_type", None)
        while sub_type is not None:
            parts.append(sub_type.name)
            sub_type = getattr(sub_type, "sub_type", None)
        return TypeRef(".".join(parts), len(node.dimensions or []))

    # ---------------- Statements and expressions ----------------

    def _statement(self, node) -> Statement:
        if isinstance(node, javalang.tree.ReturnStatement):
            return ReturnStatement(expression=self._expression(node.expression))

        if isinstance(node, javalang.tree.StatementExpression):
            expression = node.expression
            if isinstance(expression, javalang.tree.Assignment):
                return AssignmentStatement(
                    target=self._expression(expression.expressionl),
                    value=self._expression(expression.value),
                    operator=expression.type,
                )

        return OtherStatement(text=type(node).__name__)

    def _expression(self, node) -> Optional[Expression]:
        if node is None:
            return None

        if isinstance(node, javalang.tree.MemberReference):
            if not node.qualifier and _is_plain(node):
                return IdentifierReference(name=node.member)

        elif isinstance(node, javalang.tree.This):
            selectors = node.selectors or []
            if (
                not node.qualifier
                and not node.prefix_operators
                and not node.postfix_operators
                and len(selectors) == 1
                and isinstance(selectors[0], javalang.tree.MemberReference)
                and not selectors[0].qualifier
                and _is_plain(selectors[0])
            ):
                return IdentifierReference(name=selectors[0].member, self_qualified=True)

        elif isinstance(node, javalang.tree.Literal):
            if _is_plain(node):
                return Literal(value=node.value)

        return OtherExpression(text=type(node).__name__)


_default_builder = JavaModelBuilder()


def parse_java_classes(code: str) -> List[ClassModel]:
    """Build class models from Java source with a shared builder."""
    return _default_builder.parse(code)
