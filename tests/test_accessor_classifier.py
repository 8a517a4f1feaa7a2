"""
Tests for accessor classification over hand-built class models.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from accessortracker.accessor import (
    AccessorClassifier,
    AccessorFilterConfig,
    AccessorKind,
    FieldIndex,
    is_accessor,
)
from accessortracker.models import (
    VOID,
    AssignmentStatement,
    ClassModel,
    FieldMember,
    IdentifierReference,
    Literal,
    MethodMember,
    Modifier,
    OtherExpression,
    OtherStatement,
    Parameter,
    ReturnStatement,
    TypeRef,
)

INT = TypeRef("int")
BOOLEAN = TypeRef("boolean")


def private_field(name, type_ref=INT):
    return FieldMember(name, type_ref, modifiers={Modifier.PRIVATE})


def getter(name, return_type=INT, returns=None, parameters=()):
    returns = returns if returns is not None else IdentifierReference("a")
    return MethodMember(name, return_type, parameters=parameters, body=[ReturnStatement(returns)])


def setter(name, target=None, parameters=None, return_type=VOID, operator="="):
    target = target if target is not None else IdentifierReference("a", self_qualified=True)
    if parameters is None:
        parameters = [Parameter("a", INT)]
    return MethodMember(
        name,
        return_type,
        parameters=parameters,
        body=[AssignmentStatement(target, IdentifierReference("a"), operator)],
    )


def model(*members, name="T"):
    return ClassModel(name, members=members)


class TestGetterRule:
    """Test getter classification."""

    def setup_method(self):
        self.classifier = AccessorClassifier()

    def test_get_prefix_returning_private_field(self):
        method = getter("getA")
        assert self.classifier.classify(model(private_field("a"), method), method) is AccessorKind.GETTER

    def test_self_qualified_return(self):
        method = getter("getA", returns=IdentifierReference("a", self_qualified=True))
        assert self.classifier.is_accessor(model(private_field("a"), method), method)

    def test_is_prefix_requires_boolean(self):
        boolean_getter = getter("isA", return_type=BOOLEAN)
        int_getter = getter("isA", return_type=INT)

        assert self.classifier.is_accessor(model(private_field("a", BOOLEAN), boolean_getter), boolean_getter)
        assert not self.classifier.is_accessor(model(private_field("a"), int_getter), int_getter)

    def test_is_prefix_rejects_boolean_array_and_wrapper(self):
        array_getter = getter("isA", return_type=TypeRef("boolean", 1))
        wrapper_getter = getter("isA", return_type=TypeRef("Boolean"))

        assert not self.classifier.is_accessor(model(private_field("a"), array_getter), array_getter)
        assert not self.classifier.is_accessor(model(private_field("a"), wrapper_getter), wrapper_getter)

    def test_get_prefix_accepts_any_return_type(self):
        for return_type in (INT, BOOLEAN, TypeRef("String"), TypeRef("long", 2)):
            method = getter("getA", return_type=return_type)
            assert self.classifier.is_accessor(model(private_field("a", return_type), method), method)

    def test_parameters_disqualify(self):
        method = getter("getA", parameters=[Parameter("b", INT)])
        assert not self.classifier.is_accessor(model(private_field("a"), method), method)

    def test_returning_literal(self):
        method = getter("getA", returns=Literal("1"))
        assert not self.classifier.is_accessor(model(private_field("a"), method), method)

    def test_returning_other_expression(self):
        method = getter("getA", returns=OtherExpression("BinaryOperation"))
        assert not self.classifier.is_accessor(model(private_field("a"), method), method)

    def test_bare_return(self):
        method = MethodMember("getA", VOID, body=[ReturnStatement()])
        assert not self.classifier.is_accessor(model(private_field("a"), method), method)

    def test_returning_other_field(self):
        method = getter("getA", returns=IdentifierReference("b"))
        assert not self.classifier.is_accessor(model(private_field("a"), private_field("b"), method), method)

    def test_field_not_private(self):
        for modifiers in (set(), {Modifier.PUBLIC}, {Modifier.PROTECTED}):
            field = FieldMember("a", INT, modifiers=modifiers)
            method = getter("getA")
            assert not self.classifier.is_accessor(model(field, method), method)

    def test_field_missing(self):
        method = getter("getA")
        assert not self.classifier.is_accessor(model(method), method)

    def test_two_statement_body(self):
        method = MethodMember(
            "getA", INT,
            body=[OtherStatement("StatementExpression"), ReturnStatement(IdentifierReference("a"))],
        )
        assert not self.classifier.is_accessor(model(private_field("a"), method), method)

    def test_empty_body(self):
        method = MethodMember("getA", INT, body=[])
        assert not self.classifier.is_accessor(model(private_field("a"), method), method)

    def test_property_is_decapitalized_suffix(self):
        method = getter("getFooBar", returns=IdentifierReference("fooBar"))
        assert self.classifier.is_accessor(model(private_field("fooBar"), method), method)

        wrong_case = getter("getFooBar", returns=IdentifierReference("FooBar"))
        assert not self.classifier.is_accessor(model(private_field("FooBar"), wrong_case), wrong_case)


class TestSetterRule:
    """Test setter classification."""

    def setup_method(self):
        self.classifier = AccessorClassifier()

    def test_assigning_private_field(self):
        method = setter("setA")
        assert self.classifier.classify(model(private_field("a"), method), method) is AccessorKind.SETTER

    def test_unqualified_target(self):
        method = setter("setA", target=IdentifierReference("a"))
        assert self.classifier.is_accessor(model(private_field("a"), method), method)

    def test_requires_void(self):
        method = setter("setA", return_type=INT)
        assert not self.classifier.is_accessor(model(private_field("a"), method), method)

    def test_requires_exactly_one_parameter(self):
        none = setter("setA", parameters=[])
        two = setter("setA", parameters=[Parameter("a", INT), Parameter("b", INT)])

        assert not self.classifier.is_accessor(model(private_field("a"), none), none)
        assert not self.classifier.is_accessor(model(private_field("a"), two), two)

    def test_parameter_name_and_type_unconstrained(self):
        method = setter("setA", parameters=[Parameter("value", TypeRef("Object"))])
        assert self.classifier.is_accessor(model(private_field("a"), method), method)

    def test_compound_assignment(self):
        method = setter("setA", operator="+=")
        assert not self.classifier.is_accessor(model(private_field("a"), method), method)

    def test_other_field_assigned(self):
        method = setter("setA", target=IdentifierReference("b"))
        assert not self.classifier.is_accessor(model(private_field("a"), private_field("b"), method), method)

    def test_non_identifier_target(self):
        method = setter("setA", target=OtherExpression("MemberReference"))
        assert not self.classifier.is_accessor(model(private_field("a"), method), method)

    def test_field_not_private(self):
        method = setter("setA")
        assert not self.classifier.is_accessor(model(FieldMember("a", INT), method), method)

    def test_increment_body(self):
        method = MethodMember("setA", VOID, parameters=[Parameter("a", INT)],
                              body=[OtherStatement("StatementExpression")])
        assert not self.classifier.is_accessor(model(private_field("a"), method), method)

    def test_return_body(self):
        method = MethodMember("setA", VOID, parameters=[Parameter("a", INT)],
                              body=[ReturnStatement(IdentifierReference("a"))])
        assert not self.classifier.is_accessor(model(private_field("a"), method), method)


class TestGuards:
    """Test members rejected before any rule is applied."""

    def setup_method(self):
        self.classifier = AccessorClassifier()

    def test_constructor(self):
        ctor = MethodMember("getA", INT, body=[ReturnStatement(IdentifierReference("a"))],
                            is_constructor=True)
        assert not self.classifier.is_accessor(model(private_field("a"), ctor, name="getA"), ctor)

    def test_no_body(self):
        declaration = MethodMember("isA", BOOLEAN)
        class_model = ClassModel("T", members=[declaration], declaration_kind="interface")
        assert not self.classifier.is_accessor(class_model, declaration)

    def test_field_member(self):
        field = private_field("getA")
        assert not self.classifier.is_accessor(model(field), field)

    def test_badly_named(self):
        for name in ("foo", "get", "is", "set", "geta", "seta", "issue", "getter", "GetA"):
            method = getter(name)
            assert not self.classifier.is_accessor(model(private_field("a"), method), method), name

    def test_badly_named_setter_shape(self):
        method = setter("foo")
        assert not self.classifier.is_accessor(model(private_field("a"), method), method)


class TestClassifierBehaviour:
    """Test determinism, configuration and helpers."""

    def test_deterministic(self, classifier):
        method = getter("getA")
        class_model = model(private_field("a"), method)
        results = {classifier.is_accessor(class_model, method) for _ in range(5)}
        assert results == {True}

    def test_does_not_mutate_model(self, classifier):
        method = setter("setA")
        class_model = model(private_field("a"), method)
        before = (class_model, method)
        classifier.classify(class_model, method)
        assert (class_model, method) == before

    def test_prebuilt_field_index(self, classifier):
        method = getter("getA")
        class_model = model(private_field("a"), method)
        fields = FieldIndex.for_class(class_model)
        assert classifier.is_accessor(class_model, method, fields)

    def test_first_field_declaration_wins(self):
        fields = FieldIndex.for_class(model(private_field("a"), FieldMember("a", INT)))
        assert fields.private_field("a") is not None
        assert fields.get("a").is_private
        assert fields.get("b") is None
        assert len(fields) == 1
        assert "a" in fields

    def test_concurrent_calls_share_classifier_and_index(self, classifier):
        get_a = getter("getA")
        set_a = setter("setA")
        other = MethodMember("reset", VOID, body=[OtherStatement("StatementExpression")])
        class_model = model(private_field("a"), get_a, set_a, other)
        fields = FieldIndex.for_class(class_model)
        methods = [get_a, set_a, other] * 200

        with ThreadPoolExecutor(max_workers=8) as executor:
            kinds = list(executor.map(lambda m: classifier.classify(class_model, m, fields), methods))

        assert kinds == [AccessorKind.GETTER, AccessorKind.SETTER, None] * 200

    def test_module_level_is_accessor(self):
        method = getter("getA")
        assert is_accessor(model(private_field("a"), method), method)

    def test_disable_getter_rule(self):
        classifier = AccessorClassifier(AccessorFilterConfig(enable_getter_rule=False))
        get_a = getter("getA")
        set_a = setter("setA")
        class_model = model(private_field("a"), get_a, set_a)

        assert not classifier.is_accessor(class_model, get_a)
        assert classifier.is_accessor(class_model, set_a)

    def test_disable_setter_rule(self):
        classifier = AccessorClassifier(AccessorFilterConfig(enable_setter_rule=False))
        set_a = setter("setA")
        assert not classifier.is_accessor(model(private_field("a"), set_a), set_a)

    def test_custom_boolean_types(self):
        config = AccessorFilterConfig(boolean_types={"boolean", "Boolean"})
        classifier = AccessorClassifier(config)
        method = getter("isA", return_type=TypeRef("Boolean"))
        assert classifier.is_accessor(model(private_field("a", TypeRef("Boolean")), method), method)

    def test_find_and_filter(self, classifier):
        get_a = getter("getA")
        set_a = setter("setA")
        other = MethodMember("reset", VOID, body=[OtherStatement("StatementExpression")])
        ctor = MethodMember("T", VOID, body=[], is_constructor=True)
        class_model = model(private_field("a"), ctor, get_a, other, set_a)

        assert classifier.find_accessors(class_model) == [get_a, set_a]
        assert classifier.filter_members(class_model) == [ctor, other]

    def test_accessor_stats(self, classifier):
        get_a = getter("getA")
        set_a = setter("setA")
        ctor = MethodMember("T", VOID, body=[], is_constructor=True)
        declaration = MethodMember("isB", BOOLEAN)
        other = MethodMember("foo", INT, body=[ReturnStatement(IdentifierReference("a"))])

        stats = classifier.get_accessor_stats([
            model(private_field("a"), ctor, get_a, set_a, other),
            ClassModel("I", members=[declaration], declaration_kind="interface"),
        ])

        assert stats['total_methods'] == 5
        assert stats['accessors'] == 2
        assert stats['by_type'] == {'getter': 1, 'setter': 1, 'constructor': 1, 'no_body': 1}
        assert stats['accessor_rate'] == pytest.approx(0.4)

    def test_accessor_stats_empty(self, classifier):
        stats = classifier.get_accessor_stats([])
        assert stats['total_methods'] == 0
        assert stats['accessor_rate'] == 0.0
