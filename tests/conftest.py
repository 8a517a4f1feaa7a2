"""Fixtures for accessortracker tests."""

import pytest

from accessortracker.accessor import AccessorClassifier
from accessortracker.java_adapter import JavaModelBuilder


@pytest.fixture
def classifier():
    """Create an AccessorClassifier with the default configuration."""
    return AccessorClassifier()


@pytest.fixture
def builder():
    """Create a JavaModelBuilder instance."""
    return JavaModelBuilder()


@pytest.fixture
def java_project(tmp_path):
    """A small source tree with one accessor-rich class and one broken file."""
    src = tmp_path / "src" / "main" / "java"
    src.mkdir(parents=True)
    (src / "Person.java").write_text(
        "public class Person {\n"
        "    private String name;\n"
        "    private boolean active;\n"
        "    public Person(String name) { this.name = name; }\n"
        "    public String getName() { return name; }\n"
        "    public void setName(String name) { this.name = name; }\n"
        "    public boolean isActive() { return active; }\n"
        "    public String describe() { return name + active; }\n"
        "}\n"
    )
    (src / "Broken.java").write_text("class Broken { int x = ; }\n")
    build = tmp_path / "build"
    build.mkdir()
    (build / "Generated.java").write_text(
        "class Generated { private int a; int getA() { return a; } }\n"
    )
    (tmp_path / "README.md").write_text("not java\n")
    return tmp_path
